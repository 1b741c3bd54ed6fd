"""Product service layer (Use Cases).

Maps ``Product`` entities to ``ProductDTO`` and back, delegating
persistence to the injected ``IProductRepository`` and category look-ups
to the injected ``ICategoryRepository``.

- Missing product ids raise ``ProductNotFound``.
- Unknown category ids in a DTO raise ``CategoryNotFound`` before
  anything is written.
- A delete refused by a referential constraint raises ``ProductInUse``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.categories.exceptions import CategoryNotFound
from modules.core.pagination import Page, PageRequest, paginate
from modules.products.dtos import ProductDTO
from modules.products.exceptions import ProductInUse, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.dtos import ProductSearchDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives its repositories via constructor injection (DIP).
    """

    ordering_fields = ("id", "name", "price")

    def __init__(
        self,
        repository: IProductRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = repository
        self._category_repo = category_repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all_paged(
        self,
        page_request: PageRequest,
        criteria: Optional[ProductSearchDTO] = None,
    ) -> Page[ProductDTO]:
        """Return one page of products matching *criteria*."""
        filters = criteria.to_filters() if criteria else None
        return paginate(self._repo.list(filters), page_request, ProductDTO.from_entity)

    def find_by_id(self, id: int) -> ProductDTO:
        """Retrieve a single product with its categories.

        Raises:
            ProductNotFound: if no product has that id.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return ProductDTO.from_entity(product)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def insert(self, dto: ProductDTO) -> ProductDTO:
        """Create a product; any ``id`` on the DTO is discarded.

        Raises:
            CategoryNotFound: if a referenced category does not exist.
        """
        categories = self._resolve_categories(dto)
        product = Product()
        self._copy_dto_to_entity(dto, product)
        product = self._repo.save(product)
        self._repo.replace_categories(product, categories)
        logger.info("product.inserted", product_id=product.id)
        return ProductDTO.from_entity(product)

    @transaction.atomic
    def update(self, id: int, dto: ProductDTO) -> ProductDTO:
        """Overwrite every mutable field of the product with *dto*.

        Raises:
            ProductNotFound: if no product has that id.
            CategoryNotFound: if a referenced category does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")

        categories = self._resolve_categories(dto)
        self._copy_dto_to_entity(dto, product)
        product = self._repo.save(product)
        self._repo.replace_categories(product, categories)
        logger.info("product.updated", product_id=id)
        return ProductDTO.from_entity(product)

    @transaction.atomic
    def delete(self, id: int) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if no product has that id.
            ProductInUse: if the database refuses the delete.
        """
        self.find_by_id(id)
        try:
            self._repo.delete(id)
        except IntegrityError as exc:
            logger.warning("product.delete_conflict", product_id=id)
            raise ProductInUse(f"Product {id} is still referenced.") from exc
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _copy_dto_to_entity(dto: ProductDTO, product: Product) -> None:
        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.img_url = dto.img_url

    def _resolve_categories(self, dto: ProductDTO) -> List[Category]:
        ids = dto.category_ids
        if not ids:
            return []
        found = {c.id: c for c in self._category_repo.get_many(ids)}
        for category_id in ids:
            if category_id not in found:
                raise CategoryNotFound(f"Category {category_id} not found.")
        return [found[category_id] for category_id in ids]
