"""Category service layer (Use Cases).

Maps ``Category`` entities to ``CategoryDTO`` and back, delegating
persistence to the injected ``ICategoryRepository``.  Missing ids raise
``CategoryNotFound``; a delete refused by a referential constraint raises
``CategoryInUse``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import IntegrityError, transaction

from modules.categories.dtos import CategoryDTO
from modules.categories.exceptions import CategoryInUse, CategoryNotFound
from modules.categories.models import Category

if TYPE_CHECKING:
    from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for Category use-cases.

    Receives an ``ICategoryRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self) -> List[CategoryDTO]:
        """Return every category, in storage-default order."""
        return [CategoryDTO.from_entity(c) for c in self._repo.list()]

    def find_by_id(self, id: int) -> CategoryDTO:
        """Retrieve a single category.

        Raises:
            CategoryNotFound: if no category has that id.
        """
        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category {id} not found.")
        return CategoryDTO.from_entity(category)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def insert(self, dto: CategoryDTO) -> CategoryDTO:
        """Create a category; any ``id`` on the DTO is discarded."""
        category = Category(name=dto.name)
        category = self._repo.save(category)
        logger.info("category.inserted", category_id=category.id)
        return CategoryDTO.from_entity(category)

    @transaction.atomic
    def update(self, id: int, dto: CategoryDTO) -> CategoryDTO:
        """Overwrite the category's fields with *dto*.

        Raises:
            CategoryNotFound: if no category has that id.
        """
        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category {id} not found.")

        category.name = dto.name
        category = self._repo.save(category)
        logger.info("category.updated", category_id=id)
        return CategoryDTO.from_entity(category)

    @transaction.atomic
    def delete(self, id: int) -> None:
        """Delete a category.

        Raises:
            CategoryNotFound: if no category has that id.
            CategoryInUse: if products still reference the category.
        """
        self.find_by_id(id)
        try:
            self._repo.delete(id)
        except IntegrityError as exc:
            logger.warning("category.delete_conflict", category_id=id)
            raise CategoryInUse(
                f"Category {id} is still referenced by products."
            ) from exc
        logger.info("category.deleted", category_id=id)
