"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.  Missing
rows are reported with ``None`` / ``False``; the Service Layer decides
how to translate a missing entity.  Integrity errors propagate.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import structlog
from django.db import models, transaction

from modules.categories.models import Category
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _base_queryset(self) -> models.QuerySet[Product]:
        return Product.objects.prefetch_related("categories")

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product (with its categories) by primary key."""
        return self._base_queryset().filter(id=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> models.QuerySet[Product]:
        """List products, narrowed by ``ProductFilter`` criteria.

        Examples of valid filters::

            {"name": "shoe"}
            {"category_id": 3, "max_price": "100.00"}
        """
        queryset = self._base_queryset()
        if filters:
            queryset = ProductFilter(filters, queryset=queryset).qs
        return queryset

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        The entity is reloaded afterwards so it carries the stored values
        (e.g. ``price`` at the column scale).
        """
        entity.save()
        entity.refresh_from_db()
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def replace_categories(self, product: Product, categories: Iterable[Category]) -> None:
        product.categories.set(list(categories))

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a product by ID (its category links go with it).

        Returns ``False`` if no product exists with the given ID.
        """
        product = Product.objects.filter(id=id).first()
        if not product:
            return False
        product.delete()
        logger.info("product.deleted", product_id=id)
        return True
