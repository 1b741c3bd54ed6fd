"""Product repository interface.

Extends ``IRepository[Product]`` with category-link replacement.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """List products with optional search criteria, as a lazy queryset."""

    @abstractmethod
    def replace_categories(
        self, product: "Product", categories: Iterable["Category"]
    ) -> None:
        """Replace the product's category set with *categories*."""
