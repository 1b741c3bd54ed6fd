"""Django ORM implementation of the Category repository.

Missing rows are reported with ``None`` / ``False`` rather than
exceptions; the Service Layer decides what a missing entity means.
Integrity errors raised on delete are left to propagate.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import structlog
from django.db import transaction

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Category]:
        return Category.objects.filter(id=id).first()

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Category]:
        """List categories with optional Django ORM look-ups.

        Examples of valid filters::

            {"name__icontains": "book"}
        """
        queryset = Category.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def get_many(self, ids: Iterable[int]) -> List[Category]:
        return list(Category.objects.filter(id__in=list(ids)))

    @transaction.atomic
    def save(self, entity: Category) -> Category:
        """Persist (create or update) a category. Reloads the stored values."""
        entity.save()
        entity.refresh_from_db()
        logger.info("category.saved", category_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a category by ID.

        Runs in its own savepoint so a ``ProtectedError`` / ``IntegrityError``
        leaves the caller's transaction usable.
        """
        category = self.get_by_id(id)
        if not category:
            return False
        category.delete()
        logger.info("category.deleted", category_id=id)
        return True
