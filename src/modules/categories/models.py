"""Category model.

A category groups products; products link to categories through
``products.ProductCategory`` whose ``category`` foreign key uses
``PROTECT``, so a category that still has products cannot be deleted.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


class Category(BaseModel):
    name = models.CharField(max_length=255)

    class Meta:
        db_table = "categories"
        ordering = ["id"]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info("category_created", category_id=self.id, name=self.name)

    def __str__(self) -> str:
        return self.name
