"""Product model and its category link table.

- ``Product.categories`` is a many-to-many relation to
  ``categories.Category`` through ``ProductCategory``.
- Deleting a product removes its link rows (``CASCADE``).
- Deleting a category that still has link rows is refused (``PROTECT``);
  Django raises ``ProtectedError``, a subclass of ``IntegrityError``.
"""

from __future__ import annotations

import structlog
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)


class Product(BaseModel):
    """Product entity.

    ``price`` is nullable: a wholesale update whose body omits the price
    clears it.
    """

    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
    )
    img_url = models.CharField(max_length=2048, blank=True, default="")
    categories = models.ManyToManyField(
        "categories.Category",
        through="ProductCategory",
        related_name="products",
        blank=True,
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info("product_created", product_id=self.id, name=self.name)

    def __str__(self) -> str:
        return self.name


class ProductCategory(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE)
    category = models.ForeignKey(
        "categories.Category",
        on_delete=models.PROTECT,
        related_name="product_links",
    )

    class Meta:
        db_table = "product_categories"
        constraints = [
            models.UniqueConstraint(
                fields=["product", "category"],
                name="product_categories_unique",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_id} -> {self.category_id}"
