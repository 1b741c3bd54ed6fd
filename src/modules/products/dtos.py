"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  DTOs are
immutable (``frozen=True``).

- ``ProductDTO``: input and output shape of the product resource.  The
  image URL travels as ``imgUrl`` on the wire; ``id`` is ignored on input.
- ``CategoryRefDTO``: nested category entry; only ``id`` is read on input.
- ``ProductSearchDTO``: optional criteria for the paged listing.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.products.models import Product


class CategoryRefDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None


class ProductDTO(BaseModel):
    """Immutable product DTO.

    Validates:
    - ``name`` is a non-empty string of at most 255 characters.
    - ``price``, when given, is not negative and fits ``NUMERIC(12, 2)``.
    - ``imgUrl`` is at most 2048 characters.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[int] = None
    name: str = Field(max_length=255)
    description: str = ""
    price: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    img_url: str = Field(default="", alias="imgUrl", max_length=2048)
    categories: List[CategoryRefDTO] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @field_validator("description", "img_url", mode="before")
    @classmethod
    def null_text_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        if v is not None and v < 0:
            raise ValueError("Price must not be negative.")
        return v

    @property
    def category_ids(self) -> List[int]:
        """Distinct category ids, in request order."""
        return list(dict.fromkeys(c.id for c in self.categories))

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        """Build a DTO from a saved Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            img_url=product.img_url,
            categories=[
                CategoryRefDTO(id=c.id, name=c.name) for c in product.categories.all()
            ],
        )


class ProductSearchDTO(BaseModel):
    """Immutable search criteria for ``GET /products/``."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    category_id: Optional[int] = Field(default=None, ge=1)
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None

    @field_validator("name")
    @classmethod
    def blank_name_means_any(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()

    def to_filters(self) -> Dict[str, Any]:
        """Criteria as ``ProductFilter`` data, omitting unset fields."""
        return self.model_dump(exclude_none=True)
