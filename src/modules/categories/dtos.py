"""Category DTO for the Service Layer.

Framework-agnostic data transfer object using Pydantic v2.  The same
shape is used for input and output: ``id`` is ignored on input and
always set on output.  ``CategoryDTO.from_entity`` is the single
entity-to-DTO mapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from modules.categories.models import Category


class CategoryDTO(BaseModel):
    """Immutable category DTO."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: str = Field(max_length=255)

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        return v.strip()

    @classmethod
    def from_entity(cls, category: Category) -> CategoryDTO:
        """Build a DTO from a Category model instance."""
        return cls(id=category.id, name=category.name)
