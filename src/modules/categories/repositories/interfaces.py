"""Category repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for the Category entity."""

    @abstractmethod
    def get_many(self, ids: Iterable[int]) -> List["Category"]:
        """Retrieve the categories whose ids are in *ids* (missing ids are skipped)."""
