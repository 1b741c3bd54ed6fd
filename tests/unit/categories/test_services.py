"""Unit tests for CategoryService.

Covers:
- find_all / find_by_id: mapping to DTOs, not found.
- insert: id discarded, id assigned by the repository.
- update: happy path, not found checked before any write.
- delete: happy path, not found, integrity violation -> CategoryInUse.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from django.db import IntegrityError
from django.db.models import ProtectedError

from modules.categories.dtos import CategoryDTO
from modules.categories.exceptions import CategoryInUse, CategoryNotFound
from modules.categories.models import Category
from modules.categories.services import CategoryService
from modules.core.exceptions import DatabaseConflict, ErrorKind, ResourceNotFound

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def service(mock_repo):
    return CategoryService(repository=mock_repo)


def _assign_id(category: Category) -> Category:
    category.id = 42
    return category


# ===========================================================================
# find_all
# ===========================================================================


class TestFindAll:
    def test_maps_entities_to_dtos(self, service, mock_repo):
        mock_repo.list.return_value = [Category(id=1, name="Books"), Category(id=2, name="Tech")]

        result = service.find_all()

        assert result == [CategoryDTO(id=1, name="Books"), CategoryDTO(id=2, name="Tech")]

    def test_empty(self, service, mock_repo):
        mock_repo.list.return_value = []
        assert service.find_all() == []


# ===========================================================================
# find_by_id
# ===========================================================================


class TestFindById:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = Category(id=7, name="Books")

        dto = service.find_by_id(7)

        assert dto.id == 7
        assert dto.name == "Books"
        mock_repo.get_by_id.assert_called_once_with(7)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CategoryNotFound, match="Category 7 not found"):
            service.find_by_id(7)

    def test_not_found_is_a_not_found_kind(self):
        assert issubclass(CategoryNotFound, ResourceNotFound)
        assert CategoryNotFound().kind is ErrorKind.NOT_FOUND


# ===========================================================================
# insert
# ===========================================================================


class TestInsert:
    def test_returns_dto_with_assigned_id(self, service, mock_repo):
        mock_repo.save.side_effect = _assign_id

        dto = service.insert(CategoryDTO(name="Books"))

        assert dto.id == 42
        assert dto.name == "Books"
        mock_repo.save.assert_called_once()

    def test_ignores_incoming_id(self, service, mock_repo):
        ids_at_save = []

        def save(category):
            ids_at_save.append(category.id)
            return _assign_id(category)

        mock_repo.save.side_effect = save

        dto = service.insert(CategoryDTO(id=5, name="Books"))

        assert ids_at_save == [None]
        assert dto.id == 42


# ===========================================================================
# update
# ===========================================================================


class TestUpdate:
    def test_success(self, service, mock_repo):
        existing = Category(id=3, name="Old")
        mock_repo.get_by_id.return_value = existing
        mock_repo.save.side_effect = lambda c: c

        dto = service.update(3, CategoryDTO(name="New"))

        assert dto == CategoryDTO(id=3, name="New")
        assert existing.name == "New"

    def test_body_id_does_not_change_target(self, service, mock_repo):
        mock_repo.get_by_id.return_value = Category(id=3, name="Old")
        mock_repo.save.side_effect = lambda c: c

        dto = service.update(3, CategoryDTO(id=99, name="New"))

        assert dto.id == 3

    def test_not_found_raises_before_write(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CategoryNotFound):
            service.update(3, CategoryDTO(name="Ghost"))

        mock_repo.save.assert_not_called()


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = Category(id=3, name="Books")
        mock_repo.delete.return_value = True

        service.delete(3)

        mock_repo.delete.assert_called_once_with(3)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(CategoryNotFound):
            service.delete(3)

        mock_repo.delete.assert_not_called()

    def test_integrity_error_becomes_category_in_use(self, service, mock_repo):
        mock_repo.get_by_id.return_value = Category(id=3, name="Books")
        mock_repo.delete.side_effect = IntegrityError("FOREIGN KEY constraint failed")

        with pytest.raises(CategoryInUse) as excinfo:
            service.delete(3)

        assert isinstance(excinfo.value, DatabaseConflict)
        assert excinfo.value.kind is ErrorKind.CONFLICT
        assert isinstance(excinfo.value.__cause__, IntegrityError)

    def test_protected_error_becomes_category_in_use(self, service, mock_repo):
        mock_repo.get_by_id.return_value = Category(id=3, name="Books")
        mock_repo.delete.side_effect = ProtectedError("protected", set())

        with pytest.raises(CategoryInUse):
            service.delete(3)
