"""Unit tests for CategoryDjangoRepository.

Covers:
- CRUD operations (get_by_id, list, save, delete).
- get_many look-up.
- Integrity errors propagating from delete.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.db import IntegrityError

from modules.categories.models import Category
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.repositories.interfaces import ICategoryRepository
from modules.products.models import Product

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return CategoryDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, ICategoryRepository)


class TestGetById:
    def test_returns_category_when_found(self, repo):
        category = Category.objects.create(name="Books")
        result = repo.get_by_id(category.id)
        assert result is not None
        assert result.id == category.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999999) is None


class TestList:
    def test_returns_all_in_id_order(self, repo):
        first = Category.objects.create(name="Z")
        second = Category.objects.create(name="A")
        assert repo.list() == [first, second]

    def test_returns_empty_list(self, repo):
        assert repo.list() == []

    def test_filters(self, repo):
        Category.objects.create(name="Books")
        Category.objects.create(name="Electronics")
        results = repo.list({"name__icontains": "book"})
        assert [c.name for c in results] == ["Books"]


class TestGetMany:
    def test_returns_existing_and_skips_missing(self, repo):
        books = Category.objects.create(name="Books")
        tech = Category.objects.create(name="Electronics")
        results = repo.get_many([books.id, tech.id, 999999])
        assert {c.id for c in results} == {books.id, tech.id}

    def test_empty_ids(self, repo):
        assert repo.get_many([]) == []


class TestSave:
    def test_creates_with_assigned_id(self, repo):
        saved = repo.save(Category(name="New"))
        assert saved.id is not None
        assert Category.objects.filter(id=saved.id).exists()

    def test_updates_existing(self, repo):
        category = Category.objects.create(name="Old")
        category.name = "New"
        repo.save(category)
        category.refresh_from_db()
        assert category.name == "New"


class TestDelete:
    def test_deletes_existing(self, repo):
        category = Category.objects.create(name="Books")
        assert repo.delete(category.id) is True
        assert not Category.objects.filter(id=category.id).exists()

    def test_returns_false_for_nonexistent(self, repo):
        assert repo.delete(999999) is False

    def test_linked_category_raises_integrity_error(self, repo):
        category = Category.objects.create(name="Books")
        product = Product.objects.create(name="Novel", price=Decimal("5.00"))
        product.categories.add(category)

        with pytest.raises(IntegrityError):
            repo.delete(category.id)

        assert Category.objects.filter(id=category.id).exists()
