"""Integration tests for Category API endpoints.

Covers:
- CRUD operations via /api/v1/categories/.
- Domain exception mapping (404, 400 database_conflict).
"""

from __future__ import annotations

import pytest

from modules.categories.models import Category
from modules.products.models import Product

pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def books():
    return Category.objects.create(name="Books")


@pytest.fixture()
def linked_books(books):
    product = Product.objects.create(name="Novel")
    product.categories.add(books)
    return books


# ===========================================================================
# LIST / RETRIEVE
# ===========================================================================


class TestCategoryRead:
    def test_list_returns_all_in_id_order(self, api_client):
        for name in ("Books", "Electronics", "Computers"):
            Category.objects.create(name=name)
        response = api_client.get("/api/v1/categories/")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Books", "Electronics", "Computers"]

    def test_list_empty(self, api_client):
        response = api_client.get("/api/v1/categories/")
        assert response.status_code == 200
        assert response.json() == []

    def test_retrieve(self, api_client, books):
        response = api_client.get(f"/api/v1/categories/{books.id}/")
        assert response.status_code == 200
        assert response.json() == {"id": books.id, "name": "Books"}

    def test_retrieve_missing_returns_404(self, api_client):
        response = api_client.get("/api/v1/categories/99999/")
        assert response.status_code == 404
        assert response.json()["errors"][0]["code"] == "not_found"

    def test_non_numeric_id_is_not_routed(self, api_client):
        response = api_client.get("/api/v1/categories/abc/")
        assert response.status_code == 404


# ===========================================================================
# CREATE / UPDATE
# ===========================================================================


class TestCategoryWrite:
    def test_create(self, api_client):
        response = api_client.post("/api/v1/categories/", {"name": "Garden"}, format="json")
        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Garden"
        assert body["id"] > 0
        assert response["Location"].endswith(f"/api/v1/categories/{body['id']}/")
        assert Category.objects.filter(pk=body["id"]).exists()

    def test_create_ignores_client_id(self, api_client, books):
        response = api_client.post(
            "/api/v1/categories/", {"id": books.id, "name": "Garden"}, format="json"
        )
        assert response.status_code == 201
        assert response.json()["id"] != books.id
        assert Category.objects.get(pk=books.id).name == "Books"

    def test_create_blank_name_returns_400(self, api_client):
        response = api_client.post("/api/v1/categories/", {"name": " "}, format="json")
        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"
        assert response.json()["errors"][0]["attr"] == "name"

    def test_create_name_over_column_limit_returns_400(self, api_client):
        response = api_client.post("/api/v1/categories/", {"name": "x" * 256}, format="json")
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "name"
        assert not Category.objects.exists()

    def test_update(self, api_client, books):
        response = api_client.put(
            f"/api/v1/categories/{books.id}/", {"name": "Literature"}, format="json"
        )
        assert response.status_code == 200
        assert response.json() == {"id": books.id, "name": "Literature"}
        books.refresh_from_db()
        assert books.name == "Literature"

    def test_update_missing_returns_404(self, api_client):
        response = api_client.put("/api/v1/categories/99999/", {"name": "X"}, format="json")
        assert response.status_code == 404
        assert not Category.objects.exists()

    def test_patch_not_allowed(self, api_client, books):
        response = api_client.patch(
            f"/api/v1/categories/{books.id}/", {"name": "X"}, format="json"
        )
        assert response.status_code == 405


# ===========================================================================
# DELETE
# ===========================================================================


class TestCategoryDelete:
    def test_delete(self, api_client, books):
        response = api_client.delete(f"/api/v1/categories/{books.id}/")
        assert response.status_code == 204
        assert not Category.objects.filter(pk=books.id).exists()

    def test_delete_missing_returns_404(self, api_client):
        response = api_client.delete("/api/v1/categories/99999/")
        assert response.status_code == 404

    def test_delete_in_use_returns_400(self, api_client, linked_books):
        response = api_client.delete(f"/api/v1/categories/{linked_books.id}/")
        assert response.status_code == 400
        body = response.json()
        assert body["errors"][0]["code"] == "database_conflict"
        assert Category.objects.filter(pk=linked_books.id).exists()
        assert Product.objects.get(name="Novel").categories.count() == 1
