"""Integration tests for standardized error responses."""

import pytest

from modules.categories.models import Category
from modules.products.models import Product

pytestmark = pytest.mark.integration

ERROR_KEYS = {"type", "status", "errors", "path", "timestamp"}


class TestStandardizedErrors:
    def test_not_found_has_standard_format(self, api_client):
        response = api_client.get("/api/v1/products/424242/")
        assert response.status_code == 404
        data = response.json()
        assert set(data.keys()) == ERROR_KEYS
        assert data["type"] == "client_error"
        assert data["status"] == 404
        assert data["path"] == "/api/v1/products/424242/"
        assert data["errors"][0]["code"] == "not_found"

    def test_conflict_has_standard_format(self, api_client):
        category = Category.objects.create(name="Books")
        Product.objects.create(name="Novel").categories.add(category)
        response = api_client.delete(f"/api/v1/categories/{category.id}/")
        assert response.status_code == 400
        data = response.json()
        assert set(data.keys()) == ERROR_KEYS
        assert data["errors"][0]["code"] == "database_conflict"

    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/v1/categories/", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "parse_error"

    def test_non_object_body_is_rejected(self, api_client):
        response = api_client.post("/api/v1/categories/", ["Books"], format="json")
        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "non_field_errors"

    def test_validation_error_lists_each_field(self, api_client):
        response = api_client.post(
            "/api/v1/products/", {"name": "", "price": "-5"}, format="json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "validation_error"
        assert {e["attr"] for e in data["errors"]} == {"name", "price"}

    def test_unsupported_media_type(self, api_client):
        response = api_client.post(
            "/api/v1/categories/", data="name=Books", content_type="application/x-www-form-urlencoded"
        )
        assert response.status_code == 415
        assert response.json()["status"] == 415
