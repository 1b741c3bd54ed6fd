"""Product DRF serializers.

Document the request/response body in the OpenAPI schema.  Validation
and mapping are done by the Pydantic DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class CategoryRefSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField(required=False)


class ProductSerializer(serializers.ModelSerializer):
    """Read/write shape of the Product resource."""

    imgUrl = serializers.CharField(
        source="img_url", required=False, allow_blank=True, max_length=2048
    )
    categories = CategoryRefSerializer(many=True, required=False)

    class Meta:
        model = Product
        fields = ["id", "name", "description", "price", "imgUrl", "categories"]
        read_only_fields = ["id"]


class ProductPageSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    next = serializers.URLField(allow_null=True)
    previous = serializers.URLField(allow_null=True)
    results = ProductSerializer(many=True)
