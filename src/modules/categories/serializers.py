"""Category DRF serializer.

Documents the request/response body in the OpenAPI schema.  Validation
and mapping are done by ``CategoryDTO``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.models import Category


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name"]
        read_only_fields = ["id"]
