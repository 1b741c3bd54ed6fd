"""Category API views.

Exposes ``CategoryService`` via HTTP using a DRF ViewSet.  Domain
exceptions propagate to ``api_exception_handler``, which maps them to
404 / 400 responses.
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import GenericViewSet

from modules.categories.dtos import CategoryDTO
from modules.categories.models import Category
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.serializers import CategorySerializer
from modules.categories.services import CategoryService
from modules.core.api import build_dto


class CategoryViewSet(GenericViewSet):
    """ViewSet for Category CRUD operations.

    All ORM access goes through the service/repository layer; the
    ``queryset`` attribute only feeds schema generation.
    """

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(repository=CategoryDjangoRepository())

    @extend_schema(responses=CategorySerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/v1/categories/"""
        categories = self._service.find_all()
        return Response([c.model_dump(mode="json") for c in categories])

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/v1/categories/{pk}/"""
        category = self._service.find_by_id(int(pk))
        return Response(category.model_dump(mode="json"))

    def create(self, request: Request) -> Response:
        """POST /api/v1/categories/"""
        dto = build_dto(CategoryDTO, request.data)
        category = self._service.insert(dto)
        location = reverse("category-detail", args=[category.id], request=request)
        return Response(
            category.model_dump(mode="json"),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/v1/categories/{pk}/"""
        dto = build_dto(CategoryDTO, request.data)
        category = self._service.update(int(pk), dto)
        return Response(category.model_dump(mode="json"))

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/categories/{pk}/"""
        self._service.delete(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
