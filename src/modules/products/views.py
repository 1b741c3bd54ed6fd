"""Product API views.

Exposes ``ProductService`` via HTTP using a DRF ViewSet.  Request bodies
and query strings are validated into Pydantic DTOs; domain exceptions
propagate to ``api_exception_handler`` (404 / 400).
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.reverse import reverse
from rest_framework.viewsets import GenericViewSet

from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.core.api import build_dto
from modules.core.pagination import PageRequest, paginated_response
from modules.products.dtos import ProductDTO, ProductSearchDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductPageSerializer, ProductSerializer
from modules.products.services import ProductService

PAGE_PARAMS = ("page", "page_size", "ordering")
SEARCH_PARAMS = ("name", "category_id", "min_price", "max_price")


def _pick(params, names) -> dict:
    return {name: params.get(name) for name in names if params.get(name) not in (None, "")}


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    All ORM access goes through the service/repository layer; the
    ``queryset`` attribute only feeds schema generation.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    lookup_value_regex = r"\d+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("page", OpenApiTypes.INT),
            OpenApiParameter("page_size", OpenApiTypes.INT),
            OpenApiParameter("ordering", OpenApiTypes.STR, enum=ProductService.ordering_fields),
            OpenApiParameter("name", OpenApiTypes.STR),
            OpenApiParameter("category_id", OpenApiTypes.INT),
            OpenApiParameter("min_price", OpenApiTypes.DECIMAL),
            OpenApiParameter("max_price", OpenApiTypes.DECIMAL),
        ],
        responses=ProductPageSerializer,
    )
    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        params = request.query_params
        page_request = build_dto(
            PageRequest,
            _pick(params, PAGE_PARAMS),
            context={"ordering_fields": ProductService.ordering_fields},
        )
        criteria = build_dto(ProductSearchDTO, _pick(params, SEARCH_PARAMS))
        page = self._service.find_all_paged(page_request, criteria)
        return paginated_response(request, page)

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.find_by_id(int(pk))
        return Response(product.model_dump(mode="json", by_alias=True))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        dto = build_dto(ProductDTO, request.data)
        product = self._service.insert(dto)
        location = reverse("product-detail", args=[product.id], request=request)
        return Response(
            product.model_dump(mode="json", by_alias=True),
            status=status.HTTP_201_CREATED,
            headers={"Location": location},
        )

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/v1/products/{pk}/"""
        dto = build_dto(ProductDTO, request.data)
        product = self._service.update(int(pk), dto)
        return Response(product.model_dump(mode="json", by_alias=True))

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        self._service.delete(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
