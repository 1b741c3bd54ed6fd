"""Page-based pagination for list endpoints.

``PageRequest`` is the validated input (1-based ``page``, ``page_size``
capped at ``MAX_PAGE_SIZE``, allow-listed ``ordering``).  ``paginate``
turns a queryset into a framework-agnostic ``Page`` DTO so services can
return pages without knowing about HTTP, and ``paginated_response``
renders a ``Page`` in the DRF ``PageNumberPagination`` shape
(``count`` / ``next`` / ``previous`` / ``results``).
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, TypeVar

from django.conf import settings
from django.core.paginator import Paginator
from django.db.models import QuerySet
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.utils.urls import remove_query_param, replace_query_param

T = TypeVar("T")

MAX_PAGE_SIZE = settings.MAX_PAGE_SIZE
PAGE_QUERY_PARAM = "page"


def _default_page_size() -> int:
    return api_settings.PAGE_SIZE or settings.DEFAULT_PAGE_SIZE


class PageRequest(BaseModel):
    """Immutable page request.

    ``ordering`` is checked against ``ordering_fields`` passed in the
    validation context; without a context only ``id`` is accepted.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default_factory=_default_page_size, ge=1)
    ordering: str = "id"

    @field_validator("page_size")
    @classmethod
    def cap_page_size(cls, v: int) -> int:
        return min(v, MAX_PAGE_SIZE)

    @field_validator("ordering")
    @classmethod
    def ordering_must_be_allowed(cls, v: str, info: ValidationInfo) -> str:
        allowed = (info.context or {}).get("ordering_fields", ("id",))
        v = v.strip()
        if v.lstrip("-") not in allowed:
            raise ValueError(
                f"Ordering must be one of: {', '.join(sorted(allowed))}."
            )
        return v

    @property
    def order_by(self) -> list[str]:
        """Ordering clause with ``id`` as tie-breaker for stable pages."""
        fields = [self.ordering]
        if self.ordering.lstrip("-") != "id":
            fields.append("id")
        return fields


class Page(BaseModel, Generic[T]):
    """Immutable slice of a larger result set."""

    model_config = ConfigDict(frozen=True)

    items: List[T]
    count: int
    page: int
    page_size: int
    num_pages: int

    @property
    def has_next(self) -> bool:
        return self.page < self.num_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def paginate(
    queryset: QuerySet,
    page_request: PageRequest,
    mapper: Callable[[Any], T],
) -> Page[T]:
    """Slice *queryset* per *page_request*, mapping each row with *mapper*.

    A page number past the last page yields an empty ``items`` list.
    """
    paginator = Paginator(queryset.order_by(*page_request.order_by), page_request.page_size)
    if page_request.page > paginator.num_pages:
        rows: list = []
    else:
        rows = list(paginator.page(page_request.page).object_list)
    return Page(
        items=[mapper(row) for row in rows],
        count=paginator.count,
        page=page_request.page,
        page_size=page_request.page_size,
        num_pages=paginator.num_pages,
    )


def paginated_response(request: Request, page: Page) -> Response:
    """Render *page* with absolute ``next`` / ``previous`` links.

    A page past the end links nowhere: both links are ``None``.
    """
    url = request.build_absolute_uri()

    next_link = None
    if page.has_next:
        next_link = replace_query_param(url, PAGE_QUERY_PARAM, page.page + 1)

    previous_link = None
    if page.has_previous and page.page <= page.num_pages:
        if page.page - 1 == 1:
            previous_link = remove_query_param(url, PAGE_QUERY_PARAM)
        else:
            previous_link = replace_query_param(url, PAGE_QUERY_PARAM, page.page - 1)

    return Response(
        {
            "count": page.count,
            "next": next_link,
            "previous": previous_link,
            "results": [
                item.model_dump(mode="json", by_alias=True) for item in page.items
            ],
        }
    )
