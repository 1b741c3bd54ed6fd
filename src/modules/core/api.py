"""HTTP-facing helpers shared by every ViewSet.

- ``build_dto``: validates request data into a Pydantic DTO, turning
  Pydantic errors into a DRF ``ValidationError`` (400).
- ``api_exception_handler``: maps service-layer ``ErrorKind`` values to
  HTTP statuses and renders every error response in the
  drf-standardized-errors format, plus ``status`` / ``path`` /
  ``timestamp``::

      {
          "type": "client_error",
          "status": 404,
          "errors": [{"code": "not_found", "detail": "...", "attr": null}],
          "path": "/api/v1/products/42/",
          "timestamp": "2024-01-01T12:00:00+00:00"
      }
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

import structlog
from django.utils import timezone
from drf_standardized_errors.handler import exception_handler as standardized_exception_handler
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ValidationError

from modules.core.exceptions import ErrorKind, ServiceError

logger = structlog.get_logger(__name__)

D = TypeVar("D", bound=BaseModel)


class IntegrityConflict(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Integrity violation."
    default_code = ErrorKind.CONFLICT.value


_STATUS_BY_KIND: Dict[ErrorKind, Type[APIException]] = {
    ErrorKind.NOT_FOUND: NotFound,
    ErrorKind.CONFLICT: IntegrityConflict,
}


# ---------------------------------------------------------------------------
# Request parsing
# ---------------------------------------------------------------------------


def build_dto(
    dto_class: Type[D],
    data: Any,
    context: Optional[Mapping[str, Any]] = None,
) -> D:
    """Validate *data* into *dto_class* or raise a DRF ``ValidationError``."""
    if not isinstance(data, Mapping):
        raise ValidationError({"non_field_errors": ["Expected a JSON object."]})
    try:
        return dto_class.model_validate(dict(data), context=context)
    except PydanticValidationError as exc:
        detail: Dict[str, List[str]] = {}
        for error in exc.errors(include_url=False):
            attr = ".".join(str(part) for part in error["loc"]) or "non_field_errors"
            detail.setdefault(attr, []).append(error["msg"])
        raise ValidationError(detail) from exc


# ---------------------------------------------------------------------------
# Exception handling
# ---------------------------------------------------------------------------


def api_exception_handler(exc: Exception, context: Dict[str, Any]):
    """DRF ``EXCEPTION_HANDLER`` producing the standard error body.

    Domain errors are first turned into the matching DRF exception; the
    ``type`` / ``errors`` body comes from drf-standardized-errors and is
    extended with ``status``, ``path`` and ``timestamp``.
    """
    if isinstance(exc, ServiceError):
        logger.warning("api.service_error", kind=exc.kind.value, detail=str(exc))
        exc = _STATUS_BY_KIND[exc.kind](detail=str(exc))

    response = standardized_exception_handler(exc, context)
    if response is None:
        return None

    request = context.get("request")
    response.data = {
        **response.data,
        "status": response.status_code,
        "path": request.path if request is not None else None,
        "timestamp": timezone.now().isoformat(),
    }
    return response
