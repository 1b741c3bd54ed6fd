"""Domain error taxonomy shared by every catalog module.

Services raise these; the API exception handler maps each ``ErrorKind``
to an HTTP status.  Storage-layer exceptions (``IntegrityError`` and
friends) are translated into one of these kinds at the service boundary
and never reach the HTTP layer verbatim.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CONFLICT = "database_conflict"


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    kind: ErrorKind
    default_message = "Service error."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ResourceNotFound(ServiceError):
    """The requested id is absent from storage."""

    kind = ErrorKind.NOT_FOUND
    default_message = "Entity not found."


class DatabaseConflict(ServiceError):
    """A write was refused by a referential or integrity constraint."""

    kind = ErrorKind.CONFLICT
    default_message = "Integrity violation."
