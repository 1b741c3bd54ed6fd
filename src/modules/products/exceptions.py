"""Product domain exceptions.

Raised by the Service Layer.  The API exception handler translates them
into HTTP responses through the ``ErrorKind`` of their base class.
"""

from __future__ import annotations

from modules.core.exceptions import DatabaseConflict, ResourceNotFound


class ProductNotFound(ResourceNotFound):
    """No product has the requested id."""


class ProductInUse(DatabaseConflict):
    """The product is referenced elsewhere and cannot be deleted."""
