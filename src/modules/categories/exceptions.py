"""Category domain exceptions.

Raised by the Service Layer.  Each one carries the ``ErrorKind`` of its
base class, which the API exception handler maps to an HTTP status.
"""

from __future__ import annotations

from modules.core.exceptions import DatabaseConflict, ResourceNotFound


class CategoryNotFound(ResourceNotFound):
    """No category has the requested id."""


class CategoryInUse(DatabaseConflict):
    """The category is still linked to products and cannot be deleted."""
