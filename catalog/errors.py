# catalog/errors.py
"""Typed errors raised by the catalog layer.

Every error carries a human readable message, an optional context naming
the operation that raised it, and (for lookups) the identifier that was
attempted. The API layer maps ``status_code`` onto the HTTP response.
"""
from typing import Any, Optional


class CatalogError(Exception):
    """Base class for all errors raised by the catalog layer."""

    status_code: int = 400

    def __init__(
        self,
        message: str | Exception,
        context: Optional[str] = None,
        identifier: Any = None,
    ):
        self.inner = message if isinstance(message, Exception) else None
        self.message = str(message)
        self.context = context
        self.identifier = identifier
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "context": self.context,
            "identifier": self.identifier,
        }


class BadRequest(CatalogError):
    """Malformed or invalid input."""
    status_code = 400


class Forbidden(CatalogError):
    """The caller lacks the scope required for this operation."""
    status_code = 403


class NotFound(CatalogError):
    """Lookup miss, or a record owned by a different parent."""
    status_code = 404


class NotUnique(CatalogError):
    """Insert or update would violate a uniqueness constraint."""
    status_code = 409


class ServerError(CatalogError):
    """Unexpected internal failure."""
    status_code = 500
