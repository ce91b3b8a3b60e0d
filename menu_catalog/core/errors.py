"""Catalog error taxonomy.

Every failure a service can report is a ``CatalogError`` subclass carrying
the HTTP status the API layer answers with. Handlers in
``menu_catalog.api.errors`` turn them into the response envelope.
"""
from __future__ import annotations

from fastapi import status


class CatalogError(Exception):
    """Base class for all catalog failures."""

    code = "CATALOG_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, error: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def to_response(self) -> dict:
        body: dict = {"success": False, "message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class ValidationError(CatalogError):
    """Missing or malformed input."""

    code = "VALIDATION_ERROR"
    http_status = status.HTTP_400_BAD_REQUEST


class NotFoundError(CatalogError):
    """The target entity, or an entity it references, does not exist."""

    code = "NOT_FOUND"
    http_status = status.HTTP_404_NOT_FOUND


class ConflictError(CatalogError):
    """Uniqueness violation or a delete blocked by dependents."""

    code = "CONFLICT"
    http_status = status.HTTP_400_BAD_REQUEST


class UnexpectedError(CatalogError):
    """Any other persistence failure."""

    code = "UNEXPECTED_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
