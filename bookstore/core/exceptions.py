"""Domain-level exceptions.

Every expected business rule violation is a subclass of BookstoreError. Each
class carries the HTTP status and error type the exception handlers in
bookstore.core.errors translate it into.
"""
from __future__ import annotations

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_404_NOT_FOUND,
)


class BookstoreError(Exception):
    """Base class for all domain errors."""

    status_code: int = HTTP_400_BAD_REQUEST
    error_type: str = "bookstore_error"

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.details: dict[str, object] | None = details


class InvalidInput(BookstoreError):
    """The request payload is malformed or incomplete."""

    error_type = "invalid_input"


class Unauthorized(BookstoreError):
    """No valid bearer credential was presented."""

    status_code = HTTP_401_UNAUTHORIZED
    error_type = "unauthorized"


class InvalidCredentials(Unauthorized):
    """Login failed: unknown user or wrong password."""

    error_type = "invalid_credentials"


class NotFound(BookstoreError):
    """A requested entity does not exist."""

    status_code = HTTP_404_NOT_FOUND
    error_type = "not_found"


class Conflict(BookstoreError):
    """Uniqueness violation, or a delete blocked by references."""

    error_type = "conflict"


class InsufficientStock(BookstoreError):
    """An order asks for more copies than a book has in stock."""

    error_type = "insufficient_stock"
