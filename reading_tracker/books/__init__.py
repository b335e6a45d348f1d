"""Book resource: validation, storage adapter and error taxonomy."""

from .errors import (
    AuthenticationError,
    BookNotFoundError,
    BookServiceError,
    BookValidationError,
    StorageError,
)
from .repository import BookRepository
from .schemas import Book, BookCreateRequest, BookStatus, BookStatusUpdateRequest
from .validators import parse_status_filter, validate_create, validate_status_update

__all__ = [
    # Errors
    "BookServiceError",
    "AuthenticationError",
    "BookValidationError",
    "StorageError",
    "BookNotFoundError",
    # Schemas
    "Book",
    "BookStatus",
    "BookCreateRequest",
    "BookStatusUpdateRequest",
    # Core
    "BookRepository",
    "validate_create",
    "validate_status_update",
    "parse_status_filter",
]
