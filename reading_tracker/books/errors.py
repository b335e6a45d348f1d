"""Error taxonomy for the book API.

Every error raised below the HTTP layer carries a fixed status code.
The API layer renders each as ``{"error": message}``.
"""

from fastapi import status


class BookServiceError(Exception):
    """Base exception for the book API."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(BookServiceError):
    """Missing, empty or provider-rejected bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class BookValidationError(BookServiceError):
    """Request payload or path failed validation."""

    status_code = status.HTTP_400_BAD_REQUEST


class StorageError(BookServiceError):
    """Data store operation failed. Carries the upstream message verbatim."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class BookNotFoundError(BookServiceError):
    """Update/delete matched no row owned by the caller (strict mode only)."""

    status_code = status.HTTP_404_NOT_FOUND


__all__ = [
    "BookServiceError",
    "AuthenticationError",
    "BookValidationError",
    "StorageError",
    "BookNotFoundError",
]
