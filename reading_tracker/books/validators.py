"""Request validation for the book resource.

Write paths are strict: a bad payload is rejected with a 400 before the
data store is touched. The list filter is lenient: an unknown ``status``
query value is ignored and the unfiltered list is returned.
"""

from typing import Any, Optional

from .errors import BookValidationError
from .schemas import DEFAULT_STATUS, BookCreateRequest, BookStatus, BookStatusUpdateRequest

VALID_STATUSES = frozenset(s.value for s in BookStatus)

MISSING_TITLE_OR_AUTHOR = "Missing title or author"
INVALID_STATUS = "Invalid status"


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _coerce_status(value: Any) -> Optional[BookStatus]:
    """Return the matching BookStatus, or None if ``value`` is not one of them."""
    if isinstance(value, str) and value in VALID_STATUSES:
        return BookStatus(value)
    return None


def validate_create(payload: dict) -> BookCreateRequest:
    """
    Validate a creation payload.

    ``title`` and ``author`` must be non-empty strings. ``status`` may be
    absent, null or empty (defaults to reading); any other value must be a
    valid status.

    Raises:
        BookValidationError: On a missing field or unknown status
    """
    title = payload.get("title")
    author = payload.get("author")
    if not _non_empty_str(title) or not _non_empty_str(author):
        raise BookValidationError(MISSING_TITLE_OR_AUTHOR)

    raw_status = payload.get("status")
    if raw_status is None or raw_status == "":
        book_status = DEFAULT_STATUS
    else:
        book_status = _coerce_status(raw_status)
        if book_status is None:
            raise BookValidationError(INVALID_STATUS)

    return BookCreateRequest(title=title, author=author, status=book_status)


def validate_status_update(payload: dict) -> BookStatusUpdateRequest:
    """Validate a status update payload. ``status`` is required."""
    book_status = _coerce_status(payload.get("status"))
    if book_status is None:
        raise BookValidationError(INVALID_STATUS)
    return BookStatusUpdateRequest(status=book_status)


def parse_status_filter(value: Optional[str]) -> Optional[BookStatus]:
    """Resolve the optional list filter. Unknown values mean no filter."""
    return _coerce_status(value)
