from json import JSONDecodeError
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request, status
from loguru import logger
from supabase import AsyncClient

from reading_tracker.auth.dependencies import get_supabase_client, verify_current_user
from reading_tracker.auth.schemas import User
from reading_tracker.books.errors import BookNotFoundError
from reading_tracker.books.repository import BookRepository
from reading_tracker.books.schemas import Book, DeleteResponse
from reading_tracker.books.validators import (
    parse_status_filter,
    validate_create,
    validate_status_update,
)
from reading_tracker.config import config
from .schemas import ErrorResponse


router = APIRouter(
    prefix="/books",
    tags=["books"],
    responses={
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def get_book_repository(
    client: AsyncClient = Depends(get_supabase_client),
) -> BookRepository:
    return BookRepository(client, table=config.BOOKS_TABLE)


async def _read_json_object(request: Request) -> dict[str, Any]:
    """Request body as a dict. Malformed or non-object JSON reads as {}."""
    try:
        body = await request.json()
    except (JSONDecodeError, UnicodeDecodeError):
        logger.debug(f"{request.method} {request.url.path}: unparseable body treated as empty")
        return {}
    return body if isinstance(body, dict) else {}


@router.get("", response_model=list[Book])
async def list_books(
    status_filter: Optional[str] = Query(None, alias="status", description="reading | completed | wishlist"),
    current_user: User = Depends(verify_current_user),
    repository: BookRepository = Depends(get_book_repository),
) -> list[dict]:
    """
    List the caller's books, newest first.

    An unknown ``status`` value is ignored and the full list is returned.
    """
    return await repository.list_books(current_user.id, parse_status_filter(status_filter))


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
async def create_book(
    request: Request,
    current_user: User = Depends(verify_current_user),
    repository: BookRepository = Depends(get_book_repository),
) -> dict:
    """Create a book owned by the caller. ``status`` defaults to reading."""
    payload = validate_create(await _read_json_object(request))
    return await repository.create_book(current_user.id, payload)


@router.patch("/{book_id}", response_model=Optional[Book])
async def update_book_status(
    book_id: str,
    request: Request,
    current_user: User = Depends(verify_current_user),
    repository: BookRepository = Depends(get_book_repository),
) -> Optional[dict]:
    """
    Update the status of one of the caller's books.

    A missing or foreign id answers null, unless STRICT_NOT_FOUND is set.
    """
    payload = validate_status_update(await _read_json_object(request))
    book = await repository.update_status(current_user.id, book_id, payload.status)
    if book is None and config.STRICT_NOT_FOUND:
        raise BookNotFoundError("Book not found")
    return book


@router.delete("/{book_id}", response_model=DeleteResponse)
async def delete_book(
    book_id: str,
    current_user: User = Depends(verify_current_user),
    repository: BookRepository = Depends(get_book_repository),
) -> DeleteResponse:
    """Delete one of the caller's books."""
    deleted = await repository.delete_book(current_user.id, book_id)
    if not deleted and config.STRICT_NOT_FOUND:
        raise BookNotFoundError("Book not found")
    return DeleteResponse(success=True)
