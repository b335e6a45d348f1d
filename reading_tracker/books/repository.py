"""Book repository for Supabase table operations."""

from typing import Any, Optional

from loguru import logger
from postgrest.exceptions import APIError
from supabase import AsyncClient

from .errors import StorageError
from .schemas import BookCreateRequest, BookStatus


class BookRepository:
    """
    Owner-scoped access to the books table.

    Every query carries an equality filter on ``user_id``; a caller-supplied
    owner is never trusted. Each method performs exactly one round trip and
    raises StorageError with the upstream message on any failure.
    """

    def __init__(self, client: AsyncClient, table: str = "books"):
        """
        Initialize the repository with a Supabase client.

        Args:
            client: Supabase async client instance
            table: Name of the books table
        """
        self.client = client
        self.table = table

    async def _execute(self, query: Any, operation: str) -> list[dict]:
        try:
            response = await query.execute()
        except APIError as e:
            message = e.message or str(e)
            logger.error(f"Supabase error during {operation}: {message}")
            raise StorageError(message) from e
        except Exception as e:
            logger.error(f"Storage request failed during {operation}: {type(e).__name__}: {e}")
            raise StorageError(str(e) or type(e).__name__) from e

        return response.data or []

    async def list_books(self, user_id: str, status: Optional[BookStatus] = None) -> list[dict]:
        """
        List the caller's books, newest first.

        Args:
            user_id: Resolved caller identity
            status: Optional status filter

        Returns:
            Book rows (possibly empty)
        """
        query = self.client.table(self.table).select("*").eq("user_id", user_id)
        if status is not None:
            query = query.eq("status", status.value)
        query = query.order("created_at", desc=True)

        books = await self._execute(query, "list")
        logger.info(f"Retrieved {len(books)} books for user {user_id}")
        return books

    async def create_book(self, user_id: str, request: BookCreateRequest) -> dict:
        """Insert one book owned by ``user_id`` and return the stored row."""
        query = self.client.table(self.table).insert({
            "title": request.title,
            "author": request.author,
            "status": request.status.value,
            "user_id": user_id,
        })

        rows = await self._execute(query, "create")
        if not rows:
            raise StorageError("Insert returned no row")

        book = rows[0]
        logger.info(f"Created book {book.get('id')} for user {user_id}")
        return book

    async def update_status(self, user_id: str, book_id: str, status: BookStatus) -> Optional[dict]:
        """
        Set the status of one book owned by ``user_id``.

        Returns:
            The updated row, or None when no row matched id and owner.
            A foreign id and a nonexistent id are indistinguishable.
        """
        query = (
            self.client.table(self.table)
            .update({"status": status.value})
            .eq("id", book_id)
            .eq("user_id", user_id)
        )

        rows = await self._execute(query, "update")
        if not rows:
            logger.info(f"Status update matched no book {book_id} for user {user_id}")
            return None

        logger.info(f"Updated book {book_id} to {status.value} for user {user_id}")
        return rows[0]

    async def delete_book(self, user_id: str, book_id: str) -> int:
        """
        Delete one book owned by ``user_id``.

        Returns:
            Number of rows removed (0 or 1)
        """
        query = (
            self.client.table(self.table)
            .delete()
            .eq("id", book_id)
            .eq("user_id", user_id)
        )

        rows = await self._execute(query, "delete")
        logger.info(f"Deleted {len(rows)} book(s) with id {book_id} for user {user_id}")
        return len(rows)
