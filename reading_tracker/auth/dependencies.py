from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request
from loguru import logger
from supabase import AsyncClient

from reading_tracker.books.errors import AuthenticationError, StorageError
from .schemas import User

BEARER_PREFIX = "Bearer "

NO_TOKEN = "No token provided"
INVALID_TOKEN = "Invalid token"


def get_supabase_client(request: Request) -> AsyncClient:
    """
    Dependency to get the Supabase client created at startup.
    테스트에서는 app.dependency_overrides로 교체합니다.
    """
    client = getattr(request.app.state, "supabase", None)
    if client is None:
        raise StorageError("Supabase client not initialized")
    return client


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Strip the ``Bearer `` prefix. Returns None when no token remains."""
    if not authorization:
        return None
    token = authorization.removeprefix(BEARER_PREFIX).strip()
    return token or None


async def resolve_user(client: AsyncClient, authorization: Optional[str]) -> User:
    """
    Resolve the caller from the Authorization header.

    A missing or empty token fails without contacting Supabase. Every
    provider-side rejection or transport error collapses into the same
    AuthenticationError.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise AuthenticationError(NO_TOKEN)

    try:
        # get_user(jwt) checks signature, expiry and revocation server-side
        response = await client.auth.get_user(token)
    except Exception as e:
        # Log error type only; the message may echo the token
        logger.warning(f"Token verification failed: {type(e).__name__}")
        raise AuthenticationError(INVALID_TOKEN) from e

    if not response or not response.user:
        raise AuthenticationError(INVALID_TOKEN)

    return User.from_supabase(response.user)


async def verify_current_user(
    authorization: Optional[str] = Header(default=None),
    client: AsyncClient = Depends(get_supabase_client),
) -> User:
    """FastAPI dependency: the authenticated caller, or 401."""
    return await resolve_user(client, authorization)
