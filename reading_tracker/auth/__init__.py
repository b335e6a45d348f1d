"""Authentication module for the reading tracker."""

from .dependencies import (
    extract_bearer_token,
    get_supabase_client,
    resolve_user,
    verify_current_user,
)
from .routes import router as auth_router
from .schemas import User
from .utils import create_supabase_client, lifespan

__all__ = [
    # Router
    "auth_router",
    # Schemas
    "User",
    # Lifecycle
    "create_supabase_client",
    "lifespan",
    # Dependencies
    "extract_bearer_token",
    "get_supabase_client",
    "resolve_user",
    "verify_current_user",
]
