"""Authentication API routes."""

from fastapi import APIRouter, Depends

from .dependencies import verify_current_user
from .schemas import User

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=User)
async def get_me(current_user: User = Depends(verify_current_user)) -> User:
    """
    Get the identity behind the bearer token.

    Sign-up, sign-in and sign-out happen directly against Supabase Auth.
    """
    return current_user
