"""Authentication schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """Identity resolved from a bearer token by Supabase Auth."""

    id: str = Field(..., description="Stable user ID (UUID)")
    aud: Optional[str] = None
    role: str = "authenticated"
    email: Optional[str] = None
    phone: Optional[str] = None
    app_metadata: dict[str, Any] = Field(default_factory=dict)
    user_metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None

    @classmethod
    def from_supabase(cls, supabase_user: Any) -> "User":
        """Convert a gotrue User object to our schema."""
        return cls(
            id=str(supabase_user.id),
            aud=supabase_user.aud,
            role=supabase_user.role or "authenticated",
            email=supabase_user.email,
            phone=supabase_user.phone or None,
            app_metadata=supabase_user.app_metadata or {},
            user_metadata=supabase_user.user_metadata or {},
            created_at=supabase_user.created_at,
            last_sign_in_at=supabase_user.last_sign_in_at,
        )
