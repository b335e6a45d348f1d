"""설정 관리"""
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Supabase (service role: ownership is enforced by explicit user_id filters)
    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
    SUPABASE_CLIENT_TIMEOUT = int(os.getenv("SUPABASE_CLIENT_TIMEOUT", "10"))

    BOOKS_TABLE = os.getenv("BOOKS_TABLE", "books")

    # update/delete on a missing or foreign id: False keeps the silent no-op
    STRICT_NOT_FOUND = _as_bool(os.getenv("STRICT_NOT_FOUND"))

    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))

    # CORS 설정
    ALLOWED_ORIGINS = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:8000"
    ).split(",")

config = Config()
