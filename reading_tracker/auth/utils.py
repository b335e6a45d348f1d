from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from loguru import logger
from supabase import AsyncClient, AsyncClientOptions, create_async_client

from reading_tracker.config import config


async def create_supabase_client() -> AsyncClient:
    """
    Supabase Client 생성 (SERVICE_ROLE_KEY 사용)

    RLS를 우회하므로 모든 books 쿼리는 user_id 조건을 직접 포함해야 합니다.
    JWT 검증(auth.get_user)에도 사용됩니다.
    """
    if not config.SUPABASE_URL or not config.SUPABASE_SERVICE_ROLE_KEY:
        raise RuntimeError(
            "Supabase configuration missing. Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY."
        )

    return await create_async_client(
        config.SUPABASE_URL,
        config.SUPABASE_SERVICE_ROLE_KEY,
        options=AsyncClientOptions(
            postgrest_client_timeout=config.SUPABASE_CLIENT_TIMEOUT,
            storage_client_timeout=config.SUPABASE_CLIENT_TIMEOUT,
            auto_refresh_token=False,
            persist_session=False,
        )
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    FastAPI Lifespan Context Manager
    애플리케이션 시작/종료 시 Supabase 클라이언트를 관리합니다.
    """
    try:
        logger.info("Initializing Supabase Client...")
        app.state.supabase = await create_supabase_client()
        logger.info(f"Supabase Client ready: {config.SUPABASE_URL}")

        yield

    except RuntimeError as e:
        logger.error(
            f"Startup failed: {e} | "
            f"SUPABASE_URL={'set' if config.SUPABASE_URL else 'MISSING'}, "
            f"SUPABASE_SERVICE_ROLE_KEY={'set' if config.SUPABASE_SERVICE_ROLE_KEY else 'MISSING'}"
        )
        raise
    finally:
        # Shutdown
        client = getattr(app.state, "supabase", None)
        if client is not None:
            logger.info("Closing Supabase Client...")
            await client.postgrest.session.aclose()
            app.state.supabase = None
            logger.info("Supabase Client closed successfully")
