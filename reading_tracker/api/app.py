"""FastAPI 애플리케이션"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from reading_tracker import __version__
from reading_tracker.auth import auth_router, lifespan
from reading_tracker.books.errors import AuthenticationError, BookServiceError
from reading_tracker.config import config
from .books import router as books_router
from .schemas import HealthResponse

# 앱 생성
app = FastAPI(
    title="Reading Tracker",
    description="Personal reading list API backed by Supabase",
    version=__version__,
    lifespan=lifespan,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BookServiceError)
async def book_service_error_handler(request: Request, exc: BookServiceError) -> JSONResponse:
    """Render domain errors as {"error": message}"""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Framework errors (unknown route, wrong method) share the same body shape"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"{request.method} {request.url.path} failed")
    return JSONResponse(status_code=500, content={"error": "Server error"})


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check() -> HealthResponse:
    """헬스 체크"""
    return HealthResponse(status="ok")


# API 라우트 등록
app.include_router(auth_router)
app.include_router(books_router)
