"""API 스키마 정의"""
from pydantic import BaseModel


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str


class ErrorResponse(BaseModel):
    """Uniform error body"""
    error: str
