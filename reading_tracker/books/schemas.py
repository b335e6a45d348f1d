from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class BookStatus(str, Enum):
    """Reading state of a book"""
    READING = "reading"
    COMPLETED = "completed"
    WISHLIST = "wishlist"


DEFAULT_STATUS = BookStatus.READING


class BookCreateRequest(BaseModel):
    """Validated payload for creating a book"""
    title: str = Field(..., min_length=1, description="Book title")
    author: str = Field(..., min_length=1, description="Book author")
    status: BookStatus = Field(DEFAULT_STATUS, description="Reading status")


class BookStatusUpdateRequest(BaseModel):
    """Validated payload for updating a book's status"""
    status: BookStatus = Field(..., description="New reading status")


class Book(BaseModel):
    """Response schema for book"""
    model_config = ConfigDict(extra="allow")

    id: Union[int, str] = Field(..., description="Book ID assigned by the store")
    user_id: str = Field(..., description="Owner user ID (UUID)")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Book author")
    status: BookStatus = Field(..., description="Reading status")
    created_at: str = Field(..., description="Creation timestamp")


class DeleteResponse(BaseModel):
    """Acknowledgement for delete"""
    success: bool = True
