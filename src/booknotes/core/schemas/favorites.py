"""
Favorite (bookmarked book) schemas.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from .common import CamelModel


class FavoriteCreate(CamelModel):
    """Favorite creation request schema."""

    book_id: str = Field(min_length=1, max_length=255, description="External book identifier")
    title: str = Field(default="", max_length=500, description="Book title")
    authors: List[str] = Field(default_factory=list, description="Book authors, in order")
    thumbnail: Optional[str] = Field(default=None, max_length=2048, description="Cover image URL")

    @field_validator("book_id")
    @classmethod
    def validate_book_id(cls, v):
        if not v.strip():
            raise ValueError("bookId cannot be empty")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "bookId": "zyTCAlFPjgYC",
                "title": "The Google Story",
                "authors": ["David A. Vise", "Mark Malseed"],
                "thumbnail": "http://books.google.com/books/content?id=zyTCAlFPjgYC&printsec=frontcover&img=1",
            }
        }
    )


class FavoriteResponse(CamelModel):
    """Favorite response schema."""

    id: uuid.UUID = Field(description="Favorite unique identifier")
    owner_id: uuid.UUID = Field(description="Owner ID")
    book_id: str = Field(description="External book identifier")
    title: str = Field(description="Book title")
    authors: List[str] = Field(description="Book authors, in order")
    thumbnail: Optional[str] = Field(default=None, description="Cover image URL")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "ownerId": "456e7890-e89b-12d3-a456-426614174000",
                "bookId": "zyTCAlFPjgYC",
                "title": "The Google Story",
                "authors": ["David A. Vise", "Mark Malseed"],
                "thumbnail": "http://books.google.com/books/content?id=zyTCAlFPjgYC&printsec=frontcover&img=1",
                "createdAt": "2025-09-13T10:30:00Z",
                "updatedAt": "2025-09-13T10:30:00Z",
            }
        }
    )
