"""
Note schemas.
"""

import uuid
from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from .common import CamelModel


class NoteCreate(CamelModel):
    """Note creation request schema."""

    content: str = Field(min_length=1, description="Note content")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        """Validate content is not just whitespace."""
        if len(v.strip()) == 0:
            raise ValueError("Content cannot be empty")
        return v

    model_config = ConfigDict(
        json_schema_extra={"example": {"content": "Finish chapter 3 before Friday"}}
    )


class NoteUpdate(NoteCreate):
    """Note update request schema. Content is replaced wholesale."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"content": "Finish chapter 4 before Friday"}}
    )


class NoteResponse(CamelModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    owner_id: uuid.UUID = Field(description="Note owner ID")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "ownerId": "456e7890-e89b-12d3-a456-426614174000",
                "content": "Finish chapter 3 before Friday",
                "createdAt": "2025-09-13T10:30:00Z",
                "updatedAt": "2025-09-13T11:00:00Z",
            }
        }
    )
