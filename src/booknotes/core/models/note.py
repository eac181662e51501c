# Note model for user content
import uuid

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Note(BaseModel):
    """Plain text note owned by a single user."""

    __tablename__ = "notes"

    content: Mapped[str] = mapped_column(Text, nullable=False)

    # owner reference
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("idx_notes_owner_created", "owner_id", "created_at"),
    )
