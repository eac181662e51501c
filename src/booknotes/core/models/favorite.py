# Favorite model - a bookmarked book record
import uuid
from typing import List, Optional

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID, StringListType


class Favorite(BaseModel):
    """Book saved by a user.

    ``book_id`` is the identifier from the external book catalogue. The pair
    (owner_id, book_id) is not unique; saving the same book twice gives two rows.
    """

    __tablename__ = "favorites"

    book_id: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    authors: Mapped[List[str]] = mapped_column(StringListType, nullable=False, default=list)
    thumbnail: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)

    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("idx_favorites_owner_book", "owner_id", "book_id"),
    )
