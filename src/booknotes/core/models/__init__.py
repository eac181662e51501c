"""
Database models for BookNotes.

Models included:
    - User: account with username/password authentication
    - Note: plain text note owned by a user
    - Favorite: bookmarked book record owned by a user
"""

from .base import BaseModel
from .favorite import Favorite
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "Favorite",
]
