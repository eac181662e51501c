"""
Service interfaces for BookNotes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from uuid import UUID

from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from ..schemas.common import HealthCheckResponse, SuccessResponse
from ..schemas.favorites import FavoriteCreate, FavoriteResponse
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> SuccessResponse:
        """Register new user. Does not log in."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return an access token."""
        pass


class INoteService(ABC):
    """Owner-scoped note CRUD."""

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def list_user_notes(self, user_id: UUID) -> List[NoteResponse]:
        """List every note of the user."""
        pass

    @abstractmethod
    async def update_note(self, note_id: str, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Replace note content."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: str, user_id: UUID) -> NoteResponse:
        """Delete note and return it."""
        pass


class IFavoriteService(ABC):
    """Owner-scoped favorite CRUD."""

    @abstractmethod
    async def add_favorite(self, user_id: UUID, request: FavoriteCreate) -> FavoriteResponse:
        """Save a book."""
        pass

    @abstractmethod
    async def list_user_favorites(self, user_id: UUID) -> List[FavoriteResponse]:
        """List every favorite of the user."""
        pass

    @abstractmethod
    async def remove_favorite(self, book_id: str, user_id: UUID) -> FavoriteResponse:
        """Remove a saved book and return it."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass
