"""
Service layer interfaces and implementations.
"""

from .interfaces import IAuthService, IFavoriteService, IHealthService, INoteService

from .auth_service import AuthService
from .favorite_service import FavoriteService
from .health_service import HealthService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "IFavoriteService",
    "IHealthService",

    # Implementations
    "AuthService",
    "NoteService",
    "FavoriteService",
    "HealthService",
]
