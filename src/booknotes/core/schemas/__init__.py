"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import LoginRequest, RegisterRequest, TokenResponse
from .common import CamelModel, ErrorResponse, HealthCheckResponse, SuccessResponse
from .favorites import FavoriteCreate, FavoriteResponse
from .notes import NoteCreate, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    # Favorite schemas
    "FavoriteCreate",
    "FavoriteResponse",
    # Common schemas
    "CamelModel",
    "ErrorResponse",
    "SuccessResponse",
    "HealthCheckResponse",
]
