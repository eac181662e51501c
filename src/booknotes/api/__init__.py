"""API routers for BookNotes."""

from .auth import router as auth_router
from .favorites import router as favorites_router
from .health import router as health_router
from .notes import router as notes_router

__all__ = ["auth_router", "notes_router", "favorites_router", "health_router"]
