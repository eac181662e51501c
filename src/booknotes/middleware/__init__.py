"""Middleware for authentication and other cross-cutting concerns."""

from .auth import TokenHeader, get_current_user_id

__all__ = ["get_current_user_id", "TokenHeader"]
