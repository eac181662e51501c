"""
Application exception hierarchy.

Services, repositories and the auth dependency raise these; the handlers
registered in ``main.register_exception_handlers`` turn each one into a JSON
error envelope with the matching status code.

    BookNotesError (base)            -> 500
    ├── ValidationError              -> 400
    ├── ConflictError                -> 400
    ├── AuthError                    -> 401
    ├── AccessDeniedError            -> 401
    ├── InvalidTokenError            -> 401
    ├── NotFoundError                -> 404
    └── StoreError                   -> 500
"""

from typing import Any, Dict, Optional


class BookNotesError(Exception):
    """Base exception for all application errors.

    ``message`` is safe to return to clients. ``context`` is for logs only.
    """

    status_code: int = 500
    error_code: str = "internal_error"
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BookNotesError):
    """Missing or malformed client input."""

    status_code = 400
    error_code = "validation_error"
    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(BookNotesError):
    """Uniqueness violation reported by the store."""

    status_code = 400
    error_code = "conflict"
    default_message = "Resource already exists"


class AuthError(BookNotesError):
    """Login failed. Unknown user and wrong password look the same."""

    status_code = 401
    error_code = "invalid_credentials"
    default_message = "Invalid credentials"


class AccessDeniedError(BookNotesError):
    """Protected route called without a token."""

    status_code = 401
    error_code = "access_denied"
    default_message = "Access denied"


class InvalidTokenError(BookNotesError):
    """Token is malformed, badly signed or expired."""

    status_code = 401
    error_code = "invalid_token"
    default_message = "Invalid token"


class NotFoundError(BookNotesError):
    """No resource matched the id for the requesting owner."""

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource.capitalize()} not found", context=ctx)
        self.resource = resource


class StoreError(BookNotesError):
    """Unclassified persistence failure. Details stay in the logs."""

    status_code = 500
    error_code = "store_error"
    default_message = "A database error occurred"
