"""Authentication middleware."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from ..core.exceptions import AccessDeniedError
from ..security import jwt as token_service

BEARER_SCHEME = "bearer"


class TokenHeader(APIKeyHeader):
    """Token passed in the ``Authorization`` header.

    The raw token is the expected form; a ``Bearer `` prefix is tolerated.
    On success the verified user id is stored on ``request.state.user_id``.
    """

    def __init__(self, header_name: str = "Authorization"):
        super().__init__(name=header_name, auto_error=False)

    async def __call__(self, request: Request) -> UUID:
        raw: Optional[str] = await super().__call__(request)
        parts = (raw or "").split(None, 1)
        # "Bearer" with nothing after it counts as no token
        if parts and parts[0].lower() == BEARER_SCHEME:
            parts = parts[1:]
        token = parts[0].strip() if parts else ""

        if not token:
            raise AccessDeniedError()

        user_id = token_service.get_user_id_from_token(token)
        request.state.user_id = user_id
        return user_id


# Dependency for getting current user ID from the token
async def get_current_user_id(user_id: UUID = Depends(TokenHeader())) -> UUID:
    """Get current authenticated user ID."""
    return user_id
