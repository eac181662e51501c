"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import get_settings
from ..core.exceptions import InvalidTokenError

# claim carrying the account id
USER_ID_CLAIM = "userId"


def create_access_token(user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed access token for ``user_id``."""
    settings = get_settings()
    now = datetime.now(timezone.utc)

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        USER_ID_CLAIM: str(user_id),
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Decode and validate an access token.

    Raises InvalidTokenError on a bad signature, a malformed or expired token,
    or a payload without the user id claim.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        raise InvalidTokenError(context={"reason": str(e)}) from e

    if not payload.get(USER_ID_CLAIM):
        raise InvalidTokenError(context={"reason": "missing user id claim"})

    return payload


def get_user_id_from_token(token: str) -> UUID:
    """Extract user ID from token."""
    payload = decode_access_token(token)
    try:
        return UUID(str(payload[USER_ID_CLAIM]))
    except ValueError as e:
        raise InvalidTokenError(context={"reason": "user id claim is not a UUID"}) from e
