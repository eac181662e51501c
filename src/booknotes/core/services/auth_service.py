"""Authentication service implementation."""

from sqlalchemy.ext.asyncio import AsyncSession

from ...security import create_access_token, hash_password, verify_password
from ..exceptions import AuthError, ConflictError, ValidationError
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from ..schemas.common import SuccessResponse
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def register_user(self, request: RegisterRequest) -> SuccessResponse:
        """Register new user.

        No token is handed out here; the client logs in afterwards.
        """
        if not request.username or not request.username.strip():
            raise ValidationError("Username is required", field="username")
        if not request.password:
            raise ValidationError("Password is required", field="password")

        # Hash before it ever reaches the store
        user_data = {
            "username": request.username,
            "password_hash": hash_password(request.password),
        }

        try:
            user = await self.user_repo.create_user(user_data)
        except ConflictError:
            logger.info("Registration rejected, username taken", extra={"username": request.username})
            raise

        logger.info("User registered", extra={"user_id": user.id, "username": user.username})
        return SuccessResponse(message="User registered successfully")

    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return an access token."""
        user = await self.user_repo.get_by_username(request.username)

        # Same error for unknown user and wrong password
        if not user or not verify_password(request.password, user.password_hash):
            logger.info("Login failed", extra={"username": request.username})
            raise AuthError()

        logger.info("User logged in", extra={"user_id": user.id})
        return TokenResponse(token=create_access_token(user.id))
