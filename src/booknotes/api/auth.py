"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from ..core.schemas.common import ErrorResponse, SuccessResponse
from ..core.services import AuthService
from ..database import get_db_session

router = APIRouter(tags=["authentication"])


@router.post(
    "/register",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def register(request: RegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Register a new user. Call /login afterwards to get a token."""
    auth_service = AuthService(session)
    return await auth_service.register_user(request)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login user and get an access token."""
    auth_service = AuthService(session)
    return await auth_service.authenticate_user(request)
