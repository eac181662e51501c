"""Favorites API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse
from ..core.schemas.favorites import FavoriteCreate, FavoriteResponse
from ..core.services import FavoriteService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(
    prefix="/favorites",
    tags=["favorites"],
    responses={401: {"model": ErrorResponse}},
)


# answers 200, not 201 like notes
@router.post("", response_model=FavoriteResponse)
async def add_favorite(
    request: FavoriteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session)
):
    """Save a book to the current user's favorites."""
    favorite_service = FavoriteService(session)
    return await favorite_service.add_favorite(current_user_id, request)


@router.get("", response_model=List[FavoriteResponse])
async def list_favorites(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session)
):
    """List the current user's favorites."""
    favorite_service = FavoriteService(session)
    return await favorite_service.list_user_favorites(current_user_id)


@router.delete(
    "/{book_id}",
    response_model=FavoriteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def remove_favorite(
    book_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session)
):
    """Remove a book from favorites by its external book id."""
    favorite_service = FavoriteService(session)
    return await favorite_service.remove_favorite(book_id, current_user_id)
