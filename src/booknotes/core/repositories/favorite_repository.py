"""Favorite repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from ..exceptions import StoreError
from ..logging import get_logger
from ..models.favorite import Favorite

logger = get_logger("repositories.favorite")


class FavoriteRepository:
    """Repository for favorite database operations, always scoped by owner."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_favorite(self, favorite_data: dict) -> Favorite:
        """Create new favorite."""
        favorite = Favorite(**favorite_data)
        self.session.add(favorite)
        try:
            await self.session.commit()
            await self.session.refresh(favorite)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to create favorite", exc_info=e)
            raise StoreError() from e
        return favorite

    async def list_user_favorites(self, user_id: UUID) -> List[Favorite]:
        """All favorites owned by user, oldest first."""
        stmt = (
            select(Favorite)
            .where(Favorite.owner_id == user_id)
            .order_by(Favorite.created_at, Favorite.id)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to list favorites", extra={"user_id": user_id}, exc_info=e)
            raise StoreError() from e
        return list(result.scalars())

    async def delete_by_book_id(self, user_id: UUID, book_id: str) -> Optional[Favorite]:
        """Remove one of the user's favorites for ``book_id``.

        If the book was saved more than once only the oldest row goes.
        """
        candidate = aliased(Favorite)
        target = (
            select(candidate.id)
            .where(candidate.owner_id == user_id, candidate.book_id == book_id)
            .order_by(candidate.created_at, candidate.id)
            .limit(1)
            .scalar_subquery()
        )
        stmt = (
            delete(Favorite)
            .where(Favorite.id == target)
            .returning(Favorite)
            .execution_options(synchronize_session="fetch")
        )
        try:
            result = await self.session.execute(stmt)
            favorite = result.scalar_one_or_none()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to delete favorite", extra={"book_id": book_id}, exc_info=e)
            raise StoreError() from e
        return favorite
