"""Favorite service implementation."""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError
from ..logging import get_logger
from ..models.favorite import Favorite
from ..repositories.favorite_repository import FavoriteRepository
from ..schemas.favorites import FavoriteCreate, FavoriteResponse
from .interfaces import IFavoriteService

logger = get_logger("services.favorite")


class FavoriteService(IFavoriteService):
    """Favorite service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.favorite_repo = FavoriteRepository(session)

    async def add_favorite(self, user_id: UUID, request: FavoriteCreate) -> FavoriteResponse:
        """Save a book for ``user_id``. Duplicates are allowed."""
        favorite = await self.favorite_repo.create_favorite(
            {
                "owner_id": user_id,
                "book_id": request.book_id,
                "title": request.title,
                "authors": list(request.authors),
                "thumbnail": request.thumbnail,
            }
        )
        logger.info(
            "Favorite added",
            extra={"favorite_id": favorite.id, "book_id": favorite.book_id, "user_id": user_id},
        )
        return self._favorite_to_response(favorite)

    async def list_user_favorites(self, user_id: UUID) -> List[FavoriteResponse]:
        """List every favorite of the user."""
        favorites = await self.favorite_repo.list_user_favorites(user_id)
        return [self._favorite_to_response(f) for f in favorites]

    async def remove_favorite(self, book_id: str, user_id: UUID) -> FavoriteResponse:
        """Remove one saved copy of ``book_id`` and return it."""
        favorite = await self.favorite_repo.delete_by_book_id(user_id, book_id)
        if not favorite:
            raise NotFoundError("book", book_id)

        logger.info("Favorite removed", extra={"book_id": book_id, "user_id": user_id})
        return self._favorite_to_response(favorite)

    @staticmethod
    def _favorite_to_response(favorite: Favorite) -> FavoriteResponse:
        return FavoriteResponse(
            id=favorite.id,
            owner_id=favorite.owner_id,
            book_id=favorite.book_id,
            title=favorite.title,
            authors=list(favorite.authors or []),
            thumbnail=favorite.thumbnail,
            created_at=favorite.created_at,
            updated_at=favorite.updated_at,
        )
