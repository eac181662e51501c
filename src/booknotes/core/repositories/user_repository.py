"""User repository for database operations."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ConflictError, StoreError
from ..logging import get_logger
from ..models.user import User

logger = get_logger("repositories.user")


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict) -> User:
        """Insert a new user.

        Uniqueness of the username is left to the unique constraint so two
        concurrent registrations cannot both succeed.
        """
        user = User(**user_data)
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(
                "Username already taken", context={"username": user_data.get("username")}
            ) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to create user", exc_info=e)
            raise StoreError() from e

        await self.session.refresh(user)
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        stmt = select(User).where(User.username == username)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to load user by username", exc_info=e)
            raise StoreError() from e
        return result.scalar_one_or_none()
