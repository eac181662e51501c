"""Note repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import StoreError
from ..logging import get_logger
from ..models.base import utcnow
from ..models.note import Note

logger = get_logger("repositories.note")


class NoteRepository:
    """Repository for note database operations.

    Every query is filtered by owner; a note that belongs to someone else
    behaves exactly like a note that does not exist.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        try:
            await self.session.commit()
            await self.session.refresh(note)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to create note", exc_info=e)
            raise StoreError() from e
        return note

    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """All notes owned by user, oldest first."""
        stmt = (
            select(Note)
            .where(Note.owner_id == user_id)
            .order_by(Note.created_at, Note.id)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error("Failed to list notes", extra={"user_id": user_id}, exc_info=e)
            raise StoreError() from e
        return list(result.scalars())

    async def update_note(self, note_id: UUID, user_id: UUID, update_data: dict) -> Optional[Note]:
        """Update note if owned by user, in one UPDATE ... RETURNING statement."""
        values = dict(update_data)
        values["updated_at"] = utcnow()

        stmt = (
            update(Note)
            .where(Note.id == note_id, Note.owner_id == user_id)
            .values(**values)
            .returning(Note)
            .execution_options(synchronize_session="fetch", populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
            note = result.scalar_one_or_none()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to update note", extra={"note_id": note_id}, exc_info=e)
            raise StoreError() from e
        return note

    async def delete_note(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Delete note if owned by user and return the removed row."""
        stmt = (
            delete(Note)
            .where(Note.id == note_id, Note.owner_id == user_id)
            .returning(Note)
            .execution_options(synchronize_session="fetch")
        )
        try:
            result = await self.session.execute(stmt)
            note = result.scalar_one_or_none()
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Failed to delete note", extra={"note_id": note_id}, exc_info=e)
            raise StoreError() from e
        return note
