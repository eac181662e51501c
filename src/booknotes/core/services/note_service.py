"""Note service implementation."""

from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from .interfaces import INoteService

logger = get_logger("services.note")


def parse_resource_id(raw_id: str, resource: str) -> UUID:
    """Parse a path id. Garbage ids are reported as not found, never as bad input."""
    try:
        return raw_id if isinstance(raw_id, UUID) else UUID(str(raw_id))
    except ValueError:
        raise NotFoundError(resource, str(raw_id)) from None


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note owned by ``user_id``."""
        note = await self.note_repo.create_note(
            {"content": request.content, "owner_id": user_id}
        )
        logger.info("Note created", extra={"note_id": note.id, "user_id": user_id})
        return self._note_to_response(note)

    async def list_user_notes(self, user_id: UUID) -> List[NoteResponse]:
        """List every note of the user."""
        notes = await self.note_repo.list_user_notes(user_id)
        return [self._note_to_response(note) for note in notes]

    async def update_note(self, note_id: str, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Replace the content of a note the user owns."""
        nid = parse_resource_id(note_id, "note")
        note = await self.note_repo.update_note(nid, user_id, {"content": request.content})
        if not note:
            raise NotFoundError("note", str(nid))

        logger.info("Note updated", extra={"note_id": nid, "user_id": user_id})
        return self._note_to_response(note)

    async def delete_note(self, note_id: str, user_id: UUID) -> NoteResponse:
        """Delete a note the user owns and return it."""
        nid = parse_resource_id(note_id, "note")
        note = await self.note_repo.delete_note(nid, user_id)
        if not note:
            raise NotFoundError("note", str(nid))

        logger.info("Note deleted", extra={"note_id": nid, "user_id": user_id})
        return self._note_to_response(note)

    @staticmethod
    def _note_to_response(note: Note) -> NoteResponse:
        return NoteResponse(
            id=note.id,
            owner_id=note.owner_id,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
