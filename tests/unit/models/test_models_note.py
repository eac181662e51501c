"""
Unit tests for Note model.
"""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from src.booknotes.core.models.note import Note


class TestNoteModel:
    """Test Note model functionality."""

    @pytest.mark.asyncio
    async def test_create_note(self, test_session, test_user):
        note = Note(content="Note content", owner_id=test_user.id)

        test_session.add(note)
        await test_session.commit()
        await test_session.refresh(note)

        assert isinstance(note.id, uuid.UUID)
        assert note.content == "Note content"
        assert note.owner_id == test_user.id

    @pytest.mark.asyncio
    async def test_note_keeps_multiline_content(self, test_session, test_user):
        content = "line one\nline two\n\n  indented"
        note = Note(content=content, owner_id=test_user.id)

        test_session.add(note)
        await test_session.commit()
        await test_session.refresh(note)

        assert note.content == content

    @pytest.mark.asyncio
    async def test_note_requires_existing_owner(self, test_session):
        test_session.add(Note(content="orphan", owner_id=uuid.uuid4()))

        with pytest.raises(IntegrityError):
            await test_session.commit()
        await test_session.rollback()
