"""
Unit tests for base model functionality.
"""

import uuid
from datetime import datetime, timezone

from src.booknotes.core.models.base import BaseModel, utcnow
from src.booknotes.core.models.note import Note


class TestBaseModel:
    """Test BaseModel functionality."""

    def test_base_model_abstract(self):
        assert BaseModel.__abstract__ is True

    def test_utcnow_is_aware(self):
        now = utcnow()
        assert now.tzinfo is timezone.utc

    def test_repr_method(self):
        note = Note(content="x", owner_id=uuid.uuid4())
        note.id = uuid.uuid4()

        assert repr(note) == f"<Note(id={note.id})>"

    async def test_defaults_filled_on_insert(self, test_session, test_user):
        note = Note(content="defaults", owner_id=test_user.id)
        test_session.add(note)
        await test_session.commit()
        await test_session.refresh(note)

        assert isinstance(note.id, uuid.UUID)
        assert isinstance(note.created_at, datetime)
        assert isinstance(note.updated_at, datetime)
