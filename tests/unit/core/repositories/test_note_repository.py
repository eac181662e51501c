"""Unit tests for NoteRepository against SQLite."""

import uuid

import pytest

from src.booknotes.core.models.note import Note
from src.booknotes.core.repositories.note_repository import NoteRepository


async def _load(session, note_id):
    return await session.get(Note, note_id, populate_existing=True)


@pytest.mark.asyncio
async def test_create_note(test_session, test_user):
    repo = NoteRepository(test_session)

    note = await repo.create_note({"content": "hello", "owner_id": test_user.id})

    assert isinstance(note.id, uuid.UUID)
    fetched = await _load(test_session, note.id)
    assert fetched.content == "hello"
    assert fetched.owner_id == test_user.id


@pytest.mark.asyncio
async def test_list_user_notes_only_own_in_creation_order(test_session, test_user, other_user):
    repo = NoteRepository(test_session)
    first = await repo.create_note({"content": "first", "owner_id": test_user.id})
    await repo.create_note({"content": "not mine", "owner_id": other_user.id})
    second = await repo.create_note({"content": "second", "owner_id": test_user.id})

    notes = await repo.list_user_notes(test_user.id)

    assert [n.id for n in notes] == [first.id, second.id]


@pytest.mark.asyncio
async def test_list_user_notes_empty(test_session, test_user):
    repo = NoteRepository(test_session)

    assert await repo.list_user_notes(test_user.id) == []


@pytest.mark.asyncio
async def test_update_note_returns_fresh_row(test_session, test_note, test_user):
    repo = NoteRepository(test_session)
    before = test_note.updated_at

    updated = await repo.update_note(test_note.id, test_user.id, {"content": "changed"})

    assert updated is not None
    assert updated.id == test_note.id
    assert updated.content == "changed"
    assert updated.owner_id == test_user.id
    assert updated.updated_at >= before


@pytest.mark.asyncio
async def test_update_note_of_other_owner_is_noop(test_session, test_note, other_user, test_user):
    repo = NoteRepository(test_session)

    assert await repo.update_note(test_note.id, other_user.id, {"content": "hijack"}) is None

    fetched = await _load(test_session, test_note.id)
    assert fetched.content == "This is a test note content"


@pytest.mark.asyncio
async def test_update_missing_note(test_session, test_user):
    repo = NoteRepository(test_session)

    assert await repo.update_note(uuid.uuid4(), test_user.id, {"content": "x"}) is None


@pytest.mark.asyncio
async def test_delete_note_returns_removed_row(test_session, test_note, test_user):
    repo = NoteRepository(test_session)

    deleted = await repo.delete_note(test_note.id, test_user.id)

    assert deleted is not None
    assert deleted.id == test_note.id
    assert deleted.content == "This is a test note content"
    assert await _load(test_session, test_note.id) is None
    # second delete finds nothing
    assert await repo.delete_note(test_note.id, test_user.id) is None


@pytest.mark.asyncio
async def test_delete_note_of_other_owner_is_noop(test_session, test_note, other_user, test_user):
    repo = NoteRepository(test_session)

    assert await repo.delete_note(test_note.id, other_user.id) is None
    assert await _load(test_session, test_note.id) is not None
