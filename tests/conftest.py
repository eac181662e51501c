"""Shared pytest fixtures configured to use SQLite in-memory for unit tests."""

import logging
import os

# keep test runs from writing rotating log files
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from src.booknotes.core.models.favorite import Favorite
from src.booknotes.core.models.note import Note
from src.booknotes.core.models.user import User
from src.booknotes.database import Database
from src.booknotes.main import app
from src.booknotes.security.jwt import create_access_token
from src.booknotes.security.password import hash_password

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "TestPassword123!"


@pytest.fixture
async def database():
    """In-memory SQLite store, fresh schema per test."""
    db = Database(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces foreign keys (and ON DELETE CASCADE) when asked
    @event.listens_for(db.engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    await db.create_tables()
    try:
        yield db
    finally:
        await db.drop_tables()
        await db.disconnect()


@pytest.fixture
async def test_session(database):
    """Database session for direct model/repository work."""
    async with database.session() as session:
        yield session


@pytest.fixture
def test_app(database):
    """App wired to the test database instead of the lifespan-created one."""
    app.state.database = database
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _create_user(session, username: str) -> User:
    user = User(username=username, password_hash=hash_password(TEST_PASSWORD))
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest.fixture
async def test_user(test_session):
    """Create a test user in the database."""
    return await _create_user(test_session, "alice")


@pytest.fixture
async def other_user(test_session):
    """A second, unrelated account."""
    return await _create_user(test_session, "bob")


@pytest.fixture
def auth_headers(test_user):
    """Authorization header with a valid raw token."""
    return {"Authorization": create_access_token(test_user.id)}


@pytest.fixture
def other_auth_headers(other_user):
    return {"Authorization": create_access_token(other_user.id)}


@pytest.fixture
async def test_note(test_session, test_user):
    """Create a test note in the database."""
    note = Note(content="This is a test note content", owner_id=test_user.id)
    test_session.add(note)
    await test_session.commit()
    await test_session.refresh(note)
    return note


@pytest.fixture
async def test_favorite(test_session, test_user):
    """Create a test favorite in the database."""
    favorite = Favorite(
        owner_id=test_user.id,
        book_id="zyTCAlFPjgYC",
        title="The Google Story",
        authors=["David A. Vise", "Mark Malseed"],
        thumbnail="http://books.google.com/books/content?id=zyTCAlFPjgYC",
    )
    test_session.add(favorite)
    await test_session.commit()
    await test_session.refresh(favorite)
    return favorite
