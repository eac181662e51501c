"""Unit tests for auth API router (src/booknotes/api/auth.py)."""

import pytest

TEST_PASSWORD = "TestPassword123!"


@pytest.mark.asyncio
async def test_register_creates_account(async_client):
    resp = await async_client.post("/api/register", json={"username": "alice", "password": "pw"})

    assert resp.status_code == 201
    assert resp.json() == {"success": True, "message": "User registered successfully"}


@pytest.mark.asyncio
async def test_register_duplicate_username(async_client):
    payload = {"username": "alice", "password": "pw"}
    await async_client.post("/api/register", json=payload)

    resp = await async_client.post("/api/register", json=payload)

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "conflict"
    assert body["message"] == "Username already taken"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"password": "pw"},
    {"username": "alice"},
    {"username": "", "password": "pw"},
    {},
])
async def test_register_missing_fields(async_client, payload):
    resp = await async_client.post("/api/register", json=payload)

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "validation_error"
    assert isinstance(body["details"], list)


@pytest.mark.asyncio
async def test_login_returns_token(async_client, test_user):
    resp = await async_client.post("/api/login", json={"username": "alice", "password": TEST_PASSWORD})

    assert resp.status_code == 200
    token = resp.json()["token"]
    assert isinstance(token, str) and token

    # the token works as a raw Authorization header
    notes = await async_client.get("/api/notes", headers={"Authorization": token})
    assert notes.status_code == 200


@pytest.mark.asyncio
async def test_login_wrong_password(async_client, test_user):
    resp = await async_client.post("/api/login", json={"username": "alice", "password": "wrong"})

    assert resp.status_code == 401
    assert resp.json()["error"] == "invalid_credentials"
    assert resp.json()["message"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_unknown_user_looks_the_same(async_client, test_user):
    wrong_pw = await async_client.post("/api/login", json={"username": "alice", "password": "wrong"})
    unknown = await async_client.post("/api/login", json={"username": "nobody", "password": "wrong"})

    assert unknown.status_code == wrong_pw.status_code == 401
    assert unknown.json() == wrong_pw.json()


@pytest.mark.asyncio
async def test_login_overlong_unknown_username_is_invalid_credentials(async_client):
    resp = await async_client.post("/api/login", json={"username": "x" * 51, "password": "pw"})

    assert resp.status_code == 401
    assert resp.json()["error"] == "invalid_credentials"


@pytest.mark.asyncio
async def test_login_missing_password(async_client):
    resp = await async_client.post("/api/login", json={"username": "alice"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"
