"""Tests for LocalSessionStore."""

import asyncio

import pytest

from mongo_session_store.domain.exceptions import SessionSerializationError
from mongo_session_store.infrastructure.local_session_store import LocalSessionStore

# 2026-10-20T10:00:00Z
EXPIRY_MS = 1792490400000


@pytest.fixture
def store():
    """Create a fresh LocalSessionStore for each test."""
    return LocalSessionStore(reap_interval=-1)


@pytest.fixture
def sample_session():
    """Create a sample session payload for testing."""
    return {
        "cookie": {"expires": "2026-10-20T10:00:00.000Z", "httpOnly": True, "path": "/"},
        "user": {"id": "student-456", "roles": ["reader"]},
        "visits": 3,
    }


@pytest.mark.asyncio
async def test_set_and_get_session(store, sample_session):
    """Test storing and retrieving a session."""
    await store.set("sid-1", sample_session)
    retrieved = await store.get("sid-1")

    assert retrieved == sample_session


@pytest.mark.asyncio
async def test_get_strips_non_data_members(store):
    """Test functions on the payload are not stored."""
    await store.set("sid-1", {"user": "abc123", "save": lambda: None})

    assert await store.get("sid-1") == {"user": "abc123"}


@pytest.mark.asyncio
async def test_get_returns_a_copy(store, sample_session):
    """Test callers cannot mutate the stored payload."""
    await store.set("sid-1", sample_session)
    retrieved = await store.get("sid-1")
    retrieved["visits"] = 99

    assert (await store.get("sid-1"))["visits"] == 3


@pytest.mark.asyncio
async def test_get_nonexistent_session(store):
    """Test retrieving a session that doesn't exist."""
    assert await store.get("nonexistent") is None


@pytest.mark.asyncio
async def test_set_replaces_session(store, sample_session):
    """Test repeated sets keep exactly one document."""
    await store.set("sid-1", sample_session)
    await store.set("sid-1", sample_session)
    await store.set("sid-1", {**sample_session, "visits": 4})

    assert await store.length() == 1
    assert (await store.get("sid-1"))["visits"] == 4


@pytest.mark.asyncio
async def test_set_records_expiry(store, sample_session):
    """Test the cookie expiry is stored alongside the session."""
    await store.set("sid-1", sample_session)

    assert store.get_all_sessions()["sid-1"].expires == EXPIRY_MS


@pytest.mark.asyncio
async def test_set_without_expiry_keeps_previous_expiry(store, sample_session):
    """Test a payload without expiry leaves the stored expiry in place."""
    await store.set("sid-1", sample_session)
    await store.set("sid-1", {"user": "abc123"})

    document = store.get_all_sessions()["sid-1"]
    assert document.expires == EXPIRY_MS
    assert document.session == {"user": "abc123"}


@pytest.mark.asyncio
async def test_set_unserializable_session(store):
    """Test unserializable payloads are rejected."""
    with pytest.raises(SessionSerializationError):
        await store.set("sid-1", {"lock": asyncio.Lock()})

    assert await store.length() == 0


@pytest.mark.asyncio
async def test_destroy_session(store, sample_session):
    """Test deleting a session."""
    await store.set("sid-1", sample_session)
    await store.destroy("sid-1")

    assert await store.get("sid-1") is None


@pytest.mark.asyncio
async def test_destroy_nonexistent_session(store):
    """Test deleting a session that doesn't exist is not an error."""
    await store.destroy("nonexistent")

    assert await store.length() == 0


@pytest.mark.asyncio
async def test_length_counts_distinct_sessions(store, sample_session):
    """Test length after sets and destroys."""
    for sid in ("sid-1", "sid-2", "sid-3", "sid-2"):
        await store.set(sid, sample_session)
    await store.destroy("sid-3")

    assert await store.length() == 2


@pytest.mark.asyncio
async def test_clear_sessions(store, sample_session):
    """Test clearing all sessions."""
    await store.set("sid-1", sample_session)
    await store.set("sid-2", sample_session)

    await store.clear()

    assert await store.length() == 0


@pytest.mark.asyncio
async def test_reap_removes_expired_sessions(store):
    """Test reap deletes sessions expired at the reference time."""
    await store.set("expired", {"cookie": {"expires": EXPIRY_MS - 1}})
    await store.set("boundary", {"cookie": {"expires": EXPIRY_MS}})
    await store.set("live", {"cookie": {"expires": EXPIRY_MS + 1}})
    await store.set("no-expiry", {"user": "abc123"})

    removed = await store.reap(now=EXPIRY_MS)

    assert removed == 2
    assert await store.get("expired") is None
    assert await store.get("boundary") is None
    assert set(store.get_all_sessions()) == {"live", "no-expiry"}


@pytest.mark.asyncio
async def test_reaper_removes_past_sessions():
    """Test the background reaper removes a past-expiry session within one interval."""
    async with LocalSessionStore(reap_interval=20) as store:
        await store.set("sid-1", {"cookie": {"expires": "2000-01-01T00:00:00Z"}})
        await store.set("sid-2", {"cookie": {"expires": "2999-01-01T00:00:00Z"}})

        await asyncio.sleep(0.1)

        assert await store.get("sid-1") is None
        assert await store.get("sid-2") is not None

    assert store.reaper.running is False


def test_reaper_disabled():
    """Test -1 disables the reaper."""
    assert LocalSessionStore(reap_interval=-1).reaper is None


@pytest.mark.asyncio
async def test_get_all_sessions(store, sample_session):
    """Test retrieving all session documents."""
    await store.set("sid-1", sample_session)
    await store.set("sid-2", sample_session)

    all_sessions = store.get_all_sessions()
    assert len(all_sessions) == 2
    assert "sid-1" in all_sessions
    assert "sid-2" in all_sessions
