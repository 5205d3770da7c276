"""Fixtures for API unit tests: in-memory record store, fresh key lock, AsyncClient."""

import pytest
from httpx import ASGITransport, AsyncClient

from proposal_registry.infrastructure.storage.record_store import InMemoryRecordStore
from proposal_registry.main import app
from proposal_registry.scalability.key_lock import KeyedLock


@pytest.fixture
def memory_store():
    return InMemoryRecordStore()


@pytest.fixture
def app_with_overrides(memory_store):
    """App with the record store overridden so tests never touch the SQLite file."""
    from proposal_registry.api import dependencies

    lock = KeyedLock()
    app.dependency_overrides[dependencies.get_record_store] = lambda: memory_store
    app.dependency_overrides[dependencies.get_key_lock] = lambda: lock
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def caller(caller_id: str) -> dict:
    return {"X-Caller-ID": caller_id}


@pytest.fixture
def alice():
    return caller("principal-alice")


@pytest.fixture
def bob():
    return caller("principal-bob")


@pytest.fixture
def carol():
    return caller("principal-carol")
