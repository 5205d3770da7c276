"""Fixtures for storage tests: both record store implementations behind one fixture."""

import pytest

from proposal_registry.infrastructure.database.sql_record_store import SqlRecordStore
from proposal_registry.infrastructure.storage.record_store import InMemoryRecordStore


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite:///{tmp_path / 'proposals.db'}"


@pytest.fixture(params=["memory", "sql"])
def record_store(request, sqlite_url):
    if request.param == "memory":
        yield InMemoryRecordStore()
        return
    store = SqlRecordStore.from_url(sqlite_url)
    yield store
    store.close()
