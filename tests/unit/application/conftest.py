"""Fixtures for ProposalService tests: store per backend, mock logger."""

from unittest.mock import MagicMock

import pytest

from proposal_registry.application.proposal_service import ProposalService
from proposal_registry.infrastructure.database.sql_record_store import SqlRecordStore
from proposal_registry.infrastructure.storage.record_store import InMemoryRecordStore


@pytest.fixture(params=["memory", "sql"])
def store(request, tmp_path):
    if request.param == "memory":
        yield InMemoryRecordStore()
        return
    sql_store = SqlRecordStore.from_url(f"sqlite:///{tmp_path / 'service.db'}")
    yield sql_store
    sql_store.close()


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def proposal_service(store, logger):
    return ProposalService(store=store, logger=logger)
