"""FastAPI dependency injection: record store, key lock, ProposalService, caller."""

import logging
from typing import Annotated

from fastapi import Depends, Request

from proposal_registry.application.proposal_service import ProposalService
from proposal_registry.config.settings import get_settings
from proposal_registry.infrastructure.database.sql_record_store import SqlRecordStore
from proposal_registry.infrastructure.storage.record_store import InMemoryRecordStore, RecordStore
from proposal_registry.scalability.key_lock import KeyedLock

_store: RecordStore | None = None
_key_lock: KeyedLock | None = None


def get_record_store() -> RecordStore:
    """Return the singleton record store for this process, opened from settings."""
    global _store
    if _store is None:
        settings = get_settings()
        if settings.storage_backend == "memory":
            _store = InMemoryRecordStore()
        else:
            _store = SqlRecordStore.from_url(settings.database_url)
    return _store


def get_key_lock() -> KeyedLock:
    """Return singleton per-key lock shared by all requests."""
    global _key_lock
    if _key_lock is None:
        _key_lock = KeyedLock()
    return _key_lock


def get_proposal_service(
    store: Annotated[RecordStore, Depends(get_record_store)],
    lock: Annotated[KeyedLock, Depends(get_key_lock)],
) -> ProposalService:
    """Build ProposalService with injected store, lock, logger and rule settings."""
    settings = get_settings()
    return ProposalService(
        store=store,
        logger=logging.getLogger("proposal_registry.application.proposal_service"),
        lock=lock,
        reject_votes_on_inactive=settings.reject_votes_on_inactive,
        protect_existing_owner=settings.protect_existing_owner,
    )


def get_caller_id(request: Request) -> str:
    """Extract caller_id from request.state (set by middleware)."""
    return request.state.caller_id
