"""SQL-backed record store. Durable across restarts; implements RecordStore protocol."""

import logging
from typing import Iterator, Optional

from sqlalchemy import func, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from proposal_registry.domain.models.proposal import Proposal
from proposal_registry.infrastructure.database.models import (
    META_ROW_ID,
    Base,
    ProposalRecord,
    RegistryMeta,
)
from proposal_registry.infrastructure.database.session import (
    build_session_factory,
    create_engine_for_url,
)
from proposal_registry.infrastructure.storage.codec import (
    MAX_VALUE_SIZE,
    decode_proposal,
    encode_proposal,
)
from proposal_registry.infrastructure.storage.exceptions import (
    RecordNotFoundError,
    StorageWriteError,
)
from proposal_registry.infrastructure.storage.record_store import Mutator

logger = logging.getLogger(__name__)

# uint64 keys are stored in a signed BIGINT column; shifting by 2**63 keeps ordering.
KEY_OFFSET = 2**63


def _to_column(key: int) -> int:
    return key - KEY_OFFSET


def _from_column(value: int) -> int:
    return value + KEY_OFFSET


def init_schema(engine: Engine) -> None:
    """Create tables and the counter row. Counter is rebuilt from the table if the row is missing."""
    Base.metadata.create_all(engine)
    with build_session_factory(engine).begin() as session:
        meta = session.get(RegistryMeta, META_ROW_ID)
        if meta is None:
            existing = session.execute(select(func.count()).select_from(ProposalRecord)).scalar_one()
            session.add(RegistryMeta(id=META_ROW_ID, record_count=existing))
            logger.info("registry_meta_initialized", extra={"record_count": existing})


class SqlRecordStore:
    """
    Persists encoded proposals in the `proposals` table.
    Each write runs in its own transaction; a failed mutator or encoding rolls back.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        max_value_size: int = MAX_VALUE_SIZE,
        engine: Optional[Engine] = None,
    ) -> None:
        self._session_factory = session_factory
        self._max_value_size = max_value_size
        self._engine = engine

    @classmethod
    def from_url(cls, database_url: str, max_value_size: int = MAX_VALUE_SIZE) -> "SqlRecordStore":
        """Open (or create) the store at database_url."""
        engine = create_engine_for_url(database_url)
        init_schema(engine)
        return cls(build_session_factory(engine), max_value_size=max_value_size, engine=engine)

    def close(self) -> None:
        """Release pooled connections of an engine opened by from_url."""
        if self._engine is not None:
            self._engine.dispose()

    def get(self, key: int) -> Optional[Proposal]:
        with self._session_factory() as session:
            row = session.get(ProposalRecord, _to_column(key))
            if row is None:
                return None
            return decode_proposal(row.value)

    def count(self) -> int:
        with self._session_factory() as session:
            meta = session.get(RegistryMeta, META_ROW_ID)
            return meta.record_count if meta is not None else 0

    def put(self, key: int, value: Proposal) -> Optional[Proposal]:
        data = encode_proposal(value, self._max_value_size)
        try:
            with self._session_factory.begin() as session:
                row = session.get(ProposalRecord, _to_column(key), with_for_update=True)
                if row is None:
                    session.add(ProposalRecord(key=_to_column(key), value=data))
                    self._adjust_count(session, 1)
                    return None
                previous = decode_proposal(row.value)
                row.value = data
                return previous
        except SQLAlchemyError as e:
            logger.error("record_write_failed", extra={"key": key, "error": str(e)})
            raise StorageWriteError(f"Could not write record at key {key}: {e}") from e

    def update(self, key: int, mutator: Mutator) -> Proposal:
        # Commit happens on leaving the block, so commit failures are translated too.
        try:
            with self._session_factory.begin() as session:
                row = session.get(ProposalRecord, _to_column(key), with_for_update=True)
                if row is None:
                    raise RecordNotFoundError(f"No record stored at key {key}")
                current = decode_proposal(row.value)
                result = mutator(current)
                updated = current if result is None else result
                row.value = encode_proposal(updated, self._max_value_size)
                return updated
        except SQLAlchemyError as e:
            logger.error("record_write_failed", extra={"key": key, "error": str(e)})
            raise StorageWriteError(f"Could not update record at key {key}: {e}") from e

    def ordered_keys(self) -> Iterator[int]:
        with self._session_factory() as session:
            keys = session.execute(
                select(ProposalRecord.key).order_by(ProposalRecord.key)
            ).scalars().all()
        return (_from_column(k) for k in keys)

    @staticmethod
    def _adjust_count(session: Session, delta: int) -> None:
        # Single UPDATE so concurrent inserts on different keys do not lose increments.
        session.execute(
            update(RegistryMeta)
            .where(RegistryMeta.id == META_ROW_ID)
            .values(record_count=RegistryMeta.record_count + delta)
        )
