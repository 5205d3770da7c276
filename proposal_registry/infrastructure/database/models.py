# proposal_registry/infrastructure/database/models.py

from sqlalchemy import BigInteger, Column, DateTime, Integer, LargeBinary
from sqlalchemy.sql import func

from proposal_registry.infrastructure.database.session import Base
from proposal_registry.infrastructure.storage.codec import MAX_VALUE_SIZE

# Single row holding registry-wide counters.
META_ROW_ID = 1


class ProposalRecord(Base):
    """One encoded proposal. `key` is the uint64 proposal key shifted into signed BIGINT range."""

    __tablename__ = "proposals"

    key = Column(BigInteger, primary_key=True, autoincrement=False)
    value = Column(LargeBinary(MAX_VALUE_SIZE), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class RegistryMeta(Base):
    """Record count maintained alongside inserts so count() never scans."""

    __tablename__ = "registry_meta"

    id = Column(Integer, primary_key=True, autoincrement=False)
    record_count = Column(BigInteger, nullable=False, default=0)
