# Storage: record store protocol, bounded codec, storage errors.

from proposal_registry.infrastructure.storage.codec import (
    MAX_VALUE_SIZE,
    decode_proposal,
    encode_proposal,
)
from proposal_registry.infrastructure.storage.exceptions import (
    RecordCorruptedError,
    RecordNotFoundError,
    RecordTooLargeError,
    StorageError,
    StorageWriteError,
)
from proposal_registry.infrastructure.storage.record_store import (
    InMemoryRecordStore,
    Mutator,
    RecordStore,
)

__all__ = [
    "InMemoryRecordStore",
    "MAX_VALUE_SIZE",
    "Mutator",
    "RecordCorruptedError",
    "RecordNotFoundError",
    "RecordStore",
    "RecordTooLargeError",
    "StorageError",
    "StorageWriteError",
    "decode_proposal",
    "encode_proposal",
]
