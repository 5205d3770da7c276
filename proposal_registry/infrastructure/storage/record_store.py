"""Record store protocol plus in-memory implementation. Keys are unsigned 64-bit ints; values are bounded Proposals."""

from typing import Callable, Dict, Iterator, Optional, Protocol

from proposal_registry.domain.models.proposal import Proposal
from proposal_registry.infrastructure.storage.codec import (
    MAX_VALUE_SIZE,
    decode_proposal,
    encode_proposal,
)
from proposal_registry.infrastructure.storage.exceptions import RecordNotFoundError

# Receives a private copy of the stored record; may mutate it in place (return None) or return a replacement.
Mutator = Callable[[Proposal], Optional[Proposal]]


class RecordStore(Protocol):
    """Durable key -> Proposal mapping. Service layer depends on this; infrastructure implements it."""

    def get(self, key: int) -> Optional[Proposal]:
        """Return current record or None. No side effects."""
        ...

    def count(self) -> int:
        """Number of stored records. Never a full scan."""
        ...

    def put(self, key: int, value: Proposal) -> Optional[Proposal]:
        """Insert or overwrite; return previous value if any."""
        ...

    def update(self, key: int, mutator: Mutator) -> Proposal:
        """
        Apply mutator to a copy of the stored record and write the result.
        Raises RecordNotFoundError if key is absent. If the mutator or the
        encoding raises, nothing is written.
        """
        ...

    def ordered_keys(self) -> Iterator[int]:
        """Stored keys in ascending order."""
        ...


class InMemoryRecordStore:
    """Process-local store holding encoded records. Same contract as the SQL store, not durable."""

    def __init__(self, max_value_size: int = MAX_VALUE_SIZE) -> None:
        self._records: Dict[int, bytes] = {}
        self._max_value_size = max_value_size

    def get(self, key: int) -> Optional[Proposal]:
        raw = self._records.get(key)
        if raw is None:
            return None
        return decode_proposal(raw)

    def count(self) -> int:
        return len(self._records)

    def put(self, key: int, value: Proposal) -> Optional[Proposal]:
        data = encode_proposal(value, self._max_value_size)
        previous = self.get(key)
        self._records[key] = data
        return previous

    def update(self, key: int, mutator: Mutator) -> Proposal:
        raw = self._records.get(key)
        if raw is None:
            raise RecordNotFoundError(f"No record stored at key {key}")
        current = decode_proposal(raw)
        result = mutator(current)
        updated = current if result is None else result
        self._records[key] = encode_proposal(updated, self._max_value_size)
        return updated

    def ordered_keys(self) -> Iterator[int]:
        return iter(sorted(self._records))
