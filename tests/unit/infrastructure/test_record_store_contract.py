"""Record store contract, run against in-memory and SQL stores: get/put/count/update semantics."""

import pytest

from proposal_registry.domain.models.proposal import Choice, Proposal
from proposal_registry.infrastructure.storage.exceptions import (
    RecordNotFoundError,
    RecordTooLargeError,
)


def _proposal(owner: str = "alice", description: str = "Adopt policy X") -> Proposal:
    return Proposal.new(owner=owner, description=description)


def test_get_missing_returns_none(record_store):
    assert record_store.get(42) is None
    assert record_store.count() == 0


def test_put_returns_none_then_previous(record_store):
    first = _proposal(description="first")
    second = _proposal(owner="bob", description="second")
    assert record_store.put(1, first) is None
    previous = record_store.put(1, second)
    assert previous == first
    assert record_store.get(1) == second
    assert record_store.count() == 1


def test_count_tracks_distinct_keys(record_store):
    for key in (5, 1, 9):
        record_store.put(key, _proposal())
    record_store.put(5, _proposal(description="overwrite"))
    assert record_store.count() == 3


def test_update_mutates_in_place(record_store):
    record_store.put(7, _proposal())

    def apply(p: Proposal) -> None:
        p.record_vote("bob", Choice.REJECT)

    updated = record_store.update(7, apply)
    assert updated.reject == 1
    stored = record_store.get(7)
    assert stored.reject == 1
    assert stored.voted == ["bob"]


def test_update_missing_key_raises(record_store):
    with pytest.raises(RecordNotFoundError):
        record_store.update(99, lambda p: None)
    assert record_store.count() == 0


def test_update_failing_mutator_writes_nothing(record_store):
    original = _proposal()
    record_store.put(3, original)

    def apply(p: Proposal) -> None:
        p.record_vote("bob", Choice.APPROVE)
        raise RuntimeError("abort")

    with pytest.raises(RuntimeError):
        record_store.update(3, apply)
    assert record_store.get(3) == original


def test_put_oversize_rejected_before_write(record_store):
    with pytest.raises(RecordTooLargeError):
        record_store.put(1, _proposal(description="x" * 5000))
    assert record_store.get(1) is None
    assert record_store.count() == 0


def test_update_oversize_result_rejected(record_store):
    original = _proposal(description="x" * 4850)
    record_store.put(1, original)

    def apply(p: Proposal) -> None:
        p.record_vote("v" * 100, Choice.APPROVE)

    with pytest.raises(RecordTooLargeError):
        record_store.update(1, apply)
    assert record_store.get(1) == original


def test_reads_are_idempotent(record_store):
    record_store.put(1, _proposal())
    assert record_store.get(1) == record_store.get(1)


def test_ordered_keys_ascending_across_full_range(record_store):
    for key in (2**64 - 1, 0, 2**63, 17):
        record_store.put(key, _proposal())
    assert list(record_store.ordered_keys()) == [0, 17, 2**63, 2**64 - 1]
