"""Codec tests: roundtrip, size bound enforced before write, corrupted bytes."""

import json

import pytest

from proposal_registry.domain.models.proposal import Choice, Proposal
from proposal_registry.infrastructure.storage.codec import (
    MAX_VALUE_SIZE,
    decode_proposal,
    encode_proposal,
)
from proposal_registry.infrastructure.storage.exceptions import (
    RecordCorruptedError,
    RecordTooLargeError,
)


def test_encode_decode_roundtrip():
    p = Proposal.new(owner="alice", description="Adopt policy X")
    p.record_vote("bob", Choice.APPROVE)
    p.record_vote("carol", Choice.PASS)
    p.deactivate()
    assert decode_proposal(encode_proposal(p)) == p


def test_encoding_is_self_describing_json():
    data = encode_proposal(Proposal.new(owner="alice", description="d"))
    doc = json.loads(data)
    assert doc["owner"] == "alice"
    assert doc["pass"] == 0
    assert doc["voted"] == []


def test_encode_rejects_oversize_record():
    p = Proposal.new(owner="alice", description="x" * MAX_VALUE_SIZE)
    with pytest.raises(RecordTooLargeError) as exc_info:
        encode_proposal(p)
    assert str(MAX_VALUE_SIZE) in exc_info.value.message


def test_encode_respects_custom_bound():
    p = Proposal.new(owner="alice", description="x" * 200)
    with pytest.raises(RecordTooLargeError):
        encode_proposal(p, max_size=100)


def test_decode_corrupted_bytes_raises():
    with pytest.raises(RecordCorruptedError):
        decode_proposal(b"not json")
    with pytest.raises(RecordCorruptedError):
        decode_proposal(b'{"description": "d"}')
