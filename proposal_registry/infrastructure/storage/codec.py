"""Bounded record codec: Proposal <-> self-describing JSON bytes. Oversize records are rejected, never truncated."""

from pydantic import ValidationError

from proposal_registry.domain.models.proposal import Proposal
from proposal_registry.infrastructure.storage.exceptions import (
    RecordCorruptedError,
    RecordTooLargeError,
)

# Maximum encoded size of one stored proposal, in bytes.
MAX_VALUE_SIZE = 5000


def encode_proposal(proposal: Proposal, max_size: int = MAX_VALUE_SIZE) -> bytes:
    """Serialize proposal to UTF-8 JSON. Raises RecordTooLargeError above max_size."""
    data = proposal.model_dump_json(by_alias=True).encode("utf-8")
    if len(data) > max_size:
        raise RecordTooLargeError(
            f"Encoded proposal is {len(data)} bytes; maximum is {max_size}"
        )
    return data


def decode_proposal(data: bytes) -> Proposal:
    """Deserialize bytes produced by encode_proposal."""
    try:
        return Proposal.model_validate_json(data)
    except ValidationError as e:
        raise RecordCorruptedError(f"Stored proposal could not be decoded: {e}") from e
