"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from proposal_registry.domain.exceptions import (
    AccessRejectedError,
    AlreadyVotedError,
    DomainError,
    DomainValidationError,
    InvalidKeyError,
    NoSuchProposalError,
    ProposalIsNotActiveError,
    UpdateError,
    VoteError,
)
from proposal_registry.domain.models import Choice, Proposal
from proposal_registry.domain.schemas import (
    CreateProposalRequest,
    CreateProposalResponse,
    EditProposalRequest,
    ProposalCountResponse,
    ProposalResponse,
    VoteRequest,
)
from proposal_registry.domain.validators import validate_caller_id, validate_key

__all__ = [
    "AccessRejectedError",
    "AlreadyVotedError",
    "Choice",
    "CreateProposalRequest",
    "CreateProposalResponse",
    "DomainError",
    "DomainValidationError",
    "EditProposalRequest",
    "InvalidKeyError",
    "NoSuchProposalError",
    "Proposal",
    "ProposalCountResponse",
    "ProposalIsNotActiveError",
    "ProposalResponse",
    "UpdateError",
    "VoteError",
    "VoteRequest",
    "validate_caller_id",
    "validate_key",
]
