# Domain schemas: Pydantic models for API request/response.

from proposal_registry.domain.schemas.proposal import (
    CreateProposalRequest,
    CreateProposalResponse,
    EditProposalRequest,
    ProposalCountResponse,
    ProposalResponse,
    VoteRequest,
)

__all__ = [
    "CreateProposalRequest",
    "CreateProposalResponse",
    "EditProposalRequest",
    "ProposalCountResponse",
    "ProposalResponse",
    "VoteRequest",
]
