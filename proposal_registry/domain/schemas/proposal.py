"""Pydantic schemas for proposal API. Strict validation, no DB or infrastructure."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from proposal_registry.domain.models.proposal import Choice, Proposal


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class CreateProposalRequest(BaseModel):
    """Body for creating a proposal. Owner comes from the caller, never the body."""

    description: str
    is_active: bool = True


class EditProposalRequest(BaseModel):
    """Body for editing a proposal (owner only)."""

    description: str
    is_active: bool


class VoteRequest(BaseModel):
    choice: Choice


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class ProposalResponse(BaseModel):
    """Proposal as returned to callers. `pass` is serialized under its wire name."""

    model_config = ConfigDict(populate_by_name=True)

    description: str
    approve: int
    reject: int
    pass_: int = Field(..., alias="pass")
    is_active: bool
    voted: List[str]
    owner: str

    @classmethod
    def from_proposal(cls, proposal: Proposal) -> "ProposalResponse":
        return cls.model_validate(proposal.model_dump(by_alias=True))


class CreateProposalResponse(BaseModel):
    """Previous record stored at the key, if the create overwrote one."""

    previous: Optional[ProposalResponse] = None


class ProposalCountResponse(BaseModel):
    count: int = Field(..., ge=0)
