"""Proposals API router: point lookup, count, create, edit, end, vote. Caller identity from X-Caller-ID."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response
from fastapi.responses import JSONResponse

from proposal_registry.api.dependencies import get_caller_id, get_proposal_service
from proposal_registry.application.proposal_service import ProposalService
from proposal_registry.domain.schemas.proposal import (
    CreateProposalRequest,
    CreateProposalResponse,
    EditProposalRequest,
    ProposalCountResponse,
    ProposalResponse,
    VoteRequest,
)
from proposal_registry.domain.validators.proposal_validator import KEY_MAX, KEY_MIN

router = APIRouter()

ProposalKey = Annotated[int, Path(ge=KEY_MIN, le=KEY_MAX, description="Unsigned 64-bit proposal key")]


# Declared before /{key} so "count" is not parsed as a key.
@router.get("/count", response_model=ProposalCountResponse)
def get_proposal_count(
    proposal_service: Annotated[ProposalService, Depends(get_proposal_service)],
):
    """Number of stored proposals."""
    return ProposalCountResponse(count=proposal_service.get_proposal_count())


@router.get("/{key}", response_model=ProposalResponse)
def get_proposal(
    key: ProposalKey,
    proposal_service: Annotated[ProposalService, Depends(get_proposal_service)],
):
    """Get proposal by key."""
    proposal = proposal_service.get_proposal(key)
    if proposal is None:
        return JSONResponse(status_code=404, content={"detail": "Proposal not found"})
    return ProposalResponse.from_proposal(proposal)


@router.post("/{key}", response_model=CreateProposalResponse)
def create_proposal(
    key: ProposalKey,
    body: CreateProposalRequest,
    caller_id: Annotated[str, Depends(get_caller_id)],
    proposal_service: Annotated[ProposalService, Depends(get_proposal_service)],
):
    """Create proposal owned by the caller. Returns the record it replaced, if any."""
    previous = proposal_service.create_proposal(
        caller=caller_id,
        key=key,
        description=body.description,
        is_active=body.is_active,
    )
    if previous is None:
        return CreateProposalResponse(previous=None)
    return CreateProposalResponse(previous=ProposalResponse.from_proposal(previous))


@router.put("/{key}", status_code=204)
def edit_proposal(
    key: ProposalKey,
    body: EditProposalRequest,
    caller_id: Annotated[str, Depends(get_caller_id)],
    proposal_service: Annotated[ProposalService, Depends(get_proposal_service)],
):
    """Edit description and active flag (owner only)."""
    proposal_service.edit_proposal(
        caller=caller_id,
        key=key,
        description=body.description,
        is_active=body.is_active,
    )
    return Response(status_code=204)


@router.post("/{key}/end", status_code=204)
def end_proposal(
    key: ProposalKey,
    caller_id: Annotated[str, Depends(get_caller_id)],
    proposal_service: Annotated[ProposalService, Depends(get_proposal_service)],
):
    """Close proposal (owner only)."""
    proposal_service.end_proposal(caller=caller_id, key=key)
    return Response(status_code=204)


@router.post("/{key}/votes", status_code=204)
def vote(
    key: ProposalKey,
    body: VoteRequest,
    caller_id: Annotated[str, Depends(get_caller_id)],
    proposal_service: Annotated[ProposalService, Depends(get_proposal_service)],
):
    """Cast the caller's single vote."""
    proposal_service.vote(caller=caller_id, key=key, choice=body.choice)
    return Response(status_code=204)
