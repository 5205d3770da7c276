# Application layer: services that orchestrate domain and infrastructure.

from proposal_registry.application.proposal_service import ProposalService

__all__ = [
    "ProposalService",
]
