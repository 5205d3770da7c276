# Domain models: pure business entities.

from proposal_registry.domain.models.proposal import MAX_COUNTER, Choice, Proposal

__all__ = [
    "Choice",
    "MAX_COUNTER",
    "Proposal",
]
