# Domain validators: pure functions enforcing business rules.

from proposal_registry.domain.validators.proposal_validator import (
    KEY_MAX,
    KEY_MIN,
    validate_caller_id,
    validate_key,
)

__all__ = [
    "KEY_MAX",
    "KEY_MIN",
    "validate_caller_id",
    "validate_key",
]
