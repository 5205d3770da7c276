"""Validators for proposal domain rules. Pure functions, no infrastructure or DB access."""

from proposal_registry.domain.exceptions import DomainValidationError, InvalidKeyError

# Keys are unsigned 64-bit integers supplied by the caller.
KEY_MIN = 0
KEY_MAX = 2**64 - 1


def validate_key(key: int) -> None:
    """Enforce key range [0, 2**64 - 1]. Raises InvalidKeyError if invalid."""
    if isinstance(key, bool) or not isinstance(key, int):
        raise InvalidKeyError(f"key must be an integer, got {type(key).__name__}")
    if not (KEY_MIN <= key <= KEY_MAX):
        raise InvalidKeyError(f"key must be between {KEY_MIN} and {KEY_MAX}, got {key}")


def validate_caller_id(caller: str) -> None:
    """Caller identity is opaque but must be present."""
    if not caller or not caller.strip():
        raise DomainValidationError("caller identity must not be empty")
