"""Domain-specific exceptions. Pure domain layer, no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainValidationError(DomainError):
    """Raised when domain validation rules are violated."""


class InvalidKeyError(DomainValidationError):
    """Raised when a proposal key is outside the unsigned 64-bit range."""


class VoteError(DomainError):
    """Base for errors returned by proposal operations."""


class NoSuchProposalError(VoteError):
    """Raised when an operation references a key with no stored proposal."""


class AccessRejectedError(VoteError):
    """Raised when a non-owner attempts an owner-only mutation."""


class AlreadyVotedError(VoteError):
    """Raised when a caller votes twice on the same proposal."""


class ProposalIsNotActiveError(VoteError):
    """Raised when voting on or editing a proposal that has been ended."""


class UpdateError(VoteError):
    """Raised when writing a proposal to the store fails (e.g. record too large)."""
