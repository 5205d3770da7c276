"""Proposal application service. Owns the state machine over the record store: ownership, single vote, closing."""

import logging
from typing import Callable, Optional, Union

from proposal_registry.domain.exceptions import (
    AccessRejectedError,
    AlreadyVotedError,
    NoSuchProposalError,
    ProposalIsNotActiveError,
    UpdateError,
    VoteError,
)
from proposal_registry.domain.models.proposal import Choice, Proposal
from proposal_registry.domain.validators.proposal_validator import (
    validate_caller_id,
    validate_key,
)
from proposal_registry.infrastructure.storage.exceptions import (
    RecordNotFoundError,
    StorageError,
)
from proposal_registry.infrastructure.storage.record_store import RecordStore
from proposal_registry.scalability.key_lock import KeyedLock


class ProposalService:
    """
    Application-layer orchestration only. No HTTP, no FastAPI.
    Every mutation is a single store write for one key, serialized per key;
    a rejected operation leaves the stored record untouched.
    """

    def __init__(
        self,
        store: RecordStore,
        logger: logging.Logger,
        lock: Optional[KeyedLock] = None,
        reject_votes_on_inactive: bool = True,
        protect_existing_owner: bool = False,
    ) -> None:
        self._store = store
        self._logger = logger
        self._lock = lock or KeyedLock()
        self._reject_votes_on_inactive = reject_votes_on_inactive
        self._protect_existing_owner = protect_existing_owner

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_proposal(self, key: int) -> Optional[Proposal]:
        """Return the proposal stored at key, or None."""
        validate_key(key)
        return self._store.get(key)

    def get_proposal_count(self) -> int:
        return self._store.count()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_proposal(
        self,
        caller: str,
        key: int,
        description: str,
        is_active: bool = True,
    ) -> Optional[Proposal]:
        """
        Store a fresh proposal owned by caller. An existing record at key is
        overwritten and returned, unless protect_existing_owner is set and the
        caller does not own it.
        """
        validate_key(key)
        validate_caller_id(caller)
        proposal = Proposal.new(owner=caller, description=description, is_active=is_active)

        with self._lock.hold(key):
            if self._protect_existing_owner:
                existing = self._store.get(key)
                if existing is not None and not existing.is_owned_by(caller):
                    self._log_rejected("create_proposal", key, caller, "access_rejected")
                    raise AccessRejectedError(f"Proposal {key} is owned by another caller")
            try:
                previous = self._store.put(key, proposal)
            except StorageError as e:
                self._log_rejected("create_proposal", key, caller, "update_error")
                raise UpdateError(f"Could not store proposal {key}: {e.message}") from e

        if previous is not None:
            self._logger.warning(
                "proposal_overwritten",
                extra={"key": key, "caller_id": caller, "previous_owner": previous.owner},
            )
        self._logger.info(
            "proposal_created",
            extra={"key": key, "caller_id": caller, "is_active": is_active},
        )
        return previous

    def edit_proposal(self, caller: str, key: int, description: str, is_active: bool) -> None:
        """Owner-only. Replace description and active flag of an active proposal."""

        def apply(proposal: Proposal) -> None:
            self._require_owner(proposal, caller, key)
            if not proposal.is_active:
                raise ProposalIsNotActiveError(f"Proposal {key} has ended and cannot be edited")
            proposal.edit(description, is_active)

        self._mutate("edit_proposal", caller, key, apply)
        self._logger.info(
            "proposal_edited",
            extra={"key": key, "caller_id": caller, "is_active": is_active},
        )

    def end_proposal(self, caller: str, key: int) -> None:
        """Owner-only. Close the proposal; ending twice is a no-op."""

        def apply(proposal: Proposal) -> None:
            self._require_owner(proposal, caller, key)
            proposal.deactivate()

        self._mutate("end_proposal", caller, key, apply)
        self._logger.info("proposal_ended", extra={"key": key, "caller_id": caller})

    def vote(self, caller: str, key: int, choice: Union[Choice, str]) -> None:
        """Any caller, once per proposal. Increments the counter matching choice."""
        choice = Choice(choice)

        def apply(proposal: Proposal) -> None:
            if proposal.has_voted(caller):
                raise AlreadyVotedError(f"Caller has already voted on proposal {key}")
            if self._reject_votes_on_inactive and not proposal.is_active:
                raise ProposalIsNotActiveError(f"Proposal {key} has ended; votes are closed")
            proposal.record_vote(caller, choice)

        self._mutate("vote", caller, key, apply)
        self._logger.info(
            "vote_recorded",
            extra={"key": key, "caller_id": caller, "choice": choice.value},
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _mutate(
        self,
        operation: str,
        caller: str,
        key: int,
        apply: Callable[[Proposal], None],
    ) -> Proposal:
        validate_key(key)
        validate_caller_id(caller)
        with self._lock.hold(key):
            try:
                return self._store.update(key, apply)
            except RecordNotFoundError as e:
                self._log_rejected(operation, key, caller, "no_such_proposal")
                raise NoSuchProposalError(f"No proposal stored at key {key}") from e
            except StorageError as e:
                self._log_rejected(operation, key, caller, "update_error")
                raise UpdateError(f"Could not update proposal {key}: {e.message}") from e
            except VoteError as e:
                self._log_rejected(operation, key, caller, type(e).__name__)
                raise

    @staticmethod
    def _require_owner(proposal: Proposal, caller: str, key: int) -> None:
        if not proposal.is_owned_by(caller):
            raise AccessRejectedError(f"Only the owner may modify proposal {key}")

    def _log_rejected(self, operation: str, key: int, caller: str, reason: str) -> None:
        self._logger.warning(
            f"{operation}_rejected",
            extra={"key": key, "caller_id": caller, "reason": reason},
        )
