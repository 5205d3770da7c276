"""Domain model for proposals. Pure business semantics, no ORM or infrastructure."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

# Counters are unsigned 32-bit.
MAX_COUNTER = 2**32 - 1


class Choice(str, Enum):
    """Vote a caller casts on a proposal."""

    APPROVE = "Approve"
    REJECT = "Reject"
    PASS = "Pass"


class Proposal(BaseModel):
    """
    Voted-on record. Owner is fixed at creation; voted is append-only;
    is_active only moves from True to False.
    Mutate only through the methods below so invariants hold.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    description: str
    approve: int = Field(0, ge=0, le=MAX_COUNTER)
    reject: int = Field(0, ge=0, le=MAX_COUNTER)
    pass_: int = Field(0, ge=0, le=MAX_COUNTER, alias="pass")
    is_active: bool = True
    voted: List[str] = Field(default_factory=list)
    owner: str

    @classmethod
    def new(cls, owner: str, description: str, is_active: bool = True) -> "Proposal":
        """Fresh proposal: counters at zero, nobody has voted."""
        return cls(description=description, is_active=is_active, owner=owner)

    def is_owned_by(self, caller: str) -> bool:
        return self.owner == caller

    def has_voted(self, caller: str) -> bool:
        return caller in self.voted

    def record_vote(self, caller: str, choice: Choice) -> None:
        """Increment exactly one counter and remember the voter. Caller must not have voted."""
        if self.has_voted(caller):
            raise ValueError(f"{caller} already voted")
        if choice is Choice.APPROVE:
            self.approve += 1
        elif choice is Choice.REJECT:
            self.reject += 1
        else:
            self.pass_ += 1
        self.voted.append(caller)

    def deactivate(self) -> None:
        self.is_active = False

    def edit(self, description: str, is_active: bool) -> None:
        """Replace description; is_active may only stay the same or drop to False."""
        if is_active and not self.is_active:
            raise ValueError("a closed proposal cannot be reactivated")
        self.description = description
        self.is_active = is_active

    @property
    def total_votes(self) -> int:
        return self.approve + self.reject + self.pass_
