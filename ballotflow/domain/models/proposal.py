"""Proposal domain model."""

from __future__ import annotations

from dataclasses import dataclass

# Index of the reserved genesis proposal ("no proposal")
GENESIS_PROPOSAL_INDEX = 0


@dataclass(frozen=True, eq=True)
class Proposal:
    """A named option that accumulates votes.

    Proposals are identified by their 1-based position in submission
    order. Index 0 holds the genesis sentinel created when proposals open;
    it can never be voted for or read back.

    Attributes:
        index: Position in the proposal registry.
        description: Non-empty text (the genesis sentinel uses a fixed label).
        vote_count: Number of votes received, starts at 0.
    """

    index: int
    description: str
    vote_count: int = 0

    def __post_init__(self) -> None:
        """Validate proposal invariants."""
        if self.index < GENESIS_PROPOSAL_INDEX:
            raise ValueError(f"index must be >= 0, got {self.index}")
        if self.vote_count < 0:
            raise ValueError(f"vote_count must be >= 0, got {self.vote_count}")
        if not self.description.strip():
            raise ValueError("description must not be blank")

    @property
    def is_genesis(self) -> bool:
        """True for the reserved index-0 sentinel."""
        return self.index == GENESIS_PROPOSAL_INDEX

    def with_vote(self) -> Proposal:
        """Create new proposal with one more vote."""
        return Proposal(
            index=self.index,
            description=self.description,
            vote_count=self.vote_count + 1,
        )
