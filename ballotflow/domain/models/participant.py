"""Participant domain model."""

from __future__ import annotations

from dataclasses import dataclass

# Sentinel proposal index meaning "has not voted"
NO_PROPOSAL_INDEX = 0


@dataclass(frozen=True, eq=True)
class Participant:
    """An identity authorized by the administrator to propose and vote.

    Attributes:
        identity: Opaque, already-authenticated principal handle.
        is_registered: True once registered by the administrator.
        has_voted: True once the participant has cast their vote.
        voted_proposal_index: Proposal voted for; meaningful only when
            has_voted is True (0 otherwise).
    """

    identity: str
    is_registered: bool = False
    has_voted: bool = False
    voted_proposal_index: int = NO_PROPOSAL_INDEX

    @classmethod
    def register(cls, identity: str) -> Participant:
        """Create a freshly registered participant who has not voted."""
        return cls(identity=identity, is_registered=True)

    @classmethod
    def unregistered(cls, identity: str) -> Participant:
        """Default record for an identity that was never registered."""
        return cls(identity=identity)

    def with_vote(self, proposal_index: int) -> Participant:
        """Create new participant record marked as having voted.

        Double-vote checks belong to ElectionState.with_vote.

        Args:
            proposal_index: Index of the proposal voted for.

        Returns:
            New Participant with has_voted set.
        """
        return Participant(
            identity=self.identity,
            is_registered=self.is_registered,
            has_voted=True,
            voted_proposal_index=proposal_index,
        )
