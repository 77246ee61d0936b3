"""Election notification events.

The coordinator emits exactly one event per successful mutating call and
none on failure:
- ParticipantRegisteredEvent: administrator registered an identity
- ProposalSubmittedEvent: participant submitted a proposal
- VoteCastEvent: participant cast their vote
- PhaseChangedEvent: administrator advanced the phase

Delivery and storage of events belong to the sink the coordinator is given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Union
from uuid import UUID

from uuid6 import uuid7

from ballotflow.domain.models.election_phase import ElectionPhase

# Event type constants following lowercase.dot.notation convention
PARTICIPANT_REGISTERED_EVENT_TYPE: str = "election.participant.registered"
PROPOSAL_SUBMITTED_EVENT_TYPE: str = "election.proposal.submitted"
VOTE_CAST_EVENT_TYPE: str = "election.vote.cast"
PHASE_CHANGED_EVENT_TYPE: str = "election.phase.changed"


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class ParticipantRegisteredEvent:
    """Emitted when the administrator registers a participant.

    Attributes:
        election_id: Election the participant joined.
        identity: Registered identity.
        event_id: UUIDv7 of this event.
        occurred_at: When the registration was committed (UTC).
    """

    election_id: UUID
    identity: str
    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return PARTICIPANT_REGISTERED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "event_id": str(self.event_id),
            "election_id": str(self.election_id),
            "occurred_at": self.occurred_at.isoformat(),
            "identity": self.identity,
        }


@dataclass(frozen=True, eq=True)
class ProposalSubmittedEvent:
    """Emitted when a participant submits a proposal.

    Attributes:
        election_id: Election the proposal belongs to.
        proposal_index: 1-based index assigned to the proposal.
        proposer: Identity that submitted it.
        description: Proposal text.
        event_id: UUIDv7 of this event.
        occurred_at: When the proposal was committed (UTC).
    """

    election_id: UUID
    proposal_index: int
    proposer: str
    description: str
    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return PROPOSAL_SUBMITTED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "event_id": str(self.event_id),
            "election_id": str(self.election_id),
            "occurred_at": self.occurred_at.isoformat(),
            "proposal_index": self.proposal_index,
            "proposer": self.proposer,
            "description": self.description,
        }


@dataclass(frozen=True, eq=True)
class VoteCastEvent:
    """Emitted when a participant casts their vote.

    Attributes:
        election_id: Election the vote belongs to.
        voter: Identity that voted.
        proposal_index: Proposal voted for.
        event_id: UUIDv7 of this event.
        occurred_at: When the vote was committed (UTC).
    """

    election_id: UUID
    voter: str
    proposal_index: int
    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return VOTE_CAST_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "event_id": str(self.event_id),
            "election_id": str(self.election_id),
            "occurred_at": self.occurred_at.isoformat(),
            "voter": self.voter,
            "proposal_index": self.proposal_index,
        }


@dataclass(frozen=True, eq=True)
class PhaseChangedEvent:
    """Emitted when the administrator advances the election phase.

    Attributes:
        election_id: Election whose phase changed.
        previous_phase: Phase before the transition.
        next_phase: Phase after the transition.
        winning_proposal_index: Tally result, set only on the transition
            into RESULTS_TALLIED.
        event_id: UUIDv7 of this event.
        occurred_at: When the transition was committed (UTC).
    """

    election_id: UUID
    previous_phase: ElectionPhase
    next_phase: ElectionPhase
    winning_proposal_index: int | None = None
    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        """Validate the transition is a single forward step."""
        if self.previous_phase.next_phase() != self.next_phase:
            raise ValueError(
                f"{self.previous_phase.value} -> {self.next_phase.value} "
                "is not a valid phase transition"
            )
        if (self.winning_proposal_index is not None) != self.next_phase.is_terminal():
            raise ValueError(
                "winning_proposal_index must be set exactly when entering "
                f"{ElectionPhase.RESULTS_TALLIED.value}"
            )

    @property
    def event_type(self) -> str:
        return PHASE_CHANGED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "event_type": self.event_type,
            "event_id": str(self.event_id),
            "election_id": str(self.election_id),
            "occurred_at": self.occurred_at.isoformat(),
            "previous_phase": self.previous_phase.value,
            "next_phase": self.next_phase.value,
        }
        if self.winning_proposal_index is not None:
            payload["winning_proposal_index"] = self.winning_proposal_index
        return payload


ElectionEvent = Union[
    ParticipantRegisteredEvent,
    ProposalSubmittedEvent,
    VoteCastEvent,
    PhaseChangedEvent,
]
