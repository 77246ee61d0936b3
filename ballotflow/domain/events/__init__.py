"""Domain events emitted by the election coordinator."""

from ballotflow.domain.events.election import (
    PARTICIPANT_REGISTERED_EVENT_TYPE,
    PHASE_CHANGED_EVENT_TYPE,
    PROPOSAL_SUBMITTED_EVENT_TYPE,
    VOTE_CAST_EVENT_TYPE,
    ElectionEvent,
    ParticipantRegisteredEvent,
    PhaseChangedEvent,
    ProposalSubmittedEvent,
    VoteCastEvent,
)

__all__: list[str] = [
    "PARTICIPANT_REGISTERED_EVENT_TYPE",
    "PHASE_CHANGED_EVENT_TYPE",
    "PROPOSAL_SUBMITTED_EVENT_TYPE",
    "VOTE_CAST_EVENT_TYPE",
    "ElectionEvent",
    "ParticipantRegisteredEvent",
    "PhaseChangedEvent",
    "ProposalSubmittedEvent",
    "VoteCastEvent",
]
