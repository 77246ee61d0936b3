"""Election phase enumeration and transition matrix.

The election lifecycle follows a strict sequence:
REGISTERING_PARTICIPANTS -> PROPOSALS_OPEN -> PROPOSALS_CLOSED ->
VOTING_OPEN -> VOTING_CLOSED -> RESULTS_TALLIED

Every transition is administrator-triggered, one-directional and
irreversible. RESULTS_TALLIED is terminal.
"""

from __future__ import annotations

from enum import Enum


class ElectionPhase(Enum):
    """Phase of an election.

    Phases:
        REGISTERING_PARTICIPANTS: Administrator registers participants
        PROPOSALS_OPEN: Participants submit proposals
        PROPOSALS_CLOSED: Proposal list is frozen
        VOTING_OPEN: Participants cast one vote each
        VOTING_CLOSED: Votes are frozen, awaiting tally
        RESULTS_TALLIED: Terminal - winner computed
    """

    REGISTERING_PARTICIPANTS = "registering_participants"
    PROPOSALS_OPEN = "proposals_open"
    PROPOSALS_CLOSED = "proposals_closed"
    VOTING_OPEN = "voting_open"
    VOTING_CLOSED = "voting_closed"
    RESULTS_TALLIED = "results_tallied"

    def is_terminal(self) -> bool:
        """Check if this phase is the terminal phase.

        Returns:
            True if this is RESULTS_TALLIED, False otherwise.
        """
        return self == ElectionPhase.RESULTS_TALLIED

    def next_phase(self) -> ElectionPhase | None:
        """Get the next phase in the lifecycle.

        Returns:
            The next phase, or None if this is the terminal phase.
        """
        return PHASE_TRANSITION_MATRIX.get(self)

    def previous_phase(self) -> ElectionPhase | None:
        """Get the phase that must precede this one.

        Returns:
            The required predecessor, or None for the initial phase.
        """
        for phase, successor in PHASE_TRANSITION_MATRIX.items():
            if successor == self:
                return phase
        return None


# Maps each phase to its only valid successor (strict sequence)
PHASE_TRANSITION_MATRIX: dict[ElectionPhase, ElectionPhase | None] = {
    ElectionPhase.REGISTERING_PARTICIPANTS: ElectionPhase.PROPOSALS_OPEN,
    ElectionPhase.PROPOSALS_OPEN: ElectionPhase.PROPOSALS_CLOSED,
    ElectionPhase.PROPOSALS_CLOSED: ElectionPhase.VOTING_OPEN,
    ElectionPhase.VOTING_OPEN: ElectionPhase.VOTING_CLOSED,
    ElectionPhase.VOTING_CLOSED: ElectionPhase.RESULTS_TALLIED,
    ElectionPhase.RESULTS_TALLIED: None,  # Terminal
}

INITIAL_PHASE = ElectionPhase.REGISTERING_PARTICIPANTS
