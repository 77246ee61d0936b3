"""Phase errors for the election state machine.

The election lifecycle is strictly ordered:
REGISTERING_PARTICIPANTS -> PROPOSALS_OPEN -> PROPOSALS_CLOSED ->
VOTING_OPEN -> VOTING_CLOSED -> RESULTS_TALLIED

Skipping phases, repeating them or going backwards is not permitted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from ballotflow.domain.exceptions import ElectionError

if TYPE_CHECKING:
    from ballotflow.domain.models.election_phase import ElectionPhase


class ElectionPhaseError(ElectionError):
    """Base class for phase precondition failures."""

    pass


class WrongPhaseError(ElectionPhaseError):
    """Raised when an operation is invoked outside the phase it belongs to.

    Attributes:
        required: Phase the operation requires.
        actual: Phase the election is currently in.
    """

    def __init__(self, required: ElectionPhase, actual: ElectionPhase) -> None:
        """Initialize WrongPhaseError.

        Args:
            required: Phase the operation requires.
            actual: Phase the election is currently in.
        """
        self.required = required
        self.actual = actual
        super().__init__(
            f"Operation requires phase {required.value}, "
            f"but election is in phase {actual.value}"
        )


class AlreadyTalliedError(ElectionPhaseError):
    """Raised when a tally is attempted on an election that already has one.

    The winning proposal is computed exactly once. Once the election is in
    RESULTS_TALLIED it is terminal and immutable.

    Attributes:
        election_id: ID of the tallied election.
    """

    def __init__(self, election_id: UUID) -> None:
        """Initialize AlreadyTalliedError.

        Args:
            election_id: ID of the tallied election.
        """
        self.election_id = election_id
        super().__init__(
            f"Election {election_id} has already been tallied. "
            "Tallied elections are terminal; create a new election instead."
        )
