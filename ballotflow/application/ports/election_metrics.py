"""Election metrics protocol.

Lets the coordinator record operational counters without depending on a
specific metrics backend.
"""

from __future__ import annotations

from typing import Protocol

from ballotflow.domain.models.election_phase import ElectionPhase


class ElectionMetricsProtocol(Protocol):
    """Protocol for election operational metrics."""

    def record_participant_registered(self) -> None:
        """Record a successful participant registration."""
        ...

    def record_proposal_submitted(self) -> None:
        """Record a successful proposal submission."""
        ...

    def record_vote_cast(self) -> None:
        """Record a successful vote."""
        ...

    def record_phase_transition(
        self, from_phase: ElectionPhase, to_phase: ElectionPhase
    ) -> None:
        """Record a successful phase transition.

        Args:
            from_phase: Phase before the transition.
            to_phase: Phase after the transition.
        """
        ...

    def record_rejection(self, error_type: str) -> None:
        """Record a rejected call.

        Args:
            error_type: Class name of the raised election error.
        """
        ...
