"""
Domain layer - Pure election logic for ballotflow.

This layer contains:
- Domain models (ElectionPhase, Participant, Proposal, ElectionState)
- Domain events (notifications emitted per successful mutation)
- Domain services (the tally algorithm)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or bootstrap.
"""

from ballotflow.domain.exceptions import ElectionError

__all__: list[str] = ["ElectionError"]
