"""Domain errors for ballotflow.

Provides specific exception classes for every way an election call can be
rejected. All exceptions inherit from ElectionError.
"""

from ballotflow.domain.errors.authorization import (
    ElectionAuthorizationError,
    NotAdministratorError,
    NotRegisteredParticipantError,
)
from ballotflow.domain.errors.phase import (
    AlreadyTalliedError,
    ElectionPhaseError,
    WrongPhaseError,
)
from ballotflow.domain.errors.registry import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    ElectionValidationError,
    EmptyProposalError,
    ProposalNotFoundError,
)

__all__: list[str] = [
    "AlreadyRegisteredError",
    "AlreadyTalliedError",
    "AlreadyVotedError",
    "ElectionAuthorizationError",
    "ElectionPhaseError",
    "ElectionValidationError",
    "EmptyProposalError",
    "NotAdministratorError",
    "NotRegisteredParticipantError",
    "ProposalNotFoundError",
    "WrongPhaseError",
]
