"""Authorization errors for the election coordinator.

The coordinator never authenticates callers. It only decides whether an
already-authenticated caller may act as the administrator or as a
registered participant.
"""

from __future__ import annotations

from ballotflow.domain.exceptions import ElectionError


class ElectionAuthorizationError(ElectionError):
    """Base class for caller-role failures."""

    pass


class NotAdministratorError(ElectionAuthorizationError):
    """Raised when a non-administrator calls an administrator-only operation.

    Attributes:
        caller: Identity that attempted the operation.
    """

    def __init__(self, caller: str) -> None:
        """Initialize NotAdministratorError.

        Args:
            caller: Identity that attempted the operation.
        """
        self.caller = caller
        super().__init__(f"Caller {caller} is not the election administrator")


class NotRegisteredParticipantError(ElectionAuthorizationError):
    """Raised when an unregistered caller calls a participant-only operation.

    Attributes:
        caller: Identity that attempted the operation.
    """

    def __init__(self, caller: str) -> None:
        """Initialize NotRegisteredParticipantError.

        Args:
            caller: Identity that attempted the operation.
        """
        self.caller = caller
        super().__init__(f"Caller {caller} is not a registered participant")
