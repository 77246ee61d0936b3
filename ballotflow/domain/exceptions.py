"""Base exception classes for the ballotflow domain layer."""


class ElectionError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This lets callers reject any election failure with a single handler
    while still inspecting the specific error kind.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
