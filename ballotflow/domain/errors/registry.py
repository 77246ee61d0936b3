"""Validation errors for the participant and proposal registries."""

from __future__ import annotations

from ballotflow.domain.exceptions import ElectionError


class ElectionValidationError(ElectionError):
    """Base class for input and registry state failures."""

    pass


class AlreadyRegisteredError(ElectionValidationError):
    """Raised when registering an identity that is already a participant.

    Attributes:
        identity: The duplicate identity.
    """

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"Participant {identity} is already registered")


class AlreadyVotedError(ElectionValidationError):
    """Raised when a participant attempts to vote a second time.

    Attributes:
        voter: Identity of the participant.
        voted_proposal_index: Proposal the participant already voted for.
    """

    def __init__(self, voter: str, voted_proposal_index: int) -> None:
        self.voter = voter
        self.voted_proposal_index = voted_proposal_index
        super().__init__(
            f"Participant {voter} has already voted "
            f"(for proposal {voted_proposal_index})"
        )


class EmptyProposalError(ElectionValidationError):
    """Raised when a proposal description is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Proposal description must not be empty")


class ProposalNotFoundError(ElectionValidationError):
    """Raised when a proposal index does not name a real proposal.

    Index 0 is the reserved genesis sentinel and never names a real
    proposal; valid indices are 1 through proposal_count - 1.

    Attributes:
        proposal_index: The offending index.
        proposal_count: Number of proposal slots, including the sentinel.
    """

    def __init__(self, proposal_index: int, proposal_count: int) -> None:
        self.proposal_index = proposal_index
        self.proposal_count = proposal_count
        if proposal_count > 1:
            valid_str = f"valid indices are 1..{proposal_count - 1}"
        else:
            valid_str = "no proposals have been submitted"
        super().__init__(f"Proposal {proposal_index} not found: {valid_str}")
