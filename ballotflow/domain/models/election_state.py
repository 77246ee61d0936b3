"""Election state aggregate.

ElectionState is the single explicit value holding everything an election
knows: its phase, the participant registry, the proposal registry and the
tally result. It is immutable; every mutation returns a new state, so a
rejected call can never leave a partially applied change behind.

Invariants:
- Exactly one phase is active; transitions only move to the successor
- Participants are added only while REGISTERING_PARTICIPANTS
- Proposals are added only while PROPOSALS_OPEN
- Votes are recorded only while VOTING_OPEN, once per participant, and only
  for an existing proposal index >= 1
- The sum of vote counts equals the number of participants who voted
- winning_proposal_index is computed once, entering RESULTS_TALLIED

Caller roles are not checked here. The coordinator service authorizes the
caller before asking the state for a successor.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from uuid import UUID

from uuid6 import uuid7

from ballotflow.domain.errors.phase import AlreadyTalliedError, WrongPhaseError
from ballotflow.domain.errors.registry import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    EmptyProposalError,
    ProposalNotFoundError,
)
from ballotflow.domain.models.election_phase import INITIAL_PHASE, ElectionPhase
from ballotflow.domain.models.participant import Participant
from ballotflow.domain.models.proposal import GENESIS_PROPOSAL_INDEX, Proposal
from ballotflow.domain.services.tally import compute_winning_proposal_index

# Description of the reserved index-0 proposal
DEFAULT_GENESIS_DESCRIPTION = "GENESIS"


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class ElectionState:
    """Complete state of one election.

    Attributes:
        election_id: UUIDv7 unique identifier.
        administrator: Fixed identity allowed to register and advance phases.
        phase: Current election phase.
        participants: Read-only map of identity to Participant (a private
            copy of whatever mapping was passed in).
        proposals: Proposal registry ordered by index (index 0 reserved once
            proposals open).
        winning_proposal_index: Winning proposal, 0 until tallied or when
            nobody voted.
        is_tallied: True once the winner has been computed.
        version: Incremented on every successful mutation.
        created_at: Creation timestamp (UTC).
        tallied_at: Tally timestamp (None until tallied).
    """

    election_id: UUID
    administrator: str
    phase: ElectionPhase = field(default=INITIAL_PHASE)
    participants: Mapping[str, Participant] = field(default_factory=dict, hash=False)
    proposals: tuple[Proposal, ...] = field(default_factory=tuple)
    winning_proposal_index: int = field(default=GENESIS_PROPOSAL_INDEX)
    is_tallied: bool = field(default=False)
    version: int = field(default=1)
    created_at: datetime = field(default_factory=_utc_now)
    tallied_at: datetime | None = field(default=None)

    def __post_init__(self) -> None:
        """Freeze the participant registry and validate state invariants."""
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(
            self, "participants", MappingProxyType(dict(self.participants))
        )
        if not self.administrator:
            raise ValueError("administrator identity is required")
        if self.is_tallied != self.phase.is_terminal():
            raise ValueError(
                f"is_tallied={self.is_tallied} inconsistent with phase {self.phase.value}"
            )
        if self.total_votes > self.voter_count:
            raise ValueError(
                f"total_votes ({self.total_votes}) exceeds voter_count ({self.voter_count})"
            )

    @classmethod
    def create(
        cls,
        administrator: str,
        election_id: UUID | None = None,
    ) -> ElectionState:
        """Create a new election in REGISTERING_PARTICIPANTS.

        Args:
            administrator: Identity of the election administrator.
            election_id: Optional explicit ID (UUIDv7 generated otherwise).

        Returns:
            New ElectionState with empty registries.
        """
        if election_id is None:
            election_id = uuid7()
        return cls(election_id=election_id, administrator=administrator)

    # ------------------------------------------------------------------
    # Derived reads
    # ------------------------------------------------------------------

    @property
    def proposal_count(self) -> int:
        """Number of proposal slots, including the genesis sentinel."""
        return len(self.proposals)

    @property
    def total_votes(self) -> int:
        """Sum of vote counts across all proposals."""
        return sum(proposal.vote_count for proposal in self.proposals)

    @property
    def voter_count(self) -> int:
        """Number of participants who have voted."""
        return sum(1 for p in self.participants.values() if p.has_voted)

    def is_administrator(self, identity: str) -> bool:
        return identity == self.administrator

    def is_registered(self, identity: str) -> bool:
        participant = self.participants.get(identity)
        return participant is not None and participant.is_registered

    def has_proposal(self, index: int) -> bool:
        """True if index names a real (non-genesis) proposal."""
        return GENESIS_PROPOSAL_INDEX < index < self.proposal_count

    def get_participant(self, identity: str) -> Participant:
        """Return the participant record, or the unregistered default."""
        return self.participants.get(identity) or Participant.unregistered(identity)

    def get_proposal(self, index: int) -> Proposal:
        """Return a real proposal by index.

        Raises:
            ProposalNotFoundError: If index is 0, negative or out of range.
        """
        if not self.has_proposal(index):
            raise ProposalNotFoundError(
                proposal_index=index, proposal_count=self.proposal_count
            )
        return self.proposals[index]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _require_phase(self, required: ElectionPhase) -> None:
        if self.phase != required:
            raise WrongPhaseError(required=required, actual=self.phase)

    def _evolve(self, **changes: object) -> ElectionState:
        values: dict[str, object] = {
            "election_id": self.election_id,
            "administrator": self.administrator,
            "phase": self.phase,
            "participants": dict(self.participants),
            "proposals": self.proposals,
            "winning_proposal_index": self.winning_proposal_index,
            "is_tallied": self.is_tallied,
            "version": self.version + 1,
            "created_at": self.created_at,
            "tallied_at": self.tallied_at,
        }
        values.update(changes)
        return ElectionState(**values)  # type: ignore[arg-type]

    def with_participant(self, identity: str) -> ElectionState:
        """Create new state with identity registered.

        Raises:
            WrongPhaseError: If not in REGISTERING_PARTICIPANTS.
            AlreadyRegisteredError: If identity is already registered.
        """
        self._require_phase(ElectionPhase.REGISTERING_PARTICIPANTS)
        if identity in self.participants:
            raise AlreadyRegisteredError(identity=identity)

        participants = dict(self.participants)
        participants[identity] = Participant.register(identity)
        return self._evolve(participants=participants)

    def with_phase(
        self,
        new_phase: ElectionPhase,
        genesis_description: str = DEFAULT_GENESIS_DESCRIPTION,
    ) -> ElectionState:
        """Create new state moved to new_phase.

        Opening proposals creates the genesis sentinel at index 0. Entering
        RESULTS_TALLIED runs the tally before the phase is committed.

        Args:
            new_phase: The phase to transition to.
            genesis_description: Label of the index-0 sentinel.

        Returns:
            New ElectionState in new_phase.

        Raises:
            ValueError: If new_phase is the initial phase.
            WrongPhaseError: If the current phase is not new_phase's predecessor.
            AlreadyTalliedError: If a tally was already recorded.
        """
        required = new_phase.previous_phase()
        if required is None:
            raise ValueError(f"Cannot transition into initial phase {new_phase.value}")
        self._require_phase(required)

        if new_phase == ElectionPhase.PROPOSALS_OPEN:
            genesis = Proposal(
                index=GENESIS_PROPOSAL_INDEX, description=genesis_description
            )
            return self._evolve(phase=new_phase, proposals=(genesis,))

        if new_phase == ElectionPhase.RESULTS_TALLIED:
            return self.with_tally()

        return self._evolve(phase=new_phase)

    def with_tally(self) -> ElectionState:
        """Create new state with the winner computed and phase RESULTS_TALLIED.

        Raises:
            WrongPhaseError: If not in VOTING_CLOSED.
            AlreadyTalliedError: If a tally was already recorded.
        """
        self._require_phase(ElectionPhase.VOTING_CLOSED)
        if self.is_tallied:
            raise AlreadyTalliedError(election_id=self.election_id)

        return self._evolve(
            phase=ElectionPhase.RESULTS_TALLIED,
            winning_proposal_index=compute_winning_proposal_index(self.proposals),
            is_tallied=True,
            tallied_at=_utc_now(),
        )

    def with_proposal(self, description: str) -> ElectionState:
        """Create new state with a proposal appended at the next index.

        Raises:
            WrongPhaseError: If not in PROPOSALS_OPEN.
            EmptyProposalError: If description is empty or blank.
        """
        self._require_phase(ElectionPhase.PROPOSALS_OPEN)
        if not description or not description.strip():
            raise EmptyProposalError()

        proposal = Proposal(index=self.proposal_count, description=description)
        return self._evolve(proposals=self.proposals + (proposal,))

    def with_vote(self, voter: str, proposal_index: int) -> ElectionState:
        """Create new state with voter's vote recorded.

        Raises:
            WrongPhaseError: If not in VOTING_OPEN.
            KeyError: If voter is not in the participant registry.
            AlreadyVotedError: If voter already voted.
            ProposalNotFoundError: If proposal_index is not a real proposal.
        """
        self._require_phase(ElectionPhase.VOTING_OPEN)
        participant = self.participants[voter]
        if participant.has_voted:
            raise AlreadyVotedError(
                voter=voter, voted_proposal_index=participant.voted_proposal_index
            )
        proposal = self.get_proposal(proposal_index)

        participants = dict(self.participants)
        participants[voter] = participant.with_vote(proposal_index)
        proposals = list(self.proposals)
        proposals[proposal_index] = proposal.with_vote()
        return self._evolve(participants=participants, proposals=tuple(proposals))
