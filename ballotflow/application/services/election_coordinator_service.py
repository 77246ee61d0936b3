"""Election coordinator service.

The coordinator owns one election: its phase, participant registry,
proposal registry and tally result. Every operation receives the caller
identity explicitly, authorizes it, asks the immutable ElectionState for a
successor state, emits exactly one event and only then commits.

Guard order on every call:
1. Caller role (administrator or registered participant)
2. Phase precondition
3. Input and registry validation

Concurrency:
All operations run inside a single lock, so at most one mutation is in
flight. A rejected call or a failing event sink leaves the committed state
untouched.
The state properties read the committed reference without the lock; each
read sees one whole immutable snapshot.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

import structlog

from ballotflow.application.ports.election_event_sink import ElectionEventSinkProtocol
from ballotflow.application.ports.election_metrics import ElectionMetricsProtocol
from ballotflow.config.election_config import DEFAULT_ELECTION_CONFIG, ElectionConfig
from ballotflow.domain.errors.authorization import (
    NotAdministratorError,
    NotRegisteredParticipantError,
)
from ballotflow.domain.errors.phase import AlreadyTalliedError, WrongPhaseError
from ballotflow.domain.events.election import (
    ElectionEvent,
    ParticipantRegisteredEvent,
    PhaseChangedEvent,
    ProposalSubmittedEvent,
    VoteCastEvent,
)
from ballotflow.domain.exceptions import ElectionError
from ballotflow.domain.models.election_phase import ElectionPhase
from ballotflow.domain.models.election_state import ElectionState
from ballotflow.domain.models.participant import Participant
from ballotflow.domain.models.proposal import Proposal
from ballotflow.domain.services.tally import TALLY_ALGORITHM_VERSION


class ElectionCoordinatorService:
    """Phase-gated coordinator for a single election.

    One instance coordinates exactly one election. Restarting a tallied
    election is not supported; create a new coordinator instead.

    Usage:
        coordinator = ElectionCoordinatorService(administrator="admin")
        coordinator.register_participant("admin", "alice")
        coordinator.open_proposals("admin")
        coordinator.submit_proposal("alice", "Build a bridge")
        coordinator.close_proposals("admin")
        coordinator.open_voting("admin")
        coordinator.cast_vote("alice", 1)
        coordinator.close_voting("admin")
        coordinator.tally_and_close("admin")
        assert coordinator.winning_proposal_index == 1
    """

    def __init__(
        self,
        administrator: str,
        event_sink: ElectionEventSinkProtocol | None = None,
        metrics: ElectionMetricsProtocol | None = None,
        config: ElectionConfig | None = None,
        election_id: UUID | None = None,
    ) -> None:
        """Initialize the coordinator with a fresh election.

        Args:
            administrator: Fixed identity allowed to register participants
                and advance phases. Never changes afterwards.
            event_sink: Optional sink receiving every emitted event.
            metrics: Optional metrics collector for operational counters.
            config: Election configuration (defaults to DEFAULT_ELECTION_CONFIG).
            election_id: Optional explicit election ID (UUIDv7 otherwise).
        """
        self._config = config or DEFAULT_ELECTION_CONFIG
        self._event_sink = event_sink
        self._metrics = metrics
        self._lock = threading.Lock()
        self._state = ElectionState.create(
            administrator=administrator, election_id=election_id
        )
        self._log = structlog.get_logger(__name__).bind(
            component="election_coordinator",
            election_id=str(self._state.election_id),
        )
        self._log.info("election_created", administrator=administrator)

    # ------------------------------------------------------------------
    # Public state
    # ------------------------------------------------------------------

    @property
    def state(self) -> ElectionState:
        """Immutable snapshot of the current election state."""
        return self._state

    @property
    def election_id(self) -> UUID:
        return self._state.election_id

    @property
    def administrator(self) -> str:
        return self._state.administrator

    @property
    def current_phase(self) -> ElectionPhase:
        return self._state.phase

    @property
    def winning_proposal_index(self) -> int:
        """Winning proposal index; 0 until tallied or when nobody voted."""
        return self._state.winning_proposal_index

    def get_winning_proposal(self) -> Proposal | None:
        """Return the winning proposal, or None if there is no winner yet."""
        state = self._state
        if not state.is_tallied or not state.has_proposal(state.winning_proposal_index):
            return None
        return state.proposals[state.winning_proposal_index]

    # ------------------------------------------------------------------
    # Administrator operations
    # ------------------------------------------------------------------

    def register_participant(
        self, caller: str, identity: str
    ) -> ParticipantRegisteredEvent:
        """Register identity as a participant.

        Args:
            caller: Identity invoking the operation.
            identity: Identity to register.

        Returns:
            The emitted ParticipantRegisteredEvent.

        Raises:
            NotAdministratorError: If caller is not the administrator.
            WrongPhaseError: If not in REGISTERING_PARTICIPANTS.
            AlreadyRegisteredError: If identity is already registered.
        """
        with self._operation("register_participant", caller) as log:
            state = self._state
            self._require_administrator(state, caller)
            new_state = state.with_participant(identity)

            event = ParticipantRegisteredEvent(
                election_id=state.election_id, identity=identity
            )
            self._commit(new_state, event)

            if self._metrics is not None:
                self._metrics.record_participant_registered()
            log.info(
                "participant_registered",
                identity=identity,
                participant_count=len(new_state.participants),
            )
            return event

    def open_proposals(self, caller: str) -> PhaseChangedEvent:
        """REGISTERING_PARTICIPANTS -> PROPOSALS_OPEN."""
        return self._transition(
            "open_proposals", caller, ElectionPhase.PROPOSALS_OPEN
        )

    def close_proposals(self, caller: str) -> PhaseChangedEvent:
        """PROPOSALS_OPEN -> PROPOSALS_CLOSED."""
        return self._transition(
            "close_proposals", caller, ElectionPhase.PROPOSALS_CLOSED
        )

    def open_voting(self, caller: str) -> PhaseChangedEvent:
        """PROPOSALS_CLOSED -> VOTING_OPEN."""
        return self._transition("open_voting", caller, ElectionPhase.VOTING_OPEN)

    def close_voting(self, caller: str) -> PhaseChangedEvent:
        """VOTING_OPEN -> VOTING_CLOSED."""
        return self._transition("close_voting", caller, ElectionPhase.VOTING_CLOSED)

    def tally_and_close(self, caller: str) -> PhaseChangedEvent:
        """VOTING_CLOSED -> RESULTS_TALLIED, computing the winner.

        The tally runs before the new phase is committed. Ties go to the
        lowest index that reached the maximum; no votes means winner 0.
        """
        return self._transition(
            "tally_and_close", caller, ElectionPhase.RESULTS_TALLIED
        )

    def advance_phase(
        self, caller: str, expected_current: ElectionPhase
    ) -> PhaseChangedEvent:
        """Advance from expected_current to its successor.

        Args:
            caller: Identity invoking the operation.
            expected_current: Phase the caller believes is active.

        Returns:
            The emitted PhaseChangedEvent.

        Raises:
            NotAdministratorError: If caller is not the administrator.
            WrongPhaseError: If the active phase differs from expected_current.
            AlreadyTalliedError: If expected_current is the terminal phase.
        """
        with self._operation("advance_phase", caller) as log:
            state = self._state
            self._require_administrator(state, caller)
            if state.phase != expected_current:
                raise WrongPhaseError(required=expected_current, actual=state.phase)

            target = expected_current.next_phase()
            if target is None:
                raise AlreadyTalliedError(election_id=state.election_id)
            return self._advance(log, state, target)

    # ------------------------------------------------------------------
    # Participant operations
    # ------------------------------------------------------------------

    def submit_proposal(self, caller: str, description: str) -> ProposalSubmittedEvent:
        """Submit a proposal at the next index.

        Args:
            caller: Registered participant submitting the proposal.
            description: Proposal text; must not be empty or blank.

        Returns:
            The emitted ProposalSubmittedEvent carrying the new index.

        Raises:
            NotRegisteredParticipantError: If caller is not registered.
            WrongPhaseError: If not in PROPOSALS_OPEN.
            EmptyProposalError: If description is empty or blank.
        """
        with self._operation("submit_proposal", caller) as log:
            state = self._state
            self._require_participant(state, caller)
            new_state = state.with_proposal(description)
            index = new_state.proposal_count - 1

            event = ProposalSubmittedEvent(
                election_id=state.election_id,
                proposal_index=index,
                proposer=caller,
                description=description,
            )
            self._commit(new_state, event)

            if self._metrics is not None:
                self._metrics.record_proposal_submitted()
            log.info("proposal_submitted", proposal_index=index)
            return event

    def cast_vote(self, caller: str, proposal_index: int) -> VoteCastEvent:
        """Cast the caller's single vote.

        Args:
            caller: Registered participant voting.
            proposal_index: Index of the proposal voted for (>= 1).

        Returns:
            The emitted VoteCastEvent.

        Raises:
            NotRegisteredParticipantError: If caller is not registered.
            WrongPhaseError: If not in VOTING_OPEN.
            AlreadyVotedError: If caller already voted.
            ProposalNotFoundError: If proposal_index is 0, negative or out of range.
        """
        with self._operation("cast_vote", caller) as log:
            state = self._state
            self._require_participant(state, caller)
            new_state = state.with_vote(caller, proposal_index)

            event = VoteCastEvent(
                election_id=state.election_id,
                voter=caller,
                proposal_index=proposal_index,
            )
            self._commit(new_state, event)

            if self._metrics is not None:
                self._metrics.record_vote_cast()
            log.info(
                "vote_cast",
                proposal_index=proposal_index,
                voter_count=new_state.voter_count,
            )
            return event

    def get_participant(self, caller: str, identity: str) -> Participant:
        """Read a participant record.

        Unknown identities yield the unregistered default record.

        Raises:
            NotRegisteredParticipantError: If caller is not registered.
        """
        with self._operation("get_participant", caller):
            state = self._state
            self._require_participant(state, caller)
            return state.get_participant(identity)

    def get_proposal(self, caller: str, proposal_index: int) -> Proposal:
        """Read a proposal by index.

        Raises:
            NotRegisteredParticipantError: If caller is not registered.
            ProposalNotFoundError: If proposal_index is 0, negative or out of range.
        """
        with self._operation("get_proposal", caller):
            state = self._state
            self._require_participant(state, caller)
            return state.get_proposal(proposal_index)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @contextmanager
    def _operation(
        self, operation: str, caller: str
    ) -> Iterator[structlog.BoundLogger]:
        """Serialize an operation and log its rejection, if any."""
        with self._lock:
            log = self._log.bind(operation=operation, caller=caller)
            try:
                yield log
            except ElectionError as exc:
                log.warning(
                    "election_call_rejected",
                    error_type=type(exc).__name__,
                    reason=str(exc),
                    phase=self._state.phase.value,
                )
                if self._metrics is not None:
                    self._metrics.record_rejection(type(exc).__name__)
                raise

    def _transition(
        self, operation: str, caller: str, target: ElectionPhase
    ) -> PhaseChangedEvent:
        with self._operation(operation, caller) as log:
            state = self._state
            self._require_administrator(state, caller)
            return self._advance(log, state, target)

    def _advance(
        self,
        log: structlog.BoundLogger,
        state: ElectionState,
        target: ElectionPhase,
    ) -> PhaseChangedEvent:
        """Move state to target and commit. Caller must hold the lock."""
        new_state = state.with_phase(
            target, genesis_description=self._config.genesis_description
        )
        event = PhaseChangedEvent(
            election_id=state.election_id,
            previous_phase=state.phase,
            next_phase=new_state.phase,
            winning_proposal_index=(
                new_state.winning_proposal_index if new_state.is_tallied else None
            ),
        )
        self._commit(new_state, event)

        if self._metrics is not None:
            self._metrics.record_phase_transition(state.phase, new_state.phase)
        log.info(
            "phase_changed",
            previous_phase=state.phase.value,
            next_phase=new_state.phase.value,
        )
        if new_state.is_tallied:
            log.info(
                "election_tallied",
                winning_proposal_index=new_state.winning_proposal_index,
                total_votes=new_state.total_votes,
                proposal_count=new_state.proposal_count - 1,
                algorithm_version=TALLY_ALGORITHM_VERSION,
            )
        return event

    def _commit(self, new_state: ElectionState, event: ElectionEvent) -> None:
        """Emit event, then swap in new_state.

        If the sink raises, the exception propagates and the current state
        is kept.
        """
        if self._event_sink is not None:
            self._event_sink.emit(event)
        self._state = new_state

    @staticmethod
    def _require_administrator(state: ElectionState, caller: str) -> None:
        if not state.is_administrator(caller):
            raise NotAdministratorError(caller=caller)

    @staticmethod
    def _require_participant(state: ElectionState, caller: str) -> None:
        if not state.is_registered(caller):
            raise NotRegisteredParticipantError(caller=caller)
