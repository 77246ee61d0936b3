"""Unit tests for the ElectionState aggregate.

ElectionState enforces phase and registry invariants; caller roles are
the coordinator's concern and are tested there.
"""

from __future__ import annotations

from uuid import uuid4

import pytest

from ballotflow.domain.errors.phase import AlreadyTalliedError, WrongPhaseError
from ballotflow.domain.errors.registry import (
    AlreadyRegisteredError,
    AlreadyVotedError,
    EmptyProposalError,
    ProposalNotFoundError,
)
from ballotflow.domain.models.election_phase import ElectionPhase
from ballotflow.domain.models.election_state import (
    DEFAULT_GENESIS_DESCRIPTION,
    ElectionState,
)
from ballotflow.domain.models.participant import Participant

ADMIN = "0xadmin"


def _advance(state: ElectionState, *phases: ElectionPhase) -> ElectionState:
    for phase in phases:
        state = state.with_phase(phase)
    return state


@pytest.fixture
def fresh_state() -> ElectionState:
    return ElectionState.create(administrator=ADMIN)


@pytest.fixture
def voting_state(fresh_state: ElectionState) -> ElectionState:
    """Two voters, two proposals, voting open."""
    state = fresh_state.with_participant("alice").with_participant("bob")
    state = state.with_phase(ElectionPhase.PROPOSALS_OPEN)
    state = state.with_proposal("First").with_proposal("Second")
    return _advance(state, ElectionPhase.PROPOSALS_CLOSED, ElectionPhase.VOTING_OPEN)


class TestCreate:
    """Tests for ElectionState.create()."""

    def test_starts_registering_with_empty_registries(
        self, fresh_state: ElectionState
    ) -> None:
        assert fresh_state.phase == ElectionPhase.REGISTERING_PARTICIPANTS
        assert fresh_state.participants == {}
        assert fresh_state.proposals == ()
        assert fresh_state.winning_proposal_index == 0
        assert fresh_state.is_tallied is False
        assert fresh_state.version == 1

    def test_generates_election_id(self) -> None:
        first = ElectionState.create(administrator=ADMIN)
        second = ElectionState.create(administrator=ADMIN)
        assert first.election_id != second.election_id

    def test_accepts_explicit_election_id(self) -> None:
        election_id = uuid4()
        state = ElectionState.create(administrator=ADMIN, election_id=election_id)
        assert state.election_id == election_id

    def test_requires_administrator(self) -> None:
        with pytest.raises(ValueError, match="administrator"):
            ElectionState.create(administrator="")


class TestWithParticipant:
    """Tests for with_participant()."""

    def test_registers_identity(self, fresh_state: ElectionState) -> None:
        state = fresh_state.with_participant("alice")

        assert state.is_registered("alice")
        assert state.version == fresh_state.version + 1
        assert not fresh_state.is_registered("alice")

    def test_duplicate_identity_rejected(self, fresh_state: ElectionState) -> None:
        state = fresh_state.with_participant("alice")

        with pytest.raises(AlreadyRegisteredError) as exc_info:
            state.with_participant("alice")

        assert exc_info.value.identity == "alice"

    def test_administrator_may_register_as_participant(
        self, fresh_state: ElectionState
    ) -> None:
        state = fresh_state.with_participant(ADMIN)
        assert state.is_registered(ADMIN)

    def test_rejected_after_registration_closes(
        self, fresh_state: ElectionState
    ) -> None:
        state = fresh_state.with_phase(ElectionPhase.PROPOSALS_OPEN)

        with pytest.raises(WrongPhaseError) as exc_info:
            state.with_participant("alice")

        assert exc_info.value.required == ElectionPhase.REGISTERING_PARTICIPANTS
        assert exc_info.value.actual == ElectionPhase.PROPOSALS_OPEN


class TestWithPhase:
    """Tests for with_phase()."""

    def test_opening_proposals_creates_genesis(
        self, fresh_state: ElectionState
    ) -> None:
        state = fresh_state.with_phase(ElectionPhase.PROPOSALS_OPEN)

        assert state.proposal_count == 1
        assert state.proposals[0].is_genesis
        assert state.proposals[0].description == DEFAULT_GENESIS_DESCRIPTION

    def test_custom_genesis_description(self, fresh_state: ElectionState) -> None:
        state = fresh_state.with_phase(
            ElectionPhase.PROPOSALS_OPEN, genesis_description="NONE"
        )
        assert state.proposals[0].description == "NONE"

    def test_skipping_a_phase_rejected(self, fresh_state: ElectionState) -> None:
        with pytest.raises(WrongPhaseError) as exc_info:
            fresh_state.with_phase(ElectionPhase.PROPOSALS_CLOSED)

        assert exc_info.value.required == ElectionPhase.PROPOSALS_OPEN
        assert exc_info.value.actual == ElectionPhase.REGISTERING_PARTICIPANTS

    def test_repeating_a_phase_rejected(self, fresh_state: ElectionState) -> None:
        state = fresh_state.with_phase(ElectionPhase.PROPOSALS_OPEN)

        with pytest.raises(WrongPhaseError):
            state.with_phase(ElectionPhase.PROPOSALS_OPEN)

    def test_going_back_to_initial_phase_rejected(
        self, fresh_state: ElectionState
    ) -> None:
        state = fresh_state.with_phase(ElectionPhase.PROPOSALS_OPEN)

        with pytest.raises(ValueError, match="initial phase"):
            state.with_phase(ElectionPhase.REGISTERING_PARTICIPANTS)

    def test_entering_results_tallied_runs_tally(
        self, voting_state: ElectionState
    ) -> None:
        state = voting_state.with_vote("alice", 2).with_vote("bob", 2)
        state = _advance(
            state, ElectionPhase.VOTING_CLOSED, ElectionPhase.RESULTS_TALLIED
        )

        assert state.is_tallied is True
        assert state.winning_proposal_index == 2
        assert state.tallied_at is not None

    def test_original_state_unchanged(self, fresh_state: ElectionState) -> None:
        fresh_state.with_phase(ElectionPhase.PROPOSALS_OPEN)
        assert fresh_state.phase == ElectionPhase.REGISTERING_PARTICIPANTS


class TestWithTally:
    """Tests for with_tally()."""

    def test_requires_voting_closed(self, voting_state: ElectionState) -> None:
        with pytest.raises(WrongPhaseError) as exc_info:
            voting_state.with_tally()

        assert exc_info.value.required == ElectionPhase.VOTING_CLOSED

    def test_tallying_twice_rejected_by_phase(
        self, voting_state: ElectionState
    ) -> None:
        state = voting_state.with_phase(ElectionPhase.VOTING_CLOSED).with_tally()

        with pytest.raises(WrongPhaseError):
            state.with_tally()

    def test_tallied_flag_must_match_terminal_phase(
        self, voting_state: ElectionState
    ) -> None:
        with pytest.raises(ValueError, match="inconsistent"):
            ElectionState(
                election_id=voting_state.election_id,
                administrator=ADMIN,
                phase=ElectionPhase.VOTING_CLOSED,
                is_tallied=True,
            )

    def test_no_votes_yields_no_winner(self, voting_state: ElectionState) -> None:
        state = voting_state.with_phase(ElectionPhase.VOTING_CLOSED).with_tally()
        assert state.winning_proposal_index == 0

    def test_already_tallied_error_names_election(self) -> None:
        election_id = uuid4()
        error = AlreadyTalliedError(election_id=election_id)
        assert error.election_id == election_id
        assert "already been tallied" in str(error)


class TestWithProposal:
    """Tests for with_proposal()."""

    def test_indices_ascend_from_one(self, fresh_state: ElectionState) -> None:
        state = fresh_state.with_phase(ElectionPhase.PROPOSALS_OPEN)
        state = state.with_proposal("A").with_proposal("B").with_proposal("C")

        assert [p.index for p in state.proposals] == [0, 1, 2, 3]
        assert [p.description for p in state.proposals[1:]] == ["A", "B", "C"]

    @pytest.mark.parametrize("description", ["", " ", "\t\n"])
    def test_blank_description_rejected(
        self, fresh_state: ElectionState, description: str
    ) -> None:
        state = fresh_state.with_phase(ElectionPhase.PROPOSALS_OPEN)

        with pytest.raises(EmptyProposalError):
            state.with_proposal(description)

    def test_rejected_before_proposals_open(self, fresh_state: ElectionState) -> None:
        with pytest.raises(WrongPhaseError) as exc_info:
            fresh_state.with_proposal("A")

        assert exc_info.value.required == ElectionPhase.PROPOSALS_OPEN


class TestWithVote:
    """Tests for with_vote()."""

    def test_records_vote(self, voting_state: ElectionState) -> None:
        state = voting_state.with_vote("alice", 1)

        assert state.proposals[1].vote_count == 1
        assert state.participants["alice"].has_voted is True
        assert state.participants["alice"].voted_proposal_index == 1
        assert state.total_votes == 1
        assert state.voter_count == 1

    def test_second_vote_rejected(self, voting_state: ElectionState) -> None:
        state = voting_state.with_vote("alice", 1)

        with pytest.raises(AlreadyVotedError) as exc_info:
            state.with_vote("alice", 2)

        assert exc_info.value.voted_proposal_index == 1

    @pytest.mark.parametrize("index", [0, -1, 3, 1200])
    def test_invalid_index_rejected(
        self, voting_state: ElectionState, index: int
    ) -> None:
        with pytest.raises(ProposalNotFoundError) as exc_info:
            voting_state.with_vote("alice", index)

        assert exc_info.value.proposal_index == index
        assert exc_info.value.proposal_count == 3

    def test_already_voted_checked_before_index(
        self, voting_state: ElectionState
    ) -> None:
        state = voting_state.with_vote("alice", 1)

        with pytest.raises(AlreadyVotedError):
            state.with_vote("alice", 99)

    def test_rejected_outside_voting(self, voting_state: ElectionState) -> None:
        state = voting_state.with_phase(ElectionPhase.VOTING_CLOSED)

        with pytest.raises(WrongPhaseError) as exc_info:
            state.with_vote("alice", 1)

        assert exc_info.value.required == ElectionPhase.VOTING_OPEN

    def test_totals_never_exceed_voters(self, voting_state: ElectionState) -> None:
        state = voting_state.with_vote("alice", 1).with_vote("bob", 2)
        assert state.total_votes == state.voter_count == 2


class TestReads:
    """Tests for read helpers."""

    def test_get_proposal_rejects_genesis(self, voting_state: ElectionState) -> None:
        with pytest.raises(ProposalNotFoundError):
            voting_state.get_proposal(0)

    def test_get_proposal_returns_real_proposal(
        self, voting_state: ElectionState
    ) -> None:
        assert voting_state.get_proposal(2).description == "Second"

    def test_get_participant_unknown_is_unregistered_default(
        self, voting_state: ElectionState
    ) -> None:
        participant = voting_state.get_participant("nobody")
        assert participant.identity == "nobody"
        assert participant.is_registered is False

    def test_has_proposal_bounds(self, voting_state: ElectionState) -> None:
        assert not voting_state.has_proposal(0)
        assert voting_state.has_proposal(1)
        assert voting_state.has_proposal(2)
        assert not voting_state.has_proposal(3)


class TestParticipantRegistryIsReadOnly:
    """The registry can only change through with_participant and with_vote."""

    def test_item_assignment_rejected(self, fresh_state: ElectionState) -> None:
        with pytest.raises(TypeError):
            fresh_state.participants["mallory"] = Participant.register("mallory")  # type: ignore[index]

        assert not fresh_state.is_registered("mallory")

    def test_voted_flag_cannot_be_overwritten(self, voting_state: ElectionState) -> None:
        state = voting_state.with_vote("alice", 1)

        with pytest.raises(TypeError):
            state.participants["alice"] = Participant.register("alice")  # type: ignore[index]

        with pytest.raises(AlreadyVotedError):
            state.with_vote("alice", 2)

    def test_constructor_copies_mapping(self) -> None:
        registry = {"alice": Participant.register("alice")}
        state = ElectionState(election_id=uuid4(), administrator=ADMIN, participants=registry)

        registry["mallory"] = Participant.register("mallory")

        assert not state.is_registered("mallory")
        assert list(state.participants) == ["alice"]

    def test_state_is_hashable(self, voting_state: ElectionState) -> None:
        state = voting_state.with_vote("alice", 1)

        assert hash(state) == hash(state)
        assert state in {state}

    def test_equal_states_compare_equal(self) -> None:
        election_id = uuid4()
        first = ElectionState.create(administrator=ADMIN, election_id=election_id)
        second = ElectionState(
            election_id=election_id,
            administrator=ADMIN,
            created_at=first.created_at,
        )

        assert first == second
        assert first.participants == {}
