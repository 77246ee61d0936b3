"""Domain models for ballotflow."""

from ballotflow.domain.models.election_phase import (
    INITIAL_PHASE,
    PHASE_TRANSITION_MATRIX,
    ElectionPhase,
)
from ballotflow.domain.models.participant import NO_PROPOSAL_INDEX, Participant
from ballotflow.domain.models.proposal import GENESIS_PROPOSAL_INDEX, Proposal
from ballotflow.domain.models.election_state import (
    DEFAULT_GENESIS_DESCRIPTION,
    ElectionState,
)

__all__: list[str] = [
    "DEFAULT_GENESIS_DESCRIPTION",
    "ElectionPhase",
    "ElectionState",
    "GENESIS_PROPOSAL_INDEX",
    "INITIAL_PHASE",
    "NO_PROPOSAL_INDEX",
    "PHASE_TRANSITION_MATRIX",
    "Participant",
    "Proposal",
]
