"""Pure domain services for ballotflow."""

from ballotflow.domain.services.tally import (
    NO_WINNER_INDEX,
    TALLY_ALGORITHM_VERSION,
    compute_winning_index,
    compute_winning_proposal_index,
)

__all__: list[str] = [
    "NO_WINNER_INDEX",
    "TALLY_ALGORITHM_VERSION",
    "compute_winning_index",
    "compute_winning_proposal_index",
]
