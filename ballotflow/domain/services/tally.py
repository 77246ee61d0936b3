"""Winner computation for a closed election.

The tally is deterministic: given the same proposals it always returns the
same index. Proposals are scanned in ascending index order starting at 1,
and a candidate replaces the running winner only on a strictly greater vote
count, so ties go to the earliest proposal to reach the maximum. When no
votes were cast the result is the "no winner" sentinel 0.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ballotflow.domain.models.proposal import Proposal

# Index reported when no proposal received a vote
NO_WINNER_INDEX = 0

# Bump when the winner selection rule changes
TALLY_ALGORITHM_VERSION = 1


def compute_winning_index(vote_counts: Sequence[int]) -> int:
    """Return the index of the first strict maximum in vote_counts.

    Args:
        vote_counts: Vote counts by proposal index. Position 0 is the
            genesis sentinel and is never considered.

    Returns:
        Winning proposal index, or 0 if every real proposal has 0 votes.
    """
    winning_index = NO_WINNER_INDEX
    winning_count = 0
    for index in range(1, len(vote_counts)):
        if vote_counts[index] > winning_count:
            winning_count = vote_counts[index]
            winning_index = index
    return winning_index


def compute_winning_proposal_index(proposals: Sequence[Proposal]) -> int:
    """Return the winning index for a proposal registry.

    Args:
        proposals: Proposal registry ordered by index (index 0 reserved).

    Returns:
        Winning proposal index, or 0 when there is no winner.
    """
    return compute_winning_index([proposal.vote_count for proposal in proposals])
