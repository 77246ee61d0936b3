"""Unit tests for the tally algorithm.

The winner is the first proposal (lowest index >= 1) holding the strictly
highest vote count; no votes means winner 0.
"""

from __future__ import annotations

import pytest

from ballotflow.domain.models.proposal import Proposal
from ballotflow.domain.services.tally import (
    NO_WINNER_INDEX,
    compute_winning_index,
    compute_winning_proposal_index,
)


def _proposals(vote_counts: list[int]) -> list[Proposal]:
    """Build a registry with a genesis sentinel followed by vote_counts."""
    registry = [Proposal(index=0, description="GENESIS")]
    for index, count in enumerate(vote_counts, start=1):
        registry.append(
            Proposal(index=index, description=f"Proposal {index}", vote_count=count)
        )
    return registry


class TestComputeWinningProposalIndex:
    """Tests for compute_winning_proposal_index()."""

    def test_first_strict_maximum_wins(self) -> None:
        """[3,5,5,2] at indices 1..4 -> index 2."""
        assert compute_winning_proposal_index(_proposals([3, 5, 5, 2])) == 2

    def test_all_zero_votes_means_no_winner(self) -> None:
        assert compute_winning_proposal_index(_proposals([0, 0, 0])) == NO_WINNER_INDEX

    def test_two_way_tie_goes_to_lower_index(self) -> None:
        assert compute_winning_proposal_index(_proposals([1, 1])) == 1

    def test_later_strictly_greater_count_replaces_winner(self) -> None:
        assert compute_winning_proposal_index(_proposals([1, 0, 4])) == 3

    def test_single_proposal_with_votes_wins(self) -> None:
        assert compute_winning_proposal_index(_proposals([2])) == 1

    def test_registry_with_only_genesis_has_no_winner(self) -> None:
        assert compute_winning_proposal_index(_proposals([])) == NO_WINNER_INDEX

    def test_empty_registry_has_no_winner(self) -> None:
        assert compute_winning_proposal_index([]) == NO_WINNER_INDEX


class TestComputeWinningIndex:
    """Tests for compute_winning_index() over raw counts."""

    def test_position_zero_is_never_considered(self) -> None:
        assert compute_winning_index([99, 1, 2]) == 2

    @pytest.mark.parametrize(
        ("vote_counts", "expected"),
        [
            ([0, 3, 5, 5, 2], 2),
            ([0, 0, 0], 0),
            ([0, 1, 1], 1),
            ([0, 0, 0, 1], 3),
        ],
    )
    def test_is_deterministic(self, vote_counts: list[int], expected: int) -> None:
        assert compute_winning_index(vote_counts) == expected
        assert compute_winning_index(vote_counts) == expected
