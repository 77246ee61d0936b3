"""
Pytest configuration and shared fixtures for ballotflow tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- End-to-end election scenarios go in tests/integration/
- Coordinators get an in-memory event sink and an isolated metrics registry
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from prometheus_client import CollectorRegistry

from ballotflow.application.services.election_coordinator_service import (
    ElectionCoordinatorService,
)
from ballotflow.config.election_config import TEST_ELECTION_CONFIG
from ballotflow.infrastructure.monitoring.election_metrics import (
    ElectionMetricsCollector,
)
from ballotflow.infrastructure.stubs.election_event_sink_stub import (
    InMemoryElectionEventSink,
)

ADMIN = "0xadmin"
VOTER_A = "0xvoter-a"
VOTER_B = "0xvoter-b"
VOTER_C = "0xvoter-c"
OUTSIDER = "0xoutsider"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from ballotflow import __version__

    return __version__


@pytest.fixture
def event_sink() -> InMemoryElectionEventSink:
    """Create an in-memory event sink."""
    return InMemoryElectionEventSink()


@pytest.fixture
def metrics() -> ElectionMetricsCollector:
    """Create a metrics collector with an isolated registry."""
    return ElectionMetricsCollector(
        registry=CollectorRegistry(), config=TEST_ELECTION_CONFIG
    )


@pytest.fixture
def coordinator(
    event_sink: InMemoryElectionEventSink,
    metrics: ElectionMetricsCollector,
) -> ElectionCoordinatorService:
    """Create a coordinator in REGISTERING_PARTICIPANTS."""
    return ElectionCoordinatorService(
        administrator=ADMIN,
        event_sink=event_sink,
        metrics=metrics,
        config=TEST_ELECTION_CONFIG,
    )


@pytest.fixture
def coordinator_factory(
    event_sink: InMemoryElectionEventSink,
    metrics: ElectionMetricsCollector,
) -> Callable[..., ElectionCoordinatorService]:
    """Build coordinators advanced to a given setup stage.

    Stages:
        "registering": voters registered, still REGISTERING_PARTICIPANTS
        "proposals_open": voters registered, proposals open
        "voting_open": each voter submitted one proposal, voting open
    """

    def _build(
        stage: str = "registering",
        voters: tuple[str, ...] = (VOTER_A, VOTER_B, VOTER_C),
    ) -> ElectionCoordinatorService:
        election = ElectionCoordinatorService(
            administrator=ADMIN,
            event_sink=event_sink,
            metrics=metrics,
            config=TEST_ELECTION_CONFIG,
        )
        for voter in voters:
            election.register_participant(ADMIN, voter)
        if stage == "registering":
            return election

        election.open_proposals(ADMIN)
        if stage == "proposals_open":
            return election

        for number, voter in enumerate(voters, start=1):
            election.submit_proposal(voter, f"Test proposal {number}")
        election.close_proposals(ADMIN)
        election.open_voting(ADMIN)
        if stage == "voting_open":
            return election

        raise ValueError(f"Unknown stage: {stage}")

    return _build
