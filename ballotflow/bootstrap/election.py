"""Bootstrap wiring for election coordinator dependencies."""

from __future__ import annotations

from uuid import UUID

from ballotflow.application.ports.election_event_sink import ElectionEventSinkProtocol
from ballotflow.application.ports.election_metrics import ElectionMetricsProtocol
from ballotflow.application.services.election_coordinator_service import (
    ElectionCoordinatorService,
)
from ballotflow.config.election_config import ElectionConfig
from ballotflow.infrastructure.monitoring.election_metrics import (
    get_election_metrics_collector,
)
from ballotflow.infrastructure.monitoring.logging_event_sink import (
    StructlogElectionEventSink,
)

_election_event_sink: ElectionEventSinkProtocol | None = None


def get_election_event_sink() -> ElectionEventSinkProtocol:
    """Get election event sink instance."""
    global _election_event_sink
    if _election_event_sink is None:
        _election_event_sink = StructlogElectionEventSink()
    return _election_event_sink


def set_election_event_sink(sink: ElectionEventSinkProtocol) -> None:
    """Set custom election event sink (testing override)."""
    global _election_event_sink
    _election_event_sink = sink


def reset_election_event_sink() -> None:
    """Reset election event sink singleton."""
    global _election_event_sink
    _election_event_sink = None


def create_election_coordinator(
    administrator: str,
    config: ElectionConfig | None = None,
    event_sink: ElectionEventSinkProtocol | None = None,
    metrics: ElectionMetricsProtocol | None = None,
    election_id: UUID | None = None,
) -> ElectionCoordinatorService:
    """Create a coordinator for one new election.

    Unset dependencies fall back to the process-wide defaults: config from
    the environment, the shared event sink and the shared metrics collector.

    Args:
        administrator: Fixed administrator identity for the election.
        config: Election configuration.
        event_sink: Sink receiving the election's events.
        metrics: Metrics collector.
        election_id: Optional explicit election ID.

    Returns:
        A coordinator in REGISTERING_PARTICIPANTS.
    """
    return ElectionCoordinatorService(
        administrator=administrator,
        event_sink=event_sink or get_election_event_sink(),
        metrics=metrics or get_election_metrics_collector(),
        config=config or ElectionConfig.from_environment(),
        election_id=election_id,
    )
