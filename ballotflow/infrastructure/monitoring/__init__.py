"""Monitoring infrastructure: Prometheus metrics and the logging event sink."""

from ballotflow.infrastructure.monitoring.election_metrics import (
    ElectionMetricsCollector,
    get_election_metrics_collector,
    reset_election_metrics_collector,
)
from ballotflow.infrastructure.monitoring.logging_event_sink import (
    StructlogElectionEventSink,
)

__all__: list[str] = [
    "ElectionMetricsCollector",
    "StructlogElectionEventSink",
    "get_election_metrics_collector",
    "reset_election_metrics_collector",
]
