"""Election metrics for Prometheus exposition.

This module provides Prometheus counters for the election coordinator:
registrations, proposals, votes, phase transitions and rejected calls.
"""

from __future__ import annotations

import threading

from prometheus_client import CollectorRegistry, Counter

from ballotflow.config.election_config import DEFAULT_ELECTION_CONFIG, ElectionConfig
from ballotflow.domain.models.election_phase import ElectionPhase

# Thread lock for singleton initialization
_metrics_lock = threading.Lock()


class ElectionMetricsCollector:
    """Collects election metrics for Prometheus.

    Implements ElectionMetricsProtocol. Every counter carries service and
    environment labels taken from the ElectionConfig.

    Attributes:
        participants_registered_total: Counter for registrations.
        proposals_submitted_total: Counter for proposals.
        votes_cast_total: Counter for votes.
        phase_transitions_total: Counter for transitions by from/to phase.
        rejections_total: Counter for rejected calls by error type.
    """

    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        config: ElectionConfig | None = None,
    ) -> None:
        """Initialize election metrics collector.

        Args:
            registry: Optional custom registry for testing isolation.
            config: Source of service/environment labels.
        """
        config = config or DEFAULT_ELECTION_CONFIG
        self._registry = registry or CollectorRegistry()
        self._environment = config.environment
        self._service_name = config.service_name

        self.participants_registered_total = Counter(
            name="election_participants_registered_total",
            documentation="Total participants registered",
            labelnames=["service", "environment"],
            registry=self._registry,
        )
        self.proposals_submitted_total = Counter(
            name="election_proposals_submitted_total",
            documentation="Total proposals submitted",
            labelnames=["service", "environment"],
            registry=self._registry,
        )
        self.votes_cast_total = Counter(
            name="election_votes_cast_total",
            documentation="Total votes cast",
            labelnames=["service", "environment"],
            registry=self._registry,
        )
        self.phase_transitions_total = Counter(
            name="election_phase_transitions_total",
            documentation="Total phase transitions by source and target phase",
            labelnames=["from_phase", "to_phase", "service", "environment"],
            registry=self._registry,
        )
        self.rejections_total = Counter(
            name="election_rejections_total",
            documentation="Total rejected election calls by error type",
            labelnames=["error_type", "service", "environment"],
            registry=self._registry,
        )

    def record_participant_registered(self) -> None:
        self.participants_registered_total.labels(
            service=self._service_name, environment=self._environment
        ).inc()

    def record_proposal_submitted(self) -> None:
        self.proposals_submitted_total.labels(
            service=self._service_name, environment=self._environment
        ).inc()

    def record_vote_cast(self) -> None:
        self.votes_cast_total.labels(
            service=self._service_name, environment=self._environment
        ).inc()

    def record_phase_transition(
        self, from_phase: ElectionPhase, to_phase: ElectionPhase
    ) -> None:
        """Record a phase transition.

        Args:
            from_phase: Phase before the transition.
            to_phase: Phase after the transition.
        """
        self.phase_transitions_total.labels(
            from_phase=from_phase.value,
            to_phase=to_phase.value,
            service=self._service_name,
            environment=self._environment,
        ).inc()

    def record_rejection(self, error_type: str) -> None:
        """Record a rejected call.

        Args:
            error_type: Class name of the raised election error.
        """
        self.rejections_total.labels(
            error_type=error_type,
            service=self._service_name,
            environment=self._environment,
        ).inc()

    def get_registry(self) -> CollectorRegistry:
        """Get the collector registry.

        Returns:
            The Prometheus collector registry.
        """
        return self._registry


# Singleton instance
_election_metrics_collector: ElectionMetricsCollector | None = None


def get_election_metrics_collector() -> ElectionMetricsCollector:
    """Get the singleton ElectionMetricsCollector instance (thread-safe).

    Uses double-checked locking for lazy initialization. The singleton is
    configured from the environment on first use.

    Returns:
        The global ElectionMetricsCollector instance.
    """
    global _election_metrics_collector
    if _election_metrics_collector is None:
        with _metrics_lock:
            if _election_metrics_collector is None:
                _election_metrics_collector = ElectionMetricsCollector(
                    config=ElectionConfig.from_environment()
                )
    return _election_metrics_collector


def reset_election_metrics_collector() -> None:
    """Reset the singleton collector (for testing only)."""
    global _election_metrics_collector
    with _metrics_lock:
        _election_metrics_collector = None
