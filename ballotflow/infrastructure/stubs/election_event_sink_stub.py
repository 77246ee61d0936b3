"""In-memory election event sink.

This module provides an in-memory implementation of
ElectionEventSinkProtocol for testing and for embedding the coordinator
where events are consumed in-process.
"""

from __future__ import annotations

import threading

from ballotflow.application.ports.election_event_sink import ElectionEventSinkProtocol
from ballotflow.domain.events.election import ElectionEvent


class EventSinkUnavailableError(Exception):
    """Raised by the stub when configured to fail delivery."""

    def __init__(self, message: str = "Election event sink unavailable") -> None:
        super().__init__(message)


class InMemoryElectionEventSink(ElectionEventSinkProtocol):
    """Records emitted events in order.

    Usage:
        sink = InMemoryElectionEventSink()
        coordinator = ElectionCoordinatorService("admin", event_sink=sink)
        coordinator.register_participant("admin", "alice")
        assert sink.event_types == ["election.participant.registered"]

        # Simulate delivery failure
        sink.set_failing(True)
    """

    def __init__(self) -> None:
        self._events: list[ElectionEvent] = []
        self._failing = False
        self._lock = threading.Lock()

    @property
    def events(self) -> list[ElectionEvent]:
        """Copy of the recorded events, oldest first."""
        with self._lock:
            return list(self._events)

    @property
    def event_types(self) -> list[str]:
        return [event.event_type for event in self.events]

    def set_failing(self, failing: bool) -> None:
        """Make subsequent emit() calls raise (test helper)."""
        self._failing = failing

    def clear(self) -> None:
        """Clear all recorded events (test helper)."""
        with self._lock:
            self._events.clear()

    def emit(self, event: ElectionEvent) -> None:
        """Record one event.

        Raises:
            EventSinkUnavailableError: If the sink is set to fail.
        """
        if self._failing:
            raise EventSinkUnavailableError()
        with self._lock:
            self._events.append(event)
