"""Structlog-backed election event sink.

Writes every election event as one structured log line. This is the
default delivery mechanism when no ledger or message bus is wired in.
"""

from __future__ import annotations

from ballotflow.application.ports.election_event_sink import ElectionEventSinkProtocol
from ballotflow.domain.events.election import ElectionEvent
from ballotflow.infrastructure.observability.logging import get_logger_for_service


class StructlogElectionEventSink(ElectionEventSinkProtocol):
    """Emits election events to the structured log.

    Each event is logged at info level under the name "election_event"
    with the event's to_dict() payload as fields.
    """

    def __init__(self) -> None:
        self._log = get_logger_for_service(
            "election_event_sink", component="election_events"
        )

    def emit(self, event: ElectionEvent) -> None:
        """Log one election event.

        Args:
            event: The event to log.
        """
        self._log.info("election_event", **event.to_dict())
