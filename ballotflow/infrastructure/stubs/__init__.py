"""In-memory adapters for tests and in-process embedding."""

from ballotflow.infrastructure.stubs.election_event_sink_stub import (
    EventSinkUnavailableError,
    InMemoryElectionEventSink,
)

__all__: list[str] = ["EventSinkUnavailableError", "InMemoryElectionEventSink"]
