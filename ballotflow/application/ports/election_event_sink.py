"""Election event sink protocol.

The coordinator hands every notification to a sink. Delivery, storage and
fan-out to observers are the sink's business, not the coordinator's.

Contract:
- emit() is called exactly once per successful mutating call
- emit() is never called for a rejected call
- If emit() raises, the coordinator does not commit the mutation
"""

from __future__ import annotations

from typing import Protocol

from ballotflow.domain.events.election import ElectionEvent


class ElectionEventSinkProtocol(Protocol):
    """Protocol for receiving election notifications."""

    def emit(self, event: ElectionEvent) -> None:
        """Deliver one election event.

        Args:
            event: The event emitted by a successful mutation.
        """
        ...
