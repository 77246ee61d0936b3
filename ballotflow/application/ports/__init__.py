"""Application ports - Abstract interfaces for infrastructure adapters.

Available ports:
- ElectionEventSinkProtocol: Delivery of election notifications
- ElectionMetricsProtocol: Operational counters
"""

from ballotflow.application.ports.election_event_sink import ElectionEventSinkProtocol
from ballotflow.application.ports.election_metrics import ElectionMetricsProtocol

__all__: list[str] = ["ElectionEventSinkProtocol", "ElectionMetricsProtocol"]
