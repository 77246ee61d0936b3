"""Bootstrap wiring for ballotflow.

Usage:
    from ballotflow.bootstrap import configure_structlog, create_election_coordinator

    configure_structlog("production")
    coordinator = create_election_coordinator(administrator="admin")
"""

from ballotflow.bootstrap.election import (
    create_election_coordinator,
    get_election_event_sink,
    reset_election_event_sink,
    set_election_event_sink,
)
from ballotflow.bootstrap.logging import configure_structlog

__all__ = [
    "configure_structlog",
    "create_election_coordinator",
    "get_election_event_sink",
    "reset_election_event_sink",
    "set_election_event_sink",
]
