"""Application services for ballotflow."""

from ballotflow.application.services.election_coordinator_service import (
    ElectionCoordinatorService,
)

__all__: list[str] = ["ElectionCoordinatorService"]
