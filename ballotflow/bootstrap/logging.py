"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from ballotflow.config.election_config import ElectionConfig
from ballotflow.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)


def configure_structlog(environment: str | None = None) -> None:
    """Configure structlog for the given environment.

    Args:
        environment: 'production' or 'development'. When omitted, the
            renderer follows ElectionConfig.from_environment().
    """
    if environment is None:
        config = ElectionConfig.from_environment()
        environment = "production" if config.is_production else "development"
    _configure_structlog(environment=environment)


__all__ = ["configure_structlog"]
