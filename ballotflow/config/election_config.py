"""Election coordinator configuration.

This module defines configuration for the election coordinator with
environment variable overrides for deployment tuning.

Environment Variables:
- ELECTION_GENESIS_DESCRIPTION: Label of the reserved index-0 proposal (default: GENESIS)
- ENVIRONMENT: "production" (JSON logs) or "development" (console logs) (default: production)
- SERVICE_NAME: Service label attached to metrics (default: ballotflow)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ballotflow.domain.models.election_state import DEFAULT_GENESIS_DESCRIPTION

DEFAULT_ENVIRONMENT = "production"
DEFAULT_SERVICE_NAME = "ballotflow"

# Environments understood by the logging configuration
VALID_ENVIRONMENTS = ("production", "development")


def _get_str_env(key: str, default: str) -> str:
    """Get non-blank string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        Stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class ElectionConfig:
    """Configuration for an election coordinator.

    Attributes:
        genesis_description: Description of the reserved index-0 proposal
            created when proposals open.
        environment: Deployment environment; selects the log renderer in
            bootstrap.configure_structlog and labels metrics. One of
            VALID_ENVIRONMENTS.
        service_name: Service label attached to metrics.
    """

    genesis_description: str = DEFAULT_GENESIS_DESCRIPTION
    environment: str = DEFAULT_ENVIRONMENT
    service_name: str = DEFAULT_SERVICE_NAME

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.genesis_description.strip():
            raise ValueError("genesis_description must not be blank")
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {VALID_ENVIRONMENTS}, "
                f"got {self.environment!r}"
            )
        if not self.service_name.strip():
            raise ValueError("service_name must not be blank")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> ElectionConfig:
        """Create config from environment variables with defaults.

        Invalid values fall back to their defaults rather than failing
        startup.

        Returns:
            ElectionConfig with values from environment or defaults.
        """
        environment = _get_str_env("ENVIRONMENT", DEFAULT_ENVIRONMENT).lower()
        if environment not in VALID_ENVIRONMENTS:
            environment = DEFAULT_ENVIRONMENT

        return cls(
            genesis_description=_get_str_env(
                "ELECTION_GENESIS_DESCRIPTION", DEFAULT_GENESIS_DESCRIPTION
            ),
            environment=environment,
            service_name=_get_str_env("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        )


# Default production config
DEFAULT_ELECTION_CONFIG = ElectionConfig()

# Testing config with console logging
TEST_ELECTION_CONFIG = ElectionConfig(
    environment="development",
    service_name="ballotflow-test",
)
