"""Configuration module for ballotflow.

Available Configurations:
- ElectionConfig: Genesis label, environment and service name
"""

from ballotflow.config.election_config import (
    DEFAULT_ELECTION_CONFIG,
    TEST_ELECTION_CONFIG,
    ElectionConfig,
)

__all__ = [
    "ElectionConfig",
    "DEFAULT_ELECTION_CONFIG",
    "TEST_ELECTION_CONFIG",
]
