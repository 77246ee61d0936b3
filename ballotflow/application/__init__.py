"""
Application layer - Use cases and orchestration for ballotflow.

This layer contains:
- The election coordinator service
- Port definitions (abstract interfaces for infrastructure)

IMPORT RULES:
- CAN import from: domain, config
- CANNOT import from: infrastructure, bootstrap
"""
