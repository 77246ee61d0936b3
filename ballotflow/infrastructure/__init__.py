"""
Infrastructure layer - Adapters for ballotflow ports.

This layer contains:
- Structured logging and correlation (observability)
- Prometheus metrics and the logging event sink (monitoring)
- In-memory adapters for tests and embedding (stubs)
"""
