"""
ballotflow - Phase-gated election coordination

A single election among an administrator-curated set of participants,
moving strictly through registration, proposals, voting and tally.

Guarantees:
- Only authorized callers act (administrator vs. registered participant)
- Operations are only valid in the phase they belong to
- The declared winner is a deterministic function of recorded votes
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
