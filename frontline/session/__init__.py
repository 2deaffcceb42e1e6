"""
Session Module - Manages in-memory matches.

A session represents one match:
- Created when a caller starts a match
- Holds the canonical game state
- Serializes actions with a per-match lock
- Removed when ended or stale

Sessions are EPHEMERAL: no persistence to database.
"""

from .manager import MatchSession, SessionManager, SessionState

__all__ = [
    "SessionManager",
    "MatchSession",
    "SessionState",
]
