"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through:
- Created when a client starts a game
- Holds the current game state and the reducer that advances it
- Serializes inputs so each transition is applied whole
- Destroyed when the client ends it

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, Session, SessionState

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
]
