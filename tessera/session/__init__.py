"""
Session Module - Manages ephemeral game sessions.

A session represents one game instance:
- Created with a seed
- Holds the current game state snapshot
- Applies actions in arrival order through its GameLoop
- Destroyed when the caller ends it

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, Session, SessionState
from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GameLoop",
    "LoopState",
    "TurnResult",
]
