"""
Engine errors.

Engine functions raise these; the reducer turns them into failed
ActionResults that carry the unchanged state. None of them is fatal.
"""

from __future__ import annotations
from enum import Enum


class ErrorCode(Enum):
    """Structured error codes reported to callers."""
    INVALID_SELECTION = "INVALID_SELECTION"
    INVALID_PLACEMENT = "INVALID_PLACEMENT"
    NOT_PLAYERS_TURN = "NOT_PLAYERS_TURN"
    GAME_OVER = "GAME_OVER"
    UNKNOWN_ACTION = "UNKNOWN_ACTION"


class EngineError(Exception):
    """Base class for rejected actions."""
    code: ErrorCode = ErrorCode.UNKNOWN_ACTION


class InvalidSelection(EngineError):
    """Store, tile type or pool selection not available."""
    code = ErrorCode.INVALID_SELECTION


class InvalidPlacement(EngineError):
    """Held tiles cannot go to the requested row, or nothing is held."""
    code = ErrorCode.INVALID_PLACEMENT


class NotPlayersTurn(EngineError):
    """Action issued by a player other than the one whose turn it is."""
    code = ErrorCode.NOT_PLAYERS_TURN


class GameOverError(EngineError):
    """Only a new game can be started once the game is over."""
    code = ErrorCode.GAME_OVER
