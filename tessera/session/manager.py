"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Caller creates a session → a seeded GameState is built in memory
2. During the game every action goes through the session's GameLoop
3. A new-game request re-initializes the same session
4. Ending the session drops ALL state

PERSISTENCE RULES:
- No database, no files
- Game state lives only as long as the session
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import time
import uuid

from ..engine_core.setup import new_game
from ..engine_core.state import GameState, GamePhase

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Game completed, may be restarted
    ENDED = "ended"  # Session closed


@dataclass
class Session:
    """
    An ephemeral game session.

    Holds the current canonical GameState. Actions replace it
    wholesale; the previous snapshot is never mutated.
    """
    session_id: str
    game_state: GameState
    created_at: float

    state: SessionState = SessionState.ACTIVE
    actions_applied: int = 0

    def is_active(self) -> bool:
        """Check if session is still open."""
        return self.state in {SessionState.ACTIVE, SessionState.GAME_OVER}

    def replace_state(self, game_state: GameState) -> None:
        self.game_state = game_state
        self.actions_applied += 1
        if game_state.phase == GamePhase.GAME_OVER:
            self.state = SessionState.GAME_OVER
        else:
            self.state = SessionState.ACTIVE


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with a seeded initial state
    - Track active sessions
    - Clean up ended or stale sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, default_seed: int | None = None):
        self._sessions: dict[str, Session] = {}
        self.default_seed = default_seed

    def create_session(
        self,
        seed: int | None = None,
        players: list[tuple[str, str]] | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            seed: Root seed for the game (manager default, then wall clock)
            players: (player_id, name) pairs in turn order

        Returns:
            New Session ready for the first draft
        """
        session_id = str(uuid.uuid4())
        if seed is None:
            seed = self.default_seed

        game_state = new_game(seed=seed, players=players, game_id=session_id)
        session = Session(
            session_id=session_id,
            game_state=game_state,
            created_at=time.time(),
        )
        self._sessions[session_id] = session
        logger.info("Session %s created with seed %d", session_id, game_state.initial_seed)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """End a session and drop its state. Returns False if unknown."""
        session = self._sessions.pop(session_id, None)
        if not session:
            return False
        session.state = SessionState.ENDED
        logger.info("Session %s ended after %d actions", session_id, session.actions_applied)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Drop finished sessions older than max_age.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        to_remove = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds
            and session.state == SessionState.GAME_OVER
        ]
        for session_id in to_remove:
            self.end_session(session_id)
        return len(to_remove)
