"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine actions
2. Manages sessions and their game loops
3. Formats responses for the view

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    # Requests
    CreateGameRequest,
    NewGameRequest,
    StoreSelectionRequest,
    PoolSelectionRequest,
    PlacementRequest,
    # Responses
    ActionInfo,
    ActionResponse,
    GameStateResponse,
    LegalActionsResponse,
    ErrorResponse,
    # Enums
    ErrorCode,
)
from ..session import SessionManager, GameLoop, TurnResult


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        state = service.create_game(CreateGameRequest(seed=42))
        response = service.select_from_store(state.game_id, request)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    # Game loops per session
    _game_loops: dict[str, GameLoop] = field(default_factory=dict)

    def create_game(self, request: CreateGameRequest) -> GameStateResponse:
        """Create a new game session."""
        players = [
            (f"player_{i}", name)
            for i, name in enumerate(request.player_names, start=1)
        ]
        session = self.session_manager.create_session(seed=request.seed, players=players)
        self._game_loops[session.session_id] = GameLoop(session)
        return GameStateResponse.from_state(session.game_state)

    def get_game(self, game_id: str) -> GameStateResponse | ErrorResponse:
        """Get the current state snapshot."""
        loop = self._game_loops.get(game_id)
        if not loop:
            return self._not_found(game_id)
        return GameStateResponse.from_state(loop.session.game_state)

    def new_game(self, game_id: str, request: NewGameRequest) -> ActionResponse | ErrorResponse:
        loop = self._game_loops.get(game_id)
        if not loop:
            return self._not_found(game_id)
        return self._to_response(loop.new_game(request.seed))

    def select_from_store(
        self, game_id: str, request: StoreSelectionRequest
    ) -> ActionResponse | ErrorResponse:
        loop = self._game_loops.get(game_id)
        if not loop:
            return self._not_found(game_id)
        return self._to_response(
            loop.select_from_store(request.player_id, request.store_index, request.tile)
        )

    def select_from_pool(
        self, game_id: str, request: PoolSelectionRequest
    ) -> ActionResponse | ErrorResponse:
        loop = self._game_loops.get(game_id)
        if not loop:
            return self._not_found(game_id)
        return self._to_response(loop.select_from_pool(request.player_id, request.tile))

    def place_from_held(
        self, game_id: str, request: PlacementRequest
    ) -> ActionResponse | ErrorResponse:
        loop = self._game_loops.get(game_id)
        if not loop:
            return self._not_found(game_id)
        return self._to_response(loop.place_from_held(request.player_id, request.row_index))

    def legal_actions(self, game_id: str) -> LegalActionsResponse | ErrorResponse:
        loop = self._game_loops.get(game_id)
        if not loop:
            return self._not_found(game_id)
        return LegalActionsResponse(
            game_id=game_id,
            player_turn=loop.session.game_state.player_turn,
            actions=[ActionInfo.from_action(a) for a in loop.legal_actions()],
        )

    def end_game(self, game_id: str) -> bool:
        """End a game session and release its state."""
        self._game_loops.pop(game_id, None)
        return self.session_manager.end_session(game_id)

    def list_games(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    def _to_response(self, result: TurnResult) -> ActionResponse:
        return ActionResponse(
            success=result.success,
            error=result.error,
            error_code=ErrorCode(result.error_code.value) if result.error_code else None,
            changes=result.changes,
            round_ended=result.round_ended,
            state=GameStateResponse.from_state(result.state),
        )

    def _not_found(self, game_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Game {game_id} not found",
            error_code=ErrorCode.GAME_NOT_FOUND,
        )
