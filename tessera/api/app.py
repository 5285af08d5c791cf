"""
FastAPI Application - REST API for the presentation layer.

Endpoints:
    POST   /api/v1/games                          Create a game
    GET    /api/v1/games                          List active games
    GET    /api/v1/games/{id}                     Get game state
    DELETE /api/v1/games/{id}                     End a game
    POST   /api/v1/games/{id}/new-game            Re-initialize the game
    POST   /api/v1/games/{id}/store-selection     Draft from a store
    POST   /api/v1/games/{id}/pool-selection      Draft from the pool
    POST   /api/v1/games/{id}/placement           Place held tiles
    GET    /api/v1/games/{id}/legal-actions       Legal actions for the current player

A rejected action answers 409 with the unchanged state and an error code.
All responses are JSON with explicit Pydantic schemas.
"""

from typing import Union
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..logging_setup import setup_logging
from ..session import SessionManager
from .schemas import (
    # Request models
    CreateGameRequest,
    NewGameRequest,
    StoreSelectionRequest,
    PoolSelectionRequest,
    PlacementRequest,
    # Response models
    ActionResponse,
    GameStateResponse,
    LegalActionsResponse,
    GameListResponse,
    EndGameResponse,
    ErrorResponse,
    HealthResponse,
)
from .service import APIService

# Environment configuration
TESSERA_ENV = os.getenv("TESSERA_ENV", "development")
TESSERA_DEFAULT_SEED = os.getenv("TESSERA_DEFAULT_SEED")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")


def create_app(service: APIService | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    setup_logging()

    app = FastAPI(
        title="Tessera Engine API",
        description="Turn-based tile-drafting game engine for two players.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    default_seed = int(TESSERA_DEFAULT_SEED) if TESSERA_DEFAULT_SEED else None
    api_service = service or APIService(session_manager=SessionManager(default_seed=default_seed))

    # =========================================================================
    # Response helpers
    # =========================================================================

    def not_found(response: ErrorResponse) -> JSONResponse:
        return JSONResponse(status_code=404, content=response.model_dump(mode="json"))

    def action_response(
        response: Union[ActionResponse, ErrorResponse],
    ) -> Union[ActionResponse, JSONResponse]:
        if isinstance(response, ErrorResponse):
            return not_found(response)
        if not response.success:
            return JSONResponse(status_code=409, content=response.model_dump(mode="json"))
        return response

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games",
        response_model=GameStateResponse,
        status_code=201,
        tags=["Games"],
        summary="Create a new game",
    )
    async def create_game(body: CreateGameRequest) -> GameStateResponse:
        """Create a game session. The same seed always yields the same opening."""
        return api_service.create_game(body)

    @app.get(
        "/api/v1/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List active games",
    )
    async def list_games() -> GameListResponse:
        games = api_service.list_games()
        return GameListResponse(games=games, count=len(games))

    @app.get(
        "/api/v1/games/{game_id}",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get game state",
    )
    async def get_game(game_id: str) -> Union[GameStateResponse, JSONResponse]:
        """Get the complete current game state for rendering."""
        response = api_service.get_game(game_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    @app.delete(
        "/api/v1/games/{game_id}",
        response_model=EndGameResponse,
        tags=["Games"],
        summary="End a game",
    )
    async def end_game(game_id: str) -> EndGameResponse:
        success = api_service.end_game(game_id)
        return EndGameResponse(success=success, game_id=game_id)

    @app.get(
        "/api/v1/games/{game_id}/legal-actions",
        response_model=LegalActionsResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Legal actions for the current player",
    )
    async def get_legal_actions(game_id: str) -> Union[LegalActionsResponse, JSONResponse]:
        response = api_service.legal_actions(game_id)
        if isinstance(response, ErrorResponse):
            return not_found(response)
        return response

    # =========================================================================
    # Action Endpoints
    # =========================================================================

    action_responses = {
        404: {"model": ErrorResponse, "description": "Game not found"},
        409: {"model": ActionResponse, "description": "Action rejected, state unchanged"},
    }

    @app.post(
        "/api/v1/games/{game_id}/new-game",
        response_model=ActionResponse,
        responses=action_responses,
        tags=["Actions"],
        summary="Start a new game in the same session",
    )
    async def new_game(game_id: str, body: NewGameRequest) -> Union[ActionResponse, JSONResponse]:
        return action_response(api_service.new_game(game_id, body))

    @app.post(
        "/api/v1/games/{game_id}/store-selection",
        response_model=ActionResponse,
        responses=action_responses,
        tags=["Actions"],
        summary="Take every tile of one type from a store",
    )
    async def select_from_store(
        game_id: str, body: StoreSelectionRequest
    ) -> Union[ActionResponse, JSONResponse]:
        return action_response(api_service.select_from_store(game_id, body))

    @app.post(
        "/api/v1/games/{game_id}/pool-selection",
        response_model=ActionResponse,
        responses=action_responses,
        tags=["Actions"],
        summary="Take every tile of one type from the pool",
    )
    async def select_from_pool(
        game_id: str, body: PoolSelectionRequest
    ) -> Union[ActionResponse, JSONResponse]:
        return action_response(api_service.select_from_pool(game_id, body))

    @app.post(
        "/api/v1/games/{game_id}/placement",
        response_model=ActionResponse,
        responses=action_responses,
        tags=["Actions"],
        summary="Place held tiles on a staging row or the penalty line",
    )
    async def place_from_held(
        game_id: str, body: PlacementRequest
    ) -> Union[ActionResponse, JSONResponse]:
        return action_response(api_service.place_from_held(game_id, body))

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(version=__version__)

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Tessera Engine API",
            "version": __version__,
            "environment": TESSERA_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn tessera.api.app:app
app = create_app()
