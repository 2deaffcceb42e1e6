"""
FastAPI Application - REST API for match clients.

Endpoints:
    POST   /api/v1/matches                 Create a match
    GET    /api/v1/matches                 List active matches
    GET    /api/v1/matches/{id}            Get match state (?viewer= redacts)
    DELETE /api/v1/matches/{id}            End a match
    POST   /api/v1/matches/{id}/actions    Submit a GameAction
    GET    /api/v1/cards                   All faction catalogs
    GET    /api/v1/cards/{faction}         One faction's catalog
    GET    /health                         Health check

Rejected actions return 400 with an ErrorResponse carrying the engine's
error code. Unknown matches and factions return 404.

All requests and responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union
import logging
import os

# Environment configuration
FRONTLINE_ENV = os.getenv("FRONTLINE_ENV", "development")
FRONTLINE_LOG_LEVEL = os.getenv("FRONTLINE_LOG_LEVEL", "INFO")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

VERSION = "1.0.0"


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    from fastapi import FastAPI, Query
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.responses import JSONResponse

    from .service import APIService
    from .schemas import (
        # Request models
        ActionRequest,
        CreateMatchRequest,
        # Response models
        ActionResponse,
        CatalogListResponse,
        CatalogResponse,
        EndMatchResponse,
        ErrorResponse,
        HealthResponse,
        MatchListResponse,
        MatchResponse,
        # Enums
        ErrorCode,
    )

    logging.basicConfig(
        level=FRONTLINE_LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Frontline Engine API",
        description="""
Rules engine for a two-player tactical card game.

## Turn Flow

1. `POST /matches` creates a match and deals starting hands
2. The current player submits actions to `POST /matches/{id}/actions`
3. `endTurn` resolves abilities, combat and cleanup, then passes the turn
4. The match finishes when an army's morale reaches 0 or a player surrenders

## Error Codes

| Code | Description |
|------|-------------|
| `GAME_NOT_ACTIVE` | Match already finished |
| `NOT_YOUR_TURN` | Submitted by the non-current player |
| `UNKNOWN_ACTION` | Action type not recognized |
| `INVALID_PAYLOAD` | Action data malformed |
| `ILLEGAL_ACTION` | Rule precondition not met |
| `HANDLER_ERROR` | Engine fault, state rolled back |
| `MATCH_NOT_FOUND` | Match does not exist |
| `UNKNOWN_FACTION` | Faction slug not registered |
        """,
        version=VERSION,
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

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def error_from(response: ErrorResponse) -> JSONResponse:
        not_found = {ErrorCode.MATCH_NOT_FOUND, ErrorCode.UNKNOWN_FACTION}
        return make_error_response(
            response.error_code,
            response.error,
            status_code=404 if response.error_code in not_found else 400,
            details=response.details,
        )

    # =========================================================================
    # Match Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/matches",
        response_model=MatchResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid commander, deck size or players"},
            404: {"model": ErrorResponse, "description": "Unknown faction"},
        },
        tags=["Matches"],
        summary="Create a new match",
    )
    async def create_match(request: CreateMatchRequest) -> Union[MatchResponse, JSONResponse]:
        """
        Create a new match.

        Decks are built from the faction's card pool and shuffled with
        `random_seed` when given, so the whole match is reproducible.
        """
        response = api_service.create_match(request)
        if isinstance(response, ErrorResponse):
            return error_from(response)
        return response

    @app.get(
        "/api/v1/matches",
        response_model=MatchListResponse,
        tags=["Matches"],
        summary="List active matches",
    )
    async def list_matches() -> MatchListResponse:
        """List all active match IDs."""
        matches = api_service.list_matches()
        return MatchListResponse(matches=matches, count=len(matches))

    @app.get(
        "/api/v1/matches/{match_id}",
        response_model=MatchResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Matches"],
        summary="Get match state",
    )
    async def get_match(
        match_id: str,
        viewer: Annotated[
            Optional[str],
            Query(description="Player id; hides the opponent's hand, deck and face-down units"),
        ] = None,
    ) -> Union[MatchResponse, JSONResponse]:
        """Get the current state of a match."""
        response = api_service.get_match(match_id, viewer)
        if isinstance(response, ErrorResponse):
            return error_from(response)
        return response

    @app.delete(
        "/api/v1/matches/{match_id}",
        response_model=EndMatchResponse,
        tags=["Matches"],
        summary="End a match",
    )
    async def end_match(match_id: str) -> EndMatchResponse:
        """End a match and release its state."""
        success = api_service.end_match(match_id)
        return EndMatchResponse(success=success, match_id=match_id)

    @app.post(
        "/api/v1/matches/{match_id}/actions",
        response_model=ActionResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Action rejected"},
            404: {"model": ErrorResponse, "description": "Match not found"},
        },
        tags=["Matches"],
        summary="Submit an action",
    )
    async def submit_action(
        match_id: str,
        request: ActionRequest,
    ) -> Union[ActionResponse, JSONResponse]:
        """
        Submit a GameAction for the current player.

        The response carries the acting player's view of the new state.
        """
        response = api_service.submit_action(match_id, request)
        if isinstance(response, ErrorResponse):
            return error_from(response)
        return response

    # =========================================================================
    # Catalog Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/cards",
        response_model=CatalogListResponse,
        tags=["Catalog"],
        summary="List every faction's cards and commanders",
    )
    async def list_catalogs() -> CatalogListResponse:
        return api_service.list_catalogs()

    @app.get(
        "/api/v1/cards/{faction}",
        response_model=CatalogResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Catalog"],
        summary="Get one faction's cards and commanders",
    )
    async def get_catalog(faction: str) -> Union[CatalogResponse, JSONResponse]:
        response = api_service.get_catalog(faction)
        if isinstance(response, ErrorResponse):
            return error_from(response)
        return response

    # =========================================================================
    # System Endpoints
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="frontline-engine",
            version=VERSION,
        )

    @app.get("/", tags=["System"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Frontline Engine API",
            "version": VERSION,
            "environment": FRONTLINE_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


# For running directly: uvicorn frontline.api.app:app
app = create_app()
