"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages match sessions
3. Builds (optionally redacted) state snapshots
4. Lists faction catalogs

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    # Requests
    ActionRequest,
    CreateMatchRequest,
    # Responses
    ActionResponse,
    CatalogListResponse,
    CatalogResponse,
    ErrorResponse,
    MatchResponse,
    # Shared
    CardSnapshot,
    CommanderSnapshot,
    GameStateSnapshot,
    # Enums
    ErrorCode,
)
from ..factions import FACTIONS, Faction
from ..session import MatchSession, SessionManager


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        # Create match
        match = service.create_match(CreateMatchRequest(player_names=["Ada", "Brock"]))

        # Submit an action
        result = service.submit_action(match.match_id, ActionRequest(
            type="endTurn", playerId=match.current_player_id,
        ))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_match(self, request: CreateMatchRequest) -> MatchResponse | ErrorResponse:
        """
        Create a new match.
        """
        if request.faction not in FACTIONS:
            return ErrorResponse(
                error=f"Unknown faction: {request.faction}",
                error_code=ErrorCode.UNKNOWN_FACTION,
            )

        try:
            session = self.session_manager.create_match(
                player_names=request.player_names,
                faction=request.faction,
                commander_ids=request.commander_ids,
                deck_size=request.deck_size,
                random_seed=request.random_seed,
            )
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)

        return self._match_response(session)

    def get_match(self, match_id: str, viewer: str | None = None) -> MatchResponse | ErrorResponse:
        """
        Get match state, redacted for viewer if given.
        """
        session = self.session_manager.get_session(match_id)
        if not session:
            return _match_not_found(match_id)
        return self._match_response(session, viewer)

    def submit_action(self, match_id: str, request: ActionRequest) -> ActionResponse | ErrorResponse:
        """
        Apply an action and return the acting player's view of the result.
        """
        result = self.session_manager.apply_action(match_id, request.to_action())
        if result is None:
            return _match_not_found(match_id)

        if not result.success:
            return ErrorResponse(
                error=result.error or "Action rejected",
                error_code=ErrorCode(result.error_code or ErrorCode.ILLEGAL_ACTION.value),
            )

        snapshot = GameStateSnapshot.from_state(result.state)
        return ActionResponse(
            match_id=match_id,
            changes=result.changes,
            game_state=snapshot.for_viewer(request.player_id),
        )

    def end_match(self, match_id: str) -> bool:
        return self.session_manager.end_session(match_id)

    def list_matches(self) -> list[str]:
        return self.session_manager.list_active_matches()

    def get_catalog(self, faction: str) -> CatalogResponse | ErrorResponse:
        source = FACTIONS.get(faction)
        if source is None:
            return ErrorResponse(
                error=f"Unknown faction: {faction}",
                error_code=ErrorCode.UNKNOWN_FACTION,
            )
        return _catalog_response(source)

    def list_catalogs(self) -> CatalogListResponse:
        return CatalogListResponse(
            factions=[_catalog_response(f) for f in FACTIONS.values()]
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _match_response(self, session: MatchSession, viewer: str | None = None) -> MatchResponse:
        with session.lock:
            snapshot = GameStateSnapshot.from_state(session.game_state)
        if viewer is not None:
            snapshot = snapshot.for_viewer(viewer)
        return MatchResponse(
            match_id=session.match_id,
            status=snapshot.status,
            current_player_id=snapshot.current_player_id,
            turn=snapshot.turn,
            winner=snapshot.winner,
            game_state=snapshot,
        )


def _match_not_found(match_id: str) -> ErrorResponse:
    return ErrorResponse(
        error=f"Match {match_id} not found",
        error_code=ErrorCode.MATCH_NOT_FOUND,
    )


def _catalog_response(faction: Faction) -> CatalogResponse:
    return CatalogResponse(
        faction=faction.slug,
        name=faction.name,
        cards=[CardSnapshot.model_validate(c) for c in faction.cards],
        commanders=[CommanderSnapshot.model_validate(c) for c in faction.commanders],
    )
