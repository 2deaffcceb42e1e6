"""
API Module - HTTP interface to the engine.

Exposes the engine via REST API. A client:
1. Creates a match
2. Reads the state (redacted for its own player)
3. Submits actions for the current player
4. Browses faction catalogs

All state is in memory. No persistent user accounts required.
"""

from .schemas import (
    # Requests
    ActionRequest,
    CreateMatchRequest,
    # Responses
    ActionResponse,
    CatalogResponse,
    ErrorResponse,
    MatchResponse,
    # Snapshots
    CardSnapshot,
    GameStateSnapshot,
    PlayerSnapshot,
    UnitSnapshot,
    # Enums
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "ActionRequest",
    "CreateMatchRequest",
    # Responses
    "ActionResponse",
    "CatalogResponse",
    "ErrorResponse",
    "MatchResponse",
    # Snapshots
    "CardSnapshot",
    "GameStateSnapshot",
    "PlayerSnapshot",
    "UnitSnapshot",
    # Enums
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
