"""
Action System - Actions, payloads, and results.

Every player input is a GameAction submitted to the GameManager:
1. Turn actions (play, deploy, commander, draw)
2. Turn end (runs the full end-of-turn resolution)
3. Match actions (mulligan, surrender)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import time

from .units import coerce_enum


class ActionType(Enum):
    """Types of actions in the system. Values are the wire strings."""
    PLAY_UNIT = "playUnit"
    DEPLOY_UNIT = "deployUnit"
    USE_COMMANDER = "useCommander"
    DRAW_CARD = "drawCard"
    END_TURN = "endTurn"
    SURRENDER = "surrender"
    MULLIGAN = "mulligan"


# Rejection codes carried by ActionResult.error_code
GAME_NOT_ACTIVE = "GAME_NOT_ACTIVE"
NOT_YOUR_TURN = "NOT_YOUR_TURN"
UNKNOWN_ACTION = "UNKNOWN_ACTION"
INVALID_PAYLOAD = "INVALID_PAYLOAD"
ILLEGAL_ACTION = "ILLEGAL_ACTION"
HANDLER_ERROR = "HANDLER_ERROR"


@dataclass
class GameAction:
    """
    A complete action to be applied to the game state.

    data is the action-specific payload in wire form:
    - playUnit: {"cardId": str}
    - deployUnit: {"reinforcementSlot": int, "frontLineSlot": int | None}
    - everything else: {}

    type is kept as a raw string when it is not a known ActionType so the
    manager can reject it.
    """
    type: ActionType | str
    player_id: str
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)

    @classmethod
    def play_unit(cls, player_id: str, card_id: str) -> GameAction:
        """Factory for playing a card from hand into reserve."""
        return cls(ActionType.PLAY_UNIT, player_id, {"cardId": card_id})

    @classmethod
    def deploy_unit(
        cls,
        player_id: str,
        reinforcement_slot: int,
        front_line_slot: int | None = None,
    ) -> GameAction:
        """Factory for moving a reserve unit to the front line."""
        data: dict[str, Any] = {"reinforcementSlot": reinforcement_slot}
        if front_line_slot is not None:
            data["frontLineSlot"] = front_line_slot
        return cls(ActionType.DEPLOY_UNIT, player_id, data)

    @classmethod
    def use_commander(cls, player_id: str) -> GameAction:
        return cls(ActionType.USE_COMMANDER, player_id)

    @classmethod
    def draw_card(cls, player_id: str) -> GameAction:
        return cls(ActionType.DRAW_CARD, player_id)

    @classmethod
    def end_turn(cls, player_id: str) -> GameAction:
        return cls(ActionType.END_TURN, player_id)

    @classmethod
    def surrender(cls, player_id: str) -> GameAction:
        return cls(ActionType.SURRENDER, player_id)

    @classmethod
    def mulligan(cls, player_id: str) -> GameAction:
        return cls(ActionType.MULLIGAN, player_id)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> GameAction:
        """Build from the camelCase wire form ({type, playerId, data, timestamp})."""
        player_id = raw.get("playerId", raw.get("player_id", ""))
        timestamp = raw.get("timestamp")
        return cls(
            type=coerce_enum(ActionType, raw.get("type", "")),
            player_id=player_id,
            data=dict(raw.get("data") or {}),
            timestamp=timestamp if timestamp is not None else time.time(),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value if isinstance(self.type, ActionType) else self.type,
            "playerId": self.player_id,
            "data": dict(self.data),
            "timestamp": self.timestamp,
        }


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - The mutated state (if succeeded)
    - Error message and code (if rejected)
    - Human-readable changes for logs and UI
    """
    success: bool
    state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None
    changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def ok(cls, state: Any, changes: list[str] | None = None) -> ActionResult:
        """Create a success result carrying the mutated state."""
        return cls(success=True, state=state, changes=changes or [])
