"""
Engine Core - Deterministic rules engine for Frontline matches.

The engine is the runtime that:
1. Manages GameState (players, board, commanders)
2. Generates legal actions
3. Applies actions via the GameManager
4. Resolves abilities, special effects and combat at end of turn
"""

from .units import Ability, Card, DamageType, Unit, create_unit_from_card
from .state import Commander, GamePhase, GameState, GameStatus, PlayerState
from .action import ActionResult, ActionType, GameAction
from .catalog import CardCatalog, CommanderCatalog
from .constants import DEFAULT_RULES, GameRules
from .manager import GameManager
from .action_generator import legal_actions

__all__ = [
    "Ability",
    "Card",
    "DamageType",
    "Unit",
    "create_unit_from_card",
    "Commander",
    "GamePhase",
    "GameState",
    "GameStatus",
    "PlayerState",
    "ActionResult",
    "ActionType",
    "GameAction",
    "CardCatalog",
    "CommanderCatalog",
    "DEFAULT_RULES",
    "GameRules",
    "GameManager",
    "legal_actions",
]
