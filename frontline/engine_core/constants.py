"""
Rules constants for the Frontline engine.

Board geometry and the per-match tunables live here. GameRules bundles the
tunables a GameManager needs so a caller can run variants without touching
module globals.
"""

from __future__ import annotations
from dataclasses import dataclass


FRONT_LINE_SIZE = 5
REINFORCEMENT_ROW_SIZE = 3
MAX_DELAY = 4
STARTING_HAND_SIZE = 5
CARDS_DRAWN_PER_TURN = 1
DEFAULT_OVERALL_ARMY_MORALE = 50
MAX_DECK_SIZE = 30
MIN_DECK_SIZE = 20

# Front-line slot indices (0-indexed)
CENTER_SLOTS = (2,)
FLANK_SLOTS = (0, 4)


@dataclass(frozen=True)
class GameRules:
    """Per-match tunables."""
    starting_hand_size: int = STARTING_HAND_SIZE
    cards_drawn_per_turn: int = CARDS_DRAWN_PER_TURN
    mulligan_hand_size: int = STARTING_HAND_SIZE
    default_army_morale: int = DEFAULT_OVERALL_ARMY_MORALE


DEFAULT_RULES = GameRules()
