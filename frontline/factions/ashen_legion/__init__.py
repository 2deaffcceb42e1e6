"""
Ashen Legion - A faction that fights on past death.

Units trade health for morale, feed on fallen allies and, on their
strongest cards, return from the discard pile. Commanders resurrect,
scorch the enemy line, or rally the army.

This module contains:
- The 28-card pool (common through legendary)
- Three commanders
"""

from .cards import (
    ASHEN_LEGION_CARDS,
    ASHEN_LEGION_CATALOG,
    FACTION_NAME,
    get_card_by_id,
    get_cards_by_rarity,
)
from .commanders import (
    ASHEN_LEGION_COMMANDERS,
    ASHEN_LEGION_COMMANDER_CATALOG,
    get_commander_by_id,
)

__all__ = [
    "ASHEN_LEGION_CARDS",
    "ASHEN_LEGION_CATALOG",
    "FACTION_NAME",
    "get_card_by_id",
    "get_cards_by_rarity",
    "ASHEN_LEGION_COMMANDERS",
    "ASHEN_LEGION_COMMANDER_CATALOG",
    "get_commander_by_id",
]
