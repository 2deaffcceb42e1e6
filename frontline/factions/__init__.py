"""
Factions module - Static card and commander content.

Each faction has its own subpackage with:
- Card definitions
- Commander definitions

The registry maps a faction slug to its catalogs; setup builds matches
from them.
"""

from .registry import FACTIONS, Faction, default_catalog, get_faction
from .setup import setup_match

__all__ = [
    "Faction",
    "FACTIONS",
    "get_faction",
    "default_catalog",
    "setup_match",
]
