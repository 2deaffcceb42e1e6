"""Faction registry: faction slug -> card and commander catalogs."""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.catalog import CardCatalog, CommanderCatalog
from .ashen_legion import (
    ASHEN_LEGION_CATALOG,
    ASHEN_LEGION_COMMANDER_CATALOG,
    FACTION_NAME as ASHEN_LEGION_NAME,
)


@dataclass(frozen=True)
class Faction:
    slug: str
    name: str
    cards: CardCatalog
    commanders: CommanderCatalog


FACTIONS: dict[str, Faction] = {
    "ashen_legion": Faction(
        slug="ashen_legion",
        name=ASHEN_LEGION_NAME,
        cards=ASHEN_LEGION_CATALOG,
        commanders=ASHEN_LEGION_COMMANDER_CATALOG,
    ),
}


def get_faction(slug: str) -> Faction:
    faction = FACTIONS.get(slug)
    if faction is None:
        raise ValueError(f"Unknown faction: {slug}")
    return faction


def default_catalog() -> CardCatalog:
    """Every faction's cards in one catalog."""
    catalog = CardCatalog()
    for faction in FACTIONS.values():
        catalog = catalog.merged(faction.cards)
    return catalog
