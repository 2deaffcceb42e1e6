"""Ashen Legion commanders."""

from __future__ import annotations

from ...engine_core.catalog import CommanderCatalog
from ...engine_core.state import Commander, CommanderAbility, CommanderEffect
from .cards import FACTION_NAME


ASHEN_LEGION_COMMANDERS: list[Commander] = [
    Commander(
        id="cmd-al-001",
        name="General Pyrrhus the Undying",
        faction=FACTION_NAME,
        ability=CommanderAbility(
            id="cmd-al-001-ability",
            name="Phoenix Resurrection",
            description="Resurrect the last destroyed friendly unit with full Health/Morale",
            cooldown=3,
            effect=CommanderEffect(
                type="resurrect_last",
                value={"fullStats": True, "targetRow": "reinforcement"},
            ),
        ),
    ),
    Commander(
        id="cmd-al-002",
        name="Marshal Cindara",
        faction=FACTION_NAME,
        ability=CommanderAbility(
            id="cmd-al-002-ability",
            name="Ash Storm",
            description="All enemy units take 2 Morale damage and lose 1 Health",
            cooldown=4,
            effect=CommanderEffect(
                type="damage_all_enemies",
                value={"moraleDamage": 2, "healthDamage": 1},
            ),
        ),
    ),
    Commander(
        id="cmd-al-003",
        name="Lord Ignus the Eternal",
        faction=FACTION_NAME,
        ability=CommanderAbility(
            id="cmd-al-003-ability",
            name="Rally from Ashes",
            description="Restore 5 Overall Army Morale and all units gain +2 Morale",
            cooldown=5,
            effect=CommanderEffect(
                type="rally",
                value={"armyMoraleRestore": 5, "unitMoraleBoost": 2},
            ),
        ),
    ),
]


ASHEN_LEGION_COMMANDER_CATALOG = CommanderCatalog(ASHEN_LEGION_COMMANDERS)


def get_commander_by_id(commander_id: str) -> Commander | None:
    return ASHEN_LEGION_COMMANDER_CATALOG.get(commander_id)
