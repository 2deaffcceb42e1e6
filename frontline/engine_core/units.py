"""
Cards, abilities and units.

A Card is the static template from a faction catalog. A Unit is the live
battlefield instance created when a card is played from hand. Units refer
back to their card only by id, never by reference, so a GameState stays a
flat value that can cross a persistence or transport boundary.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, TypeVar


class DamageType(str, Enum):
    """Which resource pool a unit's combat damage hits."""
    HEALTH = "health"
    MORALE = "morale"
    BOTH = "both"


class AbilityType(str, Enum):
    """When/where an ability is eligible to fire."""
    CENTER = "center"
    FLANK = "flank"
    SYNERGY = "synergy"
    PASSIVE = "passive"
    REINFORCEMENT = "reinforcement"


class EffectType(str, Enum):
    BUFF = "buff"
    DAMAGE = "damage"
    HEAL = "heal"
    DRAW = "draw"
    MORALE_BOOST = "moraleBoost"
    SPECIAL = "special"


class EffectTarget(str, Enum):
    SELF = "self"
    ADJACENT = "adjacent"
    ENEMY = "enemy"  # Enemy unit in the same column
    ALL_FRIENDLY = "allFriendly"
    ALL_ENEMY = "allEnemy"
    PLAYER = "player"


class ConditionType(str, Enum):
    POSITION = "position"
    ADJACENCY = "adjacency"
    UNIT_TYPE = "unitType"
    ALWAYS = "always"


class BoardRow(str, Enum):
    FRONT_LINE = "frontLine"
    REINFORCEMENT = "reinforcement"


E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: Any) -> E | Any:
    """Return the enum member for value, or value unchanged if unknown."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class AbilityCondition:
    """Extra condition checked by synergy abilities."""
    type: ConditionType
    value: Any = None


@dataclass(frozen=True)
class AbilityEffect:
    """
    What an ability does once it fires.

    value is numeric for buff/damage/heal/draw/moraleBoost, and a symbolic
    tag (e.g. "morale_on_death") for special effects.
    """
    type: EffectType
    target: EffectTarget
    value: int | str
    description: str = ""


@dataclass(frozen=True)
class Ability:
    id: str
    name: str
    type: AbilityType | str  # Unknown types fire unconditionally
    effect: AbilityEffect
    condition: AbilityCondition | None = None
    description: str = ""


@dataclass(frozen=True)
class Card:
    """
    A card template from a faction catalog.

    Never mutated at runtime; hand, deck and discard pile hold these
    directly.
    """
    id: str
    name: str
    faction: str
    base_health: int
    base_morale: int
    delay: int
    damage_type: DamageType
    abilities: tuple[Ability, ...] = ()
    description: str = ""
    rarity: str = "common"


@dataclass
class BoardPosition:
    row: BoardRow
    slot: int


@dataclass
class Unit:
    """
    A live instance of a card on the battlefield.

    A unit with current_health <= 0 or current_morale <= 0 is defeated and
    is removed at the next sweep.
    """
    id: str
    card_id: str  # References Card.id in the catalog
    name: str
    base_health: int
    current_health: int
    base_morale: int
    current_morale: int
    delay: int
    damage_type: DamageType
    owner_id: str
    abilities: list[Ability] = field(default_factory=list)
    position: BoardPosition | None = None
    turns_in_reserve: int = 0
    face_down: bool = True

    @property
    def is_defeated(self) -> bool:
        return self.current_health <= 0 or self.current_morale <= 0

    @property
    def power(self) -> int:
        """Combat damage output."""
        return self.current_morale


def create_unit_from_card(card: Card, owner_id: str, unit_id: str) -> Unit:
    """Instantiate a fresh, face-down unit with its own copy of the abilities."""
    return Unit(
        id=unit_id,
        card_id=card.id,
        name=card.name,
        base_health=card.base_health,
        current_health=card.base_health,
        base_morale=card.base_morale,
        current_morale=card.base_morale,
        delay=card.delay,
        damage_type=card.damage_type,
        owner_id=owner_id,
        abilities=[replace(ability) for ability in card.abilities],
        turns_in_reserve=0,
        face_down=True,
    )


def get_unit_power(unit: Unit) -> int:
    return unit.power
