"""
Combat Resolver - Column-wise damage and army-morale bookkeeping.

Only the current player attacks during a turn. The resolver flags
defeated units; removing them is the Board Manager's job.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .state import GameState, PlayerState
from .units import DamageType, Unit

logger = logging.getLogger(__name__)


@dataclass
class CombatResult:
    """Outcome of one column's attack."""
    attacker: Unit
    defender: Unit | None  # None: damage went to army morale
    damage: int
    damage_type: DamageType
    defeated: bool = False


def resolve_column_combat(
    attacker: PlayerState,
    defender: PlayerState,
    column: int,
) -> CombatResult | None:
    """
    Resolve the attack in one column.

    The attacking unit deals damage equal to its power. With no defending
    unit the damage hits the defending player's army morale instead.
    """
    attacking_unit = attacker.front_line[column]
    if attacking_unit is None:
        return None

    defending_unit = defender.front_line[column]
    damage = attacking_unit.power
    result = CombatResult(
        attacker=attacking_unit,
        defender=defending_unit,
        damage=damage,
        damage_type=attacking_unit.damage_type,
    )

    if defending_unit is None:
        damage_overall_morale(defender, damage)
        return result

    if attacking_unit.damage_type == DamageType.HEALTH:
        defending_unit.current_health -= damage
    elif attacking_unit.damage_type == DamageType.MORALE:
        defending_unit.current_morale -= damage
    else:
        # Remainder goes to morale so odd powers lose nothing
        half = damage // 2
        defending_unit.current_health -= half
        defending_unit.current_morale -= damage - half

    result.defeated = defending_unit.is_defeated
    return result


def resolve_all_combat(state: GameState) -> list[CombatResult]:
    """Current player attacks every column, left to right."""
    attacker = state.current_player
    defender = state.opponent

    results = []
    for column in range(len(attacker.front_line)):
        result = resolve_column_combat(attacker, defender, column)
        if result is None:
            continue
        results.append(result)
        target = result.defender.name if result.defender else defender.name
        logger.debug(
            f"Column {column}: {result.attacker.name} deals {result.damage} "
            f"{result.damage_type.value} to {target}"
            f"{' (defeated)' if result.defeated else ''}"
        )
    return results


def damage_overall_morale(player: PlayerState, amount: int) -> None:
    player.overall_army_morale = max(0, player.overall_army_morale - amount)


def heal_overall_morale(player: PlayerState, amount: int) -> None:
    player.overall_army_morale = min(
        player.overall_army_morale + amount,
        player.max_overall_army_morale,
    )


def handle_defeated_unit(player: PlayerState, unit: Unit) -> None:
    """Losing a unit costs its owner that unit's base morale."""
    damage_overall_morale(player, unit.base_morale)
