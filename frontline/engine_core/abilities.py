"""
Ability Processor - Generic end-of-turn ability pass.

Fires each front-line unit's abilities whose positional condition holds,
then every reinforcement-row unit's reinforcement abilities. Only numeric
buff/damage/heal/moraleBoost effects are resolved here; draw and special
effects need full game context and are handled by special_effects.
"""

from __future__ import annotations

from . import board
from .combat import heal_overall_morale
from .state import PlayerState
from .units import (
    Ability,
    AbilityType,
    BoardRow,
    ConditionType,
    EffectTarget,
    EffectType,
    Unit,
)


def process_unit_abilities(player: PlayerState, opponent: PlayerState) -> None:
    for slot, unit in enumerate(player.front_line):
        if unit is None:
            continue
        for ability in unit.abilities:
            if check_ability_condition(ability, unit, player, slot):
                apply_ability_effect(ability, unit, player, opponent, slot)

    for slot, unit in enumerate(player.reinforcement_row):
        if unit is None:
            continue
        for ability in unit.abilities:
            if ability.type == AbilityType.REINFORCEMENT:
                apply_ability_effect(ability, unit, player, opponent, slot)


def check_ability_condition(
    ability: Ability,
    unit: Unit,
    player: PlayerState,
    slot: int,
) -> bool:
    """Whether a front-line unit's ability fires from its slot."""
    if ability.type == AbilityType.CENTER:
        return board.is_in_center_position(slot)

    if ability.type == AbilityType.FLANK:
        return board.is_in_flank_position(slot)

    if ability.type == AbilityType.SYNERGY:
        return any(
            _synergy_matches(ability, adjacent)
            for adjacent in board.get_adjacent_units(player, slot)
        )

    if ability.type == AbilityType.PASSIVE:
        return unit.position is not None and unit.position.row == BoardRow.FRONT_LINE

    if ability.type == AbilityType.REINFORCEMENT:
        return unit.position is not None and unit.position.row == BoardRow.REINFORCEMENT

    # Unrecognized ability types fire unconditionally
    return True


def _synergy_matches(ability: Ability, adjacent: Unit) -> bool:
    if ability.condition is None:
        return False
    if ability.condition.type == ConditionType.UNIT_TYPE:
        return adjacent.name == ability.condition.value
    return True


def get_targets(
    target: EffectTarget,
    unit: Unit,
    player: PlayerState,
    opponent: PlayerState | None,
    slot: int,
) -> list[Unit]:
    """Resolve a target selector to units. `player` targets no units."""
    if target == EffectTarget.SELF:
        return [unit]
    if target == EffectTarget.ADJACENT:
        return board.get_adjacent_units(player, slot)
    if target == EffectTarget.ALL_FRIENDLY:
        return player.front_line_units()
    if target == EffectTarget.ALL_ENEMY:
        return opponent.front_line_units() if opponent else []
    if target == EffectTarget.ENEMY:
        if opponent is None or not 0 <= slot < len(opponent.front_line):
            return []
        enemy = opponent.front_line[slot]
        return [enemy] if enemy is not None else []
    return []


def apply_ability_effect(
    ability: Ability,
    unit: Unit,
    player: PlayerState,
    opponent: PlayerState,
    slot: int,
) -> None:
    effect = ability.effect
    # Symbolic values are tags for the special-effect stage
    if not isinstance(effect.value, int) or isinstance(effect.value, bool):
        return
    value = effect.value

    if effect.type == EffectType.BUFF:
        # Buffs restore toward base morale and never exceed it
        for target in get_targets(effect.target, unit, player, None, slot):
            target.current_morale = min(target.current_morale + value, target.base_morale)

    elif effect.type == EffectType.DAMAGE:
        for target in get_targets(effect.target, unit, player, opponent, slot):
            target.current_health -= value

    elif effect.type == EffectType.HEAL:
        for target in get_targets(effect.target, unit, player, None, slot):
            target.current_health = min(target.current_health + value, target.base_health)

    elif effect.type == EffectType.MORALE_BOOST:
        if effect.target == EffectTarget.PLAYER:
            heal_overall_morale(player, value)
