"""
Special-effect stage - Tagged effects that need full game context.

Card abilities with effect type `special` carry a symbolic tag as their
value (e.g. "morale_on_death"); `draw` abilities are keyed as "draw".
Each tag may have one handler per trigger, registered with the
@special_effect decorator:

- END_OF_TURN: after the generic ability pass, acting player's front line
- ON_SELF_DEFEATED: the owning unit was just swept; a truthy return
  suppresses the attrition penalty
- ON_ALLY_DEFEATED: a friendly front-line unit was just swept

Tags without any handler are unimplemented and have no effect.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable
import logging

from .abilities import check_ability_condition
from .combat import heal_overall_morale
from .state import GameState, PlayerState, draw_cards
from .units import Ability, EffectType, Unit

logger = logging.getLogger(__name__)


class Trigger(str, Enum):
    END_OF_TURN = "end_of_turn"
    ON_SELF_DEFEATED = "on_self_defeated"
    ON_ALLY_DEFEATED = "on_ally_defeated"


@dataclass
class SpecialEffectContext:
    state: GameState
    owner: PlayerState
    opponent: PlayerState
    unit: Unit
    slot: int
    ability: Ability
    defeated: Unit | None = None  # Set for the defeat triggers


SpecialEffectHandler = Callable[[SpecialEffectContext], "bool | None"]

_HANDLERS: dict[tuple[Trigger, str], SpecialEffectHandler] = {}


def special_effect(tag: str, trigger: Trigger):
    """Decorator to register a handler for a tag at a trigger."""
    def decorator(fn: SpecialEffectHandler) -> SpecialEffectHandler:
        _HANDLERS[(trigger, tag)] = fn
        return fn
    return decorator


def get_special_handler(tag: str, trigger: Trigger) -> SpecialEffectHandler | None:
    return _HANDLERS.get((trigger, tag))


def has_special_handler(tag: str) -> bool:
    """Whether any trigger has a handler for tag."""
    return any(key[1] == tag for key in _HANDLERS)


def effect_tag(ability: Ability) -> str | None:
    """Registry key for an ability, or None if the generic pass owns it."""
    effect = ability.effect
    if effect.type == EffectType.DRAW:
        return "draw"
    if effect.type == EffectType.SPECIAL and isinstance(effect.value, str):
        return effect.value
    return None


def _unit_slot(unit: Unit) -> int:
    return unit.position.slot if unit.position is not None else -1


def _fire(
    trigger: Trigger,
    state: GameState,
    owner: PlayerState,
    unit: Unit,
    slot: int,
    defeated: Unit | None = None,
) -> bool:
    """Run unit's handlers for trigger; True if any returned truthy."""
    suppressed = False
    for ability in unit.abilities:
        tag = effect_tag(ability)
        if tag is None:
            continue

        handler = get_special_handler(tag, trigger)
        if handler is None:
            if trigger == Trigger.END_OF_TURN and not has_special_handler(tag):
                logger.debug(f"Special effect '{tag}' on {unit.name} is not implemented")
            continue

        if not check_ability_condition(ability, unit, owner, slot):
            continue

        context = SpecialEffectContext(
            state=state,
            owner=owner,
            opponent=state.other_player(owner),
            unit=unit,
            slot=slot,
            ability=ability,
            defeated=defeated,
        )
        if handler(context):
            suppressed = True
    return suppressed


def run_end_of_turn_effects(state: GameState, player: PlayerState) -> None:
    for slot, unit in enumerate(player.front_line):
        if unit is not None:
            _fire(Trigger.END_OF_TURN, state, player, unit, slot)


def run_self_defeated_effects(state: GameState, owner: PlayerState, unit: Unit) -> bool:
    """Returns True if the attrition penalty for unit is suppressed."""
    return _fire(Trigger.ON_SELF_DEFEATED, state, owner, unit, _unit_slot(unit), defeated=unit)


def run_ally_defeated_effects(state: GameState, owner: PlayerState, defeated: Unit) -> None:
    for slot, unit in enumerate(owner.front_line):
        if unit is not None:
            _fire(Trigger.ON_ALLY_DEFEATED, state, owner, unit, slot, defeated=defeated)


# =============================================================================
# Handlers
# =============================================================================

@special_effect("self_damage", Trigger.END_OF_TURN)
def _self_damage(ctx: SpecialEffectContext) -> None:
    """Take 1 Health damage at the end of your turn."""
    ctx.unit.current_health -= 1


@special_effect("no_morale_loss", Trigger.ON_SELF_DEFEATED)
def _no_morale_loss(ctx: SpecialEffectContext) -> bool:
    """Army morale is not reduced when this unit is defeated."""
    return True


@special_effect("morale_on_death", Trigger.ON_ALLY_DEFEATED)
def _morale_on_death(ctx: SpecialEffectContext) -> None:
    """Restore 2 army morale when an ally is defeated."""
    heal_overall_morale(ctx.owner, 2)


@special_effect("draw", Trigger.ON_ALLY_DEFEATED)
def _draw_on_ally_defeated(ctx: SpecialEffectContext) -> None:
    """Draw cards when an ally is defeated."""
    value = ctx.ability.effect.value
    if isinstance(value, int) and value > 0:
        draw_cards(ctx.owner, value, ctx.state.shuffle)
