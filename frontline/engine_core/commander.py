"""
Commander effects.

Each CommanderEffect.type maps to a handler registered with
@commander_effect. A handler first reports whether it can apply at all;
a False means the useCommander action is rejected and nothing (cooldown
included) changes. Unknown effect types apply nothing but still consume
the cooldown.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable
import logging

from . import board
from .combat import heal_overall_morale
from .state import Commander, GameState, PlayerState
from .units import BoardRow, create_unit_from_card

logger = logging.getLogger(__name__)


@dataclass
class CommanderContext:
    state: GameState
    player: PlayerState
    opponent: PlayerState
    value: Any


@dataclass
class CommanderEffectHandler:
    apply: Callable[[CommanderContext], None]
    can_apply: Callable[[CommanderContext], bool] | None = None


_EFFECTS: dict[str, CommanderEffectHandler] = {}


def commander_effect(effect_type: str, can_apply: Callable[[CommanderContext], bool] | None = None):
    """Decorator to register a commander effect handler."""
    def decorator(fn: Callable[[CommanderContext], None]):
        _EFFECTS[effect_type] = CommanderEffectHandler(apply=fn, can_apply=can_apply)
        return fn
    return decorator


def get_commander_effect(effect_type: str) -> CommanderEffectHandler | None:
    return _EFFECTS.get(effect_type)


def can_use_commander(player: PlayerState, state: GameState) -> str | None:
    """
    Check whether player may use their commander now.

    Returns an error message, or None if the ability can be used.
    """
    if player.has_used_commander_this_turn:
        return "Commander ability already used this turn"
    commander = player.commander
    if not commander.is_ready:
        return f"{commander.ability.name} is on cooldown ({commander.ability.current_cooldown})"

    handler = get_commander_effect(commander.ability.effect.type)
    if handler is not None and handler.can_apply is not None:
        if not handler.can_apply(_context(state, player, commander)):
            return f"{commander.ability.name} has no valid target"
    return None


def apply_commander_effect(state: GameState, player: PlayerState) -> None:
    """Apply the commander's effect. Cooldown bookkeeping is the caller's."""
    commander = player.commander
    effect_type = commander.ability.effect.type
    handler = get_commander_effect(effect_type)
    if handler is None:
        logger.warning(
            f"Unknown commander effect '{effect_type}' on {commander.name}; no effect applied"
        )
        return
    handler.apply(_context(state, player, commander))


def _context(state: GameState, player: PlayerState, commander: Commander) -> CommanderContext:
    return CommanderContext(
        state=state,
        player=player,
        opponent=state.other_player(player),
        value=commander.ability.effect.value,
    )


def _int_value(value: Any, key: str | None = None, default: int = 0) -> int:
    if key is not None:
        value = value.get(key, default) if isinstance(value, dict) else default
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return default


# =============================================================================
# Handlers
# =============================================================================

@commander_effect("healMorale")
def _heal_morale(ctx: CommanderContext) -> None:
    heal_overall_morale(ctx.player, _int_value(ctx.value))


@commander_effect("damageAll")
def _damage_all(ctx: CommanderContext) -> None:
    amount = _int_value(ctx.value)
    for unit in ctx.opponent.front_line_units():
        unit.current_health -= amount


@commander_effect("damage_all_enemies")
def _damage_all_enemies(ctx: CommanderContext) -> None:
    health_damage = _int_value(ctx.value, "healthDamage")
    morale_damage = _int_value(ctx.value, "moraleDamage")
    for unit in ctx.opponent.front_line_units():
        unit.current_health -= health_damage
        unit.current_morale -= morale_damage


@commander_effect("rally")
def _rally(ctx: CommanderContext) -> None:
    """Restore army morale; friendly front-line units grow their morale."""
    heal_overall_morale(ctx.player, _int_value(ctx.value, "armyMoraleRestore"))
    boost = _int_value(ctx.value, "unitMoraleBoost")
    for unit in ctx.player.front_line_units():
        unit.base_morale += boost
        unit.current_morale += boost


def _can_resurrect(ctx: CommanderContext) -> bool:
    return bool(ctx.player.discard_pile) and board.can_play_unit_to_reinforcement_row(ctx.player)


@commander_effect("resurrect_last", can_apply=_can_resurrect)
def _resurrect_last(ctx: CommanderContext) -> None:
    """Return the most recently discarded card as a fresh reserve unit."""
    card = ctx.player.discard_pile.pop()
    unit = create_unit_from_card(card, ctx.player.player_id, ctx.state.alloc_unit_id())
    board.play_unit_to_reinforcement_row(ctx.player, unit)
    logger.debug(f"{ctx.player.name} resurrected {unit.name} into the {BoardRow.REINFORCEMENT.value} row")
