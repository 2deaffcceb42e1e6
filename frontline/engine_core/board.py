"""
Board Manager - Structural board mutations and legality checks.

Placement, adjacency, deployment, reserve timers and the defeated-unit
sweep. Knows nothing about ability or combat semantics.
"""

from __future__ import annotations
from typing import Sequence

from .constants import CENTER_SLOTS, FLANK_SLOTS, FRONT_LINE_SIZE
from .state import PlayerState
from .units import BoardPosition, BoardRow, Unit


def empty_slots(row: Sequence[Unit | None]) -> list[int]:
    return [i for i, unit in enumerate(row) if unit is None]


def find_matching_unit(player: PlayerState, card_id: str) -> int:
    """Front-line slot of the first unit with card_id, or -1."""
    for i, unit in enumerate(player.front_line):
        if unit is not None and unit.card_id == card_id:
            return i
    return -1


def is_in_center_position(slot: int) -> bool:
    return slot in CENTER_SLOTS


def is_in_flank_position(slot: int) -> bool:
    return slot in FLANK_SLOTS


def get_adjacent_units(player: PlayerState, slot: int) -> list[Unit]:
    """Front-line occupants at slot-1 and slot+1, in that order."""
    adjacent = []
    for neighbor in (slot - 1, slot + 1):
        if 0 <= neighbor < FRONT_LINE_SIZE:
            unit = player.front_line[neighbor]
            if unit is not None:
                adjacent.append(unit)
    return adjacent


# =============================================================================
# Reinforcement row
# =============================================================================

def can_play_unit_to_reinforcement_row(player: PlayerState) -> bool:
    return any(unit is None for unit in player.reinforcement_row)


def play_unit_to_reinforcement_row(player: PlayerState, unit: Unit) -> bool:
    """Place unit face down in the first free reserve slot."""
    free = empty_slots(player.reinforcement_row)
    if not free:
        return False

    slot = free[0]
    unit.position = BoardPosition(row=BoardRow.REINFORCEMENT, slot=slot)
    unit.face_down = True
    unit.turns_in_reserve = 0
    player.reinforcement_row[slot] = unit
    return True


def increment_turns_in_reserve(player: PlayerState) -> None:
    for unit in player.reinforcement_row:
        if unit is not None:
            unit.turns_in_reserve += 1


# =============================================================================
# Deployment
# =============================================================================

def can_deploy_unit(player: PlayerState, reinforcement_slot: int) -> bool:
    """
    Whether the reserve unit at reinforcement_slot may move to the front.

    Requires the delay to have elapsed and somewhere to go: an empty
    front-line slot or a same-card unit to merge into.
    """
    if not 0 <= reinforcement_slot < len(player.reinforcement_row):
        return False

    unit = player.reinforcement_row[reinforcement_slot]
    if unit is None:
        return False

    if unit.turns_in_reserve < unit.delay:
        return False

    return bool(empty_slots(player.front_line)) or (
        find_matching_unit(player, unit.card_id) >= 0
    )


def _resolve_deploy_target(
    player: PlayerState,
    unit: Unit,
    front_line_slot: int | None,
) -> tuple[int, bool] | None:
    """
    Pick the front-line slot for a deployment without mutating anything.

    Returns (slot, merge) or None if the move is illegal.
    """
    if front_line_slot is None:
        match = find_matching_unit(player, unit.card_id)
        if match >= 0:
            return match, True
        free = empty_slots(player.front_line)
        if free:
            return free[0], False
        return None

    if not 0 <= front_line_slot < FRONT_LINE_SIZE:
        return None

    occupant = player.front_line[front_line_slot]
    if occupant is None:
        return front_line_slot, False
    if occupant.card_id == unit.card_id:
        return front_line_slot, True
    return None


def deploy_unit(
    player: PlayerState,
    reinforcement_slot: int,
    front_line_slot: int | None = None,
) -> bool:
    """
    Move a ready reserve unit to the front line.

    Without a target slot, merges into the first same-card unit, else takes
    the first empty slot. With a target, merges into a same-card occupant or
    fills an empty slot. Any failure leaves the board untouched.
    """
    if not can_deploy_unit(player, reinforcement_slot):
        return False

    unit = player.reinforcement_row[reinforcement_slot]
    target = _resolve_deploy_target(player, unit, front_line_slot)
    if target is None:
        return False

    slot, merge = target
    player.reinforcement_row[reinforcement_slot] = None
    unit.face_down = False

    if merge:
        reinforce_unit(player.front_line[slot], unit)
    else:
        unit.position = BoardPosition(row=BoardRow.FRONT_LINE, slot=slot)
        unit.turns_in_reserve = 0
        player.front_line[slot] = unit
    return True


def reinforce_unit(existing: Unit, incoming: Unit) -> bool:
    """
    Fold incoming's health and morale into existing, capped at base.

    The incoming instance is not placed anywhere afterwards.
    """
    if existing.card_id != incoming.card_id:
        return False

    existing.current_health = min(
        existing.current_health + incoming.current_health,
        existing.base_health,
    )
    existing.current_morale = min(
        existing.current_morale + incoming.current_morale,
        existing.base_morale,
    )
    return True


# =============================================================================
# Cleanup
# =============================================================================

def remove_defeated_units(player: PlayerState) -> list[Unit]:
    """Clear defeated front-line units, returned in slot order."""
    removed = []
    for i, unit in enumerate(player.front_line):
        if unit is not None and unit.is_defeated:
            player.front_line[i] = None
            removed.append(unit)
    return removed
