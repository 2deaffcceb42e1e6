"""
Action Generator - Generates all legal actions from a game state.

The action generator is used by:
1. External AI callers to enumerate possible moves
2. UI to show available actions
3. Tests (every generated action must be accepted)

Design: Generates GameAction objects, not just action types.
This ensures all generated actions are fully specified.
"""

from __future__ import annotations

from . import board
from .action import GameAction
from .commander import can_use_commander
from .state import GameState, PlayerState


def legal_actions(state: GameState) -> list[GameAction]:
    """
    Generate all legal actions for the current player.

    Returns an empty list once the match is over.
    """
    if not state.is_active:
        return []

    player = state.current_player
    player_id = player.player_id

    actions = []
    actions.extend(_play_actions(player))
    actions.extend(_deploy_actions(player))

    if can_use_commander(player, state) is None:
        actions.append(GameAction.use_commander(player_id))

    actions.append(GameAction.draw_card(player_id))

    if state.turn == 1 and not player.has_mulliganed:
        actions.append(GameAction.mulligan(player_id))

    actions.append(GameAction.end_turn(player_id))
    actions.append(GameAction.surrender(player_id))
    return actions


def _play_actions(player: PlayerState) -> list[GameAction]:
    if player.has_played_unit_this_turn:
        return []
    if not board.can_play_unit_to_reinforcement_row(player):
        return []

    seen = set()
    actions = []
    for card in player.hand:
        if card.id in seen:
            continue
        seen.add(card.id)
        actions.append(GameAction.play_unit(player.player_id, card.id))
    return actions


def _deploy_actions(player: PlayerState) -> list[GameAction]:
    if player.has_deployed_this_turn:
        return []

    actions = []
    for reserve_slot, unit in enumerate(player.reinforcement_row):
        if unit is None or not board.can_deploy_unit(player, reserve_slot):
            continue
        for slot, occupant in enumerate(player.front_line):
            if occupant is None or occupant.card_id == unit.card_id:
                actions.append(GameAction.deploy_unit(player.player_id, reserve_slot, slot))
    return actions
