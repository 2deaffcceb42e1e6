"""
Game Manager - Action dispatcher and turn state machine.

The manager is the single point of state mutation.
All state changes must go through process_action() / apply().

Design principles:
- Mutates the GameState it was given, in place
- Validates before applying; a rejected action changes nothing
- Returns ActionResult with success/failure and an error code
- Delegates board, ability, combat and commander rules to their modules
"""

from __future__ import annotations
from copy import deepcopy
from typing import Any, Callable
import logging

from . import board
from .abilities import process_unit_abilities
from .action import (
    GAME_NOT_ACTIVE,
    HANDLER_ERROR,
    ILLEGAL_ACTION,
    INVALID_PAYLOAD,
    NOT_YOUR_TURN,
    UNKNOWN_ACTION,
    ActionResult,
    ActionType,
    GameAction,
)
from .catalog import CardCatalog
from .combat import handle_defeated_unit, resolve_all_combat
from .commander import apply_commander_effect, can_use_commander
from .constants import DEFAULT_RULES, GameRules
from .special_effects import (
    run_ally_defeated_effects,
    run_end_of_turn_effects,
    run_self_defeated_effects,
)
from .state import (
    GamePhase,
    GameState,
    GameStatus,
    PlayerState,
    draw_cards,
    switch_turn,
)
from .units import Unit, create_unit_from_card

logger = logging.getLogger(__name__)


class GameManager:
    """
    Applies actions to one match.

    Stateless apart from the GameState it wraps, so a caller can build a
    fresh manager around a stored state for every action.
    """

    def __init__(
        self,
        game_state: GameState,
        catalog: CardCatalog | None = None,
        rules: GameRules | None = None,
    ):
        if catalog is None:
            from ..factions import default_catalog
            catalog = default_catalog()
        self.state = game_state
        self.catalog = catalog
        self.rules = rules or DEFAULT_RULES

    def initialize_game(self) -> None:
        """Deal starting hands."""
        for player in self.state.players:
            draw_cards(player, self.rules.starting_hand_size, self.state.shuffle)
        self.state.touch()

    def get_game_state(self) -> GameState:
        return self.state

    # =========================================================================
    # Entry points
    # =========================================================================

    def process_action(self, action: GameAction) -> bool:
        """Apply action; True if it was accepted."""
        return self.apply(action).success

    def apply(self, action: GameAction) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with the mutated state or the rejection reason.
        """
        rejection = self._validate_action(action)
        if rejection:
            message, code = rejection
            logger.debug(f"Rejected {action.type} from {action.player_id}: {message}")
            return ActionResult.failure(message, error_code=code)

        handler = self._get_handler(action.type)
        backup = deepcopy(self.state)
        try:
            result = handler(action)
        except Exception as e:
            logger.exception(f"Handler for {action.type.value} failed; state rolled back")
            vars(self.state).update(vars(backup))
            return ActionResult.failure(str(e), error_code=HANDLER_ERROR)

        if not result.success:
            logger.debug(f"Rejected {action.type.value} from {action.player_id}: {result.error}")
            return result

        self.state.last_action = action
        self.state.touch()
        return result

    def _validate_action(self, action: GameAction) -> tuple[str, str] | None:
        """
        Check the preconditions shared by every action.

        Returns (message, error_code) if rejected, None if valid.
        """
        if not self.state.is_active:
            return "Match is not active", GAME_NOT_ACTIVE

        if action.player_id != self.state.current_player.player_id:
            return f"Not {action.player_id}'s turn", NOT_YOUR_TURN

        if not isinstance(action.type, ActionType):
            return f"Unknown action type: {action.type}", UNKNOWN_ACTION

        return None

    def _get_handler(self, action_type: ActionType) -> Callable[[GameAction], ActionResult]:
        handlers = {
            ActionType.PLAY_UNIT: self._handle_play_unit,
            ActionType.DEPLOY_UNIT: self._handle_deploy_unit,
            ActionType.USE_COMMANDER: self._handle_use_commander,
            ActionType.DRAW_CARD: self._handle_draw_card,
            ActionType.END_TURN: self._handle_end_turn,
            ActionType.SURRENDER: self._handle_surrender,
            ActionType.MULLIGAN: self._handle_mulligan,
        }
        return handlers[action_type]

    # =========================================================================
    # Immediate actions
    # =========================================================================

    def _handle_play_unit(self, action: GameAction) -> ActionResult:
        card_id = action.data.get("cardId")
        if not isinstance(card_id, str):
            return ActionResult.failure("playUnit requires a cardId", error_code=INVALID_PAYLOAD)

        player = self.state.current_player
        if player.has_played_unit_this_turn:
            return ActionResult.failure("Already played a unit this turn", error_code=ILLEGAL_ACTION)
        if not board.can_play_unit_to_reinforcement_row(player):
            return ActionResult.failure("Reinforcement row is full", error_code=ILLEGAL_ACTION)

        index = player.find_hand_card(card_id)
        if index < 0:
            return ActionResult.failure(f"Card {card_id} not in hand", error_code=ILLEGAL_ACTION)

        card = player.hand[index]
        unit = create_unit_from_card(card, player.player_id, self.state.alloc_unit_id())
        board.play_unit_to_reinforcement_row(player, unit)
        player.hand.pop(index)
        player.has_played_unit_this_turn = True

        return ActionResult.ok(self.state, [f"{player.name} played {card.name} to reserve"])

    def _handle_deploy_unit(self, action: GameAction) -> ActionResult:
        reinforcement_slot = action.data.get("reinforcementSlot")
        front_line_slot = action.data.get("frontLineSlot")
        if not _is_int(reinforcement_slot) or not (
            front_line_slot is None or _is_int(front_line_slot)
        ):
            return ActionResult.failure(
                "deployUnit requires an integer reinforcementSlot and optional frontLineSlot",
                error_code=INVALID_PAYLOAD,
            )

        player = self.state.current_player
        if player.has_deployed_this_turn:
            return ActionResult.failure("Already deployed a unit this turn", error_code=ILLEGAL_ACTION)

        unit = None
        if 0 <= reinforcement_slot < len(player.reinforcement_row):
            unit = player.reinforcement_row[reinforcement_slot]

        if not board.deploy_unit(player, reinforcement_slot, front_line_slot):
            return ActionResult.failure(
                f"Cannot deploy from reserve slot {reinforcement_slot}",
                error_code=ILLEGAL_ACTION,
            )

        player.has_deployed_this_turn = True
        return ActionResult.ok(self.state, [f"{player.name} deployed {unit.name}"])

    def _handle_use_commander(self, action: GameAction) -> ActionResult:
        player = self.state.current_player
        error = can_use_commander(player, self.state)
        if error:
            return ActionResult.failure(error, error_code=ILLEGAL_ACTION)

        apply_commander_effect(self.state, player)
        player.commander.start_cooldown()
        player.has_used_commander_this_turn = True

        return ActionResult.ok(
            self.state,
            [f"{player.commander.name} used {player.commander.ability.name}"],
        )

    def _handle_draw_card(self, action: GameAction) -> ActionResult:
        player = self.state.current_player
        drawn = draw_cards(player, self.rules.cards_drawn_per_turn, self.state.shuffle)
        return ActionResult.ok(self.state, [f"{player.name} drew {len(drawn)} card(s)"])

    def _handle_surrender(self, action: GameAction) -> ActionResult:
        player = self.state.current_player
        winner = self.state.other_player(player)
        self._finish(winner)
        logger.info(f"{player.name} surrendered in match {self.state.game_id}")
        return ActionResult.ok(self.state, [f"{player.name} surrendered"])

    def _handle_mulligan(self, action: GameAction) -> ActionResult:
        player = self.state.current_player
        if self.state.turn != 1:
            return ActionResult.failure("Mulligan is only allowed on turn 1", error_code=ILLEGAL_ACTION)
        if player.has_mulliganed:
            return ActionResult.failure("Already mulliganed", error_code=ILLEGAL_ACTION)

        player.deck.extend(player.hand)
        player.hand = []
        self.state.shuffle(player.deck)
        draw_cards(player, self.rules.mulligan_hand_size, self.state.shuffle)
        player.has_mulliganed = True

        return ActionResult.ok(self.state, [f"{player.name} took a mulligan"])

    # =========================================================================
    # End of turn
    # =========================================================================

    def _handle_end_turn(self, action: GameAction) -> ActionResult:
        """
        Run the end-of-turn pipeline:
        abilities -> combat -> sweep -> defeat handling -> win check ->
        turn switch -> reserve timers -> cooldown tick -> draw.
        """
        state = self.state
        player = state.current_player
        opponent = state.opponent

        process_unit_abilities(player, opponent)
        run_end_of_turn_effects(state, player)

        state.phase = GamePhase.COMBAT
        resolve_all_combat(state)

        state.phase = GamePhase.END
        swept = [
            (player, board.remove_defeated_units(player)),
            (opponent, board.remove_defeated_units(opponent)),
        ]
        for owner, defeated in swept:
            for unit in defeated:
                self._handle_defeated(owner, unit)

        changes = [f"{player.name} ended turn {state.turn}"]
        winner = self._check_win_conditions()
        if winner is not None:
            self._finish(winner)
            changes.append(f"{winner.name} wins")
            return ActionResult.ok(state, changes)

        switch_turn(state)
        next_player = state.current_player
        board.increment_turns_in_reserve(next_player)
        next_player.commander.tick_cooldown()
        draw_cards(next_player, self.rules.cards_drawn_per_turn, state.shuffle)

        logger.info(f"Match {state.game_id} turn {state.turn}: {next_player.name} to act")
        return ActionResult.ok(state, changes)

    def _handle_defeated(self, owner: PlayerState, unit: Unit) -> None:
        if not run_self_defeated_effects(self.state, owner, unit):
            handle_defeated_unit(owner, unit)

        card = self.catalog.get(unit.card_id)
        if card is None:
            logger.warning(f"Card {unit.card_id} missing from catalog; not discarded")
        else:
            owner.discard_pile.append(card)

        run_ally_defeated_effects(self.state, owner, unit)

    def _check_win_conditions(self) -> PlayerState | None:
        """The first player (by index) whose opponent is out of army morale wins."""
        for i, player in enumerate(self.state.players):
            opponent = self.state.players[1 - i]
            if opponent.overall_army_morale <= 0:
                return player
        return None

    def _finish(self, winner: PlayerState) -> None:
        self.state.status = GameStatus.FINISHED
        self.state.winner = winner.player_id
        logger.info(f"Match {self.state.game_id} finished; winner {winner.name}")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
