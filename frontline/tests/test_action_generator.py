"""
Tests for legal action generation.

Every generated action must be accepted by the GameManager.
"""

from ..engine_core.action import ActionType, GameAction
from ..engine_core.action_generator import legal_actions
from ..engine_core.manager import GameManager
from ..engine_core.state import GameStatus
from ..factions.ashen_legion import ASHEN_LEGION_CATALOG, get_commander_by_id
from .conftest import P1, card, place


def _types(actions):
    return [a.type for a in actions]


class TestLegalActions:
    """Tests for legal_actions()."""

    def test_fresh_turn(self, blank_state, p1):
        """A fresh first turn offers plays, draw, mulligan, end turn and surrender."""
        p1.hand = [card("al-001"), card("al-001"), card("al-002")]

        actions = legal_actions(blank_state)

        plays = [a.data["cardId"] for a in actions if a.type == ActionType.PLAY_UNIT]
        assert plays == ["al-001", "al-002"]
        types = _types(actions)
        assert ActionType.USE_COMMANDER in types
        assert ActionType.DRAW_CARD in types
        assert ActionType.MULLIGAN in types
        assert types[-2:] == [ActionType.END_TURN, ActionType.SURRENDER]
        assert all(a.player_id == P1 for a in actions)

    def test_no_play_after_playing(self, blank_state, p1):
        """Once a unit is played, no more plays are offered."""
        p1.hand = [card("al-001")]
        p1.has_played_unit_this_turn = True

        assert ActionType.PLAY_UNIT not in _types(legal_actions(blank_state))

    def test_deploy_targets(self, blank_state, p1):
        """A ready unit may go to any empty slot or onto a same-card unit."""
        for slot in (0, 1, 3):
            place(p1, "al-002", slot)
        place(p1, "al-001", 2)
        place(p1, "al-001", 1, reserve=True)

        deploys = [
            (a.data["reinforcementSlot"], a.data["frontLineSlot"])
            for a in legal_actions(blank_state)
            if a.type == ActionType.DEPLOY_UNIT
        ]

        assert deploys == [(1, 2), (1, 4)]

    def test_unready_unit_not_deployable(self, blank_state, p1):
        """Units still in their delay produce no deploy actions."""
        place(p1, "al-003", 0, reserve=True)

        assert ActionType.DEPLOY_UNIT not in _types(legal_actions(blank_state))

    def test_commander_without_target(self, blank_state, p1):
        """Phoenix Resurrection is not offered with an empty discard pile."""
        p1.commander = get_commander_by_id("cmd-al-001").fresh_copy()

        assert ActionType.USE_COMMANDER not in _types(legal_actions(blank_state))

    def test_no_mulligan_after_turn_one(self, blank_state):
        """Mulligan is a first-turn option only."""
        blank_state.turn = 3

        assert ActionType.MULLIGAN not in _types(legal_actions(blank_state))

    def test_finished_match(self, blank_state):
        """A finished match has no legal actions."""
        blank_state.status = GameStatus.FINISHED

        assert legal_actions(blank_state) == []

    def test_every_action_accepted(self, seeded_match):
        """Over several turns, each generated action is accepted on a copy of the state."""
        state = seeded_match
        for _ in range(8):
            if not state.is_active:
                break
            for action in legal_actions(state):
                probe = GameManager(state.clone(), catalog=ASHEN_LEGION_CATALOG)
                result = probe.apply(action)
                assert result.success, (action.type, action.data, result.error)

            manager = GameManager(state, catalog=ASHEN_LEGION_CATALOG)
            player_id = state.current_player.player_id
            for action in legal_actions(state):
                if action.type in (ActionType.PLAY_UNIT, ActionType.DEPLOY_UNIT):
                    manager.apply(action)
                    break
            assert manager.apply(GameAction.end_turn(player_id)).success
