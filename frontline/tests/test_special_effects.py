"""
Tests for the special-effect stage.

Tests:
- Implemented tags at each trigger
- Positional conditions on tagged abilities
- Handler registry
"""

from ..engine_core import special_effects
from ..engine_core.special_effects import (
    Trigger,
    effect_tag,
    has_special_handler,
    run_ally_defeated_effects,
    run_end_of_turn_effects,
    run_self_defeated_effects,
)
from .conftest import card, make_unit, place


class TestEndOfTurn:
    """Tests for END_OF_TURN handlers."""

    def test_self_damage(self, blank_state, p1):
        """Immolation Zealot burns 1 health at the end of its owner's turn."""
        zealot = place(p1, "al-015", 0)

        run_end_of_turn_effects(blank_state, p1)

        assert zealot.current_health == 3

    def test_self_damage_not_in_reserve(self, blank_state, p1):
        """Reserve units are not part of the end-of-turn stage."""
        zealot = place(p1, "al-015", 0, reserve=True)

        run_end_of_turn_effects(blank_state, p1)

        assert zealot.current_health == 4

    def test_unimplemented_tag_is_inert(self, blank_state, p1):
        """Tags with no handler change nothing."""
        dancer = place(p1, "al-012", 0)  # damage_reduction

        run_end_of_turn_effects(blank_state, p1)

        assert dancer.current_health == dancer.base_health
        assert dancer.current_morale == dancer.base_morale

    def test_draw_waits_for_defeat(self, blank_state, p1):
        """Ember Sage draws only when an ally falls."""
        place(p1, "al-017", 1)

        run_end_of_turn_effects(blank_state, p1)

        assert p1.hand == []


class TestDefeatTriggers:
    """Tests for ON_SELF_DEFEATED and ON_ALLY_DEFEATED handlers."""

    def test_no_morale_loss_suppresses_penalty(self, blank_state, p1):
        """Charred Conscript's defeat costs no army morale."""
        conscript = place(p1, "al-010", 0)
        conscript.current_health = 0

        assert run_self_defeated_effects(blank_state, p1, conscript)

    def test_ordinary_unit_takes_penalty(self, blank_state, p1):
        """Units without the tag do not suppress the penalty."""
        footman = place(p1, "al-001", 0)

        assert not run_self_defeated_effects(blank_state, p1, footman)

    def test_morale_on_death(self, blank_state, p1):
        """Ash Prophet restores 2 army morale when an ally falls."""
        p1.overall_army_morale = 40
        place(p1, "al-005", 2)

        run_ally_defeated_effects(blank_state, p1, make_unit("al-001"))

        assert p1.overall_army_morale == 42

    def test_morale_on_death_capped(self, blank_state, p1):
        """Restored morale never exceeds the maximum."""
        p1.overall_army_morale = 49
        place(p1, "al-005", 2)

        run_ally_defeated_effects(blank_state, p1, make_unit("al-001"))

        assert p1.overall_army_morale == 50

    def test_draw_on_ally_defeated(self, blank_state, p1):
        """Ember Sage draws the top card of the deck."""
        place(p1, "al-017", 1)

        run_ally_defeated_effects(blank_state, p1, make_unit("al-001"))

        assert [c.id for c in p1.hand] == ["al-005"]
        assert len(p1.deck) == 4

    def test_each_watcher_fires(self, blank_state, p1):
        """Two prophets restore morale twice."""
        p1.overall_army_morale = 30
        place(p1, "al-005", 0)
        place(p1, "al-005", 4)

        run_ally_defeated_effects(blank_state, p1, make_unit("al-001"))

        assert p1.overall_army_morale == 34

    def test_reserve_units_do_not_watch(self, blank_state, p1):
        """Only front-line units react to a fallen ally."""
        p1.overall_army_morale = 30
        place(p1, "al-005", 0, reserve=True)

        run_ally_defeated_effects(blank_state, p1, make_unit("al-001"))

        assert p1.overall_army_morale == 30


class TestRegistry:
    """Tests for the handler registry."""

    def test_effect_tags(self):
        """Draw abilities key as "draw"; special abilities by their tag."""
        sage = card("al-017")
        footman = card("al-001")

        assert effect_tag(sage.abilities[0]) == "draw"
        assert effect_tag(sage.abilities[1]) == "morale_shield"
        assert effect_tag(footman.abilities[0]) is None

    def test_known_handlers(self):
        """Implemented tags are registered; the rest are not."""
        for tag in ("self_damage", "no_morale_loss", "morale_on_death", "draw"):
            assert has_special_handler(tag)
        assert not has_special_handler("stealth")

    def test_registered_handler_runs(self, monkeypatch, blank_state, p1):
        """A newly registered tag handler is picked up by the stage."""
        calls = []
        monkeypatch.setitem(
            special_effects._HANDLERS,
            (Trigger.END_OF_TURN, "damage_reduction"),
            lambda ctx: calls.append((ctx.unit.name, ctx.slot)),
        )
        place(p1, "al-012", 3)

        run_end_of_turn_effects(blank_state, p1)

        assert calls == [("Smoke Dancer", 3)]
