"""
Tests for the Combat Resolver.
"""

from ..engine_core.combat import (
    damage_overall_morale,
    handle_defeated_unit,
    heal_overall_morale,
    resolve_all_combat,
    resolve_column_combat,
)
from ..engine_core.units import DamageType
from .conftest import make_unit, place


class TestColumnCombat:
    """Tests for a single column's attack."""

    def test_health_damage(self, p1, p2):
        """Health attackers reduce only health."""
        place(p1, "al-001", 0)  # power 3, health
        defender = place(p2, "al-001", 0)

        result = resolve_column_combat(p1, p2, 0)

        assert result.damage == 3
        assert result.damage_type == DamageType.HEALTH
        assert defender.current_health == 2
        assert defender.current_morale == 3
        assert not result.defeated

    def test_morale_damage_defeats(self, p1, p2):
        """Morale attackers can rout a unit."""
        place(p1, "al-002", 1)  # power 4, morale
        defender = place(p2, "al-001", 1)

        result = resolve_column_combat(p1, p2, 1)

        assert defender.current_morale == -1
        assert defender.current_health == 5
        assert result.defeated
        assert result.defender is defender

    def test_split_damage(self, p1, p2):
        """Both-type damage sends half to health and the rest to morale."""
        place(p1, "al-003", 2)  # power 3, both
        defender = place(p2, "al-001", 2)

        resolve_column_combat(p1, p2, 2)

        assert defender.current_health == 4
        assert defender.current_morale == 1

    def test_empty_column_hits_army(self, p1, p2):
        """With no defender the damage goes to army morale."""
        place(p1, "al-001", 3)

        result = resolve_column_combat(p1, p2, 3)

        assert result.defender is None
        assert p2.overall_army_morale == 47

    def test_no_attacker(self, p1, p2):
        """An empty attacking slot does nothing."""
        place(p2, "al-001", 0)

        assert resolve_column_combat(p1, p2, 0) is None

    def test_power_is_current_morale(self, p1, p2):
        """A shaken unit hits for its remaining morale."""
        attacker = place(p1, "al-001", 0)
        attacker.current_morale = 1

        resolve_column_combat(p1, p2, 0)

        assert p2.overall_army_morale == 49


class TestAllCombat:
    """Tests for the full combat step."""

    def test_only_current_player_attacks(self, blank_state, p1, p2):
        """The waiting player's units deal no damage."""
        mine = place(p1, "al-001", 0)
        place(p2, "al-001", 0)
        place(p2, "al-002", 4)

        results = resolve_all_combat(blank_state)

        assert len(results) == 1
        assert mine.current_health == 5
        assert p1.overall_army_morale == 50

    def test_columns_left_to_right(self, blank_state, p1):
        """Each occupied column attacks once, in slot order."""
        place(p1, "al-002", 4)
        place(p1, "al-001", 1)

        results = resolve_all_combat(blank_state)

        assert [r.attacker.card_id for r in results] == ["al-001", "al-002"]
        assert blank_state.players[1].overall_army_morale == 43


class TestArmyMorale:
    """Tests for army-morale bookkeeping."""

    def test_damage_floors_at_zero(self, p1):
        """Army morale never goes negative."""
        p1.overall_army_morale = 2

        damage_overall_morale(p1, 5)

        assert p1.overall_army_morale == 0

    def test_heal_capped_at_max(self, p1):
        """Army morale never exceeds its maximum."""
        p1.overall_army_morale = 48

        heal_overall_morale(p1, 5)

        assert p1.overall_army_morale == 50

    def test_defeat_penalty(self, p1):
        """A lost unit costs its base morale."""
        handle_defeated_unit(p1, make_unit("al-015"))

        assert p1.overall_army_morale == 42
