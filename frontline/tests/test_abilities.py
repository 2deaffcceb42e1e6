"""
Tests for the Ability Processor.

Tests:
- Positional conditions (center, flank, synergy, passive, reinforcement)
- Effect application and caps
- Target resolution
"""

from ..engine_core.abilities import (
    check_ability_condition,
    get_targets,
    process_unit_abilities,
)
from ..engine_core.units import (
    Ability,
    AbilityEffect,
    EffectTarget,
    EffectType,
)
from .conftest import make_unit, place


class TestPositionalConditions:
    """Tests for when abilities fire."""

    def test_flank_ability_on_flank(self, p1, p2):
        """Ember Scout buffs its neighbor from a flank slot."""
        place(p1, "al-002", 0)
        neighbor = place(p1, "al-004", 1)
        neighbor.current_morale = 1

        process_unit_abilities(p1, p2)

        assert neighbor.current_morale == 2

    def test_flank_ability_off_flank(self, p1, p2):
        """Ember Scout does nothing away from the flanks."""
        place(p1, "al-002", 1)
        neighbor = place(p1, "al-004", 2)
        neighbor.current_morale = 1

        process_unit_abilities(p1, p2)

        assert neighbor.current_morale == 1

    def test_center_ability(self, p1, p2):
        """Phoenix Guard Captain restores army morale only from the center."""
        p1.overall_army_morale = 40
        place(p1, "al-023", 2)

        process_unit_abilities(p1, p2)
        assert p1.overall_army_morale == 41

        p1.front_line[2] = None
        place(p1, "al-023", 1)
        process_unit_abilities(p1, p2)
        assert p1.overall_army_morale == 41

    def test_synergy_requires_named_neighbor(self, p1, p2):
        """Molten Shield Bearers buff each other but not other units."""
        first = place(p1, "al-006", 1)
        second = place(p1, "al-006", 2)
        first.current_morale = 1
        second.current_morale = 1

        process_unit_abilities(p1, p2)

        assert first.current_morale == 2
        assert second.current_morale == 2

    def test_synergy_without_match(self, p1, p2):
        """A lone Shield Bearer's synergy stays dormant."""
        place(p1, "al-006", 1)
        neighbor = place(p1, "al-004", 2)
        neighbor.current_morale = 1

        process_unit_abilities(p1, p2)

        assert neighbor.current_morale == 1

    def test_synergy_always_condition(self, p1, p2):
        """Forge Master heals any neighbor."""
        place(p1, "al-011", 0)
        neighbor = place(p1, "al-004", 1)
        neighbor.current_health = 2

        process_unit_abilities(p1, p2)

        assert neighbor.current_health == 3

    def test_reserve_fires_only_reinforcement_abilities(self, p1, p2):
        """Ashfall Harbinger in reserve damages enemies but does not buff friends."""
        place(p1, "al-020", 0, reserve=True)
        friend = place(p1, "al-004", 0)
        friend.current_morale = 1
        enemy_a = place(p2, "al-001", 0)
        enemy_b = place(p2, "al-002", 3)

        process_unit_abilities(p1, p2)

        assert friend.current_morale == 1
        assert enemy_a.current_health == 4
        assert enemy_b.current_health == 1

    def test_unknown_ability_type_fires(self, p1):
        """Unrecognized ability types are treated as unconditional."""
        unit = place(p1, "al-001", 1)
        ability = Ability(
            id="x-1",
            name="Mystery",
            type="mystery",
            effect=AbilityEffect(EffectType.BUFF, EffectTarget.SELF, 1),
        )

        assert check_ability_condition(ability, unit, p1, 1)


class TestEffects:
    """Tests for effect application."""

    def test_buff_capped_at_base_morale(self, p1, p2):
        """Buffs restore morale but never exceed base."""
        place(p1, "al-002", 4)
        neighbor = place(p1, "al-004", 3)

        process_unit_abilities(p1, p2)

        assert neighbor.current_morale == neighbor.base_morale

    def test_heal_capped_at_base_health(self, p1, p2):
        """Cinder Surgeon heals neighbors up to base health."""
        place(p1, "al-004", 2)
        left = place(p1, "al-001", 1)
        right = place(p1, "al-002", 3)
        left.current_health = 1

        process_unit_abilities(p1, p2)

        assert left.current_health == 2
        assert right.current_health == right.base_health

    def test_damage_same_column_enemy(self, p1, p2):
        """Pyre Warden hits the enemy unit in its column."""
        place(p1, "al-009", 3)
        target = place(p2, "al-001", 3)
        bystander = place(p2, "al-001", 2)

        process_unit_abilities(p1, p2)

        assert target.current_health == 4
        assert bystander.current_health == 5

    def test_damage_empty_column(self, p1, p2):
        """Column damage against an empty slot does nothing."""
        place(p1, "al-009", 3)

        process_unit_abilities(p1, p2)

        assert p2.overall_army_morale == 50

    def test_damage_all_enemies(self, p1, p2):
        """Ember Reaper damages every enemy front-line unit."""
        place(p1, "al-007", 0)
        enemies = [place(p2, "al-001", slot) for slot in (0, 2, 4)]

        process_unit_abilities(p1, p2)

        assert [e.current_health for e in enemies] == [3, 3, 3]

    def test_morale_boost_needs_player_target(self, p1, p2):
        """Pyroclast Knight's unit-targeted morale boost has no generic effect."""
        p1.overall_army_morale = 40
        ally = place(p1, "al-004", 1)
        ally.current_morale = 1
        place(p1, "al-014", 2)

        process_unit_abilities(p1, p2)

        assert p1.overall_army_morale == 40
        assert ally.current_morale == 1

    def test_symbolic_values_skipped(self, p1, p2):
        """Special effects carry tags and are left to the special-effect stage."""
        p1.overall_army_morale = 40
        place(p1, "al-005", 0)  # morale_on_death
        place(p1, "al-010", 1)  # no_morale_loss

        process_unit_abilities(p1, p2)

        assert p1.overall_army_morale == 40


class TestTargets:
    """Tests for target resolution."""

    def test_self_and_adjacent(self, p1):
        """SELF is the unit; ADJACENT are its front-line neighbors."""
        unit = place(p1, "al-001", 2)
        left = place(p1, "al-002", 1)

        assert get_targets(EffectTarget.SELF, unit, p1, None, 2) == [unit]
        assert get_targets(EffectTarget.ADJACENT, unit, p1, None, 2) == [left]

    def test_enemy_targets_need_opponent(self, p1, p2):
        """Without an opponent, enemy selectors resolve to nothing."""
        unit = place(p1, "al-001", 0)
        enemy = place(p2, "al-002", 0)

        assert get_targets(EffectTarget.ENEMY, unit, p1, None, 0) == []
        assert get_targets(EffectTarget.ALL_ENEMY, unit, p1, None, 0) == []
        assert get_targets(EffectTarget.ENEMY, unit, p1, p2, 0) == [enemy]
        assert get_targets(EffectTarget.ALL_ENEMY, unit, p1, p2, 0) == [enemy]

    def test_player_target_has_no_units(self, p1, p2):
        """The player selector never yields units."""
        unit = make_unit("al-001")

        assert get_targets(EffectTarget.PLAYER, unit, p1, p2, 0) == []
