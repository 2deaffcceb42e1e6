"""
Tests for faction content and catalogs.
"""

import pytest

from ..engine_core.catalog import CardCatalog
from ..engine_core.constants import MAX_DELAY
from ..engine_core.units import AbilityType
from ..factions import FACTIONS, default_catalog, get_faction
from ..factions.ashen_legion import (
    ASHEN_LEGION_CARDS,
    ASHEN_LEGION_COMMANDERS,
    get_card_by_id,
    get_cards_by_rarity,
    get_commander_by_id,
)


class TestAshenLegion:
    """Tests for the Ashen Legion pool."""

    def test_card_pool(self):
        """28 cards with unique ids and sane stats."""
        ids = [c.id for c in ASHEN_LEGION_CARDS]

        assert len(ids) == 28
        assert len(set(ids)) == 28
        for c in ASHEN_LEGION_CARDS:
            assert c.faction == "Ashen Legion"
            assert c.base_health > 0
            assert c.base_morale > 0
            assert 0 <= c.delay <= MAX_DELAY
            assert c.abilities

    def test_rarity_bands(self):
        """Rarity bands follow catalog order."""
        assert [len(get_cards_by_rarity(r)) for r in ("common", "uncommon", "rare", "legendary")] == [
            12, 8, 5, 3,
        ]
        assert [c.id for c in get_cards_by_rarity("legendary")] == ["al-026", "al-027", "al-028"]

    def test_unknown_rarity(self):
        """Unknown rarities are an error."""
        with pytest.raises(ValueError):
            get_cards_by_rarity("mythic")

    def test_lookup(self):
        """Cards and commanders are found by id."""
        assert get_card_by_id("al-022").name == "Avatar of the Final Flame"
        assert get_card_by_id("al-999") is None
        assert get_commander_by_id("cmd-al-003").ability.name == "Rally from Ashes"
        assert get_commander_by_id("cmd-zz-001") is None

    def test_synergy_conditions(self):
        """Every synergy ability carries a condition."""
        for c in ASHEN_LEGION_CARDS:
            for ability in c.abilities:
                if ability.type == AbilityType.SYNERGY:
                    assert ability.condition is not None

    def test_commanders(self):
        """Three commanders, all ready at the start."""
        assert len(ASHEN_LEGION_COMMANDERS) == 3
        assert all(c.is_ready for c in ASHEN_LEGION_COMMANDERS)

    def test_fresh_copy_is_independent(self):
        """Copies share nothing with the catalog template."""
        template = get_commander_by_id("cmd-al-002")

        copy = template.fresh_copy()
        copy.start_cooldown()

        assert copy.ability.current_cooldown == 4
        assert template.ability.current_cooldown == 0


class TestRegistry:
    """Tests for the faction registry and catalogs."""

    def test_get_faction(self):
        """Registered factions resolve; others raise."""
        assert get_faction("ashen_legion") is FACTIONS["ashen_legion"]
        with pytest.raises(ValueError):
            get_faction("nowhere")

    def test_default_catalog(self):
        """The default catalog merges every faction's cards."""
        catalog = default_catalog()

        assert len(catalog) == sum(len(f.cards) for f in FACTIONS.values())
        assert "al-001" in catalog

    def test_duplicate_ids_rejected(self):
        """A catalog refuses two entries with one id."""
        footman = get_card_by_id("al-001")

        with pytest.raises(ValueError):
            CardCatalog([footman, footman])
