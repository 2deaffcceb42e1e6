"""
Ashen Legion Cards - The faction's 28-card pool.

Rarity bands by catalog order:
- common: al-001 .. al-012
- uncommon: al-013 .. al-020
- rare: al-021 .. al-025
- legendary: al-026 .. al-028

Abilities whose effect is `special` carry a symbolic tag as their value;
the engine's special-effect stage decides which tags have behavior.
"""

from __future__ import annotations

from ...engine_core.catalog import CardCatalog
from ...engine_core.units import (
    Ability,
    AbilityCondition,
    AbilityEffect,
    AbilityType,
    Card,
    ConditionType,
    DamageType,
    EffectTarget,
    EffectType,
)

FACTION_NAME = "Ashen Legion"

RARITIES = ("common", "uncommon", "rare", "legendary")


def _ability(
    ability_id: str,
    name: str,
    ability_type: AbilityType,
    effect_type: EffectType,
    target: EffectTarget,
    value: int | str,
    text: str,
    condition: AbilityCondition | None = None,
) -> Ability:
    return Ability(
        id=ability_id,
        name=name,
        type=ability_type,
        effect=AbilityEffect(type=effect_type, target=target, value=value, description=text),
        condition=condition,
        description=text,
    )


def _card(
    card_id: str,
    name: str,
    health: int,
    morale: int,
    delay: int,
    damage_type: DamageType,
    abilities: list[Ability],
    flavor: str,
    rarity: str,
) -> Card:
    return Card(
        id=card_id,
        name=name,
        faction=FACTION_NAME,
        base_health=health,
        base_morale=morale,
        delay=delay,
        damage_type=damage_type,
        abilities=tuple(abilities),
        description=flavor,
        rarity=rarity,
    )


A = AbilityType
E = EffectType
T = EffectTarget
D = DamageType


ASHEN_LEGION_CARDS: list[Card] = [
    # Common
    _card("al-001", "Cindermarch Footman", 5, 3, 0, D.HEALTH, [
        _ability("al-001-a1", "From the Ashes", A.PASSIVE, E.BUFF, T.SELF, 1,
                 "Gains +1 Morale for each allied unit defeated this turn"),
    ], "The first to march, the last to fall.", "common"),
    _card("al-002", "Ember Scout", 2, 4, 0, D.MORALE, [
        _ability("al-002-a1", "Ash Trail", A.FLANK, E.BUFF, T.ADJACENT, 1,
                 "While on a flank: Adjacent units gain +1 Morale"),
    ], "Swift as smoke, deadly as flame.", "common"),
    _card("al-003", "Soot Stalker", 3, 3, 1, D.BOTH, [
        _ability("al-003-a1", "Hidden in Ash", A.REINFORCEMENT, E.SPECIAL, T.SELF, "stealth",
                 "Cannot be targeted while in Reinforcement Row"),
    ], "In ash and shadow, death awaits.", "common"),
    _card("al-004", "Cinder Surgeon", 4, 2, 1, D.HEALTH, [
        _ability("al-004-a1", "Battlefield Triage", A.PASSIVE, E.HEAL, T.ADJACENT, 1,
                 "At turn end: Heal adjacent units 1 Health"),
    ], "Mending the broken, preserving the damned.", "common"),
    _card("al-005", "Ash Prophet", 3, 5, 2, D.MORALE, [
        _ability("al-005-a1", "Prophecy of Rebirth", A.PASSIVE, E.SPECIAL, T.PLAYER, "morale_on_death",
                 "When an allied unit is defeated: Restore 2 Overall Army Morale"),
    ], "Death is but a doorway to greater service.", "common"),
    _card("al-006", "Molten Shield Bearer", 7, 2, 1, D.HEALTH, [
        _ability("al-006-a1", "Molten Aegis", A.SYNERGY, E.BUFF, T.ADJACENT, 2,
                 "Next to Shield Bearer: Adjacent units gain +2 Health",
                 AbilityCondition(ConditionType.UNIT_TYPE, "Molten Shield Bearer")),
    ], "A wall of fire and steel.", "common"),
    _card("al-007", "Ember Reaper", 4, 6, 2, D.BOTH, [
        _ability("al-007-a1", "Death Burst", A.PASSIVE, E.DAMAGE, T.ALL_ENEMY, 2,
                 "When defeated: Deal 2 damage to all enemy units"),
    ], "In death, devastation.", "common"),
    _card("al-008", "Coal Heart Veteran", 5, 4, 1, D.HEALTH, [
        _ability("al-008-a1", "Survivor's Resolve", A.PASSIVE, E.BUFF, T.SELF, 2,
                 "If any unit was defeated last turn: Gain +2 Morale"),
    ], "Each scar tells a story of survival.", "common"),
    _card("al-009", "Pyre Warden", 3, 4, 2, D.MORALE, [
        _ability("al-009-a1", "Artillery Barrage", A.PASSIVE, E.DAMAGE, T.ENEMY, 1,
                 "Each turn: Deal 1 Morale damage to enemy in same column"),
    ], "Raining fire from afar.", "common"),
    _card("al-010", "Charred Conscript", 3, 3, 0, D.HEALTH, [
        _ability("al-010-a1", "Expendable", A.PASSIVE, E.SPECIAL, T.PLAYER, "no_morale_loss",
                 "When defeated: Your Overall Army Morale is not reduced"),
    ], "Fodder for the eternal flame.", "common"),
    _card("al-011", "Forge Master", 6, 3, 2, D.HEALTH, [
        _ability("al-011-a1", "Reforge the Fallen", A.SYNERGY, E.HEAL, T.ADJACENT, 1,
                 "Adjacent damaged units heal 1 Health each turn",
                 AbilityCondition(ConditionType.ALWAYS)),
    ], "From broken steel, new strength.", "common"),
    _card("al-012", "Smoke Dancer", 2, 5, 1, D.MORALE, [
        _ability("al-012-a1", "Elusive", A.PASSIVE, E.SPECIAL, T.SELF, "damage_reduction",
                 "Takes 1 less damage from all sources (minimum 1)"),
    ], "Now you see me, now you burn.", "common"),

    # Uncommon
    _card("al-013", "Ashguard Phalanx", 8, 4, 2, D.HEALTH, [
        _ability("al-013-a1", "Undying Formation", A.PASSIVE, E.SPECIAL, T.SELF, "resurrect_once",
                 "First time defeated: Return with half Health/Morale (rounded down)"),
    ], "Death holds no dominion here.", "uncommon"),
    _card("al-014", "Pyroclast Knight", 6, 7, 3, D.BOTH, [
        _ability("al-014-a1", "Trail of Fire", A.PASSIVE, E.MORALE_BOOST, T.ALL_FRIENDLY, 1,
                 "When deployed: All friendly units gain +1 Morale"),
    ], "Where they ride, hope follows.", "uncommon"),
    _card("al-015", "Immolation Zealot", 4, 8, 2, D.MORALE, [
        _ability("al-015-a1", "Burning Fury", A.PASSIVE, E.BUFF, T.SELF, 3,
                 "While below half Health: +3 Morale"),
        _ability("al-015-a2", "Reckless", A.PASSIVE, E.SPECIAL, T.SELF, "self_damage",
                 "End of your turn: Take 1 Health damage"),
    ], "Pain is fuel, suffering is strength.", "uncommon"),
    _card("al-016", "Phoenix Guard", 5, 6, 3, D.BOTH, [
        _ability("al-016-a1", "Rise Again", A.PASSIVE, E.SPECIAL, T.SELF, "resurrect_stronger",
                 "When defeated: Return next turn with +2 Health/+2 Morale (once per game)"),
    ], "From death's embrace, reborn in flame.", "uncommon"),
    _card("al-017", "Ember Sage", 3, 7, 3, D.MORALE, [
        _ability("al-017-a1", "Wisdom of Ashes", A.PASSIVE, E.DRAW, T.PLAYER, 1,
                 "When an allied unit is defeated: Draw a card"),
        _ability("al-017-a2", "Protective Wards", A.REINFORCEMENT, E.SPECIAL, T.ALL_FRIENDLY, "morale_shield",
                 "While in Reinforcement: Front line units cannot have Morale reduced below 1"),
    ], "Knowledge burns eternal.", "uncommon"),
    _card("al-018", "Crucible Knight", 7, 5, 2, D.HEALTH, [
        _ability("al-018-a1", "Tempered in Battle", A.PASSIVE, E.BUFF, T.SELF, 1,
                 "After dealing damage: Gain +1 Health (max +3)"),
        _ability("al-018-a2", "Guardian Stance", A.FLANK, E.SPECIAL, T.ADJACENT, "redirect",
                 "While on flank: Take damage instead of adjacent allies"),
    ], "Forged in war, cooled in blood.", "uncommon"),
    _card("al-019", "Mourning Banshee", 4, 6, 2, D.MORALE, [
        _ability("al-019-a1", "Wail of Sorrow", A.PASSIVE, E.DAMAGE, T.ALL_ENEMY, 1,
                 "When an allied unit is defeated: All enemy units lose 1 Morale"),
    ], "Her cries herald the fallen.", "uncommon"),
    _card("al-020", "Ashfall Harbinger", 5, 5, 3, D.BOTH, [
        _ability("al-020-a1", "Herald of Destruction", A.PASSIVE, E.BUFF, T.ALL_FRIENDLY, 1,
                 "All friendly units deal +1 damage"),
        _ability("al-020-a2", "Ominous Presence", A.REINFORCEMENT, E.DAMAGE, T.ALL_ENEMY, 1,
                 "While in Reinforcement: Enemy units lose 1 Morale each turn"),
    ], "The sky weeps ash at his approach.", "uncommon"),

    # Rare
    _card("al-021", "The Burned Marshal", 8, 8, 4, D.BOTH, [
        _ability("al-021-a1", "Share the Burden", A.PASSIVE, E.SPECIAL, T.ALL_FRIENDLY, "damage_redistribution",
                 "Damage to friendly units is distributed evenly among all units"),
        _ability("al-021-a2", "Inspiring Sacrifice", A.PASSIVE, E.MORALE_BOOST, T.PLAYER, 5,
                 "When defeated: Restore 5 Overall Army Morale"),
    ], "His scars are legion, his will unbroken.", "rare"),
    _card("al-022", "Avatar of the Final Flame", 10, 10, 4, D.BOTH, [
        _ability("al-022-a1", "Fueled by Death", A.PASSIVE, E.BUFF, T.SELF, 1,
                 "Has +1 Health/+1 Morale for each unit defeated this game (both sides)"),
    ], "The culmination of a thousand deaths.", "rare"),
    _card("al-023", "Phoenix Guard Captain", 6, 9, 3, D.BOTH, [
        _ability("al-023-a1", "Rally the Ashes", A.CENTER, E.MORALE_BOOST, T.PLAYER, 1,
                 "While in center: Restore 1 Overall Army Morale each turn"),
        _ability("al-023-a2", "Phoenix Rebirth", A.PASSIVE, E.SPECIAL, T.SELF, "resurrect_and_buff",
                 "When defeated: Return with full Health/Morale and all allies gain +2 Morale"),
    ], "Leading from beyond death itself.", "rare"),
    _card("al-024", "The Mourning Choir", 5, 8, 4, D.MORALE, [
        _ability("al-024-a1", "Dirge of the Fallen", A.PASSIVE, E.SPECIAL, T.PLAYER, "morale_conversion",
                 "When enemy units lose Morale: Gain that much Overall Army Morale"),
        _ability("al-024-a2", "Spectral Presence", A.PASSIVE, E.SPECIAL, T.SELF, "immune_health",
                 "Cannot take Health damage"),
    ], "Their song turns grief to power.", "rare"),
    _card("al-025", "Cinder Lord", 7, 7, 3, D.BOTH, [
        _ability("al-025-a1", "Lord of Ashes", A.PASSIVE, E.BUFF, T.ALL_FRIENDLY, 2,
                 "All friendly units have +2 Morale"),
        _ability("al-025-a2", "Immolation Aura", A.PASSIVE, E.DAMAGE, T.ADJACENT, 1,
                 "Each turn: Deal 1 damage to adjacent enemy units"),
    ], "Nobility forged in the furnace of war.", "rare"),

    # Legendary
    _card("al-026", "Ignis, the Eternal Flame", 12, 12, 4, D.BOTH, [
        _ability("al-026-a1", "Phoenix Lord", A.PASSIVE, E.SPECIAL, T.SELF, "infinite_resurrect",
                 "When defeated: Return next turn with -2 Health/-2 Morale (minimum 1/1)"),
        _ability("al-026-a2", "Conflagration", A.CENTER, E.DAMAGE, T.ALL_ENEMY, 2,
                 "While in center: Deal 2 damage to all enemy units each turn"),
        _ability("al-026-a3", "Eternal Inspiration", A.PASSIVE, E.MORALE_BOOST, T.PLAYER, 3,
                 "When resurrected: Restore 3 Overall Army Morale"),
    ], "The first flame that refuses to die.", "legendary"),
    _card("al-027", "The Crucible of War", 15, 5, 4, D.HEALTH, [
        _ability("al-027-a1", "Living Fortress", A.PASSIVE, E.SPECIAL, T.ALL_FRIENDLY, "damage_reduction_2",
                 "All friendly units take 2 less damage (minimum 1)"),
        _ability("al-027-a2", "Forge of Heroes", A.CENTER, E.SPECIAL, T.ADJACENT, "transform",
                 "While in center: Adjacent units become Phoenix Guards when they would be defeated"),
    ], "A monument to eternal conflict.", "legendary"),
    _card("al-028", "Ashara, Flame of Revolution", 8, 10, 3, D.MORALE, [
        _ability("al-028-a1", "Revolutionary Fervor", A.PASSIVE, E.SPECIAL, T.ALL_FRIENDLY, "no_rout",
                 "Friendly units cannot Rout (minimum 1 Morale)"),
        _ability("al-028-a2", "Uprising", A.FLANK, E.SPECIAL, T.PLAYER, "double_morale_gain",
                 "While on flank: Double all Overall Army Morale restoration"),
        _ability("al-028-a3", "Martyr's End", A.PASSIVE, E.SPECIAL, T.ALL_FRIENDLY, "mass_buff_on_death",
                 "When defeated: All friendly units gain +3 Health/+3 Morale"),
    ], "From her sacrifice, a new dawn rises.", "legendary"),
]


ASHEN_LEGION_CATALOG = CardCatalog(ASHEN_LEGION_CARDS)


def get_card_by_id(card_id: str) -> Card | None:
    return ASHEN_LEGION_CATALOG.get(card_id)


def get_cards_by_rarity(rarity: str) -> list[Card]:
    """Cards in a rarity band, in catalog order."""
    if rarity not in RARITIES:
        raise ValueError(f"Unknown rarity: {rarity}")
    return [card for card in ASHEN_LEGION_CARDS if card.rarity == rarity]
