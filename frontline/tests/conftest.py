"""
Pytest fixtures for Frontline tests.
"""

import pytest

from ..engine_core.catalog import CardCatalog
from ..engine_core.manager import GameManager
from ..engine_core.state import GameState, PlayerState, create_player
from ..engine_core.units import BoardPosition, BoardRow, Card, Unit, create_unit_from_card
from ..factions import setup_match
from ..factions.ashen_legion import (
    ASHEN_LEGION_CATALOG,
    get_card_by_id,
    get_commander_by_id,
)

P1 = "p1"
P2 = "p2"


def card(card_id: str) -> Card:
    """Look up an Ashen Legion card by id."""
    found = get_card_by_id(card_id)
    assert found is not None, card_id
    return found


def make_unit(card_id: str, owner_id: str = P1, unit_id: str | None = None) -> Unit:
    """Fresh unit for a catalog card, not yet on the board."""
    return create_unit_from_card(card(card_id), owner_id, unit_id or f"{owner_id}-{card_id}")


def place(player: PlayerState, card_id: str, slot: int, reserve: bool = False) -> Unit:
    """Put a fresh unit straight onto a player's board."""
    unit = make_unit(card_id, player.player_id, f"{player.player_id}-{card_id}-{slot}")
    if reserve:
        unit.position = BoardPosition(row=BoardRow.REINFORCEMENT, slot=slot)
        player.reinforcement_row[slot] = unit
    else:
        unit.position = BoardPosition(row=BoardRow.FRONT_LINE, slot=slot)
        unit.face_down = False
        player.front_line[slot] = unit
    return unit


@pytest.fixture
def catalog() -> CardCatalog:
    """The Ashen Legion card catalog."""
    return ASHEN_LEGION_CATALOG


@pytest.fixture
def blank_state() -> GameState:
    """
    Two-player state with empty hands and boards; p1 to act on turn 1.

    Each deck holds al-001..al-005 with al-005 on top. p1 commands Ash
    Storm, p2 commands Phoenix Resurrection.
    """
    deck = [card(f"al-00{i}") for i in range(1, 6)]
    players = [
        create_player(P1, "Ada", get_commander_by_id("cmd-al-002").fresh_copy(), deck),
        create_player(P2, "Brock", get_commander_by_id("cmd-al-001").fresh_copy(), deck),
    ]
    return GameState(game_id="test_game", players=players, random_seed=7)


@pytest.fixture
def p1(blank_state: GameState) -> PlayerState:
    """The acting player of blank_state."""
    return blank_state.players[0]


@pytest.fixture
def p2(blank_state: GameState) -> PlayerState:
    """The waiting player of blank_state."""
    return blank_state.players[1]


@pytest.fixture
def manager(blank_state: GameState, catalog: CardCatalog) -> GameManager:
    """GameManager around blank_state."""
    return GameManager(blank_state, catalog=catalog)


@pytest.fixture
def seeded_match() -> GameState:
    """A freshly dealt match with a fixed seed."""
    return setup_match(["Ada", "Brock"], random_seed=42, game_id="seeded")
