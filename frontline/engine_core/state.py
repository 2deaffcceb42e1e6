"""
Game State - Players, commanders and the match container.

Design principles:
- Mutable in place: every accepted action mutates the one GameState
- Serializable: flat values only (units reference cards by id)
- Exclusive ownership: a unit lives in exactly one zone at a time
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable
import random
import time

from .constants import (
    DEFAULT_OVERALL_ARMY_MORALE,
    FRONT_LINE_SIZE,
    REINFORCEMENT_ROW_SIZE,
)
from .units import Card, Unit


class GamePhase(str, Enum):
    """Informational turn phase; actions are gated by turn ownership only."""
    PLAY = "play"
    DEPLOY = "deploy"
    COMMANDER = "commander"
    COMBAT = "combat"
    END = "end"


class GameStatus(str, Enum):
    WAITING = "waiting"
    ACTIVE = "active"
    FINISHED = "finished"


# =============================================================================
# Commander
# =============================================================================

@dataclass
class CommanderEffect:
    """Effect payload; value shape depends on type (int or dict)."""
    type: str
    value: Any = None


@dataclass
class CommanderAbility:
    id: str
    name: str
    cooldown: int
    effect: CommanderEffect
    description: str = ""
    current_cooldown: int = 0


@dataclass
class Commander:
    """
    A player's commander with one cooldown-gated ability.

    Catalog entries are templates; each player gets its own copy.
    """
    id: str
    name: str
    faction: str
    ability: CommanderAbility

    @property
    def is_ready(self) -> bool:
        return self.ability.current_cooldown == 0

    def start_cooldown(self) -> None:
        self.ability.current_cooldown = self.ability.cooldown

    def tick_cooldown(self) -> None:
        if self.ability.current_cooldown > 0:
            self.ability.current_cooldown -= 1

    def fresh_copy(self) -> Commander:
        """Copy with an independent, reset cooldown."""
        commander = deepcopy(self)
        commander.ability.current_cooldown = 0
        return commander


# =============================================================================
# Player
# =============================================================================

@dataclass
class PlayerState:
    """
    Per-player mutable state.

    deck is ordered with the top card at the end of the list.
    """
    player_id: str
    name: str
    commander: Commander
    overall_army_morale: int = DEFAULT_OVERALL_ARMY_MORALE
    max_overall_army_morale: int = DEFAULT_OVERALL_ARMY_MORALE

    deck: list[Card] = field(default_factory=list)
    hand: list[Card] = field(default_factory=list)
    discard_pile: list[Card] = field(default_factory=list)
    front_line: list[Unit | None] = field(
        default_factory=lambda: [None] * FRONT_LINE_SIZE
    )
    reinforcement_row: list[Unit | None] = field(
        default_factory=lambda: [None] * REINFORCEMENT_ROW_SIZE
    )

    # Per-turn one-shot flags
    has_played_unit_this_turn: bool = False
    has_deployed_this_turn: bool = False
    has_used_commander_this_turn: bool = False

    has_mulliganed: bool = False

    def find_hand_card(self, card_id: str) -> int:
        """Index of the first hand card with card_id, or -1."""
        for i, card in enumerate(self.hand):
            if card.id == card_id:
                return i
        return -1

    def front_line_units(self) -> list[Unit]:
        return [unit for unit in self.front_line if unit is not None]

    def reset_turn_flags(self) -> None:
        self.has_played_unit_this_turn = False
        self.has_deployed_this_turn = False
        self.has_used_commander_this_turn = False


def create_player(
    player_id: str,
    name: str,
    commander: Commander,
    deck: list[Card],
    max_overall_army_morale: int = DEFAULT_OVERALL_ARMY_MORALE,
) -> PlayerState:
    return PlayerState(
        player_id=player_id,
        name=name,
        commander=commander,
        overall_army_morale=max_overall_army_morale,
        max_overall_army_morale=max_overall_army_morale,
        deck=list(deck),
    )


def draw_cards(
    player: PlayerState,
    count: int,
    shuffle: Callable[[list[Card]], None],
) -> list[Card]:
    """
    Draw up to count cards from the top of the deck into the hand.

    An empty deck is refilled from the shuffled discard pile first; with
    both empty, nothing is drawn.
    """
    drawn = []
    for _ in range(count):
        if not player.deck and player.discard_pile:
            player.deck = list(player.discard_pile)
            player.discard_pile = []
            shuffle(player.deck)

        if not player.deck:
            break

        card = player.deck.pop()
        player.hand.append(card)
        drawn.append(card)
    return drawn


# =============================================================================
# Game
# =============================================================================

@dataclass
class GameState:
    """
    Complete match state.

    This is the canonical state that the GameManager operates on.
    """
    game_id: str
    players: list[PlayerState]  # Always exactly two
    current_player_idx: int = 0
    turn: int = 1
    phase: GamePhase = GamePhase.PLAY
    status: GameStatus = GameStatus.ACTIVE
    winner: str | None = None
    last_action: Any | None = None  # GameAction

    created_at: float = field(default_factory=time.time)
    updated_at: float = field(default_factory=time.time)

    # Deterministic randomness: shuffle n uses Random(f"{seed}:{n}")
    random_seed: int = 0
    shuffle_count: int = 0

    next_unit_number: int = 1

    def __post_init__(self):
        if len(self.players) != 2:
            raise ValueError("A match needs exactly two players")

    @property
    def current_player(self) -> PlayerState:
        return self.players[self.current_player_idx]

    @property
    def opponent(self) -> PlayerState:
        return self.players[1 - self.current_player_idx]

    @property
    def is_active(self) -> bool:
        return self.status == GameStatus.ACTIVE

    def get_player(self, player_id: str) -> PlayerState | None:
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def player_index(self, player_id: str) -> int:
        for i, p in enumerate(self.players):
            if p.player_id == player_id:
                return i
        return -1

    def other_player(self, player: PlayerState) -> PlayerState:
        return self.players[1] if self.players[0] is player else self.players[0]

    def alloc_unit_id(self) -> str:
        unit_id = f"{self.game_id}-u{self.next_unit_number}"
        self.next_unit_number += 1
        return unit_id

    def shuffle(self, cards: list[Card]) -> None:
        """Shuffle cards in place with the next seeded RNG in sequence."""
        rng = random.Random(f"{self.random_seed}:{self.shuffle_count}")
        self.shuffle_count += 1
        rng.shuffle(cards)

    def touch(self) -> None:
        self.updated_at = time.time()

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)


def switch_turn(state: GameState) -> None:
    """Hand the turn to the other player and clear their per-turn flags."""
    state.current_player_idx = 1 - state.current_player_idx
    state.turn += 1
    state.phase = GamePhase.PLAY
    state.current_player.reset_turn_flags()
