"""
Match Setup - Creates an active two-player match.

This module handles:
- Building decks from a faction's card pool
- Shuffling with seed for determinism
- Picking commanders
- Choosing the starting player
- Dealing starting hands
"""

from __future__ import annotations
import logging
import random
import uuid

from ..engine_core.constants import DEFAULT_RULES, MAX_DECK_SIZE, MIN_DECK_SIZE, GameRules
from ..engine_core.manager import GameManager
from ..engine_core.state import GameState, GameStatus, create_player
from .registry import get_faction

logger = logging.getLogger(__name__)


def setup_match(
    player_names: list[str],
    faction: str = "ashen_legion",
    commander_ids: list[str] | None = None,
    deck_size: int = MIN_DECK_SIZE,
    random_seed: int | None = None,
    rules: GameRules | None = None,
    game_id: str | None = None,
) -> GameState:
    """
    Set up a new match.

    Args:
        player_names: Display names for the two players
        faction: Faction slug both decks are built from
        commander_ids: Commander per player (defaults to the faction's first two)
        deck_size: Cards per deck, taken from the front of the card pool
        random_seed: Seed for deterministic shuffling and starting player
        rules: Per-match tunables
        game_id: Match id (generated if not provided)

    Returns:
        Active GameState with starting hands dealt
    """
    if len(player_names) != 2:
        raise ValueError("A match needs exactly two players")

    source = get_faction(faction)
    rules = rules or DEFAULT_RULES

    if not MIN_DECK_SIZE <= deck_size <= MAX_DECK_SIZE:
        raise ValueError(f"Deck size must be between {MIN_DECK_SIZE} and {MAX_DECK_SIZE}")
    pool = list(source.cards)
    if deck_size > len(pool):
        raise ValueError(f"{source.name} has only {len(pool)} cards")

    if commander_ids is None:
        commander_ids = source.commanders.ids()[:2]
    if len(commander_ids) != 2:
        raise ValueError("Exactly one commander per player is required")

    seed = random_seed if random_seed is not None else random.randrange(1, 2**31)

    players = []
    for i, (name, commander_id) in enumerate(zip(player_names, commander_ids)):
        commander = source.commanders.get(commander_id)
        if commander is None:
            raise ValueError(f"Unknown commander for {source.name}: {commander_id}")
        players.append(create_player(
            player_id=f"player_{i + 1}",
            name=name,
            commander=commander.fresh_copy(),
            deck=pool[:deck_size],
            max_overall_army_morale=rules.default_army_morale,
        ))

    state = GameState(
        game_id=game_id or f"match_{uuid.uuid4().hex[:8]}",
        players=players,
        current_player_idx=random.Random(f"{seed}:start").randrange(2),
        status=GameStatus.ACTIVE,
        random_seed=seed,
    )

    for player in state.players:
        state.shuffle(player.deck)

    GameManager(state, catalog=source.cards, rules=rules).initialize_game()

    logger.info(
        f"Match {state.game_id} created: {players[0].name} vs {players[1].name} "
        f"({source.name}, seed {seed}); {state.current_player.name} starts"
    )
    return state
