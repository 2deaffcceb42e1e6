"""
Session Manager - Creates and manages in-memory matches.

LIFECYCLE:
1. Caller creates a match -> setup_match builds an active GameState
2. During the match:
   - Each submitted action takes the match's lock
   - A fresh GameManager is built around the stored state
   - The action is applied and the ActionResult returned
3. Match ends (win or surrender) -> session stays readable until removed
4. Stale or finished sessions are cleaned up periodically

PERSISTENCE RULES:
- No database; sessions live in memory only
- The engine holds no locks; serializing actions per match is done here
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import threading
import time
import uuid

from ..engine_core.action import ActionResult, GameAction
from ..engine_core.constants import DEFAULT_RULES, MIN_DECK_SIZE, GameRules
from ..engine_core.manager import GameManager
from ..engine_core.state import GameState
from ..factions import get_faction, setup_match

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a match session."""
    ACTIVE = "active"  # Match in progress
    FINISHED = "finished"  # Someone won or surrendered
    ABANDONED = "abandoned"  # Removed before finishing


@dataclass
class MatchSession:
    """
    One in-memory match.

    Contains:
    - The canonical GameState
    - The faction and rules the match was built with
    - A lock serializing actions on this match
    """
    match_id: str
    game_state: GameState
    faction: str
    created_at: float
    rules: GameRules = DEFAULT_RULES
    state: SessionState = SessionState.ACTIVE
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE and self.game_state.is_active

    def manager(self) -> GameManager:
        """A fresh GameManager around the stored state."""
        return GameManager(
            self.game_state,
            catalog=get_faction(self.faction).cards,
            rules=self.rules,
        )


class SessionManager:
    """
    Manages match sessions.

    Responsibilities:
    - Create matches
    - Serialize actions per match
    - Track and clean up sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, MatchSession] = {}
        self._lock = threading.Lock()

    def create_match(
        self,
        player_names: list[str],
        faction: str = "ashen_legion",
        commander_ids: list[str] | None = None,
        deck_size: int = MIN_DECK_SIZE,
        random_seed: int | None = None,
        rules: GameRules | None = None,
    ) -> MatchSession:
        """
        Create a new match.

        Raises ValueError for an unknown faction or commander, a bad deck
        size, or a player count other than two.
        """
        match_id = str(uuid.uuid4())
        rules = rules or DEFAULT_RULES
        game_state = setup_match(
            player_names,
            faction=faction,
            commander_ids=commander_ids,
            deck_size=deck_size,
            random_seed=random_seed,
            rules=rules,
            game_id=match_id,
        )

        session = MatchSession(
            match_id=match_id,
            game_state=game_state,
            faction=faction,
            created_at=time.time(),
            rules=rules,
        )
        with self._lock:
            self._sessions[match_id] = session
        return session

    def get_session(self, match_id: str) -> MatchSession | None:
        return self._sessions.get(match_id)

    def apply_action(self, match_id: str, action: GameAction) -> ActionResult | None:
        """
        Apply an action to a match.

        Returns None if the match does not exist.
        """
        session = self.get_session(match_id)
        if session is None:
            return None

        with session.lock:
            result = session.manager().apply(action)
            if result.success and not session.game_state.is_active:
                session.state = SessionState.FINISHED
        return result

    def end_session(self, match_id: str) -> bool:
        """Remove a match from memory. Returns False if it did not exist."""
        with self._lock:
            session = self._sessions.pop(match_id, None)
        if session is None:
            return False
        if session.state == SessionState.ACTIVE:
            session.state = SessionState.ABANDONED
        logger.info(f"Match {match_id} removed ({session.state.value})")
        return True

    def list_active_matches(self) -> list[str]:
        """List IDs of matches still in progress."""
        return [
            mid for mid, session in self._sessions.items()
            if session.is_active()
        ]

    def list_matches(self) -> list[str]:
        return list(self._sessions)

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Remove sessions idle for longer than max_age_seconds.

        Idle time is measured from the match's last accepted action.
        Returns the number of sessions removed.
        """
        current_time = time.time()
        stale = [
            match_id for match_id, session in list(self._sessions.items())
            if current_time - session.game_state.updated_at > max_age_seconds
        ]
        for match_id in stale:
            self.end_session(match_id)
        return len(stale)
