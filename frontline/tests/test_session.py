"""
Tests for session management.

Tests:
- Match creation and lookup
- Action serialization per match
- Lifecycle states and cleanup
"""

from concurrent.futures import ThreadPoolExecutor
import time

import pytest

from ..engine_core.action import GameAction
from ..session import SessionManager, SessionState


@pytest.fixture
def sessions():
    """Create a fresh session manager."""
    return SessionManager()


@pytest.fixture
def session(sessions):
    """A seeded match session."""
    return sessions.create_match(["Ada", "Brock"], random_seed=7)


class TestSessionManager:
    """Tests for SessionManager."""

    def test_create_match(self, sessions, session):
        """A created match is registered under its own game id."""
        assert session.match_id == session.game_state.game_id
        assert sessions.get_session(session.match_id) is session
        assert session.state == SessionState.ACTIVE
        assert session.is_active()

    def test_unknown_match(self, sessions):
        """Actions on unknown matches return None."""
        assert sessions.apply_action("missing", GameAction.end_turn("player_1")) is None

    def test_apply_action(self, sessions, session):
        """Actions are applied to the stored state."""
        actor = session.game_state.current_player.player_id

        result = sessions.apply_action(session.match_id, GameAction.end_turn(actor))

        assert result.success
        assert session.game_state.turn == 2

    def test_finished_match(self, sessions, session):
        """A surrender marks the session finished but keeps it readable."""
        actor = session.game_state.current_player.player_id

        sessions.apply_action(session.match_id, GameAction.surrender(actor))

        assert session.state == SessionState.FINISHED
        assert session.match_id not in sessions.list_active_matches()
        assert session.match_id in sessions.list_matches()

    def test_end_session(self, sessions, session):
        """Removing an active match abandons it."""
        assert sessions.end_session(session.match_id)

        assert session.state == SessionState.ABANDONED
        assert sessions.get_session(session.match_id) is None
        assert not sessions.end_session(session.match_id)

    def test_cleanup_stale_sessions(self, sessions, session):
        """Idle matches are cleaned up; fresh ones are kept."""
        fresh = sessions.create_match(["Cy", "Di"], random_seed=8)
        session.game_state.updated_at = time.time() - 7200

        removed = sessions.cleanup_stale_sessions(max_age_seconds=3600)

        assert removed == 1
        assert sessions.get_session(session.match_id) is None
        assert sessions.get_session(fresh.match_id) is fresh

    def test_concurrent_actions_serialized(self, sessions, session):
        """Racing end-turn submissions for one player advance exactly one turn."""
        actor = session.game_state.current_player.player_id

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(
                lambda _: sessions.apply_action(session.match_id, GameAction.end_turn(actor)),
                range(8),
            ))

        assert sum(r.success for r in results) == 1
        assert session.game_state.turn == 2
