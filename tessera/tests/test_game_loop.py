"""
Tests for sessions and the game loop.

Tests:
- Session creation, lookup and ending
- Actions flow through the loop and replace the session snapshot
- Rejected actions leave the session untouched
"""

import time

import pytest

from ..engine_core.errors import ErrorCode
from ..engine_core.state import GamePhase
from ..engine_core.tiles import PENALTY_ROW
from ..session import SessionManager, SessionState, GameLoop, LoopState


@pytest.fixture
def manager():
    return SessionManager()


@pytest.fixture
def loop(manager, seed):
    return GameLoop(manager.create_session(seed=seed))


class TestSessionManager:
    """Tests for session lifecycle."""

    def test_create_session(self, manager, seed):
        session = manager.create_session(seed=seed)

        assert session.is_active()
        assert session.game_state.game_id == session.session_id
        assert session.game_state.initial_seed == seed
        assert manager.get_session(session.session_id) is session

    def test_same_seed_same_opening(self, manager):
        first = manager.create_session(seed=3).game_state
        second = manager.create_session(seed=3).game_state

        assert first.stores == second.stores
        assert first.player_turn == second.player_turn

    def test_default_seed(self):
        manager = SessionManager(default_seed=12)
        assert manager.create_session().game_state.initial_seed == 12

    def test_custom_players(self, manager):
        session = manager.create_session(seed=1, players=[("ann", "Ann"), ("bo", "Bo")])
        assert [p.name for p in session.game_state.players] == ["Ann", "Bo"]

    def test_end_session(self, manager):
        session = manager.create_session(seed=1)

        assert manager.end_session(session.session_id)
        assert session.state == SessionState.ENDED
        assert manager.get_session(session.session_id) is None
        assert not manager.end_session(session.session_id)

    def test_list_active_sessions(self, manager):
        a = manager.create_session(seed=1)
        b = manager.create_session(seed=2)
        manager.end_session(a.session_id)

        assert manager.list_active_sessions() == [b.session_id]

    def test_cleanup_only_finished_sessions(self, manager):
        finished = manager.create_session(seed=1)
        running = manager.create_session(seed=2)
        finished.replace_state(finished.game_state._copy_with(phase=GamePhase.GAME_OVER))
        finished.created_at = time.time() - 7200
        running.created_at = time.time() - 7200

        assert manager.cleanup_stale_sessions(max_age_seconds=3600) == 1
        assert manager.get_session(finished.session_id) is None
        assert manager.get_session(running.session_id) is running


class TestGameLoop:
    """Tests for driving a session through the loop."""

    def test_initial_loop_state(self, loop):
        assert loop.state == LoopState.AWAITING_DRAFT

    def test_draft_then_place(self, loop):
        state = loop.session.game_state
        player_id = state.player_turn
        tile = state.stores[0][0]

        drafted = loop.select_from_store(player_id, 0, tile)
        assert drafted.success
        assert drafted.loop_state == LoopState.AWAITING_PLACEMENT
        assert loop.session.game_state is drafted.state

        placed = loop.place_from_held(player_id, PENALTY_ROW)
        assert placed.success
        assert placed.loop_state == LoopState.AWAITING_DRAFT
        assert not placed.round_ended
        assert placed.state.player_turn != player_id
        assert loop.session.actions_applied == 2

    def test_rejected_action_keeps_snapshot(self, loop):
        before = loop.session.game_state
        other = next(p.player_id for p in before.players if p.player_id != before.player_turn)

        result = loop.select_from_store(other, 0, before.stores[0][0])

        assert not result.success
        assert result.error_code == ErrorCode.NOT_PLAYERS_TURN
        assert result.state is before
        assert loop.session.game_state is before
        assert loop.session.actions_applied == 0

    def test_new_game_restarts_session(self, loop):
        player_id = loop.session.game_state.player_turn
        loop.select_from_store(player_id, 0, loop.session.game_state.stores[0][0])

        result = loop.new_game(seed=8)

        assert result.success
        assert result.loop_state == LoopState.AWAITING_DRAFT
        assert result.state.initial_seed == 8
        assert result.state.game_id == loop.session.session_id

    def test_round_end_reported(self, loop):
        for _ in range(500):
            result = loop.submit(loop.legal_actions()[0])
            assert result.success
            if result.round_ended:
                break
        else:
            pytest.fail("No round ended")

        assert result.changes[-1].startswith(("Round", "Game over"))

    def test_game_over_marks_session(self, loop):
        over = loop.session.game_state._copy_with(phase=GamePhase.GAME_OVER)
        loop.session.replace_state(over)

        assert loop.state == LoopState.GAME_OVER
        assert loop.session.state == SessionState.GAME_OVER
        assert loop.legal_actions()[0].action_type.value == "new_game"
