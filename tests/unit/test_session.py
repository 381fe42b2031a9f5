"""
Unit tests for GameSession.

Tests the boundary a presentation layer drives: state query,
open/flag mutations, new games and shared use across threads.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest
from sweeper import Board, ConfigError, Game, GameSession


@pytest.fixture
def session() -> GameSession:
    return GameSession()


@pytest.fixture
def corner_session(corner_mine_board: Board) -> GameSession:
    """Session whose current game uses the single corner mine layout."""
    return GameSession(game=Game(board=corner_mine_board))


class TestSessionState:
    """Test the text state surface."""

    def test_default_board_is_ten_by_ten(self, session: GameSession) -> None:
        """Session starts on a hidden 10x10 board with 15 mines."""
        lines = session.get_game_state().split("\n")
        assert len(lines) == 10
        assert all(line.split(" ") == ["."] * 10 for line in lines)
        assert session.game.config.num_mines == 15

    def test_open_then_requery(self, corner_session: GameSession) -> None:
        """Open followed by a state read shows the revealed cell."""
        assert corner_session.open_cell(1, 1) is True
        assert corner_session.get_game_state() == ". . .\n. 1 .\n. . ."

    def test_toggle_flag_then_requery(
        self, corner_session: GameSession
    ) -> None:
        """Flag followed by a state read shows the flag."""
        assert corner_session.toggle_flag(0, 0) is True
        assert corner_session.get_game_state() == "F . .\n. . .\n. . ."

    def test_stray_input_is_ignored(self, corner_session: GameSession) -> None:
        """Off-board input leaves the state unchanged."""
        before = corner_session.get_game_state()
        assert corner_session.open_cell(-5, 40) is False
        assert corner_session.toggle_flag(3, 0) is False
        assert corner_session.get_game_state() == before


class TestSessionLifecycle:
    """Test replacing and restarting games."""

    def test_new_game_replaces_board(self, session: GameSession) -> None:
        """New game becomes the current game."""
        game = session.new_game(4, 2, 1)
        assert session.game is game
        assert session.get_game_state() == ". . . .\n. . . ."

    def test_invalid_new_game_keeps_current(
        self, session: GameSession
    ) -> None:
        """Failed new game keeps the current one."""
        current = session.game
        with pytest.raises(ConfigError):
            session.new_game(3, 3, 9)
        assert session.game is current

    def test_restart_after_loss(self, corner_session: GameSession) -> None:
        """Restart after a loss gives a fresh board."""
        corner_session.open_cell(0, 0)
        assert corner_session.game.is_lost is True
        corner_session.restart()
        assert corner_session.game.is_playing is True
        assert corner_session.get_game_state() == ". . .\n. . .\n. . ."


class TestSessionThreads:
    """Test shared use of one session from several threads."""

    def test_concurrent_flags_are_all_applied(
        self, session: GameSession
    ) -> None:
        """Flags toggled from many threads are all applied."""
        positions = [(row, col) for row in range(10) for col in range(10)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(lambda pos: session.toggle_flag(*pos), positions)
            )
        assert all(results)
        assert session.game.board.flag_count == 100
        assert session.game.mines_remaining == -85
