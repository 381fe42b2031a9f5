"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Cell, Game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def corner_mine_board() -> Board:
    """
    3x3 board with a single mine in the top-left corner.

        * 1 0
        1 1 0
        0 0 0
    """
    return Board.from_mines(BoardConfig(3, 3, 1), [(0, 0)])


@pytest.fixture
def two_mine_board() -> Board:
    """
    3x3 board with mines in opposite corners.

        * 1 0
        1 2 1
        0 1 *
    """
    return Board.from_mines(BoardConfig(3, 3, 2), [(0, 0), (2, 2)])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines down the middle."""
    return Board.from_mines(
        BoardConfig(5, 5, 5), [(row, 2) for row in range(5)]
    )


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def corner_game(corner_mine_board: Board) -> Game:
    """Game over the single corner mine layout."""
    return Game(board=corner_mine_board)


@pytest.fixture
def two_mine_game(two_mine_board: Board) -> Game:
    """Game over the opposite corners layout."""
    return Game(board=two_mine_board)


@pytest.fixture
def wall_game(wall_board: Board) -> Game:
    """Game over the mine wall layout."""
    return Game(board=wall_board)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
