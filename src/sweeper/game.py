"""
Game module for Minesweeper.

Wraps a Board with the win/loss phase machine and produces the
text and array snapshots a renderer reads after every move.
"""
import logging
from enum import Enum, auto
from typing import List, Optional

import numpy as np

from .board import Board, BoardConfig, Position
from .cell import Cell, EXPLODED_TOKEN, MINE_TOKEN

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single Minesweeper game.

    Once the game is won or lost, open and flag requests are ignored,
    so the board snapshot no longer changes.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        board: Optional[Board] = None,
    ) -> None:
        """
        Initialize the game.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
                Ignored when ``board`` is given.
            board: Prebuilt board, e.g. from ``Board.from_mines``.
        """
        if board is None:
            board = Board(config or BoardConfig())
        self._board = board
        self._state = GameState.PLAYING
        self._exploded: Optional[Position] = None

    @classmethod
    def new(cls, width: int, height: int, num_mines: int, **options) -> "Game":
        """
        Start a game from raw dimensions.

        Raises:
            ConfigError: If the dimensions or mine count are invalid.
        """
        return cls(BoardConfig(width, height, num_mines, **options))

    # ========================================================================
    # Player Actions
    # ========================================================================

    def open_cell(self, row: int, col: int) -> bool:
        """
        Open the cell at (row, col).

        Opening a mine loses the game. Opening the last mine-free cell
        wins it. Out-of-bounds, flagged or already revealed cells, and
        any request after the game has ended, are ignored.

        Returns:
            True if any cell was revealed, False if the request was a no-op.
        """
        if self._state != GameState.PLAYING:
            return False

        revealed = self._board.reveal(row, col)
        if not revealed:
            return False

        if self._board.get_cell(row, col).is_mine:
            self._state = GameState.LOST
            self._exploded = (row, col)
            logger.info("Game lost: mine opened at (%d, %d)", row, col)
        elif self._board.safe_cells_remaining == 0:
            self._state = GameState.WON
            logger.info("Game won on %dx%d board", self.config.width,
                        self.config.height)
        return True

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Flag or unflag a hidden cell.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if self._state != GameState.PLAYING:
            return False
        return self._board.toggle_flag(row, col)

    def reset(self, seed: Optional[int] = None) -> None:
        """Start over on a fresh board with the same configuration."""
        self._board.reset(seed)
        self._state = GameState.PLAYING
        self._exploded = None

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def config(self) -> BoardConfig:
        return self._board.config

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._state == GameState.LOST

    @property
    def exploded(self) -> Optional[Position]:
        """Position of the mine that ended the game, if any."""
        return self._exploded

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags placed; negative when over-flagged."""
        return self.config.num_mines - self._board.flag_count

    def get_valid_actions(self) -> List[Position]:
        if self._state != GameState.PLAYING:
            return []
        return self._board.get_valid_actions()

    # ========================================================================
    # Serialization
    # ========================================================================

    def to_text(self) -> str:
        """
        Render the board as text, one line per row.

        Cells are separated by single spaces. During play a cell is "."
        (hidden), "F" (flagged) or its adjacent mine count. After a loss
        the whole board is shown: mines as "*", the opened mine as "X",
        every other cell as its count.
        """
        lines = []
        for row, cells in enumerate(self._board.rows()):
            tokens = [
                self._token(row, col, cell) for col, cell in enumerate(cells)
            ]
            lines.append(" ".join(tokens))
        return "\n".join(lines)

    def _token(self, row: int, col: int, cell: Cell) -> str:
        if self._state != GameState.LOST:
            return cell.to_token()
        if not cell.is_mine:
            return str(cell.adjacent_mines)
        if (row, col) == self._exploded:
            return EXPLODED_TOKEN
        return MINE_TOKEN

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for row, cells in enumerate(self._board.rows()):
            for col, cell in enumerate(cells):
                obs[row, col] = cell.to_observation()
        return obs

    def __str__(self) -> str:
        return self.to_text()
