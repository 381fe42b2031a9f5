"""
Board module for Minesweeper game.

Implements the grid of cells, random mine placement, adjacency
counting and the flood-fill reveal of empty regions.
"""
import logging
import random
from dataclasses import dataclass, field
from numbers import Integral
from typing import Iterable, List, Optional, Set, Tuple

from .cell import Cell, CellState
from .errors import BoundsError, ConfigError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
        first_click_safe: Defer mine placement to the first reveal and
            keep that cell mine-free.
        seed: Seed for mine placement, or None for a random layout.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10
    first_click_safe: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("width", "height", "num_mines"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if self.width < 1 or self.height < 1:
            raise ConfigError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ConfigError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)
DEFAULT = BoardConfig(10, 10, 15)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and mine layout. Game phase is tracked by
    ``Game``; the board only knows which cells are revealed or flagged.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _fixed_mines: Optional[Set[Position]] = field(default=None, repr=False)
    _mines_placed: bool = False
    _safe_revealed: int = 0
    _flags: int = 0

    def __post_init__(self) -> None:
        """Create the grid and, unless deferred, place the mines."""
        self._rng = random.Random(self.config.seed)
        self._init_grid()

    @classmethod
    def from_mines(
        cls, config: BoardConfig, mines: Iterable[Position]
    ) -> "Board":
        """
        Build a board with mines at exactly the given positions.

        Args:
            config: Board configuration; ``num_mines`` must match and
                ``first_click_safe`` must be off.
            mines: (row, col) positions holding mines.

        Raises:
            ConfigError: If the layout does not fit the configuration.
        """
        if config.first_click_safe:
            raise ConfigError(
                "A fixed mine layout cannot honor first_click_safe"
            )
        layout = set(mines)
        if len(layout) != config.num_mines:
            raise ConfigError(
                f"Expected {config.num_mines} mines, got {len(layout)}"
            )
        for row, col in layout:
            if not (0 <= row < config.height and 0 <= col < config.width):
                raise ConfigError(f"Mine at ({row}, {col}) is off the board")
        return cls(config, _fixed_mines=layout)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a fresh grid and place mines unless placement is deferred."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._mines_placed = False
        self._safe_revealed = 0
        self._flags = 0

        if self._fixed_mines is not None:
            self._set_mines(self._fixed_mines)
        elif not self.config.first_click_safe:
            self._place_mines(exclude=None)

    def _place_mines(self, exclude: Optional[Position]) -> None:
        """
        Place mines uniformly at random.

        Args:
            exclude: (row, col) position to keep mine-free, or None.
        """
        positions = self._get_valid_mine_positions(exclude)
        mine_positions = self._rng.sample(positions, self.config.num_mines)
        self._set_mines(mine_positions)
        logger.debug(
            "Placed %d mines on %dx%d board (excluded %s)",
            self.config.num_mines,
            self.config.width,
            self.config.height,
            exclude,
        )

    def _get_valid_mine_positions(
        self, exclude: Optional[Position]
    ) -> List[Position]:
        """Get all valid positions for mine placement."""
        positions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if (row, col) != exclude:
                    positions.append((row, col))
        return positions

    def _set_mines(self, mine_positions: Iterable[Position]) -> None:
        for row, col in mine_positions:
            self._grid[row][col].is_mine = True
        self._calculate_adjacent_mines()
        self._mines_placed = True

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.height):
            for col in range(self.config.width):
                count = self._count_adjacent_mines(row, col)
                self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    # ========================================================================
    # Cell Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> List[Position]:
        """
        Reveal a hidden cell, flood-filling from empty cells.

        Uses an explicit stack so large empty regions do not hit the
        recursion limit. The fill stops at numbered cells and never
        opens flagged cells.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Positions revealed by this call, starting with (row, col).
            Empty if the cell is out of bounds, flagged or already open.
        """
        if not self.in_bounds(row, col):
            return []
        if not self._grid[row][col].is_hidden:
            return []

        if not self._mines_placed:
            self._place_mines(exclude=(row, col))

        revealed = []
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            cell = self._grid[current_row][current_col]
            if not cell.reveal():
                continue
            revealed.append((current_row, current_col))
            if cell.is_mine:
                continue
            self._safe_revealed += 1
            if cell.adjacent_mines > 0:
                continue
            for neighbor in self.neighbors(current_row, current_col):
                if self._grid[neighbor[0]][neighbor[1]].is_hidden:
                    stack.append(neighbor)

        if len(revealed) > 1:
            logger.debug("Flood fill from (%d, %d) opened %d cells",
                         row, col, len(revealed))
        return revealed

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False if out of bounds or revealed.
        """
        if not self.in_bounds(row, col):
            return False
        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return False
        self._flags += 1 if cell.is_flagged else -1
        return True

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Clear the board for a new game.

        Args:
            seed: Reseed mine placement before generating the new layout.
        """
        if seed is not None:
            self._rng.seed(seed)
        self._init_grid()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mines_placed(self) -> bool:
        """Check if the mine layout has been generated yet."""
        return self._mines_placed

    @property
    def mine_positions(self) -> Set[Position]:
        """Positions of every mine (empty before deferred placement)."""
        return {
            (row, col)
            for row in range(self.config.height)
            for col in range(self.config.width)
            if self._grid[row][col].is_mine
        }

    @property
    def revealed_count(self) -> int:
        """Number of revealed mine-free cells."""
        return self._safe_revealed

    @property
    def flag_count(self) -> int:
        return self._flags

    @property
    def safe_cells_remaining(self) -> int:
        """Mine-free cells still to be revealed."""
        return self.config.safe_cells - self._safe_revealed

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            BoundsError: If the position is outside the board.
        """
        if not self.in_bounds(row, col):
            raise BoundsError(row, col)
        return self._grid[row][col]

    def rows(self) -> List[List[Cell]]:
        """Row-major view of the grid."""
        return self._grid

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        actions = []
        for row in range(self.config.height):
            for col in range(self.config.width):
                if self._grid[row][col].state == CellState.HIDDEN:
                    actions.append((row, col))
        return actions
