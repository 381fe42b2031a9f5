"""
Exceptions raised by the Minesweeper engine.

Only board construction raises. Player actions that cannot apply
(bad coordinates, flagged targets, finished games) are no-ops.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class ConfigError(MinesweeperError, ValueError):
    """Invalid board dimensions, mine count or mine layout."""


class BoundsError(MinesweeperError, IndexError):
    """Coordinate outside the board."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(row, col)
        self.row = row
        self.col = col

    def __str__(self) -> str:
        return f"Position ({self.row}, {self.col}) is outside the board"
