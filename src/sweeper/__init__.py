"""
Minesweeper rule engine.

Provides board generation, cell reveal and flagging, win/loss
tracking and board snapshots for a renderer.
"""
from .errors import MinesweeperError, ConfigError, BoundsError
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    Position,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DEFAULT,
)
from .game import Game, GameState
from .session import GameSession

__all__ = [
    "MinesweeperError",
    "ConfigError",
    "BoundsError",
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "Position",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DEFAULT",
    "Game",
    "GameState",
    "GameSession",
]
