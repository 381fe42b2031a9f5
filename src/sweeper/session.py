"""
Session boundary for a presentation layer.

A renderer holds one GameSession, calls ``open_cell``/``toggle_flag``
on player input and re-reads ``get_game_state`` to redraw.
"""
import logging
from threading import RLock
from typing import Optional

from .board import DEFAULT, BoardConfig
from .game import Game

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the current game and serializes access to it.

    Every session method holds the lock for its full duration, so a
    session may be shared between threads. The ``game`` property is
    for reading only.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        game: Optional[Game] = None,
    ) -> None:
        """
        Args:
            config: Configuration for the first game (default: 10x10
                with 15 mines).
            game: Existing game to adopt instead of creating one.
        """
        self._lock = RLock()
        self._game = game if game is not None else Game(config or DEFAULT)

    def new_game(self, width: int, height: int, num_mines: int) -> Game:
        """
        Replace the current game with a fresh one.

        Raises:
            ConfigError: If the dimensions or mine count are invalid. The
                current game is left untouched in that case.
        """
        game = Game.new(width, height, num_mines)
        with self._lock:
            self._game = game
        logger.info("New %dx%d game with %d mines", width, height, num_mines)
        return game

    def restart(self) -> None:
        """Start over with the current configuration."""
        with self._lock:
            self._game.reset()

    def get_game_state(self) -> str:
        """Text snapshot of the board, one space-separated line per row."""
        with self._lock:
            return self._game.to_text()

    def open_cell(self, row: int, col: int) -> bool:
        with self._lock:
            return self._game.open_cell(row, col)

    def toggle_flag(self, row: int, col: int) -> bool:
        with self._lock:
            return self._game.toggle_flag(row, col)

    @property
    def game(self) -> Game:
        """
        The current game, for read-only inspection.

        Calls made directly on the returned game bypass the session
        lock; mutate through ``open_cell``/``toggle_flag`` instead.
        """
        with self._lock:
            return self._game
