"""2048 game session: owns the board, the score and the end-of-game flags."""

import logging
from typing import Callable

from numpy import ndarray
from numpy.random import Generator, default_rng

from mini2048.config import GameConfiguration
from mini2048.core.direction import Direction
from mini2048.core.gameboard import Unchanged, apply_move, is_game_over, is_won, new_grid, spawn_tile

logger = logging.getLogger(__name__)


class Game2048:
    """
    2048 game session.

    This class holds the mutable state around the pure board functions: the current board, the cumulative
    score, and the ``won`` and ``game_over`` flags, which are only ever set. Calls must be serialized by the
    caller; one move is processed to completion before the next one is accepted.
    """

    # ##: All Actions.
    ACTIONS = {direction.value: direction for direction in Direction}

    def __init__(
        self,
        config: GameConfiguration | None = None,
        on_game_over: Callable[[int], None] | None = None,
        seed: int | None = None,
    ):
        """
        Initialize the 2048 game session.

        Parameters
        ----------
        config : GameConfiguration, optional
            Session configuration (default is ``GameConfiguration()``).
        on_game_over : Callable[[int], None], optional
            Called once with the final score when the game ends (e.g. a share action).
        seed : int, optional
            Random seed for the first board.
        """
        self.config = config or GameConfiguration()
        self._on_game_over = on_game_over
        self._rng: Generator | None = None
        self._grid: ndarray | None = None
        self._score = 0
        self._moves = 0
        self._won = False
        self._game_over = False

        self.reset(seed=seed)

    @property
    def grid(self) -> ndarray:
        """Get the current state of the game board."""
        return self._grid

    @property
    def score(self) -> int:
        """Get the cumulative score."""
        return self._score

    @property
    def moves(self) -> int:
        """Get the number of moves that changed the board."""
        return self._moves

    @property
    def won(self) -> bool:
        """Whether a tile has reached the target value at some point."""
        return self._won

    @property
    def game_over(self) -> bool:
        """Whether the board has been left without moves at some point."""
        return self._game_over

    @property
    def is_finished(self) -> bool:
        """Check if the game is finished."""
        return self._game_over

    @property
    def status(self) -> str:
        """End-of-game message, empty while the game is running."""
        if not self._game_over:
            return ''
        return 'You won!' if self._won else 'Game over!'

    @property
    def share_text(self) -> str:
        """Message handed to the share action."""
        return f'I scored {self._score} in 2048! {self.config.share_url}'.strip()

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Initialize a fresh board and clear the session state.

        Parameters
        ----------
        seed : int, optional
            Random seed for reproducibility.

        Returns
        -------
        ndarray
            The new game board.
        """
        self._rng = default_rng(seed)
        self._grid = new_grid(rng=self._rng, number_tile=self.config.initial_tiles)
        self._score = 0
        self._moves = 0
        self._won = False
        self._game_over = False
        logger.debug('New game (seed=%s)', seed)
        return self._grid

    def step(self, direction: Direction | str) -> tuple[ndarray, int, bool]:
        """
        Apply the selected move to the board.

        Parameters
        ----------
        direction : Direction or str
            Direction of the move.

        Returns
        -------
        tuple[ndarray, int, bool]
            Updated board, score gained by this move, game state.

        Notes
        -----
        - A move that changes nothing spawns no tile, adds no score and does not count as a move.
        - Once the game is over, moves are ignored.
        """
        if self._game_over:
            return self._grid, 0, True

        direction = Direction(direction)
        result = apply_move(self._grid, direction)
        if isinstance(result, Unchanged):
            logger.debug('Move %s changed nothing', direction.value)
            return self._grid, 0, False

        # ##: Fill randomly one cell.
        self._grid = spawn_tile(result.grid, rng=self._rng)
        self._score += result.delta
        self._moves += 1
        logger.debug('Move %s: +%d (score=%d)', direction.value, result.delta, self._score)

        if not self._won and is_won(self._grid, self.config.target):
            self._won = True
            logger.info('Reached %d after %d moves', self.config.target, self._moves)

        if is_game_over(self._grid):
            self._game_over = True
            logger.info('Game over: score=%d, moves=%d', self._score, self._moves)
            if self._on_game_over is not None:
                self._on_game_over(self._score)

        return self._grid, result.delta, self._game_over

    def render(self) -> None:
        """
        Render the game board. This method prints the score and the board to the console.
        """
        print(f'Score: {self._score}')
        for row in self._grid.tolist():
            print(' \t'.join(map(str, row)))
