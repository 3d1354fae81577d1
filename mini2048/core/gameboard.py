"""
Core functionality of the 2048 game: rotating, sliding and merging the board, spawning tiles and
detecting the end of the game.

Every move is expressed as a left move on a rotated board: the board is turned clockwise until the
requested direction points left, compressed, merged, compressed again, then turned back.
"""

from dataclasses import dataclass

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array_equal, asarray, int64, ndarray, rot90, zeros, zeros_like
from numpy.random import Generator, default_rng

from mini2048.config import GRID_SIZE, TARGET, TILE_SPAWN_PROBS
from mini2048.core.direction import Direction

# ##>: Pre-computed tile values and probabilities for sampling.
_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())

# ##>: Anything accepted by numpy's default_rng: a seed, a generator or nothing.
SeedLike = int | Generator | None


@dataclass(frozen=True, eq=False)
class Changed:
    """Result of a move that altered the board."""

    grid: ndarray
    delta: int


@dataclass(frozen=True)
class Unchanged:
    """Result of a move that left every cell in place."""


MoveResult = Changed | Unchanged


def _as_grid(grid: ndarray) -> ndarray:
    return asarray(grid, dtype=int64)


def rotate(grid: ndarray, times: int) -> ndarray:
    """
    Rotate the board by a quarter-turn clockwise, ``times`` times.

    Parameters
    ----------
    grid : ndarray
        The game board (nested lists are accepted).
    times : int
        Number of clockwise quarter-turns, reduced modulo 4.

    Returns
    -------
    ndarray
        A new rotated board; ``times % 4 == 0`` gives an equal copy.
    """
    return rot90(_as_grid(grid), k=-(times % 4)).copy()


def compress(grid: ndarray) -> ndarray:
    """
    Slide every tile of each row to the left edge, keeping their order.

    Parameters
    ----------
    grid : ndarray
        The game board.

    Returns
    -------
    ndarray
        A new board where each row holds its tiles first and zeros after them.

    Notes
    -----
    - No merging happens here.
    - The function is idempotent.
    """
    grid = _as_grid(grid)
    result = zeros_like(grid)

    for i, row in enumerate(grid):
        tiles = row[row != 0]
        result[i, : len(tiles)] = tiles

    return result


def merge(grid: ndarray) -> int:
    """
    Merge equal neighbours of each row from left to right.

    The left cell of an equal pair is doubled and the right one emptied. A doubled cell is not compared
    with its new right neighbour, so a tile takes part in at most one merge per call.

    Parameters
    ----------
    grid : ndarray
        A compressed game board. **Modified in-place.**

    Returns
    -------
    int
        Sum of the values created by merges.

    Examples
    --------
    >>> board = array([[2, 2, 2, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
    >>> merge(board)
    8
    >>> board[0]
    array([4, 0, 4, 0])
    """
    score = 0
    rows, cols = grid.shape

    for r in range(rows):
        for c in range(cols - 1):
            if grid[r, c] != 0 and grid[r, c] == grid[r, c + 1]:
                grid[r, c] *= 2
                grid[r, c + 1] = 0
                score += int(grid[r, c])

    return score


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.

    Notes
    -----
    - The function operates on rows, effectively sliding left.
    - For other directions, rotate the board before calling this function.
    - The second compress closes the gaps left by merged-away cells.
    """
    working = compress(board)
    score = merge(working)
    return score, compress(working)


def move(grid: ndarray, direction: Direction | str) -> tuple[ndarray, int]:
    """
    Apply one directional move to the board, without adding a new tile.

    Parameters
    ----------
    grid : ndarray
        The current game board.
    direction : Direction or str
        Direction of the move ('left', 'up', 'right' or 'down').

    Returns
    -------
    new_grid : ndarray
        The board after the move.
    score_delta : int
        Sum of the values created by merges during the move.

    Raises
    ------
    ValueError
        If ``direction`` is not a known direction.

    Notes
    -----
    A move that changes nothing returns a board equal to the input with a zero delta; use
    ``apply_move`` to get that information without comparing boards.
    """
    turns = Direction(direction).rotations
    score, updated = slide_and_merge(rotate(grid, turns))
    return rotate(updated, (4 - turns) % 4), score


def apply_move(grid: ndarray, direction: Direction | str) -> MoveResult:
    """
    Apply one directional move and report whether it changed the board.

    Parameters
    ----------
    grid : ndarray
        The current game board.
    direction : Direction or str
        Direction of the move.

    Returns
    -------
    Changed or Unchanged
        ``Changed(grid, delta)`` when at least one cell changed, ``Unchanged()`` otherwise.
    """
    grid = _as_grid(grid)
    updated, delta = move(grid, direction)
    if array_equal(grid, updated):
        return Unchanged()
    return Changed(grid=updated, delta=delta)


def empty_cells(grid: ndarray) -> list[tuple[int, int]]:
    """Positions (row, col) of the empty cells, in row-major order."""
    return [(int(r), int(c)) for r, c in argwhere(_as_grid(grid) == 0)]


def count_empty(grid: ndarray) -> int:
    """Number of empty cells."""
    return int((_as_grid(grid) == 0).sum())


def max_tile(grid: ndarray) -> int:
    """Highest tile value on the board."""
    return int(_as_grid(grid).max())


def spawn_tile(grid: ndarray, rng: SeedLike = None) -> ndarray:
    """
    Place one new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    grid : ndarray
        The game board. Not modified.
    rng : int, Generator or None, optional
        Source of randomness, passed to ``numpy.random.default_rng``.

    Returns
    -------
    ndarray
        A copy of the board with one more tile, or an unchanged copy if the board is full.

    Notes
    -----
    - The cell is drawn uniformly among the empty cells.
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    """
    state = _as_grid(grid).copy()
    available_cells = argwhere(state == 0)
    if len(available_cells) == 0:
        return state

    generator = default_rng(rng)
    row, col = available_cells[generator.integers(len(available_cells))]
    state[row, col] = generator.choice(_TILE_VALUES, p=_TILE_PROBS)
    return state


def new_grid(rng: SeedLike = None, number_tile: int = 2) -> ndarray:
    """
    Create an empty board and spawn the starting tiles.

    Parameters
    ----------
    rng : int, Generator or None, optional
        Source of randomness, passed to ``numpy.random.default_rng``.
    number_tile : int, optional
        Number of tiles to spawn (default is 2).

    Returns
    -------
    ndarray
        The new board.
    """
    generator = default_rng(rng)
    state = zeros((GRID_SIZE, GRID_SIZE), dtype=int64)
    for _ in range(number_tile):
        state = spawn_tile(state, rng=generator)
    return state


def is_won(grid: ndarray, target: int = TARGET) -> bool:
    """Check whether any cell holds the target value."""
    return bool(np_any(_as_grid(grid) == target))


def is_game_over(grid: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    grid : ndarray
        The current game board.

    Returns
    -------
    bool
        True if the game is over, False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no horizontally or vertically adjacent cells
    have the same value. Moves are not simulated.
    """
    state = _as_grid(grid)
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )


def has_moves_remaining(grid: ndarray) -> bool:
    """Opposite of ``is_game_over``."""
    return not is_game_over(grid)
