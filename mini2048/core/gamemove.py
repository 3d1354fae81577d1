"""
Game move utilities for the 2048 game, providing functions for determining legal and illegal moves.
"""

from numpy import ndarray

from mini2048.core.direction import Direction
from mini2048.core.gameboard import rotate


def can_move(grid: ndarray, direction: Direction | str) -> bool:
    """
    Check if a move in the given direction changes the board.

    Parameters
    ----------
    grid : ndarray
        The game board to check.
    direction : Direction or str
        Direction of the move.

    Returns
    -------
    bool
        True if the move is possible, False otherwise.

    Notes
    -----
    - The board is rotated so that the direction points left.
    - A move is possible if there's an empty cell to the left of a non-empty cell,
      or if two adjacent cells have the same non-zero value.
    """
    board = rotate(grid, Direction(direction).rotations)

    # ##>: Compare all adjacent horizontal pairs with vectorized operations.
    left_cols = board[:, :-1]
    right_cols = board[:, 1:]

    # ##>: Condition 1: Empty cell left of non-empty cell (can slide).
    can_slide = (left_cols == 0) & (right_cols != 0)
    if can_slide.any():
        return True

    # ##>: Condition 2: Two adjacent equal non-zero values (can merge).
    can_merge = (left_cols != 0) & (left_cols == right_cols)
    return bool(can_merge.any())


def illegal_actions(grid: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the board unchanged.

    Parameters
    ----------
    grid : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Illegal directions, in declaration order (left, up, right, down).
    """
    return [direction for direction in Direction if not can_move(grid, direction)]


def legal_actions(grid: ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    grid : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Legal directions, in declaration order (left, up, right, down).
    """
    return [direction for direction in Direction if can_move(grid, direction)]
