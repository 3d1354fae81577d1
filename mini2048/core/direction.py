"""
Directions a move can take, and how each one maps onto the left-only merge pipeline.
"""

from enum import Enum


class Direction(str, Enum):
    """
    Direction of a move.

    LEFT: tiles slide toward column 0.
    UP: tiles slide toward row 0.
    RIGHT: tiles slide toward the last column.
    DOWN: tiles slide toward the last row.
    """

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'

    @property
    def rotations(self) -> int:
        """
        Number of clockwise quarter-turns that bring this direction onto LEFT.

        Returns
        -------
        int
            Rotation count applied before the pipeline; ``(4 - count) % 4`` restores the orientation.
        """
        return _ROTATIONS[self]


# ##>: Clockwise turns: the left column of a board turned once clockwise is its former bottom row.
_ROTATIONS: dict[Direction, int] = {
    Direction.LEFT: 0,
    Direction.DOWN: 1,
    Direction.RIGHT: 2,
    Direction.UP: 3,
}
