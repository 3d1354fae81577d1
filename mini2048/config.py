"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass

# ##>: Side length of the square board.
GRID_SIZE = 4

# ##>: Tile value that wins the game.
TARGET = 2048

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


@dataclass(frozen=True)
class GameConfiguration:
    """
    Game configuration.

    The board size is fixed to ``GRID_SIZE``; only the session-level knobs live here.
    """

    target: int = TARGET  # Tile value that latches the win flag
    initial_tiles: int = 2  # Tiles spawned on a fresh board
    share_url: str = ''  # Appended to the share text when set
