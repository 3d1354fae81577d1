"""Rules engine and game session for 2048."""

from .config import GRID_SIZE, TARGET, TILE_SPAWN_PROBS, GameConfiguration
from .core import (
    Changed,
    Direction,
    Unchanged,
    apply_move,
    has_moves_remaining,
    is_game_over,
    is_won,
    move,
    new_grid,
    spawn_tile,
)
from .envs import Game2048

__all__ = [
    "GRID_SIZE",
    "TARGET",
    "TILE_SPAWN_PROBS",
    "GameConfiguration",
    "Direction",
    "Changed",
    "Unchanged",
    "move",
    "apply_move",
    "spawn_tile",
    "new_grid",
    "is_won",
    "is_game_over",
    "has_moves_remaining",
    "Game2048",
]
