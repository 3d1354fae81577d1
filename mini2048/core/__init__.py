"""
This module provides the rules of the 2048 game.

It includes functions for rotating, compressing and merging the board, applying moves, spawning tiles,
checking legal and illegal moves, and detecting the win and the end of the game.
"""

from .direction import Direction
from .gameboard import (
    Changed,
    MoveResult,
    Unchanged,
    apply_move,
    compress,
    count_empty,
    empty_cells,
    has_moves_remaining,
    is_game_over,
    is_won,
    max_tile,
    merge,
    move,
    new_grid,
    rotate,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import can_move, illegal_actions, legal_actions

__all__ = [
    "Direction",
    "Changed",
    "Unchanged",
    "MoveResult",
    "rotate",
    "compress",
    "merge",
    "slide_and_merge",
    "move",
    "apply_move",
    "spawn_tile",
    "new_grid",
    "empty_cells",
    "count_empty",
    "max_tile",
    "is_won",
    "is_game_over",
    "has_moves_remaining",
    "can_move",
    "legal_actions",
    "illegal_actions",
]
