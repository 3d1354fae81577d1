"""
Python implementation of a 2048 game session.

This module provides the `Game2048` class, which holds the state of one game and drives the board rules.
"""

from .game import Game2048

__all__ = ["Game2048"]
