"""
This module provides the graphical `WindowBoard` used to play the game by hand.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
