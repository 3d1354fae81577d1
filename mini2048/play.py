# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import logging
from argparse import ArgumentParser
from typing import Any, Optional, Sequence

from mini2048.config import GRID_SIZE
from mini2048.envs import Game2048
from mini2048.utils import WindowBoard

logger = logging.getLogger(__name__)


def redraw(envs: Game2048, window: WindowBoard):
    """
    Redraw the game board.

    Parameters
    ----------
    envs: Game2048
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    window.show_image(envs.grid, score=envs.score, status=envs.status)


def reset(envs: Game2048, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    envs: Game2048
        The game session

    window: WindowBoard
        Class to draw the game board
    """
    envs.reset()
    redraw(envs, window)


def step(envs: Game2048, window: WindowBoard, direction: str):
    """
    Apply a move to the game and redraw.

    Parameters
    ----------
    envs: Game2048
        The game session

    window: WindowBoard
        Class to draw the game board

    direction: str
        Direction of the move
    """
    _, reward, terminated = envs.step(direction)
    logger.debug("reward=%d", reward)

    redraw(envs, window)
    if terminated:
        logger.info("%s Final score: %d", envs.status, envs.score)


def share(envs: Game2048):
    """Hand the final score to the share action; here it is only logged."""
    logger.info("Share: %s", envs.share_text)


def key_handler(envs: Game2048, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: Game2048
        The game session

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    logger.debug("pressed %s", event.key)

    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        reset(envs, window)
        return None

    if event.key in envs.ACTIONS:
        step(envs, window, envs.ACTIONS[event.key])
        return None


def main(argv: Optional[Sequence[str]] = None):
    parser = ArgumentParser(description="Play 2048 with the arrow keys")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the first board")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    env = Game2048(seed=args.seed, on_game_over=lambda _: share(env))

    window_board = WindowBoard(title="2048 Game", size=GRID_SIZE)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    redraw(env, window_board)

    # Blocking event loop
    window_board.show(block=True)


if __name__ == "__main__":
    main()
