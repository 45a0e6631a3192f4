# -*- coding: utf-8 -*-
"""
Play 2048 Game in the console.
"""
import logging
from argparse import ArgumentParser

from game2048 import Direction, GameConfig, TwentyFortyEight
from game2048.utils import share_message

QUIT_KEYS = {"q", "quit", "escape"}
RESET_KEYS = {"r", "reset", "backspace"}


def reset(envs: TwentyFortyEight):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment
    """
    envs.reset()
    envs.render()


def step(envs: TwentyFortyEight, direction: Direction):
    """
    Applied move into the game.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment

    direction: Direction
        Move to apply
    """
    before = envs.board
    _, score, terminated = envs.step(direction)
    if envs.board is before:
        print(f"{direction.name.lower()} does not move any tile")
        return

    envs.render()
    if terminated:
        print("terminated!")
        print(share_message(score))


def key_handler(envs: TwentyFortyEight, key: str) -> bool:
    """
    Handle one line typed by the player.

    Parameters
    ----------
    envs: TwentyFortyEight
        The Game environment

    key: str
        Typed key or command

    Returns
    -------
    bool
        False once the player asked to quit.
    """
    key = key.strip().lower()
    if key in QUIT_KEYS:
        return False

    if key in RESET_KEYS:
        reset(envs)
        return True

    try:
        direction = Direction.parse(key)
    except ValueError:
        print("Use w/a/s/d (or left/up/right/down) to move, r to reset, q to quit.")
        return True

    step(envs, direction)
    return True


def main(argv: list[str] | None = None):
    parser = ArgumentParser(description="Play 2048 in the console")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the tile spawner")
    parser.add_argument("--size", type=int, default=4, help="Side of the board")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    env = TwentyFortyEight(config=GameConfig(size=args.size), seed=args.seed)
    env.render()

    # Blocking input loop, until quit or end of input
    try:
        while key_handler(env, input("move> ")):
            pass
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":
    main()
