# -*- coding: utf-8 -*-
"""
Rules engine of the 2048 sliding-tile game.
"""

from .config import DEFAULT_CONFIG, GameConfig
from .core import Direction, MoveResult, has_moves, is_done, legal_directions, make_board, make_rng, move, reduce_row
from .core import spawn_tile, transpose
from .envs import GameState, GameStatus, TwentyFortyEight, apply_move, new_game

__all__ = [
    "DEFAULT_CONFIG",
    "Direction",
    "GameConfig",
    "GameState",
    "GameStatus",
    "MoveResult",
    "TwentyFortyEight",
    "apply_move",
    "has_moves",
    "is_done",
    "legal_directions",
    "make_board",
    "make_rng",
    "move",
    "new_game",
    "reduce_row",
    "spawn_tile",
    "transpose",
]
