# -*- coding: utf-8 -*-
"""
This module provides the rules of the 2048 game on immutable boards.

It includes board constructors, the row reducer and the four-direction move engine,
legal move and terminal detection, and random tile spawning.
"""

from .board import board_score, empty_board, empty_cells, freeze, make_board, max_tile, same_board, transpose
from .gameboard import MoveResult, move, reduce_row, slide_and_merge
from .gamemove import Direction, has_moves, illegal_directions, is_done, legal_directions
from .spawner import fill_cells, make_rng, spawn_outcomes, spawn_tile

__all__ = [
    "Direction",
    "MoveResult",
    "board_score",
    "empty_board",
    "empty_cells",
    "fill_cells",
    "freeze",
    "has_moves",
    "illegal_directions",
    "is_done",
    "legal_directions",
    "make_board",
    "make_rng",
    "max_tile",
    "move",
    "reduce_row",
    "same_board",
    "slide_and_merge",
    "spawn_outcomes",
    "spawn_tile",
    "transpose",
]
