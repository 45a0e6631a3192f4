# -*- coding: utf-8 -*-
"""
Game controller of the 2048 game.

This module provides the immutable `GameState`, the `new_game` and `apply_move` transitions,
and the `TwentyFortyEight` class which plays a whole game with its own random generator.
"""

from .game import GameState, GameStatus, TwentyFortyEight, apply_move, new_game

__all__ = ["GameState", "GameStatus", "TwentyFortyEight", "apply_move", "new_game"]
