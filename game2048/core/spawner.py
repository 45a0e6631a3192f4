"""
Random tile spawning.

The generator is always handed in by the caller, which makes every game reproducible from a seed.
"""

import logging

from numpy import argwhere, ndarray
from numpy.random import PCG64DXSM, Generator

from game2048.config import DEFAULT_CONFIG, GameConfig
from game2048.core.board import freeze

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> Generator:
    """
    Create the random generator used to spawn tiles.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducibility. Fresh OS entropy is used when omitted.

    Returns
    -------
    Generator
        A numpy generator backed by PCG64DXSM.
    """
    return Generator(PCG64DXSM(seed))


def fill_cells(board: ndarray, number_tile: int, rng: Generator, config: GameConfig = DEFAULT_CONFIG) -> ndarray:
    """
    Fill empty cells with new tiles.

    Parameters
    ----------
    board : ndarray
        The current game board. It is not modified.
    number_tile : int
        Number of new tiles to add.
    rng : Generator
        Source of randomness.
    config : GameConfig, optional
        Spawn distribution to sample tile values from.

    Returns
    -------
    ndarray
        A new read-only board with the tiles added.

    Notes
    -----
    - Cells are chosen uniformly among empty cells, without replacement.
    - If there are fewer empty cells than requested, it fills all available cells.
    - A full board is returned unchanged and the generator is left untouched.
    """
    available_cells = argwhere(board == 0)
    number_tile = min(number_tile, len(available_cells))
    if number_tile <= 0:
        return board

    # ##: Randomly choose cell positions, then tile values.
    chosen_indices = rng.choice(len(available_cells), size=number_tile, replace=False)
    values = rng.choice(config.tile_values, size=number_tile, p=config.tile_weights)

    state = board.copy()
    state[tuple(available_cells[chosen_indices].T)] = values
    logger.debug('Spawned %s at %s', values.tolist(), available_cells[chosen_indices].tolist())
    return freeze(state)


def spawn_tile(board: ndarray, rng: Generator, config: GameConfig = DEFAULT_CONFIG) -> ndarray:
    """
    Place one new tile in a uniformly chosen empty cell.

    Parameters
    ----------
    board : ndarray
        The board after a move.
    rng : Generator
        Source of randomness.
    config : GameConfig, optional
        Spawn distribution (by default a 2 with probability 0.9, else a 4).

    Returns
    -------
    ndarray
        A new read-only board, or ``board`` itself when it has no empty cell.
    """
    return fill_cells(board, number_tile=1, rng=rng, config=config)


def spawn_outcomes(board: ndarray, config: GameConfig = DEFAULT_CONFIG) -> list[tuple[ndarray, float]]:
    """
    Enumerate every board a spawn can produce.

    Parameters
    ----------
    board : ndarray
        The board after a move, before the spawn.
    config : GameConfig, optional
        Spawn distribution.

    Returns
    -------
    list of tuple
        Pairs of a possible next board and its probability. Probabilities sum to 1.

    Notes
    -----
    - If there are no empty cells, it returns the board itself with probability 1.
    - The probability of a tile ``v`` in a given cell is ``P(v) / number_of_empty_cells``.
    """
    empty = argwhere(board == 0)
    if len(empty) == 0:
        return [(board, 1.0)]

    outcomes = []
    for cell in empty:
        for value, prob in config.tile_probs.items():
            state = board.copy()
            state[tuple(cell)] = value
            outcomes.append((freeze(state), prob / len(empty)))
    return outcomes
