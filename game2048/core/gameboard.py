"""
Core functionality for simulating the 2048 game: sliding and merging tiles in the four directions.
"""

from collections.abc import Sequence
from typing import NamedTuple

from numpy import asarray, int64, ndarray, zeros

from game2048.core.board import freeze, same_board, transpose
from game2048.core.gamemove import Direction, check_direction


class MoveResult(NamedTuple):
    """Board obtained after a move, and whether it differs from the board before the move."""

    board: ndarray
    changed: bool


def reduce_row(row: ndarray | Sequence[int]) -> ndarray:
    """
    Slide a line of tiles towards its start and merge adjacent equal values.

    Parameters
    ----------
    row : ndarray or sequence of int
        A 1D line of the game board. Zeros are empty cells.

    Returns
    -------
    ndarray
        A new line of the same length, tiles packed towards index 0 and padded with zeros.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the line towards the end.
    - Each tile can only be merged once per call: ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.
    """
    line = asarray(row, dtype=int64)
    result = zeros(len(line), dtype=int64)

    # ##: Compress.
    non_zero = line[line != 0]

    # ##: Merge equal pairs, left to right.
    i = 0
    position = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            result[position] = non_zero[i] * 2
            i += 2
        else:
            result[position] = non_zero[i]
            i += 1
        position += 1

    return result


def slide_and_merge(board: ndarray) -> ndarray:
    """
    Slide the game board to the left and merge adjacent cells.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    ndarray
        A new read-only board where every row went through ``reduce_row``.

    Notes
    -----
    For other directions, transpose or mirror the board before calling this function.
    """
    result = zeros(board.shape, dtype=int64)
    for i, row in enumerate(board):
        result[i] = reduce_row(row)
    return freeze(result)


def _slide_right(board: ndarray) -> ndarray:
    return freeze(slide_and_merge(board[:, ::-1])[:, ::-1])


def _apply(board: ndarray, direction: Direction) -> ndarray:
    if direction == Direction.LEFT:
        return slide_and_merge(board)
    if direction == Direction.RIGHT:
        return _slide_right(board)
    if direction == Direction.UP:
        return transpose(slide_and_merge(transpose(board)))
    return transpose(_slide_right(transpose(board)))


def move(board: ndarray, direction: Direction) -> MoveResult:
    """
    Apply a move to the board, without spawning a new tile.

    Parameters
    ----------
    board : ndarray
        The current game board.
    direction : Direction
        Direction towards which every tile slides.

    Returns
    -------
    MoveResult
        The new board and whether any cell changed.

    Raises
    ------
    ValueError
        If ``direction`` is not a ``Direction``.

    Notes
    -----
    Merges always happen towards the direction of the move: on ``[2, 2, 2, 0]``, a move to the
    right merges the two rightmost tiles.
    """
    updated = _apply(board, check_direction(direction))
    return MoveResult(board=updated, changed=not same_board(board, updated))
