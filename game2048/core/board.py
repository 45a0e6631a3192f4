"""
Board representation for the 2048 game.

A board is a square ``int64`` numpy array whose write flag is cleared: every operation of the
engine builds a new board instead of mutating its input, so two boards can be compared by value
to detect a move that changed nothing.
"""

from collections.abc import Iterable

from numpy import array, array_equal, int64, ndarray, zeros


def freeze(cells: ndarray | Iterable[Iterable[int]]) -> ndarray:
    """
    Copy cells into a new read-only board.

    Parameters
    ----------
    cells : ndarray or nested iterable of int
        Values of the board, row by row.

    Returns
    -------
    ndarray
        A read-only ``int64`` copy of the cells.
    """
    board = array(cells, dtype=int64)
    board.setflags(write=False)
    return board


def empty_board(size: int = 4) -> ndarray:
    """
    Build a board without any tile.

    Parameters
    ----------
    size : int, optional
        Side of the square board (default is 4).

    Returns
    -------
    ndarray
        A read-only board filled with zeros.
    """
    board = zeros((size, size), dtype=int64)
    board.setflags(write=False)
    return board


def make_board(cells: ndarray | Iterable[Iterable[int]]) -> ndarray:
    """
    Build a board from explicit values, checking its invariants.

    Parameters
    ----------
    cells : ndarray or nested iterable of int
        Values of the board, row by row. Zero denotes an empty cell.

    Returns
    -------
    ndarray
        A read-only board.

    Raises
    ------
    ValueError
        If the grid is not square, or holds a value that is neither zero nor a power of two >= 2.
    """
    board = freeze(cells)
    if board.ndim != 2 or board.shape[0] != board.shape[1]:
        raise ValueError(f'A board must be a square grid, got shape {board.shape}')

    tiles = board[board != 0]
    if (tiles < 2).any() or ((tiles & (tiles - 1)) != 0).any():
        raise ValueError(f'Tiles must be zero or powers of two >= 2, got {sorted(set(tiles.tolist()))}')
    return board


def transpose(board: ndarray) -> ndarray:
    """
    Swap rows and columns of a board.

    Parameters
    ----------
    board : ndarray
        The board to transpose.

    Returns
    -------
    ndarray
        A new read-only board; ``transpose(transpose(board))`` equals ``board``.
    """
    return freeze(board.T)


def same_board(first: ndarray, second: ndarray) -> bool:
    """Check whether two boards hold the same tiles in the same cells."""
    return bool(array_equal(first, second))


def board_score(board: ndarray) -> int:
    """Sum of every tile currently on the board."""
    return int(board.sum())


def max_tile(board: ndarray) -> int:
    """Highest tile on the board, 0 for an empty board."""
    return int(board.max(initial=0))


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """Positions ``(row, col)`` of every empty cell, in row-major order."""
    return [(int(row), int(col)) for row, col in zip(*(board == 0).nonzero())]
