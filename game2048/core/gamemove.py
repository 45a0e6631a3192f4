"""
Game move utilities for the 2048 game: move directions, legal moves and terminal detection.
"""

from enum import IntEnum

from numpy import ndarray


class Direction(IntEnum):
    """
    Direction of a move.

    The numbering follows the action space of the game environment (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, name: str) -> 'Direction':
        """
        Translate a direction or key name into a direction.

        Parameters
        ----------
        name : str
            A direction name (``"left"``), an arrow key name (``"ArrowLeft"``) or one of ``w``, ``a``, ``s``, ``d``.
            Matching is case-insensitive.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the name matches no direction.
        """
        key = name.strip().lower()
        if key.startswith('arrow'):
            key = key[len('arrow') :]
        try:
            return _KEYS[key]
        except KeyError:
            raise ValueError(f'Unknown direction: {name!r}') from None


# ##>: Keyboard aliases accepted by Direction.parse.
_KEYS = {
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'a': Direction.LEFT,
    'w': Direction.UP,
    'd': Direction.RIGHT,
    's': Direction.DOWN,
}


def check_direction(direction: Direction) -> Direction:
    """
    Ensure a move input is a direction.

    Raises
    ------
    ValueError
        If ``direction`` is not a member of ``Direction``.
    """
    if not isinstance(direction, Direction):
        raise ValueError(f'Invalid direction: {direction!r}. Must be one of {[d.name for d in Direction]}')
    return direction


def _neighbours(board: ndarray, axis: int) -> tuple[ndarray, ndarray]:
    """Cells paired with their next neighbour along ``axis`` (1: rows, 0: columns)."""
    if axis == 1:
        return board[:, :-1], board[:, 1:]
    return board[:-1, :], board[1:, :]


def _can_merge(first: ndarray, second: ndarray) -> bool:
    return bool(((first != 0) & (first == second)).any())


def _can_slide(target: ndarray, source: ndarray) -> bool:
    return bool(((target == 0) & (source != 0)).any())


def legal_directions_mask(board: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move would change the board.

    Notes
    -----
    A move is possible in a direction when a tile has an empty cell ahead of it in that direction,
    or when two adjacent tiles on the same line hold the same value.
    """
    mask = {}
    for axis, (backward, forward) in ((1, (Direction.LEFT, Direction.RIGHT)), (0, (Direction.UP, Direction.DOWN))):
        first, second = _neighbours(board, axis)
        # ##>: A merge along a line is available in both directions of that line.
        merge = _can_merge(first, second)
        mask[backward] = merge or _can_slide(first, second)
        mask[forward] = merge or _can_slide(second, first)
    return tuple(mask[direction] for direction in Direction)


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Legal directions, in action order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if mask[direction]]


def illegal_directions(board: ndarray) -> list[Direction]:
    """Directions that would leave the board untouched."""
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if not mask[direction]]


def has_moves(board: ndarray) -> bool:
    """
    Check whether at least one move would change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    bool
        True if a cell is empty or two horizontally or vertically adjacent cells hold the same tile.

    Notes
    -----
    An empty cell lets some tile slide and equal neighbours can merge, whatever the direction
    along their line. Without either, no direction changes the board.
    """
    if not board.all():
        return True
    return _can_merge(*_neighbours(board, axis=1)) or _can_merge(*_neighbours(board, axis=0))


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    bool
        True if the board is full and no adjacent cells hold the same value.
    """
    return not has_moves(board)
