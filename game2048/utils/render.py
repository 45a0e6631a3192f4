"""Plain-text helpers for a presentation layer: board rendering and the end-of-game message."""

from numpy import ndarray


def render_board(board: ndarray, empty: str = '.') -> str:
    """
    Render the board as tab-separated rows.

    Parameters
    ----------
    board : ndarray
        The board to render.
    empty : str, optional
        Placeholder shown in empty cells (default is ``"."``).

    Returns
    -------
    str
        One line per row.
    """
    return '\n'.join(' \t'.join(str(value) if value else empty for value in row) for row in board.tolist())


def share_message(score: int, url: str | None = None) -> str:
    """
    Text shared once a game is over.

    >>> share_message(2048)
    'I scored 2048 in 2048!'
    """
    message = f'I scored {score} in 2048!'
    if url:
        message = f'{message} {url}'
    return message
