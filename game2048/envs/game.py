"""2048 game controller: immutable game states, the move transition and a stateful game wrapper."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from numpy import ndarray
from numpy.random import Generator

from game2048.config import DEFAULT_CONFIG, GameConfig
from game2048.core.board import board_score, empty_board, freeze, same_board
from game2048.core.board import empty_cells as board_empty_cells
from game2048.core.board import max_tile as board_max_tile
from game2048.core.gameboard import move
from game2048.core.gamemove import Direction, check_direction, has_moves
from game2048.core.spawner import fill_cells, make_rng, spawn_tile
from game2048.utils.render import render_board

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """Phase of a game. ``TERMINAL`` is absorbing."""

    ACTIVE = 'active'
    TERMINAL = 'terminal'


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Snapshot of a game.

    Attributes
    ----------
    board : ndarray
        Read-only board.
    score : int
        Sum of all tiles on the board after the last accepted move (0 for a new game).
    terminal : bool
        Whether no move can change the board anymore.
    config : GameConfig
        Rules the game is played with.
    """

    board: ndarray
    score: int = 0
    terminal: bool = False
    config: GameConfig = field(default=DEFAULT_CONFIG, repr=False)

    def __post_init__(self):
        if not isinstance(self.board, ndarray) or self.board.flags.writeable:
            object.__setattr__(self, 'board', freeze(self.board))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.score == other.score and self.terminal == other.terminal and same_board(self.board, other.board)

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), self.board.shape, self.score, self.terminal))

    @property
    def status(self) -> GameStatus:
        return GameStatus.TERMINAL if self.terminal else GameStatus.ACTIVE

    @property
    def max_tile(self) -> int:
        return board_max_tile(self.board)

    @property
    def empty_cells(self) -> list[tuple[int, int]]:
        return board_empty_cells(self.board)


def new_game(rng: Generator | None = None, config: GameConfig = DEFAULT_CONFIG) -> GameState:
    """
    Start a game: an empty board seeded with the initial tiles.

    Parameters
    ----------
    rng : Generator, optional
        Source of randomness. A freshly seeded generator is created when omitted.
    config : GameConfig, optional
        Rules of the game.

    Returns
    -------
    GameState
        The initial state, with a score of 0.
    """
    rng = rng if rng is not None else make_rng()
    board = fill_cells(empty_board(config.size), number_tile=config.initial_tiles, rng=rng, config=config)
    state = GameState(board=board, score=0, terminal=not has_moves(board), config=config)
    logger.debug('New %dx%d game: %s', config.size, config.size, board.tolist())
    return state


def apply_move(state: GameState, direction: Direction, rng: Generator | None = None) -> GameState:
    """
    Play one move.

    Parameters
    ----------
    state : GameState
        The current state. It is never modified.
    direction : Direction
        Requested move.
    rng : Generator, optional
        Source of randomness for the spawned tile. A freshly seeded generator is created when omitted.

    Returns
    -------
    GameState
        The next state. ``state`` itself is returned when the game is over or the move changes nothing;
        in both cases no tile is spawned.

    Raises
    ------
    ValueError
        If ``direction`` is not a ``Direction``.
    """
    check_direction(direction)
    if state.terminal:
        logger.debug('Ignoring %s: game is over', direction.name)
        return state

    result = move(state.board, direction)
    if not result.changed:
        logger.debug('Ignoring %s: board unchanged', direction.name)
        return state

    rng = rng if rng is not None else make_rng()
    board = spawn_tile(result.board, rng=rng, config=state.config)
    next_state = GameState(board=board, score=board_score(board), terminal=not has_moves(board), config=state.config)
    if next_state.terminal:
        logger.info('Game over: score %d, max tile %d', next_state.score, next_state.max_tile)
    return next_state


class TwentyFortyEight:
    """
    2048 game.

    Stateful wrapper around ``new_game`` and ``apply_move`` owning its random generator,
    so that a seed reproduces a whole game.
    """

    # ##: All Actions.
    ACTIONS = {direction.name.lower(): direction for direction in Direction}

    def __init__(self, config: GameConfig = DEFAULT_CONFIG, seed: int | None = None):
        """
        Initialize the game and deal the initial tiles.

        Parameters
        ----------
        config : GameConfig, optional
            Rules of the game (default is the classic 4x4 game).
        seed : int, optional
            Seed of the random generator.
        """
        self.config = config
        self._rng = make_rng(seed)
        self._state = new_game(rng=self._rng, config=config)

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> ndarray:
        return self._state.board

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if no more moves are possible.
        """
        return self._state.terminal

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty board with the initial tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the generator before dealing. The current generator is kept when omitted.

        Returns
        -------
        ndarray
            The new board.
        """
        if seed is not None:
            self._rng = make_rng(seed)
        self._state = new_game(rng=self._rng, config=self.config)
        return self.board

    def step(self, direction: Direction) -> tuple[ndarray, int, bool]:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction
            The move to apply.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The board after the move (unchanged if the move was rejected)
            - The score
            - Whether the game has finished
        """
        self._state = apply_move(self._state, direction, rng=self._rng)
        return self.board, self.score, self.is_finished

    def render(self) -> None:
        """Print the game board and score to the console."""
        print(render_board(self.board))
        print(f'Score: {self.score}')
