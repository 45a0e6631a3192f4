# -*-  coding: utf-8 -*-
"""
Set of test for board representation and the row reducer.
"""
from unittest import TestCase, main

import numpy as np

from game2048.core.board import (
    board_score,
    empty_board,
    empty_cells,
    freeze,
    make_board,
    max_tile,
    same_board,
    transpose,
)
from game2048.core.gameboard import reduce_row, slide_and_merge


class TestBoard(TestCase):
    """
    Test for the board helpers.
    Boards are read-only values compared by content.
    """

    def test_empty_board(self):
        """An empty board has the requested size and no tile."""
        board = empty_board(4)
        self.assertEqual(board.shape, (4, 4))
        self.assertEqual(np.count_nonzero(board), 0)

    def test_board_is_read_only(self):
        """Writing into a board fails."""
        board = make_board([[2, 0], [0, 4]])
        with self.assertRaises(ValueError):
            board[0, 1] = 2

    def test_freeze_copies_input(self):
        """Freezing does not alias the source array."""
        source = np.array([[2, 0], [0, 0]])
        board = freeze(source)
        source[0, 1] = 4
        self.assertEqual(board[0, 1], 0)

    def test_make_board_rejects_non_square(self):
        """A board must be a square grid."""
        with self.assertRaises(ValueError):
            make_board([[2, 0, 0], [0, 0, 0]])

    def test_make_board_rejects_invalid_tiles(self):
        """Tiles must be zero or powers of two >= 2."""
        for cells in ([[3, 0], [0, 0]], [[1, 0], [0, 0]], [[-2, 0], [0, 0]]):
            with self.assertRaises(ValueError):
                make_board(cells)

    def test_transpose_is_involution(self):
        """Transposing twice gives the board back."""
        rng = np.random.default_rng(7)
        for _ in range(20):
            board = make_board(np.where(rng.random((4, 4)) < 0.5, 0, 2 ** rng.integers(1, 12, size=(4, 4))))
            self.assertTrue(same_board(transpose(transpose(board)), board))

    def test_transpose_swaps_rows_and_columns(self):
        """Rows become columns."""
        board = make_board([[2, 4, 0, 0], [0, 0, 0, 0], [8, 0, 0, 0], [0, 0, 0, 16]])
        np.testing.assert_array_equal(transpose(board)[:, 0], [2, 4, 0, 0])
        np.testing.assert_array_equal(transpose(board)[3], [0, 0, 0, 16])

    def test_score_and_max_tile(self):
        """Score is the sum of the tiles."""
        board = make_board([[2, 4, 0, 0], [0, 0, 0, 0], [8, 0, 0, 0], [0, 0, 0, 16]])
        self.assertEqual(board_score(board), 30)
        self.assertEqual(max_tile(board), 16)
        self.assertEqual(max_tile(empty_board(4)), 0)

    def test_empty_cells(self):
        """Empty cells are listed in row-major order."""
        board = make_board([[2, 0], [0, 4]])
        self.assertEqual(empty_cells(board), [(0, 1), (1, 0)])


class TestRowReducer(TestCase):
    """
    Test for the row reducer.
    This class tests compress, merge and pad on a single line.
    """

    def test_single_pass_merge(self):
        """Each tile merges at most once per move."""
        np.testing.assert_array_equal(reduce_row([2, 2, 2, 2]), [4, 4, 0, 0])

    def test_merge_across_gaps(self):
        """Tiles separated by empty cells merge after sliding."""
        np.testing.assert_array_equal(reduce_row([0, 2, 0, 2]), [4, 0, 0, 0])

    def test_merge_then_keep(self):
        """A merged tile does not merge again with its new neighbour."""
        np.testing.assert_array_equal(reduce_row([2, 0, 2, 4]), [4, 4, 0, 0])

    def test_no_cascade(self):
        """A freshly merged tile does not cascade."""
        np.testing.assert_array_equal(reduce_row([4, 2, 2, 0]), [4, 4, 0, 0])
        np.testing.assert_array_equal(reduce_row([2, 2, 4, 8]), [4, 4, 8, 0])

    def test_empty_row(self):
        """An empty line stays empty."""
        np.testing.assert_array_equal(reduce_row([0, 0, 0, 0]), [0, 0, 0, 0])

    def test_slide_without_merge(self):
        """Without equal neighbours tiles only slide."""
        np.testing.assert_array_equal(reduce_row([0, 2, 0, 4]), [2, 4, 0, 0])
        np.testing.assert_array_equal(reduce_row([2, 4, 8, 16]), [2, 4, 8, 16])

    def test_length_preserved(self):
        """The line keeps its length whatever its size."""
        self.assertEqual(len(reduce_row([2, 2, 0, 0, 2, 2])), 6)

    def test_slide_and_merge(self):
        """Every row of the board goes through the reducer."""
        board = make_board([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        result = slide_and_merge(board)
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        np.testing.assert_array_equal(result, expected)
        self.assertFalse(result.flags.writeable)


if __name__ == "__main__":
    main()
