"""Tests for game configuration and presentation helpers."""

from unittest import TestCase, main

from game2048.config import DEFAULT_CONFIG, GameConfig
from game2048.core.board import make_board
from game2048.utils.render import render_board, share_message


class TestGameConfig(TestCase):
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Default rules are the classic game."""
        self.assertEqual(DEFAULT_CONFIG.size, 4)
        self.assertEqual(DEFAULT_CONFIG.initial_tiles, 2)
        self.assertEqual(DEFAULT_CONFIG.tile_values, [2, 4])
        self.assertEqual(DEFAULT_CONFIG.tile_weights, [0.9, 0.1])

    def test_default_distribution_read_only(self):
        """The shared default distribution cannot be modified."""
        with self.assertRaises(TypeError):
            DEFAULT_CONFIG.tile_probs[3] = -4.0
        self.assertEqual(dict(DEFAULT_CONFIG.tile_probs), {2: 0.9, 4: 0.1})

    def test_distribution_copied(self):
        """Changing the source mapping does not leak into the configuration."""
        probs = {2: 0.5, 4: 0.5}
        config = GameConfig(tile_probs=probs)
        probs[8] = 1.0
        self.assertEqual(config.tile_values, [2, 4])

    def test_hashable(self):
        """Equal configurations hash alike."""
        self.assertEqual(hash(GameConfig()), hash(DEFAULT_CONFIG))
        self.assertEqual(GameConfig(), DEFAULT_CONFIG)
        self.assertNotEqual(GameConfig(size=5), DEFAULT_CONFIG)

    def test_invalid_size(self):
        """Board size must be positive."""
        with self.assertRaises(ValueError):
            GameConfig(size=0)

    def test_too_many_initial_tiles(self):
        """Initial tiles must fit on the board."""
        with self.assertRaises(ValueError):
            GameConfig(size=2, initial_tiles=5)

    def test_probabilities_sum(self):
        """Spawn probabilities must sum to one."""
        with self.assertRaises(ValueError):
            GameConfig(tile_probs={2: 0.5, 4: 0.1})

    def test_tile_values_powers_of_two(self):
        """Spawned tiles must be powers of two."""
        with self.assertRaises(ValueError):
            GameConfig(tile_probs={3: 1.0})
        with self.assertRaises(ValueError):
            GameConfig(tile_probs={})


class TestRender(TestCase):
    """Test plain-text helpers."""

    def test_render_board(self):
        """Rows are rendered on separate lines, empty cells as dots."""
        board = make_board([[2, 0], [0, 1024]])
        self.assertEqual(render_board(board), '2 \t.\n. \t1024')

    def test_share_message(self):
        """The end-of-game message quotes the score."""
        self.assertEqual(share_message(512), 'I scored 512 in 2048!')
        self.assertEqual(share_message(512, url='https://example.org'), 'I scored 512 in 2048! https://example.org')


if __name__ == '__main__':
    main()
