"""
Configuration of the 2048 rules engine.

The defaults reproduce the classic game: a 4x4 board seeded with two tiles, new tiles
being a 2 (90%) or a 4 (10%).
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from math import isclose
from types import MappingProxyType


def _is_power_of_two(value: int) -> bool:
    return value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class GameConfig:
    """
    Rules of a game of 2048.

    Attributes
    ----------
    size : int
        Side of the square board.
    initial_tiles : int
        Number of tiles placed on the empty board when a game starts.
    tile_probs : Mapping[int, float]
        Spawn distribution, mapping tile value to its probability. Stored as a read-only copy.
    """

    # ##>: Board geometry.
    size: int = 4
    initial_tiles: int = 2

    # ##>: Tile spawn probabilities (90% for 2, 10% for 4).
    tile_probs: Mapping[int, float] = field(default_factory=lambda: {2: 0.9, 4: 0.1})

    def __post_init__(self):
        object.__setattr__(self, 'tile_probs', MappingProxyType(dict(self.tile_probs)))

        if self.size < 1:
            raise ValueError(f'Board size must be >= 1, got {self.size}')
        if not 0 <= self.initial_tiles <= self.size**2:
            raise ValueError(f'Cannot place {self.initial_tiles} initial tiles on a {self.size}x{self.size} board')
        if not self.tile_probs:
            raise ValueError('At least one spawnable tile value is required')

        for value, prob in self.tile_probs.items():
            if not _is_power_of_two(value):
                raise ValueError(f'Spawned tiles must be powers of two >= 2, got {value}')
            if prob < 0:
                raise ValueError(f'Probability of tile {value} must be >= 0, got {prob}')

        total = sum(self.tile_probs.values())
        if not isclose(total, 1.0):
            raise ValueError(f'Tile probabilities must sum to 1, got {total}')

    def __hash__(self) -> int:
        return hash((self.size, self.initial_tiles, tuple(self.tile_probs.items())))

    @property
    def tile_values(self) -> list[int]:
        """Spawnable tile values, in declaration order."""
        return list(self.tile_probs)

    @property
    def tile_weights(self) -> list[float]:
        """Probabilities matching ``tile_values``."""
        return list(self.tile_probs.values())


DEFAULT_CONFIG = GameConfig()
