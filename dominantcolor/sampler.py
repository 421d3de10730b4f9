"""Pseudo-random pixel coordinate sampling used to seed clusters."""
from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from dominantcolor.types import PixelGrid

# Fixed so identical pixels always produce identical clusters.
SAMPLER_SEED = 0


class Sampler(ABC):
    """Produces an unbounded sequence of (x, y) coordinates inside a grid."""

    @abstractmethod
    def next_point(self) -> Tuple[int, int]:
        """Return the next coordinate."""

    def __iter__(self):
        while True:
            yield self.next_point()


class RandomSampler(Sampler):
    """Uniform, reproducible coordinate sampler over fixed bounds."""

    def __init__(self, min_x: int, min_y: int, width: int, height: int, seed: int = SAMPLER_SEED):
        if width <= 0 or height <= 0:
            raise ValueError(f"Cannot sample from empty bounds {width}x{height}")
        self.min_x = min_x
        self.min_y = min_y
        self.width = width
        self.height = height
        self._rng = np.random.default_rng(seed)

    @classmethod
    def for_grid(cls, grid: PixelGrid) -> "RandomSampler":
        return cls(grid.min_x, grid.min_y, grid.width, grid.height)

    def next_point(self) -> Tuple[int, int]:
        x = self.min_x + int(self._rng.integers(self.width))
        y = self.min_y + int(self._rng.integers(self.height))
        return x, y
