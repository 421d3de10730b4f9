"""Pytest configuration and fixtures."""
import numpy as np
import pytest

from dominantcolor.sampler import Sampler


class ScanSampler(Sampler):
    """Visits every coordinate in row-major order, wrapping around."""

    def __init__(self, min_x, min_y, width, height):
        self.min_x = min_x
        self.min_y = min_y
        self.width = width
        self.height = height
        self._index = 0

    @classmethod
    def for_grid(cls, grid):
        return cls(grid.min_x, grid.min_y, grid.width, grid.height)

    def next_point(self):
        y, x = divmod(self._index % (self.width * self.height), self.width)
        self._index += 1
        return self.min_x + x, self.min_y + y


def solid_image(color, height=10, width=10):
    """RGBA uint8 image filled with one color (alpha defaults to 255)."""
    if len(color) == 3:
        color = tuple(color) + (255,)
    image = np.zeros((height, width, 4), dtype=np.uint8)
    image[:, :] = color
    return image


def quadrant_image(size=4):
    """Red, green, blue and yellow quadrants."""
    half = size // 2
    image = np.zeros((size, size, 3), dtype=np.uint8)
    image[:half, :half] = [255, 0, 0]
    image[:half, half:] = [0, 255, 0]
    image[half:, :half] = [0, 0, 255]
    image[half:, half:] = [255, 255, 0]
    return image


@pytest.fixture
def scan_sampling(monkeypatch):
    """Make the clustering engine seed with ScanSampler instead of random draws."""
    monkeypatch.setattr("dominantcolor.engine.RandomSampler", ScanSampler)
    return ScanSampler
