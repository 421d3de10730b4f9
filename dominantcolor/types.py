"""Core types, configuration and exceptions for dominantcolor."""
from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class Color:
    """8-bit RGBA color."""
    r: int
    g: int
    b: int
    a: int = 255

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class WeightedColor:
    """A color together with the fraction of the image it represents."""
    color: Color
    weight: float


@dataclass
class PixelGrid:
    """Bounded RGBA pixel grid handed to the clustering engine.

    ``pixels`` is an (height, width, 4) uint8 array; ``min_x``/``min_y`` are
    the coordinates of its top-left sample.
    """
    pixels: np.ndarray
    min_x: int = 0
    min_y: int = 0

    def __post_init__(self):
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ImageLoadError(
                f"Expected (H, W, 4) pixel array, got shape {self.pixels.shape}"
            )

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> int:
        return self.width * self.height

    def at(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Return the RGBA sample at absolute coordinates (x, y)."""
        r, g, b, a = self.pixels[y - self.min_y, x - self.min_x]
        return int(r), int(g), int(b), int(a)

    def opaque_pixels(self) -> np.ndarray:
        """RGB samples of every pixel with non-zero alpha, row-major, (N, 3)."""
        flat = self.pixels.reshape(-1, 4)
        return flat[flat[:, 3] != 0, :3]


@dataclass
class DominantColorConfig:
    """Tunable defaults for dominant color extraction."""

    # Clustering
    n_clusters: int = 4
    max_sample: int = 10  # Seed retries per cluster
    n_iterations: int = 50

    # Acceptance window on r + g + b, both bounds exclusive
    max_brightness: int = 665
    min_darkness: int = 100

    # Thumbnail edge cap applied before clustering
    resize_to: int = 256

    def __post_init__(self):
        if self.max_sample < 0:
            raise ConfigError(f"max_sample must be >= 0, got {self.max_sample}")
        if self.n_iterations < 0:
            raise ConfigError(f"n_iterations must be >= 0, got {self.n_iterations}")
        if self.resize_to < 1:
            raise ConfigError(f"resize_to must be >= 1, got {self.resize_to}")
        if self.min_darkness >= self.max_brightness:
            raise ConfigError(
                f"min_darkness ({self.min_darkness}) must be below "
                f"max_brightness ({self.max_brightness})"
            )

    @classmethod
    def small(cls, **overrides) -> "DominantColorConfig":
        """Faster profile that thumbnails to 64px before clustering."""
        overrides.setdefault("resize_to", 64)
        return cls(**overrides)

    def cluster_count(self, n_clusters=None) -> int:
        """Resolve a requested cluster count, falling back to the default."""
        if n_clusters is None or n_clusters <= 0:
            n_clusters = self.n_clusters
        return n_clusters if n_clusters > 0 else 4


class DominantColorError(Exception):
    """Base exception for dominant color errors."""
    pass


class ImageLoadError(DominantColorError):
    """Exception raised when an image cannot be decoded."""
    pass


class ConfigError(DominantColorError, ValueError):
    """Exception raised for invalid configuration values."""
    pass
