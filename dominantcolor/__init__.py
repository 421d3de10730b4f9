"""dominantcolor: find the dominant color of an image with RGB K-means."""
from dominantcolor.types import (
    Color,
    WeightedColor,
    PixelGrid,
    DominantColorConfig,
    DominantColorError,
    ImageLoadError,
    ConfigError,
)
from dominantcolor.dominant import find_dominant, find_dominant_n, format_hex

__version__ = "0.1.0"
__all__ = [
    "Color",
    "WeightedColor",
    "PixelGrid",
    "DominantColorConfig",
    "DominantColorError",
    "ImageLoadError",
    "ConfigError",
    "find_dominant",
    "find_dominant_n",
    "format_hex",
]
