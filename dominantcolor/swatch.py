"""Palette swatch rendering."""
from pathlib import Path
from typing import List, Union

import numpy as np
from PIL import Image

from dominantcolor.types import WeightedColor


def render_swatch(colors: List[WeightedColor], width: int = 400, height: int = 60) -> Image.Image:
    """Horizontal bands, one per color, each as wide as its weight.

    Whatever width the weights do not cover (transparent pixels, rounding)
    is left transparent at the right edge.
    """
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    x = 0
    for entry in colors:
        band = int(round(entry.weight * width))
        band = min(band, width - x)
        if band <= 0:
            continue
        canvas[:, x:x + band] = [entry.color.r, entry.color.g, entry.color.b, 255]
        x += band
    return Image.fromarray(canvas)


def save_swatch(colors: List[WeightedColor], path: Union[str, Path], width: int = 400, height: int = 60) -> Path:
    """Render a swatch and save it as PNG, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_swatch(colors, width, height).save(path)
    return path
