"""Raster image ingestion: decode, orient, scale to 8 bits and thumbnail."""
import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image
from PIL import ImageOps

from dominantcolor.types import ImageLoadError, PixelGrid

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, Image.Image, np.ndarray]

# Pillow 16-bit modes.
_16BIT_MODES = ('I;16', 'I;16L', 'I;16B', 'I;16N')


def load_image(path: Union[str, Path]) -> Image.Image:
    """
    Load an image file with EXIF orientation applied.

    Args:
        path: Path to image file

    Returns:
        Decoded PIL image

    Raises:
        FileNotFoundError: If file doesn't exist
        ImageLoadError: If file cannot be loaded
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Image file not found: {path}")

    if not path.is_file():
        raise ImageLoadError(f"Path is not a file: {path}")

    try:
        with Image.open(path) as img:
            img.load()
            # Apply EXIF orientation transformation to handle rotation
            return ImageOps.exif_transpose(img)
    except (IOError, OSError, Image.DecompressionBombError) as e:
        raise ImageLoadError(f"Failed to load image {path}: {e}") from e


def scale_16bit(channel: np.ndarray) -> np.ndarray:
    """Exact 16-to-8 bit scaling (65535 -> 255)."""
    return (np.clip(channel, 0, 0xFFFF).astype(np.uint32) // 0x101).astype(np.uint8)


def _to_uint8(array: np.ndarray) -> np.ndarray:
    if array.dtype == np.uint8:
        return array
    if array.dtype == np.uint16:
        return scale_16bit(array)
    if array.dtype == np.bool_:
        return array.astype(np.uint8) * 255
    if np.issubdtype(array.dtype, np.floating):
        # Float images are expected in [0, 1]
        return np.clip(np.rint(array * 255.0), 0, 255).astype(np.uint8)
    if np.issubdtype(array.dtype, np.integer):
        return np.clip(array, 0, 255).astype(np.uint8)
    raise ImageLoadError(f"Unsupported pixel dtype: {array.dtype}")


def pixel_grid_from_array(array: np.ndarray) -> PixelGrid:
    """
    Build a PixelGrid from a numpy image array.

    Args:
        array: Image array (H, W), (H, W, 1), (H, W, 3) or (H, W, 4)

    Returns:
        PixelGrid with uint8 RGBA samples
    """
    array = np.asarray(array)
    if array.ndim == 2:
        array = array[..., np.newaxis]

    if array.ndim != 3:
        raise ImageLoadError(f"Expected 2D or 3D array, got {array.ndim}D")

    channels = array.shape[2]
    if channels not in (1, 3, 4):
        raise ImageLoadError(f"Expected 1, 3 or 4 channels, got {channels}")

    array = _to_uint8(array)
    height, width = array.shape[:2]

    rgba = np.full((height, width, 4), 255, dtype=np.uint8)
    if channels == 1:
        rgba[..., :3] = array
    else:
        rgba[..., :channels] = array

    return PixelGrid(rgba)


def thumbnail_size(width: int, height: int, max_edge: int) -> Tuple[int, int]:
    """Largest size within max_edge x max_edge preserving aspect; never upscales."""
    if width <= max_edge and height <= max_edge:
        return width, height
    if width >= height:
        return max_edge, max(1, round(height * max_edge / width))
    return max(1, round(width * max_edge / height)), max_edge


def _pil_to_array(img: Image.Image) -> np.ndarray:
    if img.mode in _16BIT_MODES:
        return scale_16bit(np.array(img))
    if img.mode == 'I':
        # 32-bit integer images may hold either 8-bit or 16-bit sample ranges
        samples = np.array(img)
        if samples.size and samples.max() > 255:
            return scale_16bit(samples)
        return np.clip(samples, 0, 255).astype(np.uint8)
    return np.array(img.convert('RGBA'))


def ingest(image: ImageSource, max_edge: int = 256) -> PixelGrid:
    """
    Turn a path, PIL image or numpy array into a bounded PixelGrid.

    Images larger than ``max_edge`` on either side are shrunk with
    nearest-neighbour sampling so no new colors are introduced.

    Raises:
        FileNotFoundError: If a path doesn't exist
        ImageLoadError: If the image cannot be decoded
    """
    if isinstance(image, (str, Path)):
        image = load_image(image)

    if isinstance(image, Image.Image):
        grid = pixel_grid_from_array(_pil_to_array(image))
    elif isinstance(image, np.ndarray):
        grid = pixel_grid_from_array(image)
    else:
        raise ImageLoadError(f"Unsupported image type: {type(image).__name__}")

    if grid.size == 0:
        return grid

    size = thumbnail_size(grid.width, grid.height, max_edge)
    if size != (grid.width, grid.height):
        img = Image.fromarray(grid.pixels)
        img = img.resize(size, Image.Resampling.NEAREST)
        logger.debug(f"Thumbnailed {grid.width}x{grid.height} -> {size[0]}x{size[1]}")
        grid = PixelGrid(np.array(img))

    return grid
