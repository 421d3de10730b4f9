"""Public entry points: dominant color, ranked palette and hex formatting."""
from typing import List, Optional, Sequence, Union

from dominantcolor.engine import ClusteringEngine
from dominantcolor.raster_ingest import ImageSource, ingest
from dominantcolor.selector import ColorSelector
from dominantcolor.types import Color, DominantColorConfig, WeightedColor


def _cluster(image: ImageSource, n_clusters: Optional[int], config: DominantColorConfig):
    grid = ingest(image, max_edge=config.resize_to)
    return ClusteringEngine(config).run(grid, n_clusters)


def find_dominant(
    image: ImageSource,
    n_clusters: Optional[int] = None,
    config: Optional[DominantColorConfig] = None,
) -> Color:
    """
    Find the dominant color of an image.

    Returns the heaviest cluster whose channel sum lies strictly inside the
    brightness window, or the heaviest cluster if none does. A fully
    transparent or empty image yields ``Color(0, 0, 0, 0)``.

    Args:
        image: Path, PIL image or numpy array
        n_clusters: Number of clusters (default 4; values <= 0 use the default)
        config: Tunable parameters

    Raises:
        FileNotFoundError: If a path doesn't exist
        ImageLoadError: If the image cannot be decoded
    """
    config = config or DominantColorConfig()
    result = _cluster(image, n_clusters, config)
    selector = ColorSelector(config.max_brightness, config.min_darkness)
    return selector.select(result.clusters)


def find_dominant_n(
    image: ImageSource,
    n_clusters: int,
    config: Optional[DominantColorConfig] = None,
) -> List[WeightedColor]:
    """
    Find up to ``n_clusters`` colors ranked by weight, without brightness
    filtering. Each weight is the fraction of the (thumbnailed) image's
    pixels that ended up in that cluster.
    """
    config = config or DominantColorConfig()
    n_clusters = config.cluster_count(n_clusters)
    result = _cluster(image, n_clusters, config)
    selector = ColorSelector(config.max_brightness, config.min_darkness)
    return selector.weighted(result.clusters, result.total_pixels, limit=n_clusters)


def format_hex(color: Union[Color, Sequence[int]]) -> str:
    """Render a color as ``#RRGGBB`` (uppercase, alpha dropped)."""
    if isinstance(color, Color):
        r, g, b = color.rgb
    else:
        r, g, b = color[:3]
    return f"#{int(r):02X}{int(g):02X}{int(b):02X}"
