"""Pick result colors from ranked clusters."""
from typing import Iterable, List, Optional

from dominantcolor.cluster import Cluster
from dominantcolor.types import TRANSPARENT, Color, WeightedColor


class ColorSelector:
    """Applies the brightness/darkness acceptance window to ranked clusters.

    A cluster is acceptable when ``min_darkness < r + g + b < max_brightness``.
    """

    def __init__(self, max_brightness: int = 665, min_darkness: int = 100):
        self.max_brightness = max_brightness
        self.min_darkness = min_darkness

    def is_acceptable(self, cluster: Cluster) -> bool:
        summed = sum(cluster.centroid)
        return self.min_darkness < summed < self.max_brightness

    def select(self, clusters: Iterable[Cluster]) -> Color:
        """Heaviest acceptable cluster, else the heaviest cluster.

        Returns a fully transparent color when there are no clusters.
        """
        heaviest = None
        for cluster in clusters:
            if heaviest is None:
                heaviest = cluster
            if self.is_acceptable(cluster):
                return Color(*cluster.centroid)
        if heaviest is None:
            return TRANSPARENT
        return Color(*heaviest.centroid)

    def weighted(
        self,
        clusters: Iterable[Cluster],
        total_pixels: int,
        limit: Optional[int] = None,
    ) -> List[WeightedColor]:
        """Every ranked cluster with its share of ``total_pixels``, unfiltered."""
        results = []
        for cluster in clusters:
            if limit is not None and len(results) >= limit:
                break
            weight = cluster.weight / total_pixels if total_pixels > 0 else 0.0
            results.append(WeightedColor(Color(*cluster.centroid), weight))
        return results
