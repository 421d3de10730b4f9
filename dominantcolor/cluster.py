"""K-means cluster state in 8-bit RGB space."""
from typing import Iterator, List, Optional, Tuple

import numpy as np


class Cluster:
    """A single cluster: centroid, running aggregate and weight.

    The aggregate and counter collect the pixels assigned during the current
    round. ``weight`` is the counter value frozen by the last
    ``recompute_centroid`` that saw at least one pixel.
    """

    def __init__(self, r: int = 0, g: int = 0, b: int = 0):
        self.set_centroid(r, g, b)

    def __repr__(self):
        return f"Cluster(centroid={self.centroid}, weight={self.weight})"

    @property
    def centroid(self) -> Tuple[int, int, int]:
        return self._centroid

    def set_centroid(self, r: int, g: int, b: int):
        self._centroid = (int(r), int(g), int(b))
        self.aggregate = [0, 0, 0]
        self.counter = 0
        self.weight = 0

    def is_at_centroid(self, r: int, g: int, b: int) -> bool:
        return self._centroid == (r, g, b)

    def add_point(self, r: int, g: int, b: int):
        self.aggregate[0] += int(r)
        self.aggregate[1] += int(g)
        self.aggregate[2] += int(b)
        self.counter += 1

    def add_points(self, pixels: np.ndarray):
        """Accumulate an (N, 3) array of RGB samples in one step."""
        if len(pixels) == 0:
            return
        sums = pixels.sum(axis=0, dtype=np.int64)
        for channel in range(3):
            self.aggregate[channel] += int(sums[channel])
        self.counter += len(pixels)

    def _mean(self) -> Tuple[int, int, int]:
        return tuple(total // self.counter for total in self.aggregate)

    def compare_centroid_with_aggregate(self) -> bool:
        """True if recomputing would leave the centroid where it is.

        An empty cluster never counts as converged.
        """
        if self.counter == 0:
            return False
        return self._mean() == self._centroid

    def recompute_centroid(self):
        """Move the centroid to the mean of this round's points.

        Clusters that won no points keep both their centroid and weight.
        """
        if self.counter > 0:
            self._centroid = self._mean()
            self.weight = self.counter
            self.aggregate = [0, 0, 0]
            self.counter = 0

    def distance_squared(self, r: int, g: int, b: int) -> int:
        cr, cg, cb = self._centroid
        return (int(r) - cr) ** 2 + (int(g) - cg) ** 2 + (int(b) - cb) ** 2


class ClusterSet:
    """Ordered collection of clusters owned by a single clustering run."""

    def __init__(self, clusters: Optional[List[Cluster]] = None):
        self._clusters: List[Cluster] = list(clusters or [])

    def __len__(self) -> int:
        return len(self._clusters)

    def __iter__(self) -> Iterator[Cluster]:
        return iter(self._clusters)

    def __getitem__(self, index: int) -> Cluster:
        return self._clusters[index]

    def __repr__(self):
        return f"ClusterSet({self._clusters!r})"

    def append(self, cluster: Cluster):
        self._clusters.append(cluster)

    @property
    def centroids(self) -> np.ndarray:
        """(K, 3) int64 array of member centroids in order."""
        return np.array([c.centroid for c in self._clusters], dtype=np.int64).reshape(-1, 3)

    def contains_centroid(self, r: int, g: int, b: int) -> bool:
        return any(c.is_at_centroid(r, g, b) for c in self._clusters)

    def closest(self, r: int, g: int, b: int) -> Optional[Cluster]:
        """Nearest member by squared distance; ties go to the earliest member."""
        closest = None
        best = None
        for cluster in self._clusters:
            distance = cluster.distance_squared(r, g, b)
            if best is None or distance < best:
                best = distance
                closest = cluster
        return closest

    def assign(self, pixels: np.ndarray) -> np.ndarray:
        """Index of the closest member for every row of an (N, 3) array.

        Same tie-breaking as ``closest``: a later member only wins on a
        strictly smaller distance. Memory stays O(N) for any cluster count.
        """
        if len(self._clusters) == 0:
            raise ValueError("Cannot assign pixels to an empty ClusterSet")
        samples = pixels.astype(np.int64).reshape(-1, 3)
        labels = np.zeros(len(samples), dtype=np.intp)
        best = None
        for index, centroid in enumerate(self.centroids):
            diff = samples - centroid
            distances = (diff * diff).sum(axis=1)
            if best is None:
                best = distances
                continue
            closer = distances < best
            labels[closer] = index
            best = np.where(closer, distances, best)
        return labels

    def sort_by_weight_descending(self):
        """Stable sort, heaviest first."""
        self._clusters.sort(key=lambda c: c.weight, reverse=True)
