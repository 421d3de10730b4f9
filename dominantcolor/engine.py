"""Bounded-iteration K-means clustering of a pixel grid in RGB space.

RGB K-means (N clusters, M rounds):

1. Seed N clusters by sampling random pixels. A sample seeds a cluster only
   if its color is not already a centroid; after ``max_sample`` failed draws
   seeding stops, so an image with one color collapses to one cluster.
2. Assign every non-transparent pixel to its closest cluster and accumulate
   it into that cluster's aggregate.
3. Check whether every cluster's mean equals its current centroid, then move
   each centroid to its mean.
4. Repeat from 2 until converged or M rounds have run.
5. Rank clusters by weight (pixel count of the last round they won).
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from dominantcolor.cluster import Cluster, ClusterSet
from dominantcolor.sampler import RandomSampler, Sampler
from dominantcolor.types import DominantColorConfig, PixelGrid

logger = logging.getLogger(__name__)

SamplerFactory = Callable[[PixelGrid], Sampler]


@dataclass
class ClusteringResult:
    """Ranked clusters plus bookkeeping from one clustering run."""
    clusters: ClusterSet
    total_pixels: int  # width * height of the grid, transparent pixels included
    rounds: int = 0
    converged: bool = False


class ClusteringEngine:
    """Seeds, iterates and ranks clusters for a single pixel grid."""

    def __init__(
        self,
        config: Optional[DominantColorConfig] = None,
        sampler_factory: Optional[SamplerFactory] = None,
    ):
        self.config = config or DominantColorConfig()
        self.sampler_factory = sampler_factory or RandomSampler.for_grid

    def run(self, grid: PixelGrid, n_clusters: Optional[int] = None) -> ClusteringResult:
        """Cluster ``grid`` and return clusters sorted heaviest first."""
        n_clusters = self.config.cluster_count(n_clusters)
        clusters = self.seed(grid, n_clusters)
        result = ClusteringResult(clusters=clusters, total_pixels=grid.size)

        if len(clusters) > 0:
            result.rounds, result.converged = self._iterate(grid, clusters)

        clusters.sort_by_weight_descending()
        logger.debug(
            f"Clustered {grid.width}x{grid.height} grid into {len(clusters)} clusters "
            f"in {result.rounds} rounds (converged={result.converged})"
        )
        return result

    def seed(self, grid: PixelGrid, n_clusters: int) -> ClusterSet:
        """Pick up to ``n_clusters`` distinct starting colors."""
        clusters = ClusterSet()
        if grid.size == 0:
            return clusters

        sampler = self.sampler_factory(grid)
        for _ in range(n_clusters):
            # Keep sampling until a new color shows up or the budget runs out.
            color_unique = False
            for _ in range(self.config.max_sample):
                r, g, b, a = grid.at(*sampler.next_point())
                if a == 0:
                    continue
                color_unique = not clusters.contains_centroid(r, g, b)
                if color_unique:
                    clusters.append(Cluster(r, g, b))
                    break
            if not color_unique:
                break

        if len(clusters) < n_clusters:
            logger.debug(f"Seeded {len(clusters)} of {n_clusters} requested clusters")
        return clusters

    def _iterate(self, grid: PixelGrid, clusters: ClusterSet):
        pixels = grid.opaque_pixels()
        converged = False
        rounds = 0

        while rounds < self.config.n_iterations and not converged:
            labels = clusters.assign(pixels)
            for index, cluster in enumerate(clusters):
                cluster.add_points(pixels[labels == index])

            # Every cluster must be compared before any centroid moves.
            converged = all([c.compare_centroid_with_aggregate() for c in clusters])
            for cluster in clusters:
                cluster.recompute_centroid()
            rounds += 1

        return rounds, converged
