"""Tests for brightness-window color selection."""
import pytest

from dominantcolor.cluster import Cluster
from dominantcolor.selector import ColorSelector
from dominantcolor.types import Color, WeightedColor


def ranked(*entries):
    """Clusters from (centroid, weight) pairs, already in rank order."""
    clusters = []
    for centroid, weight in entries:
        cluster = Cluster(*centroid)
        cluster.weight = weight
        clusters.append(cluster)
    return clusters


class TestSelect:
    """Test single-color selection."""

    def test_skips_too_bright(self):
        clusters = ranked(((255, 255, 255), 10), ((200, 30, 30), 5))
        assert ColorSelector().select(clusters) == Color(200, 30, 30, 255)

    def test_skips_too_dark(self):
        clusters = ranked(((0, 0, 0), 10), ((250, 250, 250), 6), ((40, 80, 120), 2))
        assert ColorSelector().select(clusters) == Color(40, 80, 120)

    def test_falls_back_to_heaviest(self):
        clusters = ranked(((0, 0, 0), 10), ((255, 255, 255), 8))
        assert ColorSelector().select(clusters) == Color(0, 0, 0, 255)

    @pytest.mark.parametrize("centroid,accepted", [
        ((100, 0, 0), False),
        ((101, 0, 0), True),
        ((255, 255, 154), True),
        ((255, 255, 155), False),
    ])
    def test_window_bounds_are_exclusive(self, centroid, accepted):
        clusters = ranked(((0, 0, 0), 10), (centroid, 5))
        expected = Color(*centroid) if accepted else Color(0, 0, 0)
        assert ColorSelector().select(clusters) == expected

    def test_custom_window(self):
        clusters = ranked(((20, 20, 20), 10), ((100, 100, 100), 5))
        assert ColorSelector(max_brightness=700, min_darkness=30).select(clusters) == Color(20, 20, 20)

    def test_no_clusters_gives_transparent(self):
        assert ColorSelector().select([]) == Color(0, 0, 0, 0)


class TestWeighted:
    """Test unfiltered multi-color results."""

    def test_weights_normalized_by_total(self):
        clusters = ranked(((255, 255, 255), 6), ((0, 0, 0), 2))
        result = ColorSelector().weighted(clusters, total_pixels=10)
        assert result == [
            WeightedColor(Color(255, 255, 255), 0.6),
            WeightedColor(Color(0, 0, 0), 0.2),
        ]

    def test_limit(self):
        clusters = ranked(((1, 1, 1), 3), ((2, 2, 2), 2), ((3, 3, 3), 1))
        result = ColorSelector().weighted(clusters, 6, limit=2)
        assert [w.color.r for w in result] == [1, 2]

    def test_zero_total_gives_zero_weights(self):
        clusters = ranked(((1, 1, 1), 3))
        result = ColorSelector().weighted(clusters, 0)
        assert result[0].weight == 0.0

    def test_empty(self):
        assert ColorSelector().weighted([], 100) == []
