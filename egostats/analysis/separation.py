"""All-pairs separation statistics via per-source breadth-first search.

Every node is used as a BFS source and each finite, strictly positive hop
distance is appended to one flat sample. An unordered pair {u, v} in the
same component therefore contributes dist(u, v) twice, once from each
endpoint, and unreachable pairs contribute nothing. Mean, population
standard deviation and median are taken over that sample.

Runs in O(N * (N + E)); intended for single ego networks of a few thousand
nodes, not general large graphs.
"""

import logging
from collections import deque
from dataclasses import dataclass

import numpy as np

from egostats.graph.types import Graph

log = logging.getLogger(__name__)

UNREACHABLE = -1


@dataclass(frozen=True, slots=True)
class SeparationStats:
    """Summary of one graph's distance sample."""

    mean: float
    std_dev: float
    median: float
    sample_size: int  # number of directed (source, target) distances


def single_source_distances(graph: Graph, source: int) -> np.ndarray:
    """Hop distance from ``source`` to every node (UNREACHABLE if none).

    Args:
        graph: Graph to traverse.
        source: Start node index.

    Returns:
        int64 array of shape (N,); ``dist[source] == 0``.
    """
    dist = [UNREACHABLE] * graph.node_count
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        next_dist = dist[node] + 1
        for nbr in graph.neighbors(node):
            if dist[nbr] == UNREACHABLE:
                dist[nbr] = next_dist
                queue.append(nbr)
    return np.array(dist, dtype=np.int64)


def mean_of(sample: np.ndarray) -> float:
    if sample.size == 0:
        return 0.0
    return float(sample.sum() / sample.size)


def std_dev_of(sample: np.ndarray) -> float:
    """Population standard deviation (divides by the sample count)."""
    if sample.size == 0:
        return 0.0
    return float(np.std(sample.astype(np.float64), ddof=0))


def median_of(sample: np.ndarray) -> float:
    """Middle value; mean of the two central values for even counts."""
    if sample.size == 0:
        return 0.0
    ordered = np.sort(sample)
    mid = ordered.size // 2
    if ordered.size % 2 == 0:
        return (float(ordered[mid - 1]) + float(ordered[mid])) / 2.0
    return float(ordered[mid])


class SeparationAnalyzer:
    """Shortest-path separation statistics over every ordered node pair."""

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def distance_sample(self) -> np.ndarray:
        """All finite, positive single-source distances, for every source.

        A fresh array is built on each call.
        """
        parts: list[np.ndarray] = []
        for source in range(self.graph.node_count):
            dist = single_source_distances(self.graph, source)
            parts.append(dist[dist > 0])

        if not parts:
            return np.zeros(0, dtype=np.int64)
        sample = np.concatenate(parts)
        log.debug(
            "Distance sample: %d entries from %d sources",
            sample.size,
            self.graph.node_count,
        )
        return sample

    def mean_separation(self) -> float:
        return mean_of(self.distance_sample())

    def std_dev_separation(self) -> float:
        return std_dev_of(self.distance_sample())

    def median_separation(self) -> float:
        return median_of(self.distance_sample())

    def summary(self) -> SeparationStats:
        """All three statistics from a single traversal pass."""
        sample = self.distance_sample()
        stats = SeparationStats(
            mean=mean_of(sample),
            std_dev=std_dev_of(sample),
            median=median_of(sample),
            sample_size=int(sample.size),
        )
        log.info(
            "Separation: mean=%.4f, std_dev=%.4f, median=%.1f (%d distances)",
            stats.mean,
            stats.std_dev,
            stats.median,
            stats.sample_size,
        )
        return stats
