"""Degree distribution of an undirected graph."""

import numpy as np

from egostats.graph.types import Graph


class DegreeAnalyzer:
    """Per-node degree and degree -> frequency aggregation.

    Degree is the length of a node's neighbor list, so parallel edges
    from a repeated input line each count toward it.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph

    def degree(self, node: int) -> int:
        return len(self.graph.neighbors(node))

    def degree_sequence(self) -> np.ndarray:
        """Degrees in node-index order, shape (N,)."""
        return np.fromiter(
            (self.degree(node) for node in range(self.graph.node_count)),
            dtype=np.int64,
            count=self.graph.node_count,
        )

    def distribution(self) -> dict[int, int]:
        """Map each observed degree to the number of nodes having it.

        Returns an empty mapping for a graph with no nodes.
        """
        counts: dict[int, int] = {}
        for node in range(self.graph.node_count):
            d = self.degree(node)
            counts[d] = counts.get(d, 0) + 1
        return counts

    def sorted_distribution(self) -> list[tuple[int, int]]:
        """(degree, count) pairs in ascending degree order."""
        return sorted(self.distribution().items())
