"""Graph construction from parsed edge pairs."""

import logging
from collections.abc import Iterable
from pathlib import Path

from egostats.graph.parser import read_edge_list
from egostats.graph.types import Graph

log = logging.getLogger(__name__)


class GraphBuilder:
    """Accumulates edges and assigns dense node indices in first-seen order.

    The name-to-index map lives only as long as the builder; ``build()``
    hands a copy to the frozen Graph.
    """

    def __init__(self) -> None:
        self._index: dict[str, int] = {}
        self._names: list[str] = []
        self._adjacency: list[list[int]] = []
        self._edges: list[tuple[int, int]] = []

    def _node(self, name: str) -> int:
        idx = self._index.get(name)
        if idx is None:
            idx = len(self._names)
            self._index[name] = idx
            self._names.append(name)
            self._adjacency.append([])
        return idx

    def add_edge(self, a: str, b: str) -> None:
        """Record an undirected edge; duplicates are kept as separate edges."""
        u = self._node(a)
        v = self._node(b)
        self._adjacency[u].append(v)
        if u != v:
            self._adjacency[v].append(u)
        self._edges.append((u, v))

    def build(self) -> Graph:
        return Graph(
            names=tuple(self._names),
            adjacency=tuple(tuple(nbrs) for nbrs in self._adjacency),
            edges=tuple(self._edges),
            _index=dict(self._index),
        )


def build_graph(pairs: Iterable[tuple[str, str]]) -> Graph:
    """Build a Graph from endpoint-name pairs, in iteration order."""
    builder = GraphBuilder()
    for a, b in pairs:
        builder.add_edge(a, b)
    return builder.build()


def load_edges(path: str | Path) -> Graph:
    """Read an edge-list file and build its Graph.

    Raises:
        EdgeListError: If the file cannot be read.
    """
    graph = build_graph(read_edge_list(path))
    log.info(
        "Graph loaded from %s (nodes=%d, edges=%d)",
        path,
        graph.node_count,
        graph.edge_count,
    )
    return graph
