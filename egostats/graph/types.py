"""Graph data structures for ego-network analysis."""

from dataclasses import dataclass, field

import numpy as np
import scipy.sparse


@dataclass(frozen=True)
class Graph:
    """Immutable undirected, unweighted graph addressed by dense node index.

    Nodes are 0..N-1 in first-seen order. Each node owns an ordered tuple of
    neighbor indices; an edge (a, b) appends b to a's list and a to b's list,
    so a duplicated input edge appears twice in both lists. A self-loop
    appears once in its node's own list.
    """

    names: tuple[str, ...]  # index -> original identifier
    adjacency: tuple[tuple[int, ...], ...]  # index -> neighbor indices
    edges: tuple[tuple[int, int], ...]  # insertion-ordered edge endpoints
    _index: dict[str, int] = field(repr=False, compare=False)

    @property
    def node_count(self) -> int:
        return len(self.names)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def neighbors(self, node: int) -> tuple[int, ...]:
        return self.adjacency[node]

    def index_of(self, name: str) -> int:
        """Dense index assigned to ``name``; raises KeyError if unknown."""
        return self._index[name]

    def name_of(self, node: int) -> str:
        return self.names[node]

    def to_sparse(self) -> scipy.sparse.csr_matrix:
        """Symmetric adjacency matrix (N x N).

        Parallel edges sum to their multiplicity. Self-loops contribute 1
        on the diagonal.
        """
        n = self.node_count
        if not self.edges:
            return scipy.sparse.csr_matrix((n, n), dtype=np.int64)

        pairs = np.asarray(self.edges, dtype=np.int64)
        off_diag = pairs[:, 0] != pairs[:, 1]
        rows = np.concatenate([pairs[:, 0], pairs[off_diag, 1]])
        cols = np.concatenate([pairs[:, 1], pairs[off_diag, 0]])
        data = np.ones(len(rows), dtype=np.int64)
        # coo -> csr sums duplicate coordinates
        return scipy.sparse.coo_matrix(
            (data, (rows, cols)), shape=(n, n)
        ).tocsr()
