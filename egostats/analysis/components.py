"""Connected-component count, reported alongside the separation sample."""

from scipy.sparse.csgraph import connected_components

from egostats.graph.types import Graph


def count_components(graph: Graph) -> int:
    """Number of connected components (0 for a graph with no nodes).

    Pairs in different components are missing from the distance sample,
    so more than one component means the separation statistics only
    describe within-component distances.
    """
    if graph.node_count == 0:
        return 0
    n_components, _ = connected_components(graph.to_sparse(), directed=False)
    return int(n_components)
