"""Plain-text rendering of inventory, degree, and separation results.

Each function returns a list of lines; the caller decides where they go.
"""

from egostats.analysis.separation import SeparationStats

# File-name suffix -> label used in the inventory listing
_INVENTORY_LABELS: dict[str, str] = {
    ".edges": "Edges",
    ".circles": "Circles",
    ".feat": "Features",
}


def format_inventory(counts: dict[str, int]) -> list[str]:
    """Preliminary-analysis lines, one per inventoried file."""
    lines = ["Preliminary Analysis:"]
    for name in sorted(counts):
        label = next(
            (lbl for ext, lbl in _INVENTORY_LABELS.items() if name.endswith(ext)),
            "Lines",
        )
        lines.append(f"File: {name} - {label}: {counts[name]}")
    return lines


def format_graph_summary(node_count: int, edge_count: int) -> list[str]:
    return [f"Graph loaded with {node_count} nodes and {edge_count} edges"]


def format_degree_distribution(sorted_degrees: list[tuple[int, int]]) -> list[str]:
    """Degree listing, expected in ascending degree order."""
    lines = ["Degrees sorted from lowest to highest:"]
    for degree, count in sorted_degrees:
        lines.append(f"Degree: {degree}, Count: {count}")
    return lines


def format_separation(stats: SeparationStats, precision: int = 2) -> list[str]:
    """Mean, standard deviation and median, fixed to ``precision`` decimals."""
    return [
        f"Mean separation: {stats.mean:.{precision}f}",
        f"Standard deviation of separation: {stats.std_dev:.{precision}f}",
        f"Median separation: {stats.median:.{precision}f}",
    ]
