"""Console report rendering for ego-network statistics."""

from egostats.reporting.text import (
    format_degree_distribution,
    format_graph_summary,
    format_inventory,
    format_separation,
)

__all__ = [
    "format_degree_distribution",
    "format_graph_summary",
    "format_inventory",
    "format_separation",
]
