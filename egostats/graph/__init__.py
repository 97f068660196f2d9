"""Edge-list parsing and undirected graph construction."""

from egostats.graph.builder import GraphBuilder, build_graph, load_edges
from egostats.graph.inventory import analyze_files, count_lines
from egostats.graph.parser import (
    EdgeListError,
    parse_edge_line,
    parse_edge_lines,
    read_edge_list,
)
from egostats.graph.types import Graph

__all__ = [
    "EdgeListError",
    "Graph",
    "GraphBuilder",
    "analyze_files",
    "build_graph",
    "count_lines",
    "load_edges",
    "parse_edge_line",
    "parse_edge_lines",
    "read_edge_list",
]
