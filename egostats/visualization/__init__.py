"""Static figure generation for ego-network statistics."""

from egostats.visualization.degree import (
    plot_degree_distribution,
    render_degree_distribution,
)
from egostats.visualization.style import apply_style, save_figure

__all__ = [
    "apply_style",
    "plot_degree_distribution",
    "render_degree_distribution",
    "save_figure",
]
