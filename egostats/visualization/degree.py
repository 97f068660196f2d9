"""Degree distribution scatter on log-log axes."""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from egostats.visualization.style import DEGREE_COLOR, apply_style, save_figure

log = logging.getLogger(__name__)


def plot_degree_distribution(distribution: dict[int, int]) -> plt.Figure:
    """Plot degree vs. frequency on log-log axes.

    Degree 0 (isolated nodes) has no position on a log axis and is left
    out of the scatter.

    Args:
        distribution: Mapping degree -> number of nodes with that degree.

    Returns:
        The matplotlib Figure containing the plot.
    """
    fig, ax = plt.subplots()
    ax.set_title("Degree Distribution (Log-Log Scale)")
    ax.set_xlabel("Degree")
    ax.set_ylabel("Frequency")

    points = sorted((d, c) for d, c in distribution.items() if d > 0)
    if not points:
        ax.text(
            0.5, 0.5, "No nodes with positive degree",
            transform=ax.transAxes, ha="center", va="center",
            fontsize=12, color="gray",
        )
        return fig

    degrees = np.array([d for d, _ in points])
    counts = np.array([c for _, c in points])
    ax.scatter(degrees, counts, s=25, color=DEGREE_COLOR, alpha=0.8)
    ax.set_xscale("log")
    ax.set_yscale("log")

    fig.tight_layout()
    return fig


def render_degree_distribution(
    distribution: dict[int, int],
    output_dir: str | Path,
    name: str = "degree_distribution",
) -> tuple[Path, Path]:
    """Style, plot, and save the degree distribution as PNG + SVG."""
    apply_style()
    fig = plot_degree_distribution(distribution)
    paths = save_figure(fig, Path(output_dir), name)
    log.info("Degree distribution plotted to %s", paths[0])
    return paths
