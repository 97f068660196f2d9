"""Degree, separation, and connectivity analysis of a loaded graph."""

from egostats.analysis.components import count_components
from egostats.analysis.degree import DegreeAnalyzer
from egostats.analysis.separation import (
    UNREACHABLE,
    SeparationAnalyzer,
    SeparationStats,
    median_of,
    mean_of,
    single_source_distances,
    std_dev_of,
)

__all__ = [
    "DegreeAnalyzer",
    "SeparationAnalyzer",
    "SeparationStats",
    "UNREACHABLE",
    "count_components",
    "mean_of",
    "median_of",
    "single_source_distances",
    "std_dev_of",
]
