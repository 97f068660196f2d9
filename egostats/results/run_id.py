"""Run ID generation with scannable slug format."""

from datetime import datetime, timezone
from pathlib import Path

from egostats.config.experiment import AnalysisConfig
from egostats.graph.types import Graph


def generate_run_id(config: AnalysisConfig, graph: Graph) -> str:
    """Generate a scannable run ID from the input file and graph size.

    Format: {edges_stem}_n{nodes}_e{edges}_{YYYYMMDD}_{HHMMSS}
    Example: 0_n333_e2519_20261019_143012
    """
    ts = datetime.now(timezone.utc)
    stem = Path(config.input.edges_path).stem or "edges"
    return (
        f"{stem}"
        f"_n{graph.node_count}"
        f"_e{graph.edge_count}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
