#!/usr/bin/env python3
"""Entry point for ego-network statistics.

Chains all stages into a single executable command:
dataset inventory -> graph loading -> degree distribution ->
separation statistics -> result JSON -> degree plot.

Usage:
    python run_analysis.py --edges facebook/0.edges
    python run_analysis.py --config analysis.json --no-plot
    python run_analysis.py --edges 0.edges --dry-run --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from egostats.config import (
    DEFAULT_CONFIG,
    AnalysisConfig,
    config_from_json,
    config_hash,
)

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def run_pipeline(config: AnalysisConfig) -> Path:
    """Execute the full analysis.

    Args:
        config: Validated analysis configuration.

    Returns:
        Path to the written result.json.

    Raises:
        EdgeListError: If the edge list cannot be read. An unreadable dataset
            file only empties the inventory.
    """
    # Lazy imports to keep --dry-run fast
    from egostats.analysis import (
        DegreeAnalyzer,
        SeparationAnalyzer,
        count_components,
    )
    from egostats.graph import EdgeListError, analyze_files, load_edges
    from egostats.reporting import (
        format_degree_distribution,
        format_graph_summary,
        format_inventory,
        format_separation,
    )
    from egostats.results import build_result, generate_run_id, write_result
    from egostats.visualization import render_degree_distribution

    pipeline_start = time.monotonic()
    edges_path = Path(config.input.edges_path)
    data_dir = Path(config.input.data_dir) if config.input.data_dir else edges_path.parent

    # ── Stage 1: Dataset Inventory ─────────────────────────────────
    with stage_timer("Dataset Inventory"):
        try:
            inventory = analyze_files(data_dir, config.input.inventory_extensions)
        except EdgeListError as e:
            log.error("Error analyzing files: %s", e)
            inventory = {}
        for line in format_inventory(inventory):
            print(line)

    # ── Stage 2: Graph Loading ─────────────────────────────────────
    with stage_timer("Graph Loading"):
        graph = load_edges(edges_path)
        component_count = count_components(graph)
        for line in format_graph_summary(graph.node_count, graph.edge_count):
            print(line)
        log.info("Connected components: %d", component_count)

    # ── Stage 3: Degree Distribution ───────────────────────────────
    with stage_timer("Degree Distribution"):
        degrees = DegreeAnalyzer(graph)
        distribution = degrees.distribution()
        for line in format_degree_distribution(degrees.sorted_distribution()):
            print(line)

    # ── Stage 4: Separation Statistics ─────────────────────────────
    with stage_timer("Separation Statistics"):
        separation = SeparationAnalyzer(graph).summary()
        for line in format_separation(separation, config.output.precision):
            print(line)

    # ── Stage 5: Result JSON ───────────────────────────────────────
    with stage_timer("Write Result"):
        run_id = generate_run_id(config, graph)
        result = build_result(
            config=config,
            run_id=run_id,
            node_count=graph.node_count,
            edge_count=graph.edge_count,
            component_count=component_count,
            degree_distribution=distribution,
            separation=separation,
            inventory=inventory,
        )
        result_path = write_result(result, config.output.results_dir)

    # ── Stage 6: Degree Plot ───────────────────────────────────────
    figure_path = None
    if config.output.plot:
        with stage_timer("Degree Plot"):
            figure_path, _ = render_degree_distribution(
                distribution,
                result_path.parent / "figures",
                config.output.plot_name,
            )
            print(f"Degree distribution plotted to {figure_path}")

    total_elapsed = time.monotonic() - pipeline_start
    print(f"\n{'=' * 60}")
    print(f"Analysis complete in {total_elapsed:.1f}s")
    print(f"  Run:     {run_id}")
    print(f"  Result:  {result_path}")
    if figure_path is not None:
        print(f"  Figure:  {figure_path}")
    print(f"{'=' * 60}")

    return result_path


def resolve_config(args: argparse.Namespace) -> AnalysisConfig:
    """Load the config file (or defaults) and apply command-line overrides."""
    if args.config:
        config = config_from_json(Path(args.config).read_text())
    else:
        config = DEFAULT_CONFIG

    input_cfg = config.input
    if args.edges:
        input_cfg = replace(input_cfg, edges_path=args.edges)
    if args.data_dir:
        input_cfg = replace(input_cfg, data_dir=args.data_dir)

    output_cfg = config.output
    if args.results_dir:
        output_cfg = replace(output_cfg, results_dir=args.results_dir)
    if args.no_plot:
        output_cfg = replace(output_cfg, plot=False)

    return replace(config, input=input_cfg, output=output_cfg)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Degree and separation statistics for an ego-network edge list"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to analysis config JSON file",
    )
    parser.add_argument(
        "--edges",
        type=str,
        default=None,
        help="Path to the .edges file (overrides the config)",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory to inventory (defaults to the edge list's directory)",
    )
    parser.add_argument(
        "--results-dir",
        type=str,
        default=None,
        help="Base directory for result.json and figures",
    )
    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Skip the degree distribution plot",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the analysis plan without reading the edge list",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config and not Path(args.config).exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        config = resolve_config(args)
    except (OSError, ValueError, DaciteError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    edges_path = Path(config.input.edges_path)
    print(f"Edge list:   {edges_path}")
    print(f"Config hash: {config_hash(config, exclude_fields=['description', 'tags'])}")

    if args.dry_run:
        print("\nAnalysis plan:")
        print(f"  1. Inventory {config.input.data_dir or edges_path.parent} "
              f"for {', '.join(config.input.inventory_extensions)}")
        print(f"  2. Load graph from {edges_path}")
        print("  3. Degree distribution")
        print("  4. Separation statistics (BFS from every node)")
        print(f"  5. Write {config.output.results_dir}/<run_id>/result.json")
        if config.output.plot:
            print(f"  6. Plot figures/{config.output.plot_name}.png + .svg")
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    if not edges_path.is_file():
        print(f"Error: edge list not found: {edges_path}", file=sys.stderr)
        sys.exit(1)

    try:
        run_pipeline(config)
    except Exception:
        log.exception("Analysis failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
