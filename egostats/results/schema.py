"""Result assembly, schema validation and writing.

Uses a Python validation function (not jsonschema) to check required fields
and types before writing result.json files.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from egostats.analysis.separation import SeparationStats
from egostats.config.experiment import AnalysisConfig
from egostats.config.hashing import config_hash
from egostats.config.serialization import config_to_json

log = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "metrics",
}

REQUIRED_SCALARS = {
    "node_count",
    "edge_count",
    "component_count",
    "mean_separation",
    "std_dev_separation",
    "median_separation",
    "distance_sample_size",
}


def build_result(
    config: AnalysisConfig,
    run_id: str,
    node_count: int,
    edge_count: int,
    component_count: int,
    degree_distribution: dict[int, int],
    separation: SeparationStats,
    inventory: dict[str, int] | None = None,
) -> dict[str, Any]:
    """Assemble a schema-conformant result dict for one analysis run.

    Degree keys become strings (JSON object keys) and are listed in
    ascending degree order.
    """
    return {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": json.loads(config_to_json(config)),
        "config_hash": config_hash(config, exclude_fields=["description", "tags"]),
        "inventory": dict(inventory or {}),
        "metrics": {
            "scalars": {
                "node_count": node_count,
                "edge_count": edge_count,
                "component_count": component_count,
                "mean_separation": separation.mean,
                "std_dev_separation": separation.std_dev,
                "median_separation": separation.median,
                "distance_sample_size": separation.sample_size,
            },
            "degree_distribution": {
                str(degree): count
                for degree, count in sorted(degree_distribution.items())
            },
        },
    }


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "schema_version" in result and not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")

    if "tags" in result and not isinstance(result["tags"], list):
        errors.append("tags must be a list")

    if "config" in result and not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in result:
        ts = result["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    metrics = result.get("metrics")
    if metrics is None:
        return errors
    if not isinstance(metrics, dict):
        errors.append("metrics must be a dict")
        return errors

    scalars = metrics.get("scalars")
    if not isinstance(scalars, dict):
        errors.append("metrics.scalars is required")
    else:
        missing_scalars = REQUIRED_SCALARS - set(scalars.keys())
        if missing_scalars:
            errors.append(
                f"metrics.scalars missing fields: {sorted(missing_scalars)}"
            )
        for name in ("mean_separation", "std_dev_separation", "median_separation"):
            value = scalars.get(name)
            if value is not None and (
                not isinstance(value, (int, float)) or value < 0
            ):
                errors.append(f"metrics.scalars.{name} must be a non-negative number")

    dist = metrics.get("degree_distribution")
    if dist is not None:
        if not isinstance(dist, dict):
            errors.append("metrics.degree_distribution must be a dict")
        else:
            for key, count in dist.items():
                if not str(key).isdigit():
                    errors.append(
                        f"metrics.degree_distribution key {key!r} is not a degree"
                    )
                if not isinstance(count, int) or count <= 0:
                    errors.append(
                        f"metrics.degree_distribution[{key!r}] must be a positive int"
                    )
            if isinstance(scalars, dict) and "node_count" in scalars:
                total = sum(c for c in dist.values() if isinstance(c, int))
                if total != scalars["node_count"]:
                    errors.append(
                        f"degree_distribution counts sum to {total}, "
                        f"expected node_count {scalars['node_count']}"
                    )

    return errors


def write_result(result: dict[str, Any], results_dir: str | Path = "results") -> Path:
    """Validate and write result.json under ``results_dir/{run_id}/``.

    Raises:
        ValueError: If the result fails validation. Nothing is written.

    Returns:
        Path to the written result.json.
    """
    errors = validate_result(result)
    if errors:
        raise ValueError(f"Result validation failed: {'; '.join(errors)}")

    output_dir = Path(results_dir) / result["run_id"]
    output_dir.mkdir(parents=True, exist_ok=True)
    result_path = output_dir / "result.json"
    with open(result_path, "w") as f:
        json.dump(result, f, indent=2)

    log.info("Result written to %s", result_path)
    return result_path


def load_result(path: str | Path) -> dict[str, Any]:
    """Load a result.json file (or the result.json inside a run directory)."""
    path = Path(path)
    if path.is_dir():
        path = path / "result.json"
    with open(path) as f:
        return json.load(f)
