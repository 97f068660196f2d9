"""JSON serialization and deserialization for analysis configs."""

import json
from dataclasses import asdict
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from egostats.config.experiment import AnalysisConfig

_DACITE_CONFIG = DaciteConfig(cast=[tuple], check_types=True, strict=True)


def config_to_json(config: AnalysisConfig) -> str:
    """Serialize an AnalysisConfig to a JSON string (sorted keys, 2-space indent)."""
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> AnalysisConfig:
    """Deserialize a JSON string to an AnalysisConfig.

    Uses dacite with strict=True to reject unknown keys and cast=[tuple]
    to turn JSON arrays back into the tuple-typed fields. Missing keys fall
    back to the dataclass defaults, so a partial file like
    ``{"input": {"edges_path": "107.edges"}}`` is valid.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: AnalysisConfig) -> dict[str, Any]:
    """Convert an AnalysisConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> AnalysisConfig:
    """Reconstruct an AnalysisConfig from a plain dictionary."""
    return from_dict(data_class=AnalysisConfig, data=d, config=_DACITE_CONFIG)
