"""Analysis configuration system with frozen, hashable, serializable dataclasses."""

from egostats.config.experiment import (
    INVENTORY_EXTENSIONS,
    AnalysisConfig,
    InputConfig,
    OutputConfig,
)
from egostats.config.defaults import DEFAULT_CONFIG
from egostats.config.hashing import config_hash
from egostats.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "AnalysisConfig",
    "InputConfig",
    "OutputConfig",
    "INVENTORY_EXTENSIONS",
    "DEFAULT_CONFIG",
    "config_hash",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
