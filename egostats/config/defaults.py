"""Default configuration — single source of truth for analysis parameters."""

from egostats.config.experiment import AnalysisConfig

# Reads 0.edges, inventories its directory, prints statistics with two
# decimals and writes the log-log degree plot under results/.
DEFAULT_CONFIG = AnalysisConfig()
