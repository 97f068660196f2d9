"""Analysis configuration dataclasses — all frozen and slotted for immutability."""

from dataclasses import dataclass, field

INVENTORY_EXTENSIONS: tuple[str, ...] = (".edges", ".circles", ".feat")


@dataclass(frozen=True, slots=True)
class InputConfig:
    """Where the edge list and its sibling dataset files live."""

    edges_path: str = "0.edges"
    data_dir: str | None = None  # defaults to the edge list's parent directory
    inventory_extensions: tuple[str, ...] = INVENTORY_EXTENSIONS


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Result and figure output parameters."""

    results_dir: str = "results"
    plot: bool = True
    plot_name: str = "degree_distribution"
    precision: int = 2  # decimals for printed statistics


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Top-level analysis configuration composing all sub-configs.

    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations before any file is touched.
    """

    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.input.edges_path:
            raise ValueError("edges_path must be a non-empty path")
        for ext in self.input.inventory_extensions:
            if not ext.startswith("."):
                raise ValueError(
                    f"inventory extension {ext!r} must start with '.'"
                )
        if self.output.precision < 0:
            raise ValueError(
                f"precision must be >= 0, got {self.output.precision}"
            )
        if self.output.plot and not self.output.plot_name:
            raise ValueError("plot_name is required when plot is enabled")
