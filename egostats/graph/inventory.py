"""Line-count inventory of an ego-network dataset directory.

An ego network is distributed as sibling files sharing the ego's id:
``{id}.edges``, ``{id}.circles``, ``{id}.feat`` and friends.
"""

import logging
from pathlib import Path

from egostats.config.experiment import INVENTORY_EXTENSIONS
from egostats.graph.parser import EdgeListError

log = logging.getLogger(__name__)


def count_lines(path: str | Path) -> int:
    """Count the lines of a file, whatever its encoding.

    Raises:
        EdgeListError: If the file cannot be opened or read.
    """
    try:
        with open(path, "rb") as f:
            return sum(1 for _ in f)
    except OSError as e:
        raise EdgeListError(f"Failed to count lines in {path}: {e}") from e


def analyze_files(
    directory: str | Path,
    extensions: tuple[str, ...] = INVENTORY_EXTENSIONS,
) -> dict[str, int]:
    """Line counts for dataset files in ``directory``, keyed by file name.

    Only files whose names end with one of ``extensions`` are counted.
    A path that is not a directory yields an empty mapping.
    """
    directory = Path(directory)
    counts: dict[str, int] = {}
    if not directory.is_dir():
        log.debug("Inventory skipped: %s is not a directory", directory)
        return counts

    for entry in sorted(directory.iterdir()):
        if entry.is_file() and entry.name.endswith(extensions):
            counts[entry.name] = count_lines(entry)

    log.info("Inventoried %d dataset file(s) in %s", len(counts), directory)
    return counts
