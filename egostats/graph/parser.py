"""Edge-list parsing: raw text lines to endpoint-name pairs.

An edge list holds one edge per line as two whitespace-separated node
identifiers. Lines with any other token count are skipped without error.
A line naming the same identifier twice is a self-loop edge.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

log = logging.getLogger(__name__)


class EdgeListError(Exception):
    """Raised when an edge-list or dataset file cannot be opened or decoded."""


def parse_edge_line(line: str) -> tuple[str, str] | None:
    """Parse one line into an ``(a, b)`` pair, or None if it is skipped."""
    tokens = line.split()
    if len(tokens) != 2:
        return None
    return tokens[0], tokens[1]


def parse_edge_lines(lines: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield the edge pair of every well-formed line, in input order."""
    skipped = 0
    for lineno, line in enumerate(lines, start=1):
        pair = parse_edge_line(line)
        if pair is None:
            skipped += 1
            log.debug("Skipping line %d: %r", lineno, line.rstrip("\n"))
            continue
        yield pair
    if skipped:
        log.info("Skipped %d malformed edge-list line(s)", skipped)


def read_edge_list(path: str | Path) -> list[tuple[str, str]]:
    """Read and parse an edge-list file.

    Args:
        path: Path to a whitespace-separated edge list (e.g. ``0.edges``).

    Returns:
        Edge pairs in file order.

    Raises:
        EdgeListError: If the file cannot be opened or is not valid UTF-8.
            The whole read fails; no partial result is returned.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            pairs = list(parse_edge_lines(f))
    except (OSError, UnicodeDecodeError) as e:
        raise EdgeListError(f"Failed to read edge list {path}: {e}") from e

    log.info("Read %d edges from %s", len(pairs), path)
    return pairs
