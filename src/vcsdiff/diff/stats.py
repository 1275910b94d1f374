"""Per-file addition/deletion counts from ``git diff --numstat``."""

from __future__ import annotations

from typing import Callable

from loguru import logger

from vcsdiff.diff.paths import new_path, unquote_path
from vcsdiff.vcs.models import FileStats
from vcsdiff.vcs.runner import VcsError


def parse_numstat(output: str) -> FileStats:
    """Parse ``additions<TAB>deletions<TAB>path`` lines.

    Binary files (``-`` counts) and malformed lines are skipped. Rename paths
    are keyed by their new side, with git's path quoting undone.
    """
    stats: FileStats = {}
    for line in output.splitlines():
        parts = line.split("\t", 2)
        if len(parts) != 3 or not parts[2]:
            continue
        try:
            additions, deletions = int(parts[0]), int(parts[1])
        except ValueError:
            continue
        if additions < 0 or deletions < 0:
            continue
        stats[unquote_path(new_path(parts[2]))] = (additions, deletions)
    return stats


def fetch_stats(numstat: Callable[[list[str]], str], args: list[str]) -> FileStats:
    """Run a numstat query and parse it; failures give empty stats."""
    try:
        return parse_numstat(numstat(args))
    except VcsError as exc:
        logger.debug(f"stats unavailable: {exc}")
        return {}
