"""Rename detection and reconciliation.

Renames reach us two ways: git's name-status and jj's summary report them in
a separate query, while the difftastic listing may already carry an arrow
path for a moved file. Both end up as ``moved_from`` on the display entry,
with the status forced to CREATED (moves render as adds with history).
"""

from __future__ import annotations

from typing import Callable, Iterable

from loguru import logger

from vcsdiff.diff.paths import split_path, unquote_path
from vcsdiff.difftastic.models import ChangeStatus
from vcsdiff.display.models import DisplayFile
from vcsdiff.vcs.models import RenameMap
from vcsdiff.vcs.runner import VcsError


def _build_map(pairs: Iterable[tuple[str, str]]) -> RenameMap:
    renames: RenameMap = {}
    for old, new in pairs:
        if old and new and old != new:
            renames[new] = old
    return renames


def parse_git_name_status(output: str) -> RenameMap:
    """Rename pairs from ``git diff --name-status -M`` (``R<score>\\told\\tnew``)."""
    pairs = []
    for line in output.splitlines():
        parts = line.split("\t")
        if len(parts) != 3 or not parts[0].startswith("R"):
            continue
        pairs.append((unquote_path(parts[1].strip()), unquote_path(parts[2].strip())))
    return _build_map(pairs)


def parse_jj_summary(output: str) -> RenameMap:
    """Rename pairs from ``jj diff --summary`` (``R old => new`` or brace form)."""
    pairs = []
    for line in output.splitlines():
        if not line.startswith("R "):
            continue
        pairs.append(split_path(line[2:].strip()))
    return _build_map(pairs)


def fetch_renames(
    query: Callable[[list[str]], str],
    args: list[str],
    parse: Callable[[str], RenameMap],
) -> RenameMap:
    """Run a rename query and parse it; failures give an empty map."""
    try:
        return parse(query(args))
    except VcsError as exc:
        logger.debug(f"rename detection unavailable: {exc}")
        return {}


def reconcile(files: list[DisplayFile], renames: RenameMap) -> list[DisplayFile]:
    """Apply *renames* to *files* and drop the delete half of each move.

    Only removes entries, never adds them, and keeps the input order.
    """
    for file in files:
        old = renames.get(file.path)
        if old is not None:
            file.moved_from = old
        if file.moved_from is not None:
            file.status = ChangeStatus.CREATED

    moved_olds: set[str] = {f.moved_from for f in files if f.moved_from is not None}
    seen: set[str] = set()
    result: list[DisplayFile] = []
    for file in files:
        if file.status == ChangeStatus.DELETED and file.path in moved_olds:
            logger.debug(f"dropping delete half of move: {file.path}")
            continue
        if file.path in seen:
            logger.debug(f"dropping duplicate entry: {file.path}")
            continue
        seen.add(file.path)
        result.append(file)
    return result
