"""Parallel per-file assembly of display entries."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Protocol

from vcsdiff.diff.paths import split_path
from vcsdiff.difftastic.models import DifftFile
from vcsdiff.display.models import DisplayFile
from vcsdiff.vcs.models import FileStats, RenameMap

Aligner = Callable[[DifftFile, list[str], list[str], Optional[tuple[int, int]]], DisplayFile]


class ContentSource(Protocol):
    """Old/new file content for one scope."""

    def old_lines(self, path: str) -> list[str]:
        ...

    def new_lines(self, path: str) -> list[str]:
        ...


def default_jobs() -> int:
    return os.cpu_count() or 1


def assemble_file(
    entry: DifftFile,
    stats: FileStats,
    renames: RenameMap,
    content: ContentSource,
    aligner: Aligner,
) -> DisplayFile:
    """Fetch both versions of one file and align them."""
    old_path, new_path = split_path(entry.path)
    old_path = renames.get(new_path, old_path)

    old_lines = content.old_lines(old_path)
    new_lines = content.new_lines(new_path)

    entry.path = new_path
    display = aligner(entry, old_lines, new_lines, stats.get(new_path))
    if old_path != new_path:
        display.moved_from = old_path
    return display


def assemble(
    files: list[DifftFile],
    stats: FileStats,
    renames: RenameMap,
    content: ContentSource,
    aligner: Aligner,
    jobs: Optional[int] = None,
) -> list[DisplayFile]:
    """Assemble every file on a thread pool; results keep the input order.

    *stats*, *renames* and *content* are shared read-only between workers.
    """
    if not files:
        return []
    workers = min(jobs or default_jobs(), len(files))
    if workers == 1:
        return [assemble_file(f, stats, renames, content, aligner) for f in files]

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="vcsdiff") as pool:
        return list(
            pool.map(
                lambda entry: assemble_file(entry, stats, renames, content, aligner),
                files,
            )
        )
