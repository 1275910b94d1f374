"""Diff retrieval entry points: range, unstaged, and staged.

Listing and parsing failures abort the call with a DiffError. Stats, rename
detection, and content lookups are enrichment: when they fail the call still
returns every file, just with less information.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, Union

from loguru import logger

from vcsdiff.config.schema import DiffConfig
from vcsdiff.diff.assembler import Aligner, assemble
from vcsdiff.diff.backends import Backend, backend_for
from vcsdiff.diff.renames import reconcile
from vcsdiff.difftastic.models import DifftFile
from vcsdiff.difftastic.parser import DifftParseError, parse
from vcsdiff.display.models import DisplayFile
from vcsdiff.display.processor import process_file
from vcsdiff.vcs.models import Range, ScopeSpec, Staged, Unstaged, VcsKind
from vcsdiff.vcs.runner import CommandFailedError, CommandSpawnError, VcsError

Parser = Callable[[str], list[DifftFile]]


class DiffError(Exception):
    """A diff could not be produced; the message is meant for the user."""


@dataclass
class DiffResult:
    files: list[DisplayFile] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"files": [f.to_dict() for f in self.files]}


def _list_error(kind: VcsKind, exc: VcsError) -> DiffError:
    if isinstance(exc, CommandSpawnError):
        return DiffError(f"Failed to run {kind.value}: {exc.detail}")
    if isinstance(exc, CommandFailedError):
        return DiffError(f"{kind.value} command failed: {exc.stderr}")
    return DiffError(f"{kind.value} command failed: {exc}")


def collect(
    backend: Backend,
    scope: ScopeSpec,
    *,
    parser: Parser = parse,
    aligner: Aligner = process_file,
    jobs: Optional[int] = None,
    rename_detection: bool = True,
) -> DiffResult:
    """Run one diff against *backend*: list, enrich, assemble, reconcile."""
    start = time.perf_counter()

    try:
        raw = backend.list_output(scope)
    except VcsError as exc:
        raise _list_error(backend.kind, exc) from exc
    try:
        files = parser(raw)
    except DifftParseError as exc:
        raise DiffError(f"Failed to parse difftastic JSON: {exc}") from exc

    stats = backend.stats(scope)
    renames = backend.renames(scope) if rename_detection else {}
    content = backend.content(scope)
    logger.debug(
        f"{backend.kind.value} {scope}: files={len(files)} stats={len(stats)} "
        f"renames={len(renames)}"
    )

    display_files = assemble(files, stats, renames, content, aligner, jobs)
    result = DiffResult(files=reconcile(display_files, renames))

    elapsed_ms = int((time.perf_counter() - start) * 1000)
    logger.debug(f"diff assembled: files={len(result.files)} Timing(ms)={elapsed_ms}")
    return result


def _run(
    scope: ScopeSpec,
    vcs: Union[str, VcsKind],
    cwd: Optional[Path],
    config: Optional[DiffConfig],
    parser: Parser,
    aligner: Aligner,
) -> DiffResult:
    try:
        kind = VcsKind.parse(vcs)
    except ValueError as exc:
        raise DiffError(str(exc)) from exc
    cfg = config or DiffConfig()
    backend = backend_for(kind, cwd=cwd, tool=cfg.tool, timeout=cfg.command_timeout)
    return collect(
        backend,
        scope,
        parser=parser,
        aligner=aligner,
        jobs=cfg.workers,
        rename_detection=cfg.rename_detection,
    )


def run_diff(
    scope: str,
    vcs: Union[str, VcsKind],
    *,
    cwd: Optional[Path] = None,
    config: Optional[DiffConfig] = None,
    parser: Parser = parse,
    aligner: Aligner = process_file,
) -> DiffResult:
    """Diff a git commit range or a jj revset."""
    return _run(Range(scope), vcs, cwd, config, parser, aligner)


def run_diff_unstaged(
    vcs: Union[str, VcsKind],
    *,
    cwd: Optional[Path] = None,
    config: Optional[DiffConfig] = None,
    parser: Parser = parse,
    aligner: Aligner = process_file,
) -> DiffResult:
    """Diff the working tree against the index (git) or current revision (jj)."""
    return _run(Unstaged(), vcs, cwd, config, parser, aligner)


def run_diff_staged(
    vcs: Union[str, VcsKind],
    *,
    cwd: Optional[Path] = None,
    config: Optional[DiffConfig] = None,
    parser: Parser = parse,
    aligner: Aligner = process_file,
) -> DiffResult:
    """Diff the index against HEAD (git); jj shows the current revision."""
    return _run(Staged(), vcs, cwd, config, parser, aligner)
