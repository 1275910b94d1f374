"""Backend strategies: how each VCS lists, measures, and addresses a scope.

A backend is chosen once per call by :func:`backend_for`; nothing below it
checks the VCS kind again.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from vcsdiff.diff.assembler import ContentSource
from vcsdiff.diff.ranges import jj_revset_bounds, parse_jj_range, resolve_git_range
from vcsdiff.diff.renames import fetch_renames, parse_git_name_status, parse_jj_summary
from vcsdiff.diff.stats import fetch_stats
from vcsdiff.diff.translate import jj_diff_stats
from vcsdiff.vcs.adapter import GitCommands, JjCommands
from vcsdiff.vcs.git import GitAdapter
from vcsdiff.vcs.jj import JjAdapter
from vcsdiff.vcs.models import (
    FileStats,
    Range,
    RenameMap,
    ScopeSpec,
    Staged,
    Unstaged,
    VcsKind,
)
from vcsdiff.vcs.runner import VcsError, into_lines, read_working_tree


def _resolve_root(lookup: Callable[[], Path]) -> Optional[Path]:
    try:
        return lookup()
    except VcsError as exc:
        logger.debug(f"repository root unavailable: {exc}")
        return None


def _unknown_scope(scope: object) -> TypeError:
    return TypeError(f"Unsupported diff scope: {scope!r}")


# --- content sources ---


@dataclass(frozen=True)
class GitRefContent:
    """Both sides read from commits (``git show <ref>:<path>``)."""

    git: GitCommands
    old_ref: str
    new_ref: str

    def old_lines(self, path: str) -> list[str]:
        return into_lines(self.git.show(self.old_ref, path))

    def new_lines(self, path: str) -> list[str]:
        return into_lines(self.git.show(self.new_ref, path))


@dataclass(frozen=True)
class GitIndexToWorkingTree:
    git: GitCommands
    root: Optional[Path]

    def old_lines(self, path: str) -> list[str]:
        return into_lines(self.git.show_index(path))

    def new_lines(self, path: str) -> list[str]:
        return into_lines(read_working_tree(self.root, path))


@dataclass(frozen=True)
class GitHeadToIndex:
    git: GitCommands

    def old_lines(self, path: str) -> list[str]:
        return into_lines(self.git.show("HEAD", path))

    def new_lines(self, path: str) -> list[str]:
        return into_lines(self.git.show_index(path))


@dataclass(frozen=True)
class JjRevsetContent:
    """Both sides read with ``jj file show -r <revset>``."""

    jj: JjCommands
    old_revset: str
    new_revset: str

    def old_lines(self, path: str) -> list[str]:
        return into_lines(self.jj.file_show(self.old_revset, path))

    def new_lines(self, path: str) -> list[str]:
        return into_lines(self.jj.file_show(self.new_revset, path))


@dataclass(frozen=True)
class JjRevsetToWorkingTree:
    jj: JjCommands
    old_revset: str
    root: Optional[Path]

    def old_lines(self, path: str) -> list[str]:
        return into_lines(self.jj.file_show(self.old_revset, path))

    def new_lines(self, path: str) -> list[str]:
        return into_lines(read_working_tree(self.root, path))


# --- backends ---


class Backend(ABC):
    """Backend-specific behaviour for one VCS."""

    kind: VcsKind

    @abstractmethod
    def list_output(self, scope: ScopeSpec) -> str:
        """Raw difftastic output for *scope*. Raises VcsError."""

    @abstractmethod
    def stats(self, scope: ScopeSpec) -> FileStats:
        """Best-effort per-file stats; empty on failure."""

    @abstractmethod
    def renames(self, scope: ScopeSpec) -> RenameMap:
        """Best-effort rename map; empty on failure."""

    @abstractmethod
    def content(self, scope: ScopeSpec) -> ContentSource:
        """Content addressing for *scope*, resolved before any fan-out."""


class GitBackend(Backend):
    kind = VcsKind.GIT

    def __init__(self, git: GitCommands) -> None:
        self.git = git

    @staticmethod
    def _args(scope: ScopeSpec) -> list[str]:
        if isinstance(scope, Range):
            return [scope.expr]
        if isinstance(scope, Unstaged):
            return []
        if isinstance(scope, Staged):
            return ["--cached"]
        raise _unknown_scope(scope)

    def list_output(self, scope: ScopeSpec) -> str:
        return self.git.diff_tool(self._args(scope))

    def stats(self, scope: ScopeSpec) -> FileStats:
        return fetch_stats(self.git.numstat, self._args(scope))

    def renames(self, scope: ScopeSpec) -> RenameMap:
        return fetch_renames(self.git.name_status, self._args(scope), parse_git_name_status)

    def content(self, scope: ScopeSpec) -> ContentSource:
        if isinstance(scope, Range):
            old_ref, new_ref = resolve_git_range(scope.expr, self.git.merge_base)
            return GitRefContent(self.git, old_ref, new_ref)
        if isinstance(scope, Unstaged):
            return GitIndexToWorkingTree(self.git, _resolve_root(self.git.toplevel))
        if isinstance(scope, Staged):
            return GitHeadToIndex(self.git)
        raise _unknown_scope(scope)


class JjBackend(Backend):
    """jj backend; *git* is used for stats in colocated repositories."""

    kind = VcsKind.JJ

    def __init__(self, jj: JjCommands, git: GitCommands) -> None:
        self.jj = jj
        self.git = git

    @staticmethod
    def _args(scope: ScopeSpec) -> list[str]:
        if isinstance(scope, Range):
            bounds = parse_jj_range(scope.expr)
            if bounds is not None:
                return ["--from", bounds[0], "--to", bounds[1]]
            return ["-r", scope.expr]
        if isinstance(scope, Unstaged):
            return []
        if isinstance(scope, Staged):
            return ["-r", "@"]
        raise _unknown_scope(scope)

    @staticmethod
    def _revisions(scope: ScopeSpec) -> tuple[str, str]:
        """Old/new revsets bounding the change shown for *scope*."""
        if isinstance(scope, Range):
            return parse_jj_range(scope.expr) or jj_revset_bounds(scope.expr)
        if isinstance(scope, (Unstaged, Staged)):
            return "@-", "@"
        raise _unknown_scope(scope)

    def list_output(self, scope: ScopeSpec) -> str:
        return self.jj.diff_tool(self._args(scope))

    def stats(self, scope: ScopeSpec) -> FileStats:
        old, new = self._revisions(scope)
        return jj_diff_stats(self.jj, self.git, old, new)

    def renames(self, scope: ScopeSpec) -> RenameMap:
        return fetch_renames(self.jj.summary, self._args(scope), parse_jj_summary)

    def content(self, scope: ScopeSpec) -> ContentSource:
        if isinstance(scope, Unstaged):
            return JjRevsetToWorkingTree(self.jj, "@", _resolve_root(self.jj.root))
        old, new = self._revisions(scope)
        return JjRevsetContent(self.jj, old, new)


def backend_for(
    kind: VcsKind,
    *,
    cwd: Optional[Path] = None,
    tool: str = "difft",
    timeout: Optional[float] = None,
) -> Backend:
    """Build the backend for *kind* with real subprocess adapters."""
    git = GitAdapter(cwd=cwd, tool=tool, timeout=timeout)
    if kind is VcsKind.GIT:
        return GitBackend(git)
    if kind is VcsKind.JJ:
        return JjBackend(JjAdapter(cwd=cwd, tool=tool, timeout=timeout), git)
    raise ValueError(f"Unsupported VCS: {kind!r}")
