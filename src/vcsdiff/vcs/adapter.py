"""Command capabilities the diff engine needs from each backend.

The concrete adapters in :mod:`vcsdiff.vcs.git` and :mod:`vcsdiff.vcs.jj`
shell out; tests substitute fakes that return canned text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol


class GitCommands(Protocol):
    def diff_tool(self, args: list[str]) -> str:
        """Run ``git diff`` through difftastic. Raises VcsError."""
        ...

    def numstat(self, args: list[str]) -> str:
        """Return ``git diff --numstat`` output. Raises VcsError."""
        ...

    def name_status(self, args: list[str]) -> str:
        """Return ``git diff --name-status -M`` output. Raises VcsError."""
        ...

    def show(self, ref: str, path: str) -> Optional[str]:
        """Content of *path* at *ref*, or None."""
        ...

    def show_index(self, path: str) -> Optional[str]:
        """Staged content of *path*, or None."""
        ...

    def toplevel(self) -> Path:
        """Repository root. Raises VcsError."""
        ...

    def merge_base(self, a: str, b: str) -> Optional[str]:
        """Common ancestor of *a* and *b*, or None."""
        ...


class JjCommands(Protocol):
    def diff_tool(self, args: list[str]) -> str:
        """Run ``jj diff`` through difftastic. Raises VcsError."""
        ...

    def summary(self, args: list[str]) -> str:
        """Return ``jj diff --summary`` output. Raises VcsError."""
        ...

    def file_show(self, revset: str, path: str) -> Optional[str]:
        """Content of *path* at *revset*, or None."""
        ...

    def commit_id(self, revset: str) -> str:
        """Raw ``commit_id`` template output for *revset*. Raises VcsError."""
        ...

    def root(self) -> Path:
        """Workspace root. Raises VcsError."""
        ...
