"""Data models for diff scopes, VCS kinds, and revision listings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class VcsKind(str, Enum):
    GIT = "git"
    JJ = "jj"

    @classmethod
    def parse(cls, name: Union[str, "VcsKind"]) -> "VcsKind":
        """Map a user-supplied name to a VcsKind. Raises ValueError if unknown."""
        if isinstance(name, VcsKind):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown VCS: {name!r} (expected 'git' or 'jj')") from None


@dataclass(frozen=True)
class Range:
    """A VCS-specific range or revision expression."""

    expr: str


@dataclass(frozen=True)
class Unstaged:
    """Working tree against the index (git) or the current revision (jj)."""


@dataclass(frozen=True)
class Staged:
    """Index against HEAD (git); the current revision's own change (jj)."""


ScopeSpec = Union[Range, Unstaged, Staged]

# path -> (additions, deletions)
FileStats = dict[str, tuple[int, int]]

# new path -> old path
RenameMap = dict[str, str]

STAGED_REV = "--staged"


@dataclass(frozen=True)
class RevisionItem:
    """One selectable entry in a revision listing."""

    rev: str
    text: str
    short: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None
    age: Optional[str] = None
    marker: Optional[str] = None


def detect_vcs(cwd: Optional[Path] = None) -> VcsKind:
    """Return JJ when a ``.jj`` directory exists at or above *cwd*, else GIT."""
    start = (cwd or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        if (directory / ".jj").is_dir():
            return VcsKind.JJ
    return VcsKind.GIT
