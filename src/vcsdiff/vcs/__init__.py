"""VCS interface layer: process runner, git and jj adapters, models."""

from vcsdiff.vcs.git import GitAdapter
from vcsdiff.vcs.jj import JjAdapter
from vcsdiff.vcs.models import (
    FileStats,
    Range,
    RenameMap,
    RevisionItem,
    ScopeSpec,
    Staged,
    Unstaged,
    VcsKind,
    detect_vcs,
)
from vcsdiff.vcs.runner import (
    CommandFailedError,
    CommandSpawnError,
    VcsError,
    into_lines,
    run_command,
)

__all__ = [
    "CommandFailedError",
    "CommandSpawnError",
    "FileStats",
    "GitAdapter",
    "JjAdapter",
    "Range",
    "RenameMap",
    "RevisionItem",
    "ScopeSpec",
    "Staged",
    "Unstaged",
    "VcsError",
    "VcsKind",
    "detect_vcs",
    "into_lines",
    "run_command",
]
