"""Data models for parsed difftastic output."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ChangeStatus(str, Enum):
    UNCHANGED = "unchanged"
    CREATED = "created"
    DELETED = "deleted"
    MODIFIED = "modified"


@dataclass
class DifftFile:
    """One file entry from difftastic's JSON output.

    ``chunks`` and ``aligned_lines`` are kept as difftastic emits them; only
    the aligner looks inside. ``path`` and ``status`` may be rewritten during
    rename reconciliation.
    """

    path: str
    status: ChangeStatus = ChangeStatus.MODIFIED
    language: Optional[str] = None
    chunks: list[Any] = field(default_factory=list)
    aligned_lines: Optional[list[Any]] = None
