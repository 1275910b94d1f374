"""Display-ready models produced by the aligner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from vcsdiff.difftastic.models import ChangeStatus


@dataclass(frozen=True, slots=True)
class LineSide:
    """One side of a display row. ``number`` is 1-based."""

    number: int
    text: str
    changed: bool = False


@dataclass(frozen=True, slots=True)
class DisplayRow:
    left: Optional[LineSide] = None
    right: Optional[LineSide] = None


@dataclass
class DisplayFile:
    """A file ready for side-by-side display."""

    path: str
    status: ChangeStatus
    language: Optional[str] = None
    rows: list[DisplayRow] = field(default_factory=list)
    additions: int = 0
    deletions: int = 0
    moved_from: Optional[str] = None  # set by rename reconciliation

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "status": self.status.value,
            "language": self.language,
            "additions": self.additions,
            "deletions": self.deletions,
            "moved_from": self.moved_from,
            "rows": [
                {
                    "left": _side_dict(row.left),
                    "right": _side_dict(row.right),
                }
                for row in self.rows
            ],
        }


def _side_dict(side: Optional[LineSide]) -> Optional[dict[str, Any]]:
    if side is None:
        return None
    return {"number": side.number, "text": side.text, "changed": side.changed}
