"""JSON reporter for diff results and revision listings."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from vcsdiff.diff.facade import DiffResult
from vcsdiff.vcs.models import RevisionItem


def to_dict(result: DiffResult) -> dict[str, Any]:
    """Convert a DiffResult to a JSON-serialisable dict."""
    return result.to_dict()


def render(result: DiffResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)


def render_revisions(items: list[RevisionItem]) -> str:
    return json.dumps(
        [{k: v for k, v in asdict(item).items() if v is not None} for item in items],
        indent=2,
    )
