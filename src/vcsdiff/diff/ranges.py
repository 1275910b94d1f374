"""Range resolution for git revision ranges and jj revsets."""

from __future__ import annotations

from typing import Callable, Optional

MergeBase = Callable[[str, str], Optional[str]]


def resolve_git_range(expr: str, merge_base: MergeBase) -> tuple[str, str]:
    """Turn a git range into ``(old_ref, new_ref)``.

    ``A...B`` diffs from the merge base (``A^`` when there is none), ``A..B``
    from ``A``, and a single ``R`` from its parent. Empty sides are passed
    through as given.
    """
    if "..." in expr:
        a, b = expr.split("...", 1)
        base = merge_base(a, b)
        return (base if base else f"{a}^"), b
    if ".." in expr:
        old, new = expr.split("..", 1)
        return old, new
    return f"{expr}^", expr


def parse_jj_range(expr: str) -> Optional[tuple[str, str]]:
    """Return ``(from, to)`` for a jj ``A..B`` with both sides non-empty."""
    if ".." not in expr:
        return None
    old, new = (side.strip() for side in expr.split("..", 1))
    if not old or not new:
        return None
    return old, new


def jj_revset_bounds(revset: str) -> tuple[str, str]:
    """Old/new revisions covering every commit in *revset*."""
    return f"roots({revset})-", f"heads({revset})"
