"""Diff orchestration: ranges, renames, stats, parallel assembly, facade."""

from vcsdiff.diff.facade import (
    DiffError,
    DiffResult,
    collect,
    run_diff,
    run_diff_staged,
    run_diff_unstaged,
)
from vcsdiff.diff.paths import split_path
from vcsdiff.diff.ranges import jj_revset_bounds, parse_jj_range, resolve_git_range
from vcsdiff.diff.renames import parse_git_name_status, parse_jj_summary, reconcile

__all__ = [
    "DiffError",
    "DiffResult",
    "collect",
    "jj_revset_bounds",
    "parse_git_name_status",
    "parse_jj_range",
    "parse_jj_summary",
    "reconcile",
    "resolve_git_range",
    "run_diff",
    "run_diff_staged",
    "run_diff_unstaged",
    "split_path",
]
