"""Revision listings used to pick a diff target or range endpoints."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from vcsdiff.vcs.git import GitAdapter
from vcsdiff.vcs.jj import JjAdapter, effective_revset
from vcsdiff.vcs.models import RevisionItem, VcsKind


def list_revisions(
    kind: VcsKind,
    *,
    limit: int = 50,
    revset: Optional[str] = None,
    cwd: Optional[Path] = None,
    include_staged: bool = True,
) -> list[RevisionItem]:
    """Recent revisions, newest first. Raises VcsError.

    For git, a ``--staged`` pseudo-revision leads the list when the index
    differs from HEAD.
    """
    if kind is VcsKind.GIT:
        return GitAdapter(cwd=cwd).log(limit, revset, include_staged=include_staged)
    return JjAdapter(cwd=cwd).log(limit, revset)


def list_range_starts(
    kind: VcsKind,
    end_rev: str,
    *,
    limit: int = 50,
    revset: Optional[str] = None,
    cwd: Optional[Path] = None,
) -> list[RevisionItem]:
    """Candidate start revisions for a range ending at *end_rev*.

    For jj only revisions between ``trunk()`` and *end_rev* are offered, so
    immutable history before trunk is left out.
    """
    if kind is VcsKind.GIT:
        return GitAdapter(cwd=cwd).log(limit, end_rev, exclude_rev=end_rev)
    parent_filter = f"(::{end_rev}) & (trunk()::)"
    return JjAdapter(cwd=cwd).log(
        limit, effective_revset(parent_filter, revset), exclude_rev=end_rev
    )
