"""jj revset to git commit translation, for stats in colocated repositories."""

from __future__ import annotations

import re
from typing import Optional

from loguru import logger

from vcsdiff.diff.stats import fetch_stats
from vcsdiff.vcs.adapter import GitCommands, JjCommands
from vcsdiff.vcs.models import FileStats
from vcsdiff.vcs.runner import VcsError

_COMMIT_ID_RE = re.compile(r"^[0-9a-fA-F]{40}$")


def parse_commit_id(output: str) -> Optional[str]:
    """Return the commit id if *output* is exactly one 40-hex-digit line."""
    lines = [line.strip() for line in output.splitlines() if line.strip()]
    if len(lines) != 1 or not _COMMIT_ID_RE.match(lines[0]):
        return None
    return lines[0]


def jj_to_git_commit(jj: JjCommands, revset: str) -> Optional[str]:
    """Resolve *revset* to a git commit id, or None when inconclusive."""
    try:
        output = jj.commit_id(revset)
    except VcsError as exc:
        logger.debug(f"cannot translate {revset!r}: {exc}")
        return None
    commit = parse_commit_id(output)
    if commit is None:
        logger.debug(f"revset {revset!r} does not name exactly one commit")
    return commit


def jj_diff_stats(
    jj: JjCommands, git: GitCommands, old_revset: str, new_revset: str
) -> FileStats:
    """Stats between two jj revisions, computed by git on translated commits."""
    old = jj_to_git_commit(jj, old_revset)
    new = jj_to_git_commit(jj, new_revset)
    if old and new:
        return fetch_stats(git.numstat, [f"{old}..{new}"])
    if new:
        return fetch_stats(git.numstat, [f"{new}^..{new}"])
    return {}
