"""git subprocess adapter: difftastic listing, numstat, renames, content."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger

from vcsdiff.vcs.models import STAGED_REV, RevisionItem
from vcsdiff.vcs.runner import (
    DIFFTASTIC_ENV,
    CommandFailedError,
    VcsError,
    run_command,
    run_content,
)

_LOG_FORMAT = "--pretty=format:%H\t%h\t%ad\t%s"


class GitAdapter:
    """Runs git commands in *cwd* (the current directory when None)."""

    def __init__(
        self,
        cwd: Optional[Path] = None,
        tool: str = "difft",
        timeout: Optional[float] = None,
    ) -> None:
        self.cwd = cwd
        self.tool = tool
        self.timeout = timeout

    def _run(self, args: list[str], operation: str, **kwargs) -> str:
        return run_command(
            "git", args, operation=operation, cwd=self.cwd, timeout=self.timeout, **kwargs
        )

    def _content(self, spec: str, operation: str) -> Optional[str]:
        return run_content(
            "git", ["show", spec], operation=operation, cwd=self.cwd, timeout=self.timeout
        )

    # --- listing and enrichment ---

    def diff_tool(self, args: list[str]) -> str:
        return self._run(
            ["-c", f"diff.external={self.tool}", "diff", *args],
            "git diff",
            env=DIFFTASTIC_ENV,
        )

    def numstat(self, args: list[str]) -> str:
        return self._run(
            ["-c", "core.quotePath=false", "diff", "--numstat", *args], "git diff --numstat"
        )

    def name_status(self, args: list[str]) -> str:
        return self._run(
            ["-c", "core.quotePath=false", "diff", "--name-status", "-M", *args],
            "git diff --name-status",
        )

    # --- content ---

    def show(self, ref: str, path: str) -> Optional[str]:
        return self._content(f"{ref}:{path}", "git show")

    def show_index(self, path: str) -> Optional[str]:
        return self._content(f":{path}", "git show (index)")

    # --- addressing ---

    def toplevel(self) -> Path:
        out = self._run(["rev-parse", "--show-toplevel"], "git rev-parse")
        return Path(out.strip())

    def merge_base(self, a: str, b: str) -> Optional[str]:
        try:
            out = self._run(["merge-base", a, b], "git merge-base")
        except VcsError as exc:
            logger.debug(f"no merge-base for {a}...{b}: {exc}")
            return None
        return out.strip() or None

    # --- history ---

    def has_staged_changes(self) -> bool:
        """True when the index differs from HEAD."""
        try:
            self._run(["diff", "--cached", "--quiet"], "git diff --cached --quiet")
        except CommandFailedError as exc:
            return exc.returncode == 1
        except VcsError as exc:
            logger.debug(f"staged check unavailable: {exc}")
            return False
        return False

    def log(
        self,
        limit: int,
        revspec: Optional[str] = None,
        *,
        exclude_rev: Optional[str] = None,
        include_staged: bool = False,
    ) -> list[RevisionItem]:
        """List up to *limit* commits, newest first. Raises VcsError."""
        args = ["log", "--date=short", _LOG_FORMAT, "-n", str(limit)]
        if revspec:
            args.append(revspec)
        output = self._run(args, "git log")

        items: list[RevisionItem] = []
        if include_staged and self.has_staged_changes():
            items.append(RevisionItem(rev=STAGED_REV, text="(STAGED)"))

        for line in output.splitlines():
            parts = line.split("\t", 3)
            if len(parts) != 4 or not parts[0] or parts[0] == exclude_rev:
                continue
            full, short, date, subject = parts
            items.append(
                RevisionItem(
                    rev=full,
                    text=f"{short}  {date}  {subject}",
                    short=short,
                    date=date,
                    description=subject,
                )
            )
        return items
