"""jj subprocess adapter: difftastic listing, summary, content, commit ids."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from vcsdiff.vcs.models import RevisionItem
from vcsdiff.vcs.runner import DIFFTASTIC_ENV, run_command, run_content

_LOG_TEMPLATE = (
    'if(current_working_copy, "@", if(immutable, "◆", "○")) ++ "\\t" ++ '
    'description.first_line() ++ "\\t" ++ change_id.shortest() ++ "\\t" ++ '
    'author.timestamp().ago() ++ "\\t" ++ commit_id ++ "\\n"'
)

_MAX_DESCRIPTION = 40


class JjAdapter:
    """Runs jj commands in *cwd* (the current directory when None)."""

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
            "jj", args, operation=operation, cwd=self.cwd, timeout=self.timeout, **kwargs
        )

    def diff_tool(self, args: list[str]) -> str:
        return self._run(["diff", *args, "--tool", self.tool], "jj diff", env=DIFFTASTIC_ENV)

    def summary(self, args: list[str]) -> str:
        return self._run(["diff", "--summary", *args], "jj diff --summary")

    def file_show(self, revset: str, path: str) -> Optional[str]:
        return run_content(
            "jj",
            ["file", "show", "-r", revset, path],
            operation="jj file show",
            cwd=self.cwd,
            timeout=self.timeout,
        )

    def commit_id(self, revset: str) -> str:
        return self._run(
            ["log", "-r", revset, "--no-graph", "-T", "commit_id"], "jj log"
        )

    def root(self) -> Path:
        return Path(self._run(["root"], "jj root").strip())

    def log(
        self,
        limit: int,
        revset: Optional[str] = None,
        *,
        exclude_rev: Optional[str] = None,
    ) -> list[RevisionItem]:
        """List up to *limit* revisions. Raises VcsError."""
        args = ["log", "--no-graph", "-n", str(limit)]
        if revset:
            args += ["-r", revset]
        args += ["-T", _LOG_TEMPLATE]
        output = self._run(args, "jj log")

        items: list[RevisionItem] = []
        for line in output.splitlines():
            parts = line.split("\t")
            if len(parts) != 5 or not parts[4] or parts[4] == exclude_rev:
                continue
            marker, desc, change_id, age, rev = parts
            desc = desc or "(no description set)"
            if len(desc) > _MAX_DESCRIPTION:
                desc = desc[:_MAX_DESCRIPTION] + "..."
            items.append(
                RevisionItem(
                    rev=rev,
                    text=f"{marker} {desc} {change_id} {age}",
                    short=change_id,
                    description=desc,
                    age=age,
                    marker=marker,
                )
            )
        return items


def effective_revset(filter_revset: Optional[str], base_revset: Optional[str]) -> Optional[str]:
    """Intersect a filter with the configured log revset, when both are set."""
    if filter_revset and base_revset:
        return f"({filter_revset}) & ({base_revset})"
    return filter_revset or base_revset
