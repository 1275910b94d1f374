"""Subprocess wrapper shared by the git and jj adapters."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Optional

from loguru import logger

# Environment required for difftastic to emit structured JSON.
DIFFTASTIC_ENV: dict[str, str] = {
    "DFT_DISPLAY": "json",
    "DFT_UNSTABLE": "yes",
}


class VcsError(Exception):
    """Base class for failures of an external VCS command."""

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(message)
        self.operation = operation


class CommandSpawnError(VcsError):
    """The command could not be started (or did not finish in time)."""

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(operation, f"{operation}: {detail}")
        self.detail = detail


class CommandFailedError(VcsError):
    """The command ran but exited non-zero."""

    def __init__(self, operation: str, stderr: str, returncode: int) -> None:
        super().__init__(operation, f"{operation} failed: {stderr}")
        self.stderr = stderr
        self.returncode = returncode


def run_command(
    program: str,
    args: list[str],
    *,
    operation: str,
    cwd: Optional[Path] = None,
    env: Optional[dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> str:
    """Run *program* with *args* and return stdout.

    Raises CommandSpawnError when the process cannot be started and
    CommandFailedError on a non-zero exit.
    """
    cmd = [program, *args]
    full_env = {**os.environ, **env} if env else None
    logger.debug(f"{operation}: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            env=full_env,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandSpawnError(
            operation, f"timed out after {timeout}s: {' '.join(cmd)}"
        ) from exc
    except OSError as exc:
        raise CommandSpawnError(operation, f"{program} could not be started: {exc}") from exc

    if result.returncode != 0:
        raise CommandFailedError(operation, result.stderr.strip(), result.returncode)
    return result.stdout


def run_content(
    program: str,
    args: list[str],
    *,
    operation: str,
    cwd: Optional[Path] = None,
    timeout: Optional[float] = None,
) -> Optional[str]:
    """Like run_command, but any failure means "no content".

    A file missing at a revision is the normal case for added and removed
    files, so it cannot be told apart from other failures here.
    """
    try:
        return run_command(program, args, operation=operation, cwd=cwd, timeout=timeout)
    except VcsError as exc:
        logger.debug(f"no content from {operation}: {exc}")
        return None


def into_lines(content: Optional[str]) -> list[str]:
    """Split file content into lines; ``None`` gives an empty list."""
    if content is None:
        return []
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_working_tree(root: Optional[Path], path: str) -> Optional[str]:
    """Read *path* relative to the repository *root* from disk."""
    if root is None:
        return None
    try:
        return (root / path).read_bytes().decode("utf-8", errors="replace")
    except OSError as exc:
        logger.debug(f"working tree read failed for {path}: {exc}")
        return None
