"""Shared test fixtures: fake adapters, difftastic output samples, temp repos."""

from __future__ import annotations

import json
import subprocess
import textwrap
from pathlib import Path
from typing import Optional

import pytest

from vcsdiff.vcs.runner import CommandFailedError, VcsError


class FakeGit:
    """GitCommands stand-in returning canned text and recording calls."""

    def __init__(
        self,
        diff_output: str = "",
        numstat_output: str = "",
        name_status_output: str = "",
        files: Optional[dict[tuple[str, str], str]] = None,
        index: Optional[dict[str, str]] = None,
        root: Optional[Path] = None,
        merge_base_result: Optional[str] = None,
        fail: tuple[str, ...] = (),
    ) -> None:
        self.diff_output = diff_output
        self.numstat_output = numstat_output
        self.name_status_output = name_status_output
        self.files = files or {}
        self.index = index or {}
        self.root = root
        self.merge_base_result = merge_base_result
        self.fail = fail
        self.calls: list[tuple[str, tuple]] = []

    def _check(self, name: str, *args) -> None:
        self.calls.append((name, args))
        if name in self.fail:
            raise CommandFailedError(f"git {name}", f"fatal: {name} broke", 128)

    def diff_tool(self, args: list[str]) -> str:
        self._check("diff_tool", list(args))
        return self.diff_output

    def numstat(self, args: list[str]) -> str:
        self._check("numstat", list(args))
        return self.numstat_output

    def name_status(self, args: list[str]) -> str:
        self._check("name_status", list(args))
        return self.name_status_output

    def show(self, ref: str, path: str) -> Optional[str]:
        self.calls.append(("show", (ref, path)))
        return self.files.get((ref, path))

    def show_index(self, path: str) -> Optional[str]:
        self.calls.append(("show_index", (path,)))
        return self.index.get(path)

    def toplevel(self) -> Path:
        self._check("toplevel")
        if self.root is None:
            raise VcsError("git rev-parse", "not a git repository")
        return self.root

    def merge_base(self, a: str, b: str) -> Optional[str]:
        self.calls.append(("merge_base", (a, b)))
        return self.merge_base_result

    def called(self, name: str) -> list[tuple]:
        return [args for call, args in self.calls if call == name]


class FakeJj:
    """JjCommands stand-in returning canned text and recording calls."""

    def __init__(
        self,
        diff_output: str = "",
        summary_output: str = "",
        files: Optional[dict[tuple[str, str], str]] = None,
        commit_ids: Optional[dict[str, str]] = None,
        root: Optional[Path] = None,
        fail: tuple[str, ...] = (),
    ) -> None:
        self.diff_output = diff_output
        self.summary_output = summary_output
        self.files = files or {}
        self.commit_ids = commit_ids or {}
        self.root_path = root
        self.fail = fail
        self.calls: list[tuple[str, tuple]] = []

    def _check(self, name: str, *args) -> None:
        self.calls.append((name, args))
        if name in self.fail:
            raise CommandFailedError(f"jj {name}", f"Error: {name} broke", 1)

    def diff_tool(self, args: list[str]) -> str:
        self._check("diff_tool", list(args))
        return self.diff_output

    def summary(self, args: list[str]) -> str:
        self._check("summary", list(args))
        return self.summary_output

    def file_show(self, revset: str, path: str) -> Optional[str]:
        self.calls.append(("file_show", (revset, path)))
        return self.files.get((revset, path))

    def commit_id(self, revset: str) -> str:
        self._check("commit_id", revset)
        return self.commit_ids.get(revset, "")

    def root(self) -> Path:
        self._check("root")
        if self.root_path is None:
            raise VcsError("jj root", "There is no jj repo in \".\"")
        return self.root_path

    def called(self, name: str) -> list[tuple]:
        return [args for call, args in self.calls if call == name]


def difft_entry(
    path: str,
    status: str = "changed",
    language: str = "Python",
    chunks: Optional[list] = None,
    aligned_lines: Optional[list] = None,
) -> dict:
    entry = {"path": path, "status": status, "language": language}
    if chunks is not None:
        entry["chunks"] = chunks
    if aligned_lines is not None:
        entry["aligned_lines"] = aligned_lines
    return entry


def concat_json(*entries: dict) -> str:
    """Entries back to back, the way git's per-file external diff emits them."""
    return "\n".join(json.dumps(e) for e in entries) + "\n"


def array_json(*entries: dict) -> str:
    return json.dumps(list(entries))


SHA_OLD = "a" * 40
SHA_NEW = "b" * 40


@pytest.fixture
def sample_difft_modified() -> str:
    """A modified file with one changed line on each side."""
    return textwrap.dedent("""\
        {"path": "app.py", "language": "Python", "status": "changed",
         "chunks": [[{"lhs": {"line_number": 1, "changes": []},
                      "rhs": {"line_number": 1, "changes": []}}]],
         "aligned_lines": [[0, 0], [1, 1], [2, 2]]}
    """)


@pytest.fixture
def sample_difft_mixed() -> str:
    """Three files emitted back to back: created, deleted, and modified."""
    return concat_json(
        difft_entry("new.py", "created", chunks=[[{"rhs": {"line_number": 0, "changes": []}}]]),
        difft_entry("gone.py", "deleted", chunks=[[{"lhs": {"line_number": 0, "changes": []}}]]),
        difft_entry("app.py", "changed"),
    )


@pytest.fixture
def sample_numstat() -> str:
    return textwrap.dedent("""\
        3\t1\tapp.py
        -\t-\tlogo.png
        10\t0\tnew.py
        2\t2\tsrc/{old.rs => new.rs}
        not a numstat line
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
