"""Tests for rename parsing and reconciliation."""

import textwrap

from vcsdiff.diff.renames import (
    fetch_renames,
    parse_git_name_status,
    parse_jj_summary,
    reconcile,
)
from vcsdiff.difftastic.models import ChangeStatus
from vcsdiff.display.models import DisplayFile
from vcsdiff.vcs.runner import CommandSpawnError


def _file(path, status=ChangeStatus.MODIFIED, moved_from=None):
    return DisplayFile(path=path, status=status, moved_from=moved_from)


class TestParseGitNameStatus:
    def test_renames_only(self):
        output = textwrap.dedent("""\
            M\tapp.py
            R100\told.py\tnew.py
            A\tadded.py
            R087\tsrc/a.rs\tsrc/b.rs
        """)
        assert parse_git_name_status(output) == {"new.py": "old.py", "src/b.rs": "src/a.rs"}

    def test_copy_ignored(self):
        assert parse_git_name_status("C075\ta.py\tb.py\n") == {}

    def test_quoted_paths(self):
        output = "R100\t\"caf\\303\\251.txt\"\t\"th\\303\\251.txt\"\n"
        assert parse_git_name_status(output) == {"thé.txt": "café.txt"}

    def test_malformed_lines(self):
        assert parse_git_name_status("R100\tonly-one-path\n\n") == {}


class TestParseJjSummary:
    def test_flat_arrow(self):
        assert parse_jj_summary("R old.rs => new.rs\n") == {"new.rs": "old.rs"}

    def test_brace_form(self):
        output = "M src/lib.rs\nR src/{util.rs => helpers.rs}\nA docs/x.md\n"
        assert parse_jj_summary(output) == {"src/helpers.rs": "src/util.rs"}

    def test_non_rename_lines(self):
        assert parse_jj_summary("M a.rs\nD b.rs\n") == {}


class TestFetchRenames:
    def test_failure_gives_empty(self):
        def broken(args):
            raise CommandSpawnError("jj diff --summary", "jj could not be started")

        assert fetch_renames(broken, [], parse_jj_summary) == {}


class TestReconcile:
    def test_move_collapses_to_one_entry(self):
        files = [
            _file("a.txt", ChangeStatus.DELETED),
            _file("b.txt", ChangeStatus.CREATED),
            _file("c.txt"),
        ]
        result = reconcile(files, {"b.txt": "a.txt"})
        assert [f.path for f in result] == ["b.txt", "c.txt"]
        assert result[0].status == ChangeStatus.CREATED
        assert result[0].moved_from == "a.txt"
        assert result[1].moved_from is None

    def test_modified_rename_becomes_created(self):
        result = reconcile([_file("src/new.rs")], {"src/new.rs": "src/old.rs"})
        assert result[0].status == ChangeStatus.CREATED
        assert result[0].moved_from == "src/old.rs"

    def test_inline_move_without_map(self):
        files = [
            _file("old.rs", ChangeStatus.DELETED),
            _file("new.rs", moved_from="old.rs"),
        ]
        result = reconcile(files, {})
        assert [f.path for f in result] == ["new.rs"]
        assert result[0].status == ChangeStatus.CREATED

    def test_modified_old_path_kept(self):
        # Only the delete half of a move is dropped.
        files = [_file("a.txt"), _file("b.txt", moved_from="a.txt")]
        assert [f.path for f in reconcile(files, {})] == ["a.txt", "b.txt"]

    def test_no_renames_is_identity(self):
        files = [_file("x"), _file("y", ChangeStatus.DELETED), _file("z", ChangeStatus.CREATED)]
        result = reconcile(files, {})
        assert [(f.path, f.status) for f in result] == [
            ("x", ChangeStatus.MODIFIED),
            ("y", ChangeStatus.DELETED),
            ("z", ChangeStatus.CREATED),
        ]

    def test_duplicate_paths_dropped(self):
        files = [_file("b.txt", moved_from="a.txt"), _file("b.txt", ChangeStatus.CREATED)]
        result = reconcile(files, {})
        assert len(result) == 1
        assert result[0].moved_from == "a.txt"

    def test_never_adds(self):
        result = reconcile([_file("c.txt")], {"b.txt": "a.txt"})
        assert [f.path for f in result] == ["c.txt"]
