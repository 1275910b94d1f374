"""Tests for numstat parsing."""

from vcsdiff.diff.stats import fetch_stats, parse_numstat
from vcsdiff.vcs.runner import CommandFailedError


class TestParseNumstat:
    def test_counts(self, sample_numstat: str):
        stats = parse_numstat(sample_numstat)
        assert stats["app.py"] == (3, 1)
        assert stats["new.py"] == (10, 0)

    def test_binary_skipped(self, sample_numstat: str):
        assert "logo.png" not in parse_numstat(sample_numstat)

    def test_rename_keyed_by_new_path(self, sample_numstat: str):
        stats = parse_numstat(sample_numstat)
        assert stats["src/new.rs"] == (2, 2)
        assert "src/{old.rs => new.rs}" not in stats

    def test_empty(self):
        assert parse_numstat("") == {}

    def test_path_with_tab(self):
        assert parse_numstat("1\t0\tweird\tname.txt\n") == {"weird\tname.txt": (1, 0)}


class TestFetchStats:
    def test_failure_gives_empty(self):
        def broken(args):
            raise CommandFailedError("git diff --numstat", "fatal: bad revision", 128)

        assert fetch_stats(broken, ["nope"]) == {}

    def test_passes_args(self):
        seen = []

        def numstat(args):
            seen.append(args)
            return "1\t1\ta.py\n"

        assert fetch_stats(numstat, ["HEAD"]) == {"a.py": (1, 1)}
        assert seen == [["HEAD"]]


class TestQuotedPaths:
    def test_quoted_path(self):
        assert parse_numstat('1\t0\t"caf\\303\\251.txt"\n') == {"café.txt": (1, 0)}

    def test_quoted_rename(self):
        assert parse_numstat('0\t0\t"caf\\303\\251.txt" => "th\\303\\251.txt"\n') == {"thé.txt": (0, 0)}
