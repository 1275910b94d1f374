"""Tests for jj to git commit translation."""

from conftest import SHA_NEW, SHA_OLD, FakeGit, FakeJj

from vcsdiff.diff.translate import jj_diff_stats, jj_to_git_commit, parse_commit_id


class TestParseCommitId:
    def test_single_id(self):
        assert parse_commit_id(SHA_OLD + "\n") == SHA_OLD

    def test_surrounding_whitespace(self):
        assert parse_commit_id(f"\n  {SHA_OLD}  \n\n") == SHA_OLD

    def test_multiple_ids(self):
        assert parse_commit_id(f"{SHA_OLD}\n{SHA_NEW}\n") is None

    def test_short_id(self):
        assert parse_commit_id("abc123\n") is None

    def test_non_hex(self):
        assert parse_commit_id("z" * 40) is None

    def test_empty(self):
        assert parse_commit_id("") is None


class TestJjToGitCommit:
    def test_resolves(self):
        jj = FakeJj(commit_ids={"@-": SHA_OLD})
        assert jj_to_git_commit(jj, "@-") == SHA_OLD

    def test_failure_is_none(self):
        jj = FakeJj(fail=("commit_id",))
        assert jj_to_git_commit(jj, "@") is None


class TestJjDiffStats:
    def test_both_sides(self):
        jj = FakeJj(commit_ids={"@-": SHA_OLD, "@": SHA_NEW})
        git = FakeGit(numstat_output="4\t2\tlib.rs\n")
        assert jj_diff_stats(jj, git, "@-", "@") == {"lib.rs": (4, 2)}
        assert git.called("numstat") == [([f"{SHA_OLD}..{SHA_NEW}"],)]

    def test_only_new_side(self):
        jj = FakeJj(commit_ids={"@": SHA_NEW})
        git = FakeGit(numstat_output="1\t0\tlib.rs\n")
        assert jj_diff_stats(jj, git, "root()-", "@") == {"lib.rs": (1, 0)}
        assert git.called("numstat") == [([f"{SHA_NEW}^..{SHA_NEW}"],)]

    def test_nothing_resolves(self):
        jj = FakeJj()
        git = FakeGit(numstat_output="1\t0\tlib.rs\n")
        assert jj_diff_stats(jj, git, "x", "y") == {}
        assert git.called("numstat") == []

    def test_git_failure_gives_empty(self):
        jj = FakeJj(commit_ids={"@-": SHA_OLD, "@": SHA_NEW})
        git = FakeGit(fail=("numstat",))
        assert jj_diff_stats(jj, git, "@-", "@") == {}
