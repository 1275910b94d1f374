"""Tests for move-encoding path splitting."""

from vcsdiff.diff.paths import new_path, split_path, unquote_path


class TestSplitPath:
    def test_plain_path(self):
        assert split_path("src/main.rs") == ("src/main.rs", "src/main.rs")

    def test_brace_form(self):
        assert split_path("src/{old.rs => new.rs}") == ("src/old.rs", "src/new.rs")

    def test_brace_form_with_suffix(self):
        assert split_path("{a => b}/mod.rs") == ("a/mod.rs", "b/mod.rs")

    def test_brace_form_spaces_trimmed(self):
        assert split_path("lib/{  x.py   =>  y.py }") == ("lib/x.py", "lib/y.py")

    def test_flat_arrow(self):
        assert split_path("old.rs => new.rs") == ("old.rs", "new.rs")

    def test_ascii_arrow(self):
        assert split_path("a.txt -> b.txt") == ("a.txt", "b.txt")

    def test_brace_without_arrow_is_literal(self):
        assert split_path("templates/{name}.html") == (
            "templates/{name}.html",
            "templates/{name}.html",
        )

    def test_empty_side_is_not_a_move(self):
        assert split_path(" => b") == (" => b", " => b")


class TestNewPath:
    def test_new_side(self):
        assert new_path("src/{old.rs => new.rs}") == "src/new.rs"

    def test_identity(self):
        assert new_path("README.md") == "README.md"


class TestUnquotePath:
    def test_plain(self):
        assert unquote_path("src/main.rs") == "src/main.rs"

    def test_octal_utf8(self):
        assert unquote_path('"caf\\303\\251.txt"') == "café.txt"

    def test_c_escapes(self):
        assert unquote_path('"tab\\there \\"q\\" back\\\\slash"') == 'tab\there "q" back\\slash'

    def test_lone_quote(self):
        assert unquote_path('"') == '"'
