"""Tests for comma-separated glob filters."""

from pathlib import Path

import pytest

from profanity.errors import GlobPatternError
from profanity.pipeline.globs import (
    matches_any,
    matches_any_pattern,
    matches_pattern,
    split_patterns,
    validate_pattern,
)


class TestSplitPatterns:
    def test_split_and_strip(self):
        assert split_patterns(" *.go , *.md,") == ["*.go", "*.md"]

    def test_empty_string(self):
        assert split_patterns("") == []


class TestMatchesAny:
    """Tests for full-path and base-name matching."""

    def test_wildcard_matches_full_path(self):
        assert matches_any("*.go", "/a/b/c.go")

    def test_bare_name_matches_base_name(self):
        """A pattern without a separator still matches through the base name."""
        assert matches_any("c.go", "/a/b/c.go")

    def test_any_pattern_in_list(self):
        assert matches_any("*.md, *.go", "src/main.go")
        assert not matches_any("*.md, *.txt", "src/main.go")

    def test_path_pattern(self):
        assert matches_any("vendor/*", "vendor/lib.go")
        assert not matches_any("vendor/*", "src/lib.go")

    def test_accepts_path_objects(self):
        assert matches_any("*.py", Path("pkg") / "mod.py")

    def test_character_class(self):
        assert matches_any("[abc].txt", "docs/b.txt")
        assert not matches_any("[abc].txt", "docs/d.txt")

    def test_blank_entries_never_match(self):
        assert not matches_any(" , ", "main.go")


class TestMalformedPatterns:
    def test_unterminated_class_raises(self):
        with pytest.raises(GlobPatternError, match="unterminated character class"):
            matches_any("*.[ch", "main.c")

    def test_error_carries_pattern(self):
        with pytest.raises(GlobPatternError) as exc_info:
            matches_pattern("src/[", "src/a")
        assert exc_info.value.pattern == "src/["

    def test_leading_bracket_is_literal_member(self):
        validate_pattern("[]a]")
        validate_pattern("[!]a]")

    def test_any_malformed_pattern_in_list_raises(self):
        with pytest.raises(GlobPatternError):
            matches_any_pattern(["[", "*.go"], "main.go")


class TestCaseSensitivity:
    """Matching is case-sensitive on every platform."""

    def test_extension_case_differs(self):
        assert not matches_any("*.GO", "src/main.go")

    def test_base_name_case_differs(self):
        assert not matches_pattern("readme.md", "docs/README.md")
        assert matches_pattern("README.md", "docs/README.md")
