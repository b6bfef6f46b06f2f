"""
Unit tests for literal string splitting.
"""

from flexver.splitter import split_literal


class TestSplitLiteral:
    """Tests for split_literal."""

    def test_splits_on_dot(self):
        """Dots separate segments."""
        assert split_literal("1.2.3", ".") == ["1", "2", "3"]

    def test_single_element_is_list(self):
        """A string without the delimiter still yields a list."""
        assert split_literal("1", ".") == ["1"]

    def test_empty_string_is_list(self):
        """An empty string yields a single empty element."""
        assert split_literal("", ".") == [""]

    def test_empty_segments_preserved(self):
        """Adjacent and trailing delimiters produce empty segments."""
        assert split_literal("1..2.", ".") == ["1", "", "2", ""]

    def test_delimiter_is_not_a_pattern(self):
        """Regex metacharacters are matched literally."""
        assert split_literal("a.b|c", "|") == ["a.b", "c"]
        assert split_literal("a.b.c", ".*") == ["a.b.c"]

    def test_multi_character_delimiter(self):
        assert split_literal("1::2::3", "::") == ["1", "2", "3"]

    def test_empty_delimiter_splits_characters_with_bookends(self):
        """An empty delimiter yields each character between empty bookends."""
        assert split_literal("abc", "") == ["", "a", "b", "c", ""]
