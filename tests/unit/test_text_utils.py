"""Unit tests for text utilities."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clashview.utils.text import display_width, ends_with_terminator, split_lines

pytestmark = pytest.mark.unit


class TestSplitLines:
    """Tests for split_lines."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a\n"]),
            ("a\nb", ["a\n", "b"]),
            ("\n\n", ["\n", "\n"]),
            ("a\r\nb\n", ["a\r\n", "b\n"]),
        ],
    )
    def test_split(self, text, expected):
        """Test lines keep their terminators."""
        assert split_lines(text) == expected

    def test_only_newline_terminates(self):
        """Test other line separators stay inside the line."""
        assert split_lines("a\rb\x0bc d") == ["a\rb\x0bc d"]

    @given(st.text())
    def test_lossless(self, text):
        """Test joining the lines gives back the text."""
        assert "".join(split_lines(text)) == text


class TestHelpers:
    """Tests for the small text helpers."""

    def test_ends_with_terminator(self):
        """Test only a final newline counts."""
        assert ends_with_terminator("a\n")
        assert not ends_with_terminator("a")
        assert not ends_with_terminator("")

    def test_display_width_counts_characters(self):
        """Test width is measured in characters, not bytes."""
        assert display_width("é•") == 2
