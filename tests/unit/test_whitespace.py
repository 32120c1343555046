"""Unit tests for whitespace visualization."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clashview.constants import NEWLINE_GLYPH, SPACE_GLYPH
from clashview.whitespace import show_whitespace, styled_channel

pytestmark = pytest.mark.unit


def _brackets(text):
    return f"[{text}]"


def _braces(text):
    return f"{{{text}}}"


class TestShowWhitespace:
    """Tests for show_whitespace."""

    def test_spaces_and_newlines(self):
        """Test spaces and newlines become glyphs."""
        assert show_whitespace("a b\n", str, str) == "a•b⏎\n"

    def test_crlf_is_one_terminator(self):
        """Test CR LF produces a single newline glyph."""
        assert show_whitespace("a\r\nb", str, str) == "a⏎\nb"

    def test_lone_carriage_return_kept(self):
        """Test a CR without LF stays raw."""
        assert show_whitespace("a\rb", str, str) == "a\rb"

    def test_paints_applied(self):
        """Test content and glyphs use their own paints."""
        assert show_whitespace("ab  c\n", _brackets, _braces) == "[ab]{•}{•}[c]{⏎}\n"

    def test_tabs_are_content(self):
        """Test tabs are painted as content."""
        assert show_whitespace("a\tb", _brackets, _braces) == "[a\tb]"

    def test_empty(self):
        """Test empty text stays empty."""
        assert show_whitespace("", _brackets, _braces) == ""

    def test_escape_codes_not_substituted(self, style):
        """Test spaces inside emitted escape codes are never replaced."""
        result = show_whitespace("x y", style.output, style.output_whitespace)
        assert result.count(SPACE_GLYPH) == 1

    @given(st.text(alphabet=st.sampled_from("ab \n\r\t"), max_size=40))
    def test_glyph_counts(self, text):
        """Test one glyph per space and per line terminator."""
        result = show_whitespace(text, str, str)
        assert result.count(SPACE_GLYPH) == text.count(" ")
        assert result.count(NEWLINE_GLYPH) == text.count("\n")


class TestStyledChannel:
    """Tests for styled_channel."""

    def test_without_whitespace_style(self):
        """Test the whole text is painted when no glyph style is given."""
        assert styled_channel("a b\n", _brackets) == "[a b\n]"

    def test_with_whitespace_style(self):
        """Test glyphs are shown when a glyph style is given."""
        assert styled_channel("a b", _brackets, _braces) == "[a]{•}[b]"
