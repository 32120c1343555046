"""Unit tests for the markup tree parser."""

import time

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clashview.markup.nodes import Bold, Constant, MarkupDocument, Monospace, Text, Variable, plain_text
from clashview.markup.parser import MarkupParser

pytestmark = pytest.mark.unit


@pytest.fixture
def parser():
    return MarkupParser()


class TestMarkupParser:
    """Tests for MarkupParser.parse."""

    def test_plain_text(self, parser):
        """Test text without markers is a single text node."""
        assert parser.parse("hello world") == MarkupDocument(children=[Text("hello world")])

    def test_empty_text(self, parser):
        """Test empty input gives an empty document."""
        assert parser.parse("") == MarkupDocument(children=[])

    def test_each_tag_kind(self, parser):
        """Test each tag kind produces its node class."""
        doc = parser.parse("[[a]]{{b}}<<c>>`d`")
        assert doc.children == [
            Variable(children=[Text("a")]),
            Constant(children=[Text("b")]),
            Bold(children=[Text("c")]),
            Monospace(children=[Text("d")]),
        ]

    def test_nested_tags(self, parser):
        """Test tags nest inside other tags."""
        doc = parser.parse("<<Next [[N]] {{3}} lines:>>")
        assert doc.children == [
            Bold(
                children=[
                    Text("Next "),
                    Variable(children=[Text("N")]),
                    Text(" "),
                    Constant(children=[Text("3")]),
                    Text(" lines:"),
                ]
            )
        ]

    def test_deep_nesting(self, parser):
        """Test nesting deeper than one level."""
        doc = parser.parse("<<a {{b [[c]]}}>>")
        bold = doc.children[0]
        constant = bold.children[1]
        assert isinstance(constant, Constant)
        assert constant.children[1] == Variable(children=[Text("c")])

    def test_unclosed_marker_is_literal(self, parser):
        """Test an opener without a closer stays text."""
        assert parser.parse("a [[b") == MarkupDocument(children=[Text("a [[b")])

    def test_inner_unclosed_before_outer_closer(self, parser):
        """Test an inner tag cut off by its enclosing closer stays text."""
        doc = parser.parse("<<a [[b>> c]]")
        assert doc.children[0] == Bold(children=[Text("a [[b")])
        assert doc.children[1] == Text(" c]]")

    def test_stray_closer_is_literal(self, parser):
        """Test a closer without an opener stays text."""
        assert parser.parse("a ]] b") == MarkupDocument(children=[Text("a ]] b")])

    def test_multiline_content(self, parser):
        """Test tags span newlines."""
        doc = parser.parse("<<two\nlines>>")
        assert doc.children == [Bold(children=[Text("two\nlines")])]

    def test_max_depth_keeps_markers_literal(self):
        """Test markers beyond the depth limit are kept as text."""
        doc = MarkupParser(max_depth=1).parse("<<a [[b]]>>")
        assert doc.children == [Bold(children=[Text("a [[b]]")])]

    def test_invalid_max_depth(self):
        """Test a depth limit below one is rejected."""
        with pytest.raises(ValueError):
            MarkupParser(max_depth=0)

    def test_very_deep_input(self, parser):
        """Test deep input does not exhaust the stack."""
        text = "<<" * 500 + "x" + ">>" * 500
        assert "x" in plain_text(parser.parse(text))

    def test_opener_without_closer_keeps_inner_tags(self, parser):
        """Test complete tags after a literal opener still parse."""
        doc = parser.parse("<<a [[b]] c")
        assert doc.children == [Text("<<a "), Variable(children=[Text("b")]), Text(" c")]

    def test_cut_off_tag_keeps_inner_tags(self, parser):
        """Test a tag cut off by its enclosing closer keeps its complete children."""
        doc = parser.parse("<<x {{a [[b]] c>> }}")
        assert doc.children == [
            Bold(children=[Text("x {{a "), Variable(children=[Text("b")]), Text(" c")]),
            Text(" }}"),
        ]

    def test_unclosed_openers_parse_in_linear_time(self, parser):
        """Test kilobytes of unclosed nested openers parse quickly."""
        text = "[[{{<<`" * 800 + "]]"
        start = time.perf_counter()
        doc = parser.parse(text)
        elapsed = time.perf_counter() - start
        assert elapsed < 2.0
        assert len(plain_text(doc)) >= len(text) - 2 * 800

    def test_many_open_tags_cut_off_at_once(self, parser):
        """Test one closer demoting a full stack of open tags stays fast."""
        text = ("<<" + "[[a " * 31) * 200 + "]]" + ">>"
        start = time.perf_counter()
        doc = parser.parse(text)
        assert time.perf_counter() - start < 2.0
        assert plain_text(doc).count("a") == 31 * 200


class TestPlainText:
    """Tests for plain_text."""

    def test_markers_removed(self, parser):
        """Test plain_text drops consumed markers only."""
        assert plain_text(parser.parse("<<a [[b]] c>> [[d")) == "a b c [[d"

    @given(st.text(alphabet=st.characters(exclude_characters="[]{}<>`"), max_size=50))
    def test_marker_free_text_round_trips(self, text):
        """Test text without markers is preserved exactly."""
        assert plain_text(MarkupParser().parse(text)) == text
