"""Unit tests for word-level diffing and diff spans."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from clashview.diff.spans import Deleted, Equal, Inserted, make_span
from clashview.diff.word_diff import diff_words, tokenize

pytestmark = pytest.mark.unit

diff_text = st.text(alphabet=st.sampled_from("ab1 2.,\n\t"), max_size=30)


class TestSpans:
    """Tests for the span classes."""

    def test_equal_rejects_empty_text(self):
        """Test empty equal spans cannot be built."""
        with pytest.raises(ValueError):
            Equal("")

    def test_kinds(self):
        """Test every span class reports its kind."""
        assert (Equal("a").kind, Inserted("b").kind, Deleted("c").kind) == ("equal", "inserted", "deleted")

    def test_make_span(self):
        """Test make_span picks the class for a kind."""
        assert make_span("inserted", "x") == Inserted("x")

    def test_make_span_unknown_kind(self):
        """Test an unknown kind is rejected."""
        with pytest.raises(ValueError):
            make_span("moved", "x")  # type: ignore[arg-type]

    def test_spans_are_frozen(self):
        """Test spans are immutable."""
        span = Equal("a")
        with pytest.raises(AttributeError):
            span.text = "b"  # type: ignore[misc]


class TestTokenize:
    """Tests for tokenize."""

    def test_words_whitespace_and_punctuation(self):
        """Test the three token classes."""
        assert tokenize("ab, 12\n") == ["ab", ",", " ", "12", "\n"]

    def test_whitespace_tokens_are_single_characters(self):
        """Test each whitespace character is its own token."""
        assert tokenize("  ") == [" ", " "]

    @given(diff_text)
    def test_lossless(self, text):
        """Test tokens join back into the text."""
        assert "".join(tokenize(text)) == text


class TestDiffWords:
    """Tests for diff_words."""

    def test_identical(self):
        """Test identical strings give a single equal span."""
        assert diff_words("1 2 3", "1 2 3") == [Equal("1 2 3")]

    def test_both_empty(self):
        """Test empty strings give no spans."""
        assert diff_words("", "") == []

    def test_replaced_word(self):
        """Test a replaced word gives a deletion followed by an insertion."""
        assert diff_words("1 2 3", "1 2 4") == [Equal("1 2 "), Deleted("3"), Inserted("4")]

    def test_inserted_word(self):
        """Test extra text is an insertion."""
        assert diff_words("a b", "a b c") == [Equal("a b"), Inserted(" c")]

    def test_deleted_word(self):
        """Test missing text is a deletion."""
        assert diff_words("a b c", "a c") == [Equal("a "), Deleted("b "), Equal("c")]

    def test_missing_trailing_space(self):
        """Test a missing space shows up as a deletion."""
        assert diff_words("a \n", "a\n") == [Equal("a"), Deleted(" "), Equal("\n")]

    def test_everything_inserted(self):
        """Test an empty old string gives one insertion."""
        assert diff_words("", "new text") == [Inserted("new text")]

    @given(diff_text, diff_text)
    def test_reconstructs_both_strings(self, old, new):
        """Test equal and deleted spans rebuild old; equal and inserted rebuild new."""
        spans = diff_words(old, new)
        assert "".join(s.text for s in spans if not isinstance(s, Inserted)) == old
        assert "".join(s.text for s in spans if not isinstance(s, Deleted)) == new

    @given(diff_text, diff_text)
    def test_no_empty_or_repeated_spans(self, old, new):
        """Test spans are never empty and neighbours never share a kind."""
        spans = diff_words(old, new)
        assert all(span.text for span in spans)
        assert all(a.kind != b.kind for a, b in zip(spans, spans[1:]))
