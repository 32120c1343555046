#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/diff/word_diff.py
"""Word-level comparison of two strings using difflib.

Strings are split into words, single whitespace characters and single
punctuation characters, so a diff pinpoints a wrong number or a missing
space without re-aligning whole lines.
"""

from __future__ import annotations

import difflib
from typing import Iterable, Iterator

from clashview.constants import RE_DIFF_TOKEN
from clashview.diff.spans import DiffSpan, SpanKind, make_span


def tokenize(text: str) -> list[str]:
    """Split text into diff tokens; ``"".join(tokenize(text)) == text``."""
    return RE_DIFF_TOKEN.findall(text)


def _iter_classified(old_tokens: list[str], new_tokens: list[str]) -> Iterator[tuple[SpanKind, str]]:
    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            yield "equal", "".join(old_tokens[i1:i2])
        elif tag == "delete":
            yield "deleted", "".join(old_tokens[i1:i2])
        elif tag == "insert":
            yield "inserted", "".join(new_tokens[j1:j2])
        else:
            yield "deleted", "".join(old_tokens[i1:i2])
            yield "inserted", "".join(new_tokens[j1:j2])


def _merge_adjacent(classified: Iterable[tuple[SpanKind, str]]) -> list[DiffSpan]:
    merged: list[tuple[SpanKind, str]] = []
    for kind, text in classified:
        if not text:
            continue
        if merged and merged[-1][0] == kind:
            merged[-1] = (kind, merged[-1][1] + text)
        else:
            merged.append((kind, text))
    return [make_span(kind, text) for kind, text in merged]


def diff_words(old: str, new: str) -> list[DiffSpan]:
    """Compare two strings word by word.

    Parameters
    ----------
    old : str
        Reference text (the expected output line)
    new : str
        Text compared against the reference (the actual output line)

    Returns
    -------
    list of DiffSpan
        Ordered spans; adjacent spans never share a kind and none is empty.
        Within a replaced region the deletion precedes the insertion.

    Examples
    --------
        >>> diff_words("1 2 3", "1 2 4")
        [Equal(text='1 2 '), Deleted(text='3'), Inserted(text='4')]

    """
    return _merge_adjacent(_iter_classified(tokenize(old), tokenize(new)))
