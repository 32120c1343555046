#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/diff/__init__.py
"""Expected versus actual output comparison.

Key Features
------------
- Positional line alignment; no re-synchronization after shifted lines
- Word-level spans per line pair using Python's difflib
- Visible whitespace glyphs so trailing spaces and missing newlines show up

Examples
--------
Print the diff of a wrong answer:

    >>> from clashview.diff import render_diff
    >>> from clashview.style import Stylesheet
    >>> stats = render_diff("3\\n1 2 3\\n", "3\\n1 2 4\\n", Stylesheet.default())

Compare two strings directly:

    >>> from clashview.diff import diff_words
    >>> diff_words("answer: 42", "answer: 24")
    [Equal(text='answer: '), Deleted(text='42'), Inserted(text='24')]

"""

from clashview.diff.renderer import DiffStats, OutputDiffRenderer, render_diff
from clashview.diff.spans import Deleted, DiffSpan, Equal, Inserted
from clashview.diff.word_diff import diff_words, tokenize

__all__ = [
    "Deleted",
    "DiffSpan",
    "DiffStats",
    "Equal",
    "Inserted",
    "OutputDiffRenderer",
    "diff_words",
    "render_diff",
    "tokenize",
]
