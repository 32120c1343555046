#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/utils/text.py
"""Text processing utilities for the diff renderer and markup layout.

Functions
---------
split_lines : Split text into lines that keep their terminators
ends_with_terminator : Check whether text ends with a line terminator
display_width : Width of a line measured in characters

Examples
--------
Lossless line splitting:

    >>> from clashview.utils.text import split_lines
    >>> split_lines("a\\nb")
    ['a\\n', 'b']
    >>> "".join(split_lines("a\\n\\nb\\n")) == "a\\n\\nb\\n"
    True

"""

from __future__ import annotations

from clashview.constants import RE_LINE


def split_lines(text: str) -> list[str]:
    """Split text into lines, keeping each line's ``\\n`` terminator.

    Unlike ``str.splitlines(keepends=True)`` only ``\\n`` terminates a line,
    so a ``\\r`` before it stays part of the line content and other Unicode
    separators are left alone. The final line has no terminator when the text
    does not end with one.

    Parameters
    ----------
    text : str
        Text to split

    Returns
    -------
    list of str
        Lines in source order; ``"".join(result) == text``

    """
    return RE_LINE.findall(text)


def ends_with_terminator(text: str) -> bool:
    """Return True when ``text`` ends with a line terminator."""
    return text.endswith("\n")


def display_width(line: str) -> int:
    """Return the layout width of a single line of text."""
    return len(line)
