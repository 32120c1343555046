#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/whitespace.py
"""Whitespace visualization for test input and program output.

Spaces become ``•`` and line terminators become ``⏎`` followed by a real
newline, so trailing spaces and missing final newlines are visible in the
terminal.
"""

from __future__ import annotations

from typing import Callable, Optional

from clashview.constants import NEWLINE_GLYPH, RE_LINE_TERMINATOR, RE_NONWHITESPACE, SPACE_GLYPH

PaintFunction = Callable[[str], str]


def show_whitespace(text: str, style: PaintFunction, whitespace_style: PaintFunction) -> str:
    """Paint ``text`` with visible whitespace glyphs.

    Content runs are painted before any substitution so the escape sequences
    they introduce are never mistaken for literal whitespace.

    Parameters
    ----------
    text : str
        Text to visualize
    style : callable
        Paint function for runs of characters other than space, CR and LF
    whitespace_style : callable
        Paint function for the space and line terminator glyphs

    Returns
    -------
    str
        The visualized text

    Examples
    --------
        >>> show_whitespace("a b\\n", str, str)
        'a•b⏎\\n'

    """
    newline = f"{whitespace_style(NEWLINE_GLYPH)}\n"
    space = whitespace_style(SPACE_GLYPH)
    painted = RE_NONWHITESPACE.sub(lambda m: style(m.group(0)), text)
    return RE_LINE_TERMINATOR.sub(lambda _: newline, painted).replace(" ", space)


def styled_channel(text: str, style: PaintFunction, whitespace_style: Optional[PaintFunction] = None) -> str:
    """Paint a whole channel, visualizing whitespace only when a glyph style is set."""
    if whitespace_style is None:
        return style(text)
    return show_whitespace(text, style, whitespace_style)
