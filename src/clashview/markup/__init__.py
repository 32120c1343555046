#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/markup/__init__.py
"""Statement markup formatting.

Clash statements mark up text with ``[[variables]]``, ``{{constants}}``,
``<<bold>>`` and `` `monospace` `` tags. This package turns such text into
ANSI-styled terminal text.

Examples
--------
Format a statement with the default palette:

    >>> from clashview.markup import format_markup
    >>> from clashview.style import Stylesheet
    >>> print(format_markup("Read <<[[N]] lines>>", Stylesheet.default()))

Resolve nesting of any depth:

    >>> from clashview.options import MarkupOptions
    >>> format_markup("<<a {{b [[c]]}}>>", Stylesheet.default(), MarkupOptions(nesting="tree"))

"""

from clashview.markup.formatter import (
    collapse_newlines,
    format_add_reverse_nester_tags,
    format_markup,
    normalize_monospace,
    paint_inner_blocks,
    trim_consecutive_spaces,
)
from clashview.markup.nodes import Bold, Constant, MarkupDocument, Monospace, Text, Variable, plain_text
from clashview.markup.parser import MarkupParser
from clashview.markup.renderer import AnsiMarkupRenderer, render_markup
from clashview.markup.visitors import MarkupVisitor

__all__ = [
    "AnsiMarkupRenderer",
    "Bold",
    "Constant",
    "MarkupDocument",
    "MarkupParser",
    "MarkupVisitor",
    "Monospace",
    "Text",
    "Variable",
    "collapse_newlines",
    "format_add_reverse_nester_tags",
    "format_markup",
    "normalize_monospace",
    "paint_inner_blocks",
    "plain_text",
    "render_markup",
    "trim_consecutive_spaces",
]
