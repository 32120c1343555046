#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/markup/formatter.py
"""Statement markup formatting for terminal display.

Clash statements use four inline tags::

    [[VARIABLE]]  {{CONSTANT}}  <<BOLD>>  `MONOSPACE`

:func:`format_markup` turns such text into ANSI-styled text through five
stages, each exposed as its own function:

1. :func:`normalize_monospace` - rewrite legacy ``` blocks and give every
   monospace block its own paragraph
2. :func:`trim_consecutive_spaces` - collapse space runs outside monospace
3. :func:`format_add_reverse_nester_tags` - escape one level of nesting
4. :func:`paint_inner_blocks` - replace tags with painted content
5. :func:`collapse_newlines` - limit blank lines and strip the tail

With ``MarkupOptions(nesting="tree")`` stages 3 and 4 are replaced by the
node tree parser and renderer in :mod:`clashview.markup.renderer`.

Examples
--------
    >>> from clashview.markup.formatter import format_add_reverse_nester_tags
    >>> format_add_reverse_nester_tags("<<Next [[N]] {{3}} lines:>>")
    '<<Next >>[[N]]<< >>{{3}}<< lines:>>'

"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Sequence

from clashview.constants import (
    BOLD_CLOSE,
    BOLD_OPEN,
    CONSTANT_CLOSE,
    CONSTANT_OPEN,
    LEGACY_MONOSPACE_MARK,
    LEGACY_MONOSPACE_WARNING,
    MONOSPACE_MARK,
    RE_BACKTICK,
    RE_BOLD,
    RE_CONSTANT,
    RE_MONOSPACE,
    RE_MONOSPACE_OLD,
    RE_MONOSPACE_TRIM,
    RE_NEWLINES,
    RE_SPACES,
    RE_VARIABLE,
)
from clashview.markup.renderer import render_markup
from clashview.options import MarkupOptions
from clashview.style import Stylesheet
from clashview.utils.text import display_width

logger = logging.getLogger(__name__)


def format_markup(text: str, style: Stylesheet, options: Optional[MarkupOptions] = None) -> str:
    """Convert statement markup into styled terminal text.

    Parameters
    ----------
    text : str
        Statement text containing markup tags
    style : Stylesheet
        Stylesheet providing the variable, constant, bold and monospace paints
    options : MarkupOptions, optional
        Formatter options; defaults to the one-level escape pipeline

    Returns
    -------
    str
        Styled text. Feeding the result back in is not supported.

    """
    options = options or MarkupOptions()

    result = normalize_monospace(text, warn=options.warn_legacy_monospace)
    result = trim_consecutive_spaces(result)
    if options.nesting == "tree":
        result = render_markup(result, style)
    else:
        result = format_add_reverse_nester_tags(result)
        result = paint_inner_blocks(result, style)
    return collapse_newlines(result)


def normalize_monospace(text: str, warn: bool = True) -> str:
    """Normalize monospace blocks.

    1. Logs a warning if the outdated ```text``` syntax is found
    2. Replaces ```text``` with `text`
    3. Surrounds every monospace block with exactly two newlines on each
       side and trims the whitespace just inside its backticks

    Parameters
    ----------
    text : str
        Raw statement text
    warn : bool, default True
        Whether to log the legacy syntax warning

    Returns
    -------
    str
        Text with normalized monospace blocks

    Examples
    --------
        >>> normalize_monospace("text   `mono line` text")
        'text\\n\\n`mono line`\\n\\ntext'

    """
    if warn and RE_MONOSPACE_OLD.search(text):
        logger.warning(LEGACY_MONOSPACE_WARNING)

    result = text.replace(LEGACY_MONOSPACE_MARK, MONOSPACE_MARK)
    return RE_MONOSPACE_TRIM.sub(lambda m: f"\n\n`{m.group(1)}`\n\n", result)


def trim_consecutive_spaces(text: str) -> str:
    """Collapse runs of spaces into one space unless inside a monospace block.

    Tabs and newlines are left untouched.
    """

    def _trim(match: re.Match[str]) -> str:
        monospace = match.group(1)
        if monospace is not None:
            return monospace
        return RE_SPACES.sub(" ", match.group(2))

    return RE_BACKTICK.sub(_trim, text)


def _reopen_around(
    inner_patterns: Sequence[re.Pattern[str]], closing: str, opening: str
) -> Callable[[re.Match[str]], str]:
    """Build a replacement that closes the outer tag around each inner tag."""

    def _escape(match: re.Match[str]) -> str:
        body = match.group(0)
        for pattern in inner_patterns:
            body = pattern.sub(lambda inner: f"{closing}{inner.group(0)}{opening}", body)
        return body

    return _escape


def format_add_reverse_nester_tags(text: str) -> str:
    """Escape one level of tag nesting.

    Later stages replace each tag kind independently, so a tag embedded in a
    tag of another kind would be misclassified. The outer tag is closed right
    before the inner tag and reopened right after it::

        <<Next [[N]] {{3}} lines:>>
     -> <<Next >>[[N]]<< >>{{3}}<< lines:>>

    Outer kinds are processed in the order bold, monospace, constant. Only
    one level of nesting comes out right.
    """
    # <<Next [[N]] {{3}} lines:>>
    result = RE_BOLD.sub(_reopen_around((RE_VARIABLE, RE_CONSTANT), BOLD_CLOSE, BOLD_OPEN), text)
    # `Next [[N]] {{3}} lines:`
    result = RE_MONOSPACE.sub(_reopen_around((RE_VARIABLE, RE_CONSTANT), MONOSPACE_MARK, MONOSPACE_MARK), result)
    # {{Next [[N]] `Mono \n and more` lines}}
    return RE_CONSTANT.sub(_reopen_around((RE_VARIABLE, RE_MONOSPACE), CONSTANT_CLOSE, CONSTANT_OPEN), result)


def _paint_monospace_block(content: str, style: Stylesheet) -> str:
    lines = content.split("\n")
    width = max(display_width(line) for line in lines)
    painted = []
    for line in lines:
        # Lines of one character or less are leftovers of the nesting escape
        if display_width(line) > 1:
            painted.append(style.monospace(line.ljust(width)))
        else:
            painted.append(line)
    return "\n".join(painted)


def paint_inner_blocks(text: str, style: Stylesheet) -> str:
    """Remove the tags and paint their content.

    Tags are replaced in the order variable, constant, bold, monospace::

        [[VARIABLE]]
     -> \\x1b[33mVARIABLE\\x1b[0m

    Monospace content is laid out as a block: every line longer than one
    character is padded to the width of the longest line before painting.
    """
    result = RE_VARIABLE.sub(lambda m: style.variable(m.group(1)), text)
    result = RE_CONSTANT.sub(lambda m: style.constant(m.group(1)), result)
    result = RE_BOLD.sub(lambda m: style.bold(m.group(1)), result)
    return RE_MONOSPACE.sub(lambda m: _paint_monospace_block(m.group(1), style), result)


def collapse_newlines(text: str) -> str:
    """Replace runs of three or more newlines with two and strip the tail.

    Examples
    --------
        >>> collapse_newlines("Text with many\\n\\n\\n\\n\\nnewlines\\n\\n")
        'Text with many\\n\\nnewlines'

    """
    return RE_NEWLINES.sub("\n\n", text).rstrip()
