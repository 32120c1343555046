#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/markup/renderer.py
"""ANSI rendering of markup node trees.

:class:`AnsiMarkupRenderer` walks a tree produced by
:class:`~clashview.markup.parser.MarkupParser` and paints every text run with
the combination of the styles of all tags enclosing it, so
``<<Next [[N]]>>`` paints ``N`` with both the bold and the variable style.

Monospace content is laid out as a block: each of its lines is padded with
monospace-styled spaces to the width of its longest line. Newlines are never
painted.
"""

from __future__ import annotations

from rich.style import Style

from clashview.markup.nodes import Bold, Constant, MarkupDocument, Monospace, TagNode, Text, Variable
from clashview.markup.parser import MarkupParser
from clashview.markup.visitors import MarkupVisitor
from clashview.style import Paint, Stylesheet
from clashview.utils.text import display_width

Segment = tuple[str, Paint]

_NEWLINE: Segment = ("\n", Paint())


def _split_segment_lines(segments: list[Segment]) -> list[list[Segment]]:
    lines: list[list[Segment]] = [[]]
    for segment in segments:
        if segment[0] == "\n":
            lines.append([])
        else:
            lines[-1].append(segment)
    return lines


def _line_width(line: list[Segment]) -> int:
    return sum(display_width(text) for text, _ in line)


class AnsiMarkupRenderer(MarkupVisitor):
    """Render markup node trees to ANSI-styled text.

    Visit methods return lists of ``(text, paint)`` segments; newlines are
    always separate segments with the null paint.

    Parameters
    ----------
    style : Stylesheet
        Stylesheet providing the markup paints

    Examples
    --------
        >>> from clashview.markup.parser import MarkupParser
        >>> renderer = AnsiMarkupRenderer(Stylesheet.plain())
        >>> renderer.render(MarkupParser().parse("<<Next [[N]]>>"))
        'Next N'

    """

    def __init__(self, style: Stylesheet):
        """Initialize the renderer with a stylesheet."""
        self.style = style
        self._stack: list[Paint] = []

    def render(self, document: MarkupDocument) -> str:
        """Render ``document`` and return the styled text."""
        self._stack = []
        segments = document.accept(self)
        return "".join(paint(text) if paint.style else text for text, paint in segments)

    def _current_paint(self) -> Paint:
        current = Paint(Style.null(), self.style.color_system)
        for paint in self._stack:
            current = current.combine(paint)
        return current

    def _visit_children(self, node: MarkupDocument | TagNode) -> list[Segment]:
        segments: list[Segment] = []
        for child in node.children:
            segments.extend(child.accept(self))
        return segments

    def _visit_tag(self, node: TagNode) -> list[Segment]:
        paint: Paint = getattr(self.style, node.role)
        self._stack.append(paint)
        try:
            return self._visit_children(node)
        finally:
            self._stack.pop()

    def visit_document(self, node: MarkupDocument) -> list[Segment]:
        """Render the top-level nodes."""
        return self._visit_children(node)

    def visit_text(self, node: Text) -> list[Segment]:
        """Split text on newlines and style each piece with the enclosing tags."""
        paint = self._current_paint()
        segments: list[Segment] = []
        for index, part in enumerate(node.content.split("\n")):
            if index:
                segments.append(_NEWLINE)
            if part:
                segments.append((part, paint))
        return segments

    def visit_variable(self, node: Variable) -> list[Segment]:
        """Render a variable."""
        return self._visit_tag(node)

    def visit_constant(self, node: Constant) -> list[Segment]:
        """Render a constant."""
        return self._visit_tag(node)

    def visit_bold(self, node: Bold) -> list[Segment]:
        """Render a bold run."""
        return self._visit_tag(node)

    def visit_monospace(self, node: Monospace) -> list[Segment]:
        """Render a monospace block padded to its widest line."""
        pad_paint = self._current_paint().combine(self.style.monospace)
        lines = _split_segment_lines(self._visit_tag(node))
        width = max(_line_width(line) for line in lines)

        segments: list[Segment] = []
        for index, line in enumerate(lines):
            if index:
                segments.append(_NEWLINE)
            segments.extend(line)
            padding = width - _line_width(line)
            if padding:
                segments.append((" " * padding, pad_paint))
        return segments


def render_markup(text: str, style: Stylesheet) -> str:
    """Parse ``text`` as markup and render it with ``style``."""
    return AnsiMarkupRenderer(style).render(MarkupParser().parse(text))
