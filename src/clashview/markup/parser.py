#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/markup/parser.py
"""Single-pass parser for statement markup.

Produces a :class:`~clashview.markup.nodes.MarkupDocument` in which tags
nest up to a depth limit. Parsing never fails: an opening marker without a
matching closing marker, or whose enclosing tag closes first, stays literal
text while any complete tags inside it are kept.

Open tags are held on a stack and every input position is visited once, so
the cost is linear in the text length times the depth limit.

Examples
--------
    >>> from clashview.markup.parser import MarkupParser
    >>> doc = MarkupParser().parse("<<Next [[N]] lines>>")
    >>> doc.children[0].children
    [Text(content='Next '), Variable(children=[Text(content='N')]), Text(content=' lines')]

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from clashview.constants import MAX_NESTING_DEPTH
from clashview.markup.nodes import TAG_TYPES, MarkupDocument, Node, TagNode, Text

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """An open tag (or the document root) and what it has collected so far."""

    tag_type: Optional[type[TagNode]] = None
    children: list[Node] = field(default_factory=list)

    def add_text(self, content: str) -> None:
        if self.children and isinstance(self.children[-1], Text):
            self.children[-1] = Text(self.children[-1].content + content)
        else:
            self.children.append(Text(content))

    def add_node(self, node: Node) -> None:
        if isinstance(node, Text):
            self.add_text(node.content)
        else:
            self.children.append(node)


class _StackParser:
    """Single-use parsing state for one parse call."""

    def __init__(self, text: str, max_depth: int):
        self.text = text
        self.max_depth = max_depth
        # Last start of each closer; an opener after it can never close
        self._last_closer = {tag_type: text.rfind(tag_type.closing) for tag_type in TAG_TYPES}
        self._stack: list[_Frame] = [_Frame()]

    def run(self) -> list[Node]:
        text = self.text
        stack = self._stack
        pos = 0
        buffer: list[str] = []

        while pos < len(text):
            top = stack[-1]
            if top.tag_type is not None and text.startswith(top.tag_type.closing, pos):
                self._flush(buffer)
                self._close()
                pos += len(top.tag_type.closing)
                continue

            target = self._enclosing_closer_at(pos)
            if target is not None:
                self._flush(buffer)
                while len(stack) - 1 > target:
                    self._demote()
                continue

            tag_type = self._opener_at(pos)
            if tag_type is not None:
                self._flush(buffer)
                stack.append(_Frame(tag_type))
                pos += len(tag_type.opening)
                continue

            buffer.append(text[pos])
            pos += 1

        self._flush(buffer)
        while len(stack) > 1:
            self._demote()
        return stack[0].children

    def _enclosing_closer_at(self, pos: int) -> Optional[int]:
        # Innermost open tag below the top whose closer starts here
        for index in range(len(self._stack) - 2, 0, -1):
            if self.text.startswith(self._stack[index].tag_type.closing, pos):
                return index
        return None

    def _opener_at(self, pos: int) -> Optional[type[TagNode]]:
        if len(self._stack) - 1 >= self.max_depth:
            return None
        for tag_type in TAG_TYPES:
            if self.text.startswith(tag_type.opening, pos):
                if self._last_closer[tag_type] < pos + len(tag_type.opening):
                    return None
                return tag_type
        return None

    def _close(self) -> None:
        frame = self._stack.pop()
        self._stack[-1].add_node(frame.tag_type(children=frame.children))

    def _demote(self) -> None:
        """Turn the top open tag back into literal text in its parent."""
        frame = self._stack.pop()
        parent = self._stack[-1]
        parent.add_text(frame.tag_type.opening)
        for child in frame.children:
            parent.add_node(child)

    def _flush(self, buffer: list[str]) -> None:
        if buffer:
            self._stack[-1].add_text("".join(buffer))
            buffer.clear()


class MarkupParser:
    """Parse statement markup into a node tree.

    Parameters
    ----------
    max_depth : int, default MAX_NESTING_DEPTH
        Deepest nesting opened before markers are kept as literal text

    """

    def __init__(self, max_depth: int = MAX_NESTING_DEPTH):
        """Initialize the parser."""
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        self.max_depth = max_depth

    def parse(self, text: str) -> MarkupDocument:
        """Parse ``text`` into a :class:`MarkupDocument`.

        Parameters
        ----------
        text : str
            Statement text, usually already whitespace-normalized

        Returns
        -------
        MarkupDocument
            Root node; concatenating the plain text of literal markers and
            tag contents gives back the text without the consumed markers

        """
        children = _StackParser(text, self.max_depth).run()
        logger.debug("Parsed markup into %d top-level nodes", len(children))
        return MarkupDocument(children=children)
