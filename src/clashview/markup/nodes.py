#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/markup/nodes.py
"""Node classes for the statement markup tree.

The tree parser in :mod:`clashview.markup.parser` turns statement markup into
these nodes so nested tags of any depth keep their meaning. Every node
supports the visitor pattern through ``accept``.

Node Hierarchy
--------------
    - MarkupDocument (root)
    - Text (leaf)
    - Variable, Constant, Bold, Monospace (containers)

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar


class Node(ABC):
    """Base class for all markup nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass
class MarkupDocument(Node):
    """Root node holding the top-level nodes of a statement.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes in source order

    """

    children: list[Node] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Text(Node):
    """Literal text, including any markers that did not form a tag.

    Parameters
    ----------
    content : str
        The text

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class TagNode(Node):
    """Base class for the four tag kinds.

    Subclasses declare their markers and the stylesheet role used to paint
    their content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Nodes between the opening and closing markers

    """

    opening: ClassVar[str]
    closing: ClassVar[str]
    role: ClassVar[str]

    children: list[Node] = field(default_factory=list)


@dataclass
class Variable(TagNode):
    """``[[VARIABLE]]`` tag."""

    opening: ClassVar[str] = "[["
    closing: ClassVar[str] = "]]"
    role: ClassVar[str] = "variable"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this variable."""
        return visitor.visit_variable(self)


@dataclass
class Constant(TagNode):
    """``{{CONSTANT}}`` tag."""

    opening: ClassVar[str] = "{{"
    closing: ClassVar[str] = "}}"
    role: ClassVar[str] = "constant"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this constant."""
        return visitor.visit_constant(self)


@dataclass
class Bold(TagNode):
    """``<<BOLD>>`` tag."""

    opening: ClassVar[str] = "<<"
    closing: ClassVar[str] = ">>"
    role: ClassVar[str] = "bold"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bold run."""
        return visitor.visit_bold(self)


@dataclass
class Monospace(TagNode):
    """`` `MONOSPACE` `` tag; its content is laid out as a padded block."""

    opening: ClassVar[str] = "`"
    closing: ClassVar[str] = "`"
    role: ClassVar[str] = "monospace"

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this monospace block."""
        return visitor.visit_monospace(self)


TAG_TYPES: tuple[type[TagNode], ...] = (Variable, Constant, Bold, Monospace)


def plain_text(node: Node) -> str:
    """Return the text of ``node`` and its descendants with every marker removed."""
    if isinstance(node, Text):
        return node.content
    if isinstance(node, (TagNode, MarkupDocument)):
        return "".join(plain_text(child) for child in node.children)
    return ""
