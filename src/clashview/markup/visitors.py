#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/markup/visitors.py
"""Visitor base class for markup node trees.

Renderers subclass :class:`MarkupVisitor` and implement one ``visit_*``
method per node kind.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from clashview.markup.nodes import Bold, Constant, MarkupDocument, Monospace, Text, Variable


class MarkupVisitor(ABC):
    """Abstract base class for markup node visitors.

    Examples
    --------
    Visitor that counts variables:

        >>> class VariableCounter(MarkupVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_document(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...     def visit_variable(self, node):
        ...         self.count += 1
        ...         self.visit_document(node)
        ...     visit_constant = visit_bold = visit_monospace = visit_document
        ...     def visit_text(self, node):
        ...         pass

    """

    @abstractmethod
    def visit_document(self, node: MarkupDocument) -> Any:
        """Visit a MarkupDocument node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_variable(self, node: Variable) -> Any:
        """Visit a Variable node."""
        pass

    @abstractmethod
    def visit_constant(self, node: Constant) -> Any:
        """Visit a Constant node."""
        pass

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold node."""
        pass

    @abstractmethod
    def visit_monospace(self, node: Monospace) -> Any:
        """Visit a Monospace node."""
        pass
