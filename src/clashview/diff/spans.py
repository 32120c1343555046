#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/diff/spans.py
"""Classified spans produced by comparing two strings.

A word diff yields an ordered sequence of :class:`Equal`, :class:`Inserted`
and :class:`Deleted` spans. Concatenating the ``Equal`` and ``Deleted`` texts
gives back the old string; ``Equal`` and ``Inserted`` give back the new one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

SpanKind = Literal["equal", "inserted", "deleted"]


@dataclass(frozen=True, slots=True)
class DiffSpan:
    """Base class for a contiguous classified substring."""

    text: str

    kind: ClassVar[SpanKind]


@dataclass(frozen=True, slots=True)
class Equal(DiffSpan):
    """Text present in both strings. Never empty."""

    kind: ClassVar[SpanKind] = "equal"

    def __post_init__(self) -> None:
        """Reject empty text.

        Raises
        ------
        ValueError
            If ``text`` is empty; renderers read the first character of
            every equal span.

        """
        if not self.text:
            raise ValueError("Equal spans must not be empty")


@dataclass(frozen=True, slots=True)
class Inserted(DiffSpan):
    """Text present only in the new string."""

    kind: ClassVar[SpanKind] = "inserted"


@dataclass(frozen=True, slots=True)
class Deleted(DiffSpan):
    """Text present only in the old string."""

    kind: ClassVar[SpanKind] = "deleted"


def make_span(kind: SpanKind, text: str) -> DiffSpan:
    """Build the span class matching ``kind``."""
    if kind == "equal":
        return Equal(text)
    if kind == "inserted":
        return Inserted(text)
    if kind == "deleted":
        return Deleted(text)
    raise ValueError(f"Unsupported span kind: {kind}")
