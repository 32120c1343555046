#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/diff/renderer.py
"""Styled word diff of expected and actual program output.

Lines are paired by position only: the i-th expected line is compared with
the i-th actual line. Each pair is diffed word by word and the actual line is
reconstructed with wrong or extra text painted as errors, so a single wrong
number or a missing space stands out. Whitespace is made visible with the
glyphs of :mod:`clashview.whitespace`.

Examples
--------
    >>> import io
    >>> from clashview.style import Stylesheet
    >>> out = io.StringIO()
    >>> stats = render_diff("1 2 3\\n", "1 2 4\\n", Stylesheet.plain(), stream=out)
    >>> out.getvalue()
    '1•2•4⏎\\n'
    >>> stats.error_spans
    2

"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from itertools import zip_longest
from typing import IO, Callable, Optional, Sequence

from clashview.diff.spans import Deleted, DiffSpan, Equal, Inserted
from clashview.diff.word_diff import diff_words
from clashview.options import DiffOptions
from clashview.style import Paint, Stylesheet
from clashview.utils.text import ends_with_terminator, split_lines
from clashview.whitespace import show_whitespace

logger = logging.getLogger(__name__)

Differ = Callable[[str, str], Sequence[DiffSpan]]


@dataclass(frozen=True)
class DiffStats:
    """Summary of one diff rendering.

    Parameters
    ----------
    missing_lines : int
        Expected lines with no actual counterpart
    extra_lines : int
        Actual lines with no expected counterpart
    error_spans : int
        Writes painted with the error style
    no_output : bool
        True when the actual output was empty

    """

    missing_lines: int = 0
    extra_lines: int = 0
    error_spans: int = 0
    no_output: bool = False

    @property
    def identical(self) -> bool:
        """True when the rendering flagged nothing."""
        return not (self.missing_lines or self.extra_lines or self.error_spans or self.no_output)


class OutputDiffRenderer:
    """Write a styled word diff of expected and actual output to a stream.

    Parameters
    ----------
    style : Stylesheet
        Stylesheet providing the output, output_whitespace and error paints
    stream : IO[str], optional
        Destination; defaults to ``sys.stdout`` at render time
    differ : callable, optional
        Word-diff function returning DiffSpans; defaults to :func:`diff_words`
    options : DiffOptions, optional
        Rendering options

    """

    def __init__(
        self,
        style: Stylesheet,
        stream: Optional[IO[str]] = None,
        differ: Optional[Differ] = None,
        options: Optional[DiffOptions] = None,
    ):
        """Initialize the renderer."""
        self.style = style
        self.stream = stream
        self.differ: Differ = differ or diff_words
        self.options = options or DiffOptions()

    def _write(self, text: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(text)
        stream.flush()

    def _write_span(self, text: str, paint: Paint, whitespace_paint: Paint) -> None:
        if not text:
            return
        if self.options.show_whitespace:
            self._write(show_whitespace(text, paint, whitespace_paint))
        else:
            self._write(paint(text))

    def _write_matched(self, text: str) -> None:
        self._write_span(text, self.style.output, self.style.output_whitespace or self.style.output)

    def _write_error(self, text: str) -> None:
        self._write_span(text, self.style.error, self.style.error)

    def _write_line_pair(self, expected_line: str, actual_line: str) -> int:
        """Write the reconstruction of one aligned line pair; return the error write count."""
        errors = 0
        previous_was_deletion = False
        for span in self.differ(expected_line, actual_line):
            if isinstance(span, Deleted):
                previous_was_deletion = True
            elif isinstance(span, Equal):
                if previous_was_deletion:
                    # First character after a deletion marks where text went missing
                    self._write_error(span.text[0])
                    self._write_matched(span.text[1:])
                    errors += 1
                else:
                    self._write_matched(span.text)
                previous_was_deletion = False
            elif isinstance(span, Inserted):
                self._write_error(span.text)
                errors += 1
        return errors

    def render(self, expected: str, actual: str) -> DiffStats:
        """Render the diff of ``actual`` against ``expected``.

        Parameters
        ----------
        expected : str
            Expected test output
        actual : str
            Captured program output

        Returns
        -------
        DiffStats
            Counts describing what was written

        """
        if not actual:
            self._write(f"{self.style.dim(self.options.no_output_marker)}\n")
            return DiffStats(no_output=True)

        missing_lines = 0
        extra_lines = 0
        error_spans = 0
        for expected_line, actual_line in zip_longest(split_lines(expected), split_lines(actual)):
            if actual_line is None:
                missing_lines += 1
            elif expected_line is None:
                self._write_error(actual_line)
                extra_lines += 1
                error_spans += 1
            else:
                error_spans += self._write_line_pair(expected_line, actual_line)

        if not ends_with_terminator(actual):
            self._write("\n")

        if missing_lines > 0:
            plural = "s" if missing_lines != 1 else ""
            summary = f"(expected {missing_lines} more line{plural})"
            self._write(f"{self.style.dim(summary)}\n")

        logger.debug(
            "Rendered diff: %d missing, %d extra, %d error spans", missing_lines, extra_lines, error_spans
        )
        return DiffStats(missing_lines=missing_lines, extra_lines=extra_lines, error_spans=error_spans)


def render_diff(
    expected: str,
    actual: str,
    style: Stylesheet,
    stream: Optional[IO[str]] = None,
    differ: Optional[Differ] = None,
    options: Optional[DiffOptions] = None,
) -> DiffStats:
    """Write a styled word diff of ``actual`` against ``expected``.

    Convenience wrapper around :class:`OutputDiffRenderer`.
    """
    return OutputDiffRenderer(style, stream=stream, differ=differ, options=options).render(expected, actual)
