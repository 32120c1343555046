#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/__init__.py
"""clashview - terminal rendering for clash programming puzzles.

clashview turns the pieces of a clash into readable terminal text:

- statement markup (``[[variables]]``, ``{{constants}}``, ``<<bold>>`` and
  `` `monospace` `` blocks) rendered as ANSI-styled text
- test input and output with visible whitespace glyphs
- a word-level diff of expected and actual program output
- per-test reports built from the three above

Styling is driven by a :class:`Stylesheet` of rich styles, and settings can
be loaded from ``.clashview.toml`` (or YAML, JSON, ``[tool.clashview]`` in
``pyproject.toml``).

Examples
--------
    >>> from clashview import Stylesheet, format_markup, render_diff
    >>> sheet = Stylesheet.default()
    >>> print(format_markup("Print <<[[N]] lines>>", sheet))
    >>> stats = render_diff("1 2 3\\n", "1 2 4\\n", sheet)

"""

from clashview.config import load_options
from clashview.diff import DiffStats, OutputDiffRenderer, diff_words, render_diff
from clashview.exceptions import ClashviewError, ConfigError, InvalidStyleError, ValidationError
from clashview.logging_utils import configure_logging
from clashview.markup import format_markup
from clashview.options import ClashviewOptions, DiffOptions, MarkupOptions
from clashview.report import TestRunReporter
from clashview.style import Paint, Stylesheet
from clashview.testcase import (
    RuntimeFailure,
    Success,
    TestCase,
    TestResult,
    TestRun,
    Timeout,
    UnableToRun,
    WrongOutput,
)
from clashview.whitespace import show_whitespace, styled_channel

__version__ = "0.1.0"

__all__ = [
    "ClashviewError",
    "ClashviewOptions",
    "ConfigError",
    "DiffOptions",
    "DiffStats",
    "InvalidStyleError",
    "MarkupOptions",
    "OutputDiffRenderer",
    "Paint",
    "RuntimeFailure",
    "Stylesheet",
    "Success",
    "TestCase",
    "TestResult",
    "TestRun",
    "TestRunReporter",
    "Timeout",
    "UnableToRun",
    "ValidationError",
    "WrongOutput",
    "configure_logging",
    "diff_words",
    "format_markup",
    "load_options",
    "render_diff",
    "show_whitespace",
    "styled_channel",
]
