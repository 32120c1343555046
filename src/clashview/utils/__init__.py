#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/utils/__init__.py
"""Utility modules for clashview package."""

from clashview.utils.text import display_width, ends_with_terminator, split_lines

__all__ = [
    "display_width",
    "ends_with_terminator",
    "split_lines",
]
