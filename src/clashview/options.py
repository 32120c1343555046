#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/options.py
"""Configuration options for markup formatting and diff rendering.

All option classes are frozen dataclasses; use ``create_updated`` to derive
a modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from clashview.constants import (
    DEFAULT_COLOR_SYSTEM,
    DEFAULT_NESTING_MODE,
    DEFAULT_NO_OUTPUT_MARKER,
    NestingMode,
)
from clashview.exceptions import ValidationError
from clashview.style import Stylesheet

_NESTING_MODES = ("escape", "tree")
_COLOR_SYSTEM_NAMES = ("standard", "256", "truecolor", "none")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class MarkupOptions(CloneFrozenMixin):
    """Options for the statement markup formatter.

    Parameters
    ----------
    nesting : {"escape", "tree"}, default "escape"
        How nested tags are resolved:
        - "escape": close and reopen the outer tag around inner tags (one level)
        - "tree": parse into a node tree and combine styles at any depth
    warn_legacy_monospace : bool, default True
        Log a warning when the obsolete triple-backtick syntax is found

    """

    nesting: NestingMode = field(
        default=DEFAULT_NESTING_MODE,
        metadata={"help": "Nested tag resolution: 'escape' (one level) or 'tree' (any depth)", "importance": "core"},
    )
    warn_legacy_monospace: bool = field(
        default=True,
        metadata={"help": "Warn when obsolete ``` monospace syntax is found", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the nesting mode.

        Raises
        ------
        ValidationError
            If ``nesting`` is not a known mode.

        """
        if self.nesting not in _NESTING_MODES:
            raise ValidationError(
                f"nesting must be one of {_NESTING_MODES}, got {self.nesting!r}",
                parameter_name="nesting",
                parameter_value=self.nesting,
            )


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Options for the expected/actual output diff renderer.

    Parameters
    ----------
    no_output_marker : str, default "(no output)"
        Marker written when the program produced no output
    show_whitespace : bool, default True
        Replace spaces and line terminators by visible glyphs

    """

    no_output_marker: str = field(
        default=DEFAULT_NO_OUTPUT_MARKER,
        metadata={"help": "Marker written when the program produced no output", "importance": "advanced"},
    )
    show_whitespace: bool = field(
        default=True,
        metadata={"help": "Show spaces and newlines as visible glyphs", "importance": "core"},
    )


@dataclass(frozen=True)
class ClashviewOptions(CloneFrozenMixin):
    """Top-level options bundle, usually loaded from a configuration file.

    Parameters
    ----------
    color_system : {"standard", "256", "truecolor", "none"}, default "truecolor"
        Terminal color system; "none" disables escape sequences
    style : Mapping[str, str | None], default empty
        Role overrides as rich style definitions
    markup : MarkupOptions
        Markup formatter options
    diff : DiffOptions
        Diff renderer options

    """

    color_system: str = field(
        default=DEFAULT_COLOR_SYSTEM,
        metadata={"help": "Terminal color system: standard, 256, truecolor or none", "importance": "core"},
    )
    style: Mapping[str, Optional[str]] = field(
        default_factory=dict,
        metadata={"help": "Stylesheet role overrides as rich style definitions", "importance": "core"},
    )
    markup: MarkupOptions = field(default_factory=MarkupOptions)
    diff: DiffOptions = field(default_factory=DiffOptions)

    def __post_init__(self) -> None:
        """Validate the color system name.

        Raises
        ------
        ValidationError
            If ``color_system`` is not a known name.

        """
        if str(self.color_system).lower() not in _COLOR_SYSTEM_NAMES:
            raise ValidationError(
                f"color_system must be one of {_COLOR_SYSTEM_NAMES}, got {self.color_system!r}",
                parameter_name="color_system",
                parameter_value=self.color_system,
            )

    def build_stylesheet(self) -> Stylesheet:
        """Build the stylesheet described by ``color_system`` and ``style``."""
        if str(self.color_system).lower() == "none":
            return Stylesheet.from_mapping(self.style, color_system=None)
        return Stylesheet.from_mapping(self.style, color_system=self.color_system)
