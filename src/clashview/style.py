#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/style.py
"""Stylesheets mapping semantic roles to terminal paint functions.

A :class:`Stylesheet` is an immutable set of :class:`Paint` objects, one per
semantic role (``title``, ``variable``, ``error`` and so on). A paint wraps a
:class:`rich.style.Style` together with the color system of the target
terminal and, when called, returns its argument wrapped in ANSI SGR escape
sequences.

Examples
--------
Paint text with the built-in palette:

    >>> from clashview.style import Stylesheet
    >>> sheet = Stylesheet.default()
    >>> sheet.variable("N")
    '\\x1b[33mN\\x1b[0m'

Override a few roles from rich style definitions:

    >>> sheet = Stylesheet.from_mapping({"variable": "bold magenta"}, color_system="256")

"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Mapping, Optional

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from clashview.constants import (
    DEFAULT_COLOR_SYSTEM,
    DEFAULT_STYLE_DEFINITIONS,
    OPTIONAL_STYLE_ROLES,
    REQUIRED_STYLE_ROLES,
)
from clashview.exceptions import InvalidStyleError

_COLOR_SYSTEMS: dict[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
}


def resolve_color_system(name: str | ColorSystem | None) -> Optional[ColorSystem]:
    """Translate a color system name into a rich ``ColorSystem``.

    Parameters
    ----------
    name : str, ColorSystem or None
        One of ``"standard"``, ``"256"``, ``"truecolor"``, a ``ColorSystem``
        member, or None to disable escape sequences entirely.

    Returns
    -------
    ColorSystem or None
        The resolved color system

    Raises
    ------
    InvalidStyleError
        If the name is not a known color system

    """
    if name is None or isinstance(name, ColorSystem):
        return name
    try:
        return _COLOR_SYSTEMS[str(name).lower()]
    except KeyError:
        raise InvalidStyleError(
            f"Unknown color system '{name}'. Expected one of: {', '.join(_COLOR_SYSTEMS)}",
            role="color_system",
            definition=str(name),
        ) from None


def parse_style(definition: str | Style, role: str | None = None) -> Style:
    """Parse a rich style definition, reporting failures as InvalidStyleError."""
    if isinstance(definition, Style):
        return definition
    try:
        return Style.parse(definition)
    except StyleSyntaxError as e:
        raise InvalidStyleError(
            f"Invalid style definition for role '{role}': {definition!r}",
            role=role,
            definition=definition,
            original_error=e,
        ) from e


def downgrade_style(style: Style, color_system: Optional[ColorSystem]) -> Style:
    """Return ``style`` with its colors reduced to ``color_system``.

    rich caches the escape codes of a style the first time it is rendered,
    so styles bound to a smaller color system get fresh, pre-downgraded
    instances instead of sharing the parsed one.
    """
    if color_system is None or color_system == ColorSystem.TRUECOLOR:
        return style
    return style + Style.from_color(
        style.color.downgrade(color_system) if style.color else None,
        style.bgcolor.downgrade(color_system) if style.bgcolor else None,
    )


@dataclass(frozen=True)
class Paint:
    """Callable paint function for one role.

    Parameters
    ----------
    style : Style
        The rich style applied to painted text
    color_system : ColorSystem or None, default = ColorSystem.TRUECOLOR
        Terminal color system; None paints text unchanged

    """

    style: Style = field(default_factory=Style.null)
    color_system: Optional[ColorSystem] = ColorSystem.TRUECOLOR

    def __call__(self, text: str) -> str:
        """Return ``text`` wrapped in the escape sequences of this paint."""
        return self.style.render(text, color_system=self.color_system)

    def combine(self, other: Paint) -> Paint:
        """Return a paint layering ``other`` on top of this paint."""
        return Paint(self.style + other.style, self.color_system)


def _plain_paint() -> Paint:
    return Paint(Style.null(), None)


@dataclass(frozen=True)
class Stylesheet:
    """Read-only mapping from semantic role to paint function.

    The twelve required roles always hold a paint. ``input_whitespace`` and
    ``output_whitespace`` are optional: when None, the glyphs of that channel
    are painted with the channel's base style.

    Parameters
    ----------
    title, secondary_title : Paint
        Test case titles and section headers
    input, output : Paint
        Test input and expected/matched output text
    variable, constant, bold, monospace : Paint
        Statement markup roles
    success, failure, error, stderr : Paint
        Test outcomes, diff errors, and captured standard error
    input_whitespace, output_whitespace : Paint or None
        Glyph styles for visualized whitespace of each channel
    color_system : ColorSystem or None
        Color system shared by every paint of the sheet

    """

    title: Paint = field(default_factory=_plain_paint)
    secondary_title: Paint = field(default_factory=_plain_paint)
    input: Paint = field(default_factory=_plain_paint)
    output: Paint = field(default_factory=_plain_paint)
    variable: Paint = field(default_factory=_plain_paint)
    constant: Paint = field(default_factory=_plain_paint)
    bold: Paint = field(default_factory=_plain_paint)
    monospace: Paint = field(default_factory=_plain_paint)
    success: Paint = field(default_factory=_plain_paint)
    failure: Paint = field(default_factory=_plain_paint)
    error: Paint = field(default_factory=_plain_paint)
    stderr: Paint = field(default_factory=_plain_paint)
    input_whitespace: Optional[Paint] = None
    output_whitespace: Optional[Paint] = None
    color_system: Optional[ColorSystem] = None

    @classmethod
    def default(cls, color_system: str | ColorSystem | None = DEFAULT_COLOR_SYSTEM) -> Stylesheet:
        """Build the built-in palette for the given color system."""
        return cls.from_mapping({}, color_system=color_system)

    @classmethod
    def plain(cls) -> Stylesheet:
        """Build a stylesheet whose paints leave text untouched."""
        return cls()

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str | Style | None],
        color_system: str | ColorSystem | None = DEFAULT_COLOR_SYSTEM,
        base: Mapping[str, str | Style | None] | None = None,
    ) -> Stylesheet:
        """Build a stylesheet from rich style definitions.

        Parameters
        ----------
        mapping : Mapping[str, str | Style | None]
            Role name to style definition (e.g. ``"bold green"``). A None value
            removes an optional whitespace role.
        color_system : str, ColorSystem or None, default = "truecolor"
            Target terminal color system
        base : Mapping, optional
            Definitions the mapping overrides; defaults to the built-in palette

        Returns
        -------
        Stylesheet
            The resulting stylesheet

        Raises
        ------
        InvalidStyleError
            If a role is unknown, a required role is set to None, or a
            definition does not parse

        """
        resolved_system = resolve_color_system(color_system)
        definitions = dict(DEFAULT_STYLE_DEFINITIONS if base is None else base)

        for role, definition in mapping.items():
            if role not in REQUIRED_STYLE_ROLES and role not in OPTIONAL_STYLE_ROLES:
                raise InvalidStyleError(f"Unknown style role '{role}'", role=role)
            if definition is None and role in REQUIRED_STYLE_ROLES:
                raise InvalidStyleError(f"Style role '{role}' is required and cannot be removed", role=role)
            definitions[role] = definition

        paints: dict[str, Paint | None] = {}
        for role in REQUIRED_STYLE_ROLES + OPTIONAL_STYLE_ROLES:
            definition = definitions.get(role)
            if definition is None:
                paints[role] = None if role in OPTIONAL_STYLE_ROLES else Paint(Style.null(), resolved_system)
            else:
                style = downgrade_style(parse_style(definition, role), resolved_system)
                paints[role] = Paint(style, resolved_system)

        return cls(color_system=resolved_system, **paints)  # type: ignore[arg-type]

    @classmethod
    def roles(cls) -> tuple[str, ...]:
        """Return every role name, required roles first."""
        return tuple(f.name for f in fields(cls) if f.name != "color_system")

    def painter(self, role: str) -> Optional[Paint]:
        """Look up the paint for ``role``.

        Returns None for an absent optional role.

        Raises
        ------
        InvalidStyleError
            If ``role`` is not a stylesheet role

        """
        if role not in self.roles():
            raise InvalidStyleError(f"Unknown style role '{role}'", role=role)
        return getattr(self, role)

    def paint(self, role: str, text: str) -> str:
        """Paint ``text`` with the paint of ``role``, falling back to plain text."""
        paint = self.painter(role)
        return paint(text) if paint is not None else text

    @property
    def dim(self) -> Paint:
        """Dim paint used for diff annotations such as ``(no output)``."""
        return Paint(Style(dim=True), self.color_system)
