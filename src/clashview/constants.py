#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/clashview/constants.py
"""Constants shared across the clashview rendering pipeline.

Compiled patterns in this module are process-wide and read-only; every
formatter stage and the whitespace visualizer use them directly.
"""

from __future__ import annotations

import re
from typing import Final, Literal

# =============================================================================
# Markup tag markers
# =============================================================================

VARIABLE_OPEN: Final = "[["
VARIABLE_CLOSE: Final = "]]"
CONSTANT_OPEN: Final = "{{"
CONSTANT_CLOSE: Final = "}}"
BOLD_OPEN: Final = "<<"
BOLD_CLOSE: Final = ">>"
MONOSPACE_MARK: Final = "`"
LEGACY_MONOSPACE_MARK: Final = "```"

# Deepest tag nesting the tree parser will open before treating markers as text
MAX_NESTING_DEPTH: Final = 32

NestingMode = Literal["escape", "tree"]
DEFAULT_NESTING_MODE: NestingMode = "escape"

LEGACY_MONOSPACE_WARNING: Final = "Clash contains obsolete ``` formatting, consider fixing it in the website."

# =============================================================================
# Markup patterns
# =============================================================================

RE_VARIABLE: Final = re.compile(r"\[\[(.*?)\]\]", re.DOTALL)
RE_CONSTANT: Final = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
RE_BOLD: Final = re.compile(r"<<(.*?)>>", re.DOTALL)
RE_MONOSPACE: Final = re.compile(r"`([^`]*?)`")
RE_MONOSPACE_OLD: Final = re.compile(r"```([^`]*?)```")
RE_MONOSPACE_TRIM: Final = re.compile(r"\s*`\s*([^`]+?)\s*`\s*")
RE_BACKTICK: Final = re.compile(r"(`[^`]+`)|([^`]+)")
RE_SPACES: Final = re.compile(r" {2,}")
RE_NEWLINES: Final = re.compile(r"\n{3,}")

# =============================================================================
# Whitespace visualization
# =============================================================================

SPACE_GLYPH: Final = "•"
NEWLINE_GLYPH: Final = "⏎"

RE_NONWHITESPACE: Final = re.compile(r"[^\r\n ]+")
RE_LINE_TERMINATOR: Final = re.compile(r"\r?\n")

# =============================================================================
# Diff rendering
# =============================================================================

DEFAULT_NO_OUTPUT_MARKER: Final = "(no output)"

# Words, single whitespace characters, and single punctuation characters
RE_DIFF_TOKEN: Final = re.compile(r"\w+|\s|[^\w\s]")
RE_LINE: Final = re.compile(r"[^\n]*\n|[^\n]+\Z")

# =============================================================================
# Styles
# =============================================================================

ColorSystemName = Literal["standard", "256", "truecolor"]
DEFAULT_COLOR_SYSTEM: ColorSystemName = "truecolor"

REQUIRED_STYLE_ROLES: Final = (
    "title",
    "secondary_title",
    "input",
    "output",
    "variable",
    "constant",
    "bold",
    "monospace",
    "success",
    "failure",
    "error",
    "stderr",
)
OPTIONAL_STYLE_ROLES: Final = ("input_whitespace", "output_whitespace")

DEFAULT_STYLE_DEFINITIONS: Final = {
    "title": "bold green",
    "secondary_title": "bold yellow",
    "input": "white",
    "output": "white",
    "variable": "yellow",
    "constant": "blue",
    "bold": "italic",
    "monospace": "on rgb(43,43,43)",
    "success": "bold green",
    "failure": "bold red",
    "error": "red",
    "stderr": "red",
    "input_whitespace": "rgb(43,43,43)",
    "output_whitespace": "rgb(43,43,43)",
}

# =============================================================================
# Configuration
# =============================================================================

CONFIG_FILENAMES: Final = [".clashview.toml", ".clashview.yaml", ".clashview.yml", ".clashview.json", "pyproject.toml"]
CONFIG_ENV_VAR: Final = "CLASHVIEW_CONFIG"
