#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the differ library.

This module centralizes the literal types, renderer defaults, and the ANSI
colour table shared by the diff renderers and the CLI.

Constants are organized by category:
1. Type Definitions - Literal types used across the package
2. Renderer Defaults - Default option values per output format
3. Terminal Colours - ANSI escape codes
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

ChangeType = Literal["same", "add", "delete"]
CollectionChangeType = Literal["added", "removed", "modified", "unchanged"]
SetChangeType = Literal["added", "removed", "unchanged"]
DiffFormat = Literal["terminal", "html", "json"]
ColorMode = Literal["auto", "always", "never"]

SUPPORTED_FORMATS: tuple[str, ...] = ("terminal", "html", "json")

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_FORMAT: DiffFormat = "terminal"

DEFAULT_TERMINAL_CONTEXT_LINES = 0
DEFAULT_HTML_CONTEXT_LINES = 0
DEFAULT_JSON_CONTEXT_LINES = 3
DEFAULT_SHOW_LINE_NUMBERS = True
DEFAULT_USE_COLOURS = True
DEFAULT_JSON_INDENT = 2

# Line-number columns are never narrower than this
MIN_LINE_NUMBER_WIDTH = 2

DEFAULT_HTML_CLASS_NAMES: dict[str, str] = {
    "container": "diff-container",
    "line": "diff-line",
    "add": "diff-add",
    "delete": "diff-delete",
    "same": "diff-same",
    "omitted": "diff-omitted",
    "line_number": "line-number",
    "prefix": "diff-prefix",
    "content": "diff-content",
}

LINE_PREFIXES: dict[str, str] = {
    "add": "+",
    "delete": "-",
    "same": " ",
}

# =============================================================================
# Terminal Colours
# =============================================================================


class AnsiColour(str, Enum):
    """ANSI escape codes for terminal colours."""

    RESET = "\x1b[0m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    GREY = "\x1b[90m"
    BRIGHT_RED = "\x1b[91m"
    BRIGHT_GREEN = "\x1b[92m"
    BRIGHT_YELLOW = "\x1b[93m"
    BRIGHT_BLUE = "\x1b[94m"
    BRIGHT_MAGENTA = "\x1b[95m"
    BRIGHT_CYAN = "\x1b[96m"
    BRIGHT_WHITE = "\x1b[97m"

    def __str__(self) -> str:
        return self.value


ENTRY_COLOURS: dict[str, AnsiColour] = {
    "delete": AnsiColour.RED,
    "add": AnsiColour.GREEN,
    "same": AnsiColour.GREY,
}

# =============================================================================
# CLI Exit Codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
