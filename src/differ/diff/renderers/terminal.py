#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/renderers/terminal.py
"""Terminal diff renderer with optional ANSI colours.

Each rendered line carries the old and new line numbers (right-aligned to
a shared width), a ``+``/``-``/space prefix, and the entry content.
"""

from __future__ import annotations

from typing import Any, Sequence

from differ.constants import ENTRY_COLOURS, LINE_PREFIXES, MIN_LINE_NUMBER_WIDTH, AnsiColour
from differ.diff.entries import DiffEntry
from differ.diff.renderers.windowing import SEPARATOR, OmittedRun, iter_windowed, max_line_number
from differ.options import TerminalDiffOptions


class TerminalDiffRenderer:
    """Render an edit script for terminal display.

    Colours are keyed by entry type:
    - Red for deletions
    - Green for additions
    - Grey for unchanged context

    Parameters
    ----------
    options : TerminalDiffOptions, optional
        Rendering options; defaults show only changes, with colours

    Examples
    --------
    Render a line diff without colours:
        >>> from differ import sequential_diff
        >>> entries = sequential_diff(["a", "b"], ["a", "c"], with_positions=True)
        >>> renderer = TerminalDiffRenderer(TerminalDiffOptions(use_colours=False))
        >>> output = renderer.render(entries)

    """

    def __init__(self, options: TerminalDiffOptions | None = None):
        """Initialize the terminal diff renderer."""
        self.options = options or TerminalDiffOptions()

    def render(self, entries: Sequence[DiffEntry]) -> str:
        """Render diff entries to a string.

        Parameters
        ----------
        entries : sequence of DiffEntry
            Edit script, normally with line numbers attached

        Returns
        -------
        str
            Newline-joined lines; empty when there are no changes

        """
        width = max(MIN_LINE_NUMBER_WIDTH, len(str(max_line_number(entries))))
        lines: list[str] = []

        for item in iter_windowed(entries, self.options.context_lines):
            if item is SEPARATOR:
                lines.append(self._gutter(width))
            elif isinstance(item, OmittedRun):
                lines.append(f"{self._gutter(width)}{item.message}")
            else:
                lines.append(self._format_line(item, width))

        return "\n".join(lines)

    def _gutter(self, width: int) -> str:
        """Blank space occupying the line-number and prefix columns."""
        if not self.options.show_line_numbers:
            return ""
        padding = " " * width
        return f"{padding} {padding}    "

    def _format_line(self, entry: DiffEntry, width: int) -> str:
        prefix = LINE_PREFIXES[entry.type]
        colour = reset = ""
        if self.options.use_colours:
            colour = ENTRY_COLOURS[entry.type].value
            reset = AnsiColour.RESET.value

        body = f"{colour}{prefix} {entry.content}{reset}"
        if not self.options.show_line_numbers:
            return body

        left = str(entry.left_line).rjust(width) if entry.left_line else " " * width
        right = str(entry.right_line).rjust(width) if entry.right_line else " " * width
        return f"{left} {right} {body}"


def render_terminal(entries: Sequence[DiffEntry], options: TerminalDiffOptions | None = None, **kwargs: Any) -> str:
    """Render diff entries for a terminal.

    Parameters
    ----------
    entries : sequence of DiffEntry
        Edit script to render
    options : TerminalDiffOptions, optional
        Base options
    **kwargs
        Field overrides applied on top of ``options``

    Returns
    -------
    str
        Rendered diff

    """
    resolved = options or TerminalDiffOptions()
    if kwargs:
        resolved = resolved.create_updated(**kwargs)
    return TerminalDiffRenderer(resolved).render(entries)
