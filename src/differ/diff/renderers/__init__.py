#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/renderers/__init__.py
"""Diff renderers for terminal, HTML, and JSON output.

Available Renderers
-------------------
- TerminalDiffRenderer: Line-numbered output with optional ANSI colours
- HtmlDiffRenderer: HTML fragment with configurable class names
- JsonDiffRenderer: Structured JSON output for programmatic access

All renderers share the context-line windowing in
:mod:`differ.diff.renderers.windowing`.

Examples
--------
Render with colours for terminal:
    >>> from differ import sequential_diff
    >>> from differ.diff.renderers import render_terminal
    >>> entries = sequential_diff(["a", "b"], ["a", "c"], with_positions=True)
    >>> output = render_terminal(entries, context_lines=1)

"""

from differ.diff.renderers.html import HtmlDiffRenderer, render_html
from differ.diff.renderers.json import JsonDiffRenderer, render_json
from differ.diff.renderers.terminal import TerminalDiffRenderer, render_terminal

__all__ = [
    "HtmlDiffRenderer",
    "JsonDiffRenderer",
    "TerminalDiffRenderer",
    "render_html",
    "render_json",
    "render_terminal",
]
