#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/renderers/html.py
"""HTML diff renderer.

Emits one ``<div>`` per rendered entry (and one per omitted run) with
configurable class names, so callers can style the fragment with their own
stylesheet. All user content is HTML-escaped.
"""

from __future__ import annotations

from html import escape
from typing import Any, Sequence

from differ.constants import LINE_PREFIXES, MIN_LINE_NUMBER_WIDTH
from differ.diff.entries import DiffEntry
from differ.diff.renderers.windowing import SEPARATOR, OmittedRun, iter_windowed, max_line_number
from differ.options import HtmlDiffOptions


class HtmlDiffRenderer:
    """Render an edit script as an HTML fragment.

    Parameters
    ----------
    options : HtmlDiffOptions, optional
        Rendering options, including the CSS class names per slot

    Examples
    --------
    Render with custom class names:
        >>> from differ import sequential_diff
        >>> from differ.options import HtmlDiffOptions
        >>> entries = sequential_diff(["A", "foo"], ["A", "bar"], with_positions=True)
        >>> options = HtmlDiffOptions(context_lines=1, class_names={"add": "my-add"})
        >>> html = HtmlDiffRenderer(options).render(entries)

    """

    def __init__(self, options: HtmlDiffOptions | None = None):
        """Initialize the HTML diff renderer."""
        self.options = options or HtmlDiffOptions()

    def render(self, entries: Sequence[DiffEntry]) -> str:
        """Render diff entries to an HTML string.

        Parameters
        ----------
        entries : sequence of DiffEntry
            Edit script, normally with line numbers attached

        Returns
        -------
        str
            HTML fragment; empty when there are no changes

        """
        width = max(MIN_LINE_NUMBER_WIDTH, len(str(max_line_number(entries))))
        blocks: list[str] = []

        for item in iter_windowed(entries, self.options.context_lines):
            if item is SEPARATOR:
                padding = " " * width
                blocks.append(f"{padding} {padding}    ")
            elif isinstance(item, OmittedRun):
                blocks.append(self._format_omitted(item))
            else:
                blocks.append(self._format_line(item, width))

        output = "\n".join(blocks)
        if output and self.options.wrap_in_container:
            container = escape(self.options.class_names.container)
            output = f'<div class="{container}">\n{output}\n</div>'
        return output

    def _format_line(self, entry: DiffEntry, width: int) -> str:
        classes = self.options.class_names
        line_classes = " ".join(name for name in (classes.line, classes.for_type(entry.type)) if name)

        parts = [f'<div class="{escape(line_classes)}">']
        if self.options.show_line_numbers:
            left = str(entry.left_line).rjust(width) if entry.left_line else ""
            right = str(entry.right_line).rjust(width) if entry.right_line else ""
            number_class = escape(classes.line_number)
            parts.append(f'  <span class="{number_class} left">{escape(left)}</span>')
            parts.append(f'  <span class="{number_class} right">{escape(right)}</span>')
        parts.append(f'  <span class="{escape(classes.prefix)}">{LINE_PREFIXES[entry.type]}</span>')
        parts.append(f'  <span class="{escape(classes.content)}">{escape(str(entry.content))}</span>')
        parts.append("</div>")
        return "\n".join(parts)

    def _format_omitted(self, run: OmittedRun) -> str:
        omitted = escape(self.options.class_names.omitted)
        return f'<div class="{omitted}">\n  <span class="{omitted}-content">{escape(run.message)}</span>\n</div>'


def render_html(entries: Sequence[DiffEntry], options: HtmlDiffOptions | None = None, **kwargs: Any) -> str:
    """Render diff entries as an HTML fragment.

    Parameters
    ----------
    entries : sequence of DiffEntry
        Edit script to render
    options : HtmlDiffOptions, optional
        Base options
    **kwargs
        Field overrides applied on top of ``options``

    """
    resolved = options or HtmlDiffOptions()
    if kwargs:
        resolved = resolved.create_updated(**kwargs)
    return HtmlDiffRenderer(resolved).render(entries)


def render_to_file(entries: Sequence[DiffEntry], output_path: str, **kwargs: Any) -> None:
    """Render diff entries to an HTML file.

    Parameters
    ----------
    entries : sequence of DiffEntry
        Edit script to render
    output_path : str
        Destination path for the generated HTML file.
    **kwargs
        Option fields forwarded to :class:`HtmlDiffOptions`.

    """
    html = render_html(entries, HtmlDiffOptions(**kwargs))

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html)
