#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/api.py
"""High-level API for diffing text and rendering the result."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from differ.constants import DEFAULT_FORMAT, SUPPORTED_FORMATS
from differ.diff.entries import DiffEntry
from differ.diff.renderers import HtmlDiffRenderer, JsonDiffRenderer, TerminalDiffRenderer
from differ.diff.sequence import sequential_diff
from differ.exceptions import UnsupportedFormatError
from differ.options import DiffRendererOptions, get_options_class

logger = logging.getLogger(__name__)


_RENDERERS: dict[str, Callable[[Any], Any]] = {
    "terminal": TerminalDiffRenderer,
    "html": HtmlDiffRenderer,
    "json": JsonDiffRenderer,
}


def render_entries(
    entries: Sequence[DiffEntry],
    format: str = DEFAULT_FORMAT,
    options: DiffRendererOptions | None = None,
    **kwargs: Any,
) -> str:
    """Render an edit script in the requested format.

    Parameters
    ----------
    entries : sequence of DiffEntry
        Edit script to render
    format : {"terminal", "html", "json"}, default "terminal"
        Output format
    options : options dataclass, optional
        Options for the format; defaults to the format's default options
    **kwargs
        Option field overrides applied with ``create_updated``

    Returns
    -------
    str
        Rendered diff

    Raises
    ------
    UnsupportedFormatError
        If ``format`` is not a known format identifier
    TypeError
        If ``options`` is not the options class of ``format``

    """
    options_class = get_options_class(format)
    if options is None:
        options = options_class(**kwargs)
    elif not isinstance(options, options_class):
        raise TypeError(f"{format} format expects {options_class.__name__}, got {type(options).__name__}")
    elif kwargs:
        options = options.create_updated(**kwargs)

    logger.debug("Rendering %d diff entries as %s", len(entries), format)
    return _RENDERERS[format](options).render(entries)


def diff_text(
    old_text: str,
    new_text: str,
    format: str = DEFAULT_FORMAT,
    options: DiffRendererOptions | None = None,
    **kwargs: Any,
) -> str:
    """Diff two texts line by line and render the result.

    The texts are split on ``"\\n"``, diffed with line numbers attached, and
    passed to the renderer for ``format``.

    Parameters
    ----------
    old_text : str
        Original text
    new_text : str
        Modified text
    format : {"terminal", "html", "json"}, default "terminal"
        Output format
    options : options dataclass, optional
        Options for the format
    **kwargs
        Option field overrides, e.g. ``context_lines=2``

    Returns
    -------
    str
        Rendered diff

    Raises
    ------
    UnsupportedFormatError
        If ``format`` is not a known format identifier

    Examples
    --------
    >>> output = diff_text("a\\nb", "a\\nc", format="json")

    """
    if format not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(format, SUPPORTED_FORMATS)

    entries = sequential_diff(old_text.split("\n"), new_text.split("\n"), with_positions=True)
    return render_entries(entries, format, options, **kwargs)
