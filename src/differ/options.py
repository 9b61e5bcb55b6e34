#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer options for the differ output formats.

Each renderer takes a frozen dataclass of options. Instances are immutable;
use :meth:`CloneFrozenMixin.create_updated` to derive a modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, Union

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from differ.constants import (
    DEFAULT_HTML_CLASS_NAMES,
    DEFAULT_HTML_CONTEXT_LINES,
    DEFAULT_JSON_CONTEXT_LINES,
    DEFAULT_JSON_INDENT,
    DEFAULT_SHOW_LINE_NUMBERS,
    DEFAULT_TERMINAL_CONTEXT_LINES,
    DEFAULT_USE_COLOURS,
    SUPPORTED_FORMATS,
)
from differ.exceptions import UnsupportedFormatError


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
class BaseDiffRendererOptions(CloneFrozenMixin):
    """Options shared by every diff renderer.

    Parameters
    ----------
    context_lines : int
        Unchanged entries shown around each change. ``0`` shows only changes.
    show_line_numbers : bool, default True
        Whether to emit the old/new line-number columns.

    """

    context_lines: int = field(
        default=0,
        metadata={"help": "Number of unchanged lines shown around each change", "type": int},
    )
    show_line_numbers: bool = field(
        default=DEFAULT_SHOW_LINE_NUMBERS,
        metadata={"help": "Show old/new line numbers"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If ``context_lines`` is negative.

        """
        if self.context_lines < 0:
            raise ValueError(f"context_lines must be non-negative, got {self.context_lines}")


@dataclass(frozen=True)
class TerminalDiffOptions(BaseDiffRendererOptions):
    """Options for :class:`~differ.diff.renderers.terminal.TerminalDiffRenderer`.

    Parameters
    ----------
    use_colours : bool, default True
        Wrap each line in an ANSI colour keyed by entry type.

    """

    context_lines: int = field(
        default=DEFAULT_TERMINAL_CONTEXT_LINES,
        metadata={"help": "Number of unchanged lines shown around each change", "type": int},
    )
    use_colours: bool = field(
        default=DEFAULT_USE_COLOURS,
        metadata={"help": "Use ANSI colour codes in the output"},
    )


@dataclass(frozen=True)
class HtmlClassNames(CloneFrozenMixin):
    """CSS class names used for each semantic slot of the HTML output."""

    container: str = DEFAULT_HTML_CLASS_NAMES["container"]
    line: str = DEFAULT_HTML_CLASS_NAMES["line"]
    add: str = DEFAULT_HTML_CLASS_NAMES["add"]
    delete: str = DEFAULT_HTML_CLASS_NAMES["delete"]
    same: str = DEFAULT_HTML_CLASS_NAMES["same"]
    omitted: str = DEFAULT_HTML_CLASS_NAMES["omitted"]
    line_number: str = DEFAULT_HTML_CLASS_NAMES["line_number"]
    prefix: str = DEFAULT_HTML_CLASS_NAMES["prefix"]
    content: str = DEFAULT_HTML_CLASS_NAMES["content"]

    @classmethod
    def from_mapping(cls, classes: Mapping[str, str] | None) -> "HtmlClassNames":
        """Build class names from a partial mapping of overrides.

        Empty values fall back to the defaults. ``lineNumber`` is accepted
        as an alias of ``line_number``.

        Raises
        ------
        ValueError
            If the mapping contains an unknown slot name.

        """
        if not classes:
            return cls()

        known = {f.name for f in fields(cls)}
        overrides: dict[str, str] = {}
        for key, value in classes.items():
            name = "line_number" if key == "lineNumber" else key
            if name not in known:
                raise ValueError(f"Unknown HTML class slot: '{key}'")
            if value:
                overrides[name] = value
        return cls(**overrides)

    def for_type(self, entry_type: str) -> str:
        """Return the class for an entry type (``add``, ``delete`` or ``same``)."""
        if entry_type == "add":
            return self.add
        if entry_type == "delete":
            return self.delete
        return self.same


@dataclass(frozen=True)
class HtmlDiffOptions(BaseDiffRendererOptions):
    """Options for :class:`~differ.diff.renderers.html.HtmlDiffRenderer`.

    Parameters
    ----------
    class_names : HtmlClassNames or mapping
        CSS class names per slot. A plain mapping of overrides is converted.
    wrap_in_container : bool, default False
        Wrap non-empty output in a ``<div>`` carrying the container class.

    """

    context_lines: int = field(
        default=DEFAULT_HTML_CONTEXT_LINES,
        metadata={"help": "Number of unchanged lines shown around each change", "type": int},
    )
    class_names: HtmlClassNames = field(
        default_factory=HtmlClassNames,
        metadata={"help": "CSS class names per semantic slot"},
    )
    wrap_in_container: bool = field(
        default=False,
        metadata={"help": "Wrap the rendered lines in a container element"},
    )

    def __post_init__(self) -> None:
        """Validate ranges and normalize ``class_names``."""
        super().__post_init__()
        if not isinstance(self.class_names, HtmlClassNames):
            object.__setattr__(self, "class_names", HtmlClassNames.from_mapping(self.class_names))


@dataclass(frozen=True)
class JsonDiffOptions(BaseDiffRendererOptions):
    """Options for :class:`~differ.diff.renderers.json.JsonDiffRenderer`.

    Parameters
    ----------
    indent : int, default 2
        Indentation used for the pretty-printed payload.

    """

    context_lines: int = field(
        default=DEFAULT_JSON_CONTEXT_LINES,
        metadata={"help": "Number of unchanged lines shown around each change", "type": int},
    )
    indent: int = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation width", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges."""
        super().__post_init__()
        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")


DiffRendererOptions = Union[TerminalDiffOptions, HtmlDiffOptions, JsonDiffOptions]

_OPTIONS_BY_FORMAT: dict[str, type[BaseDiffRendererOptions]] = {
    "terminal": TerminalDiffOptions,
    "html": HtmlDiffOptions,
    "json": JsonDiffOptions,
}


def get_options_class(format_type: str) -> type[BaseDiffRendererOptions]:
    """Return the options dataclass used by a render format.

    Raises
    ------
    UnsupportedFormatError
        If the format is not one of ``terminal``, ``html`` or ``json``.

    """
    try:
        return _OPTIONS_BY_FORMAT[format_type]
    except KeyError:
        raise UnsupportedFormatError(format_type, SUPPORTED_FORMATS) from None


def options_for_format(format_type: str, **overrides: Any) -> BaseDiffRendererOptions:
    """Build the default options for ``format_type`` with field overrides applied.

    Unknown field names raise ``TypeError`` like any dataclass constructor.
    """
    return get_options_class(format_type)(**overrides)
