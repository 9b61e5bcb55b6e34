#  Copyright (c) 2025 Tom Villani, Ph.D.
"""differ - Sequence and collection diffing with terminal, HTML, and JSON output.

differ computes minimal edit scripts between two ordered sequences using the
classic longest-common-subsequence algorithm, compares unordered collections
(mappings, sets, and nested records), and renders line diffs for terminals,
web pages, and machine consumers.

Key Features
------------
- LCS edit scripts over any sequence, with a pluggable equality predicate
- Deterministic tie-break: deletes precede adds in a replaced region
- Character-level diffs with coalesced runs
- Mapping, set, and recursive record comparison
- Context-line windowing shared by every renderer

Requirements
------------
- Python 3.10+

Examples
--------
Diff two texts and print a coloured terminal view:

    >>> from differ import diff_text
    >>> print(diff_text("a\\nb\\nc", "a\\nx\\nc", context_lines=1))  # doctest: +SKIP

Compare nested records:

    >>> from differ import diff_objects, format_object_diff
    >>> print(format_object_diff(diff_objects({"age": 30}, {"age": 31})))
    ~ age: 30 → 31

"""

from differ.constants import AnsiColour
from differ.diff import (
    AddEntry,
    DeleteEntry,
    DiffEntry,
    DiffStats,
    MapAdded,
    MapDiffEntry,
    MapModified,
    MapRemoved,
    MapUnchanged,
    ObjectAdded,
    ObjectDiffEntry,
    ObjectModified,
    ObjectRemoved,
    ObjectUnchanged,
    SameEntry,
    SetDiffEntry,
    build_lcs_table,
    character_diff,
    diff_maps,
    diff_objects,
    diff_sets,
    diff_stats,
    diff_text,
    format_object_diff,
    render_entries,
    sequential_diff,
)
from differ.diff.renderers import (
    HtmlDiffRenderer,
    JsonDiffRenderer,
    TerminalDiffRenderer,
    render_html,
    render_json,
    render_terminal,
)
from differ.exceptions import (
    ConfigError,
    CyclicStructureError,
    DifferError,
    UnsupportedFormatError,
    ValidationError,
)
from differ.options import HtmlClassNames, HtmlDiffOptions, JsonDiffOptions, TerminalDiffOptions

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Core
    "build_lcs_table",
    "sequential_diff",
    "character_diff",
    "diff_maps",
    "diff_sets",
    "diff_objects",
    "format_object_diff",
    "diff_stats",
    "diff_text",
    "render_entries",
    # Entries
    "AddEntry",
    "DeleteEntry",
    "DiffEntry",
    "DiffStats",
    "SameEntry",
    "MapAdded",
    "MapDiffEntry",
    "MapModified",
    "MapRemoved",
    "MapUnchanged",
    "ObjectAdded",
    "ObjectDiffEntry",
    "ObjectModified",
    "ObjectRemoved",
    "ObjectUnchanged",
    "SetDiffEntry",
    # Renderers
    "HtmlDiffRenderer",
    "JsonDiffRenderer",
    "TerminalDiffRenderer",
    "render_html",
    "render_json",
    "render_terminal",
    # Options
    "HtmlClassNames",
    "HtmlDiffOptions",
    "JsonDiffOptions",
    "TerminalDiffOptions",
    "AnsiColour",
    # Exceptions
    "ConfigError",
    "CyclicStructureError",
    "DifferError",
    "UnsupportedFormatError",
    "ValidationError",
]
