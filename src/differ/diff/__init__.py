#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/__init__.py
"""Sequence and collection diffing.

Key Features
------------
- LCS-based edit scripts for any sequence, with a pluggable equality predicate
- Character-level diffs with coalesced runs
- Mapping, set, and nested-record comparison
- Terminal, HTML, and JSON renderers with context-line windowing

Examples
--------
Diff two lists of lines:
    >>> from differ.diff import sequential_diff
    >>> entries = sequential_diff(["a", "b", "c"], ["a", "d", "c"], with_positions=True)

Render a text diff as JSON:
    >>> from differ.diff import diff_text
    >>> payload = diff_text("a\\nb", "a\\nc", format="json")

"""

from differ.diff.api import diff_text, render_entries
from differ.diff.entries import AddEntry, DeleteEntry, DiffEntry, DiffStats, SameEntry, diff_stats
from differ.diff.lcs import build_lcs_table, strict_equal
from differ.diff.maps import MapAdded, MapDiffEntry, MapModified, MapRemoved, MapUnchanged, diff_maps
from differ.diff.objects import (
    ObjectAdded,
    ObjectDiffEntry,
    ObjectModified,
    ObjectRemoved,
    ObjectUnchanged,
    diff_objects,
    format_object_diff,
)
from differ.diff.sequence import character_diff, sequential_diff
from differ.diff.sets import SetDiffEntry, diff_sets

__all__ = [
    "AddEntry",
    "DeleteEntry",
    "DiffEntry",
    "DiffStats",
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
    "SameEntry",
    "SetDiffEntry",
    "build_lcs_table",
    "character_diff",
    "diff_maps",
    "diff_objects",
    "diff_sets",
    "diff_stats",
    "diff_text",
    "format_object_diff",
    "render_entries",
    "sequential_diff",
    "strict_equal",
]
