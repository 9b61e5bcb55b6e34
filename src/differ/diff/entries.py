#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/entries.py
"""Diff entry types shared by the differs and renderers.

Sequence diffs are made of three variants. Each variant only carries the
line numbers for the side(s) it consumes, so a delete entry can never hold
a right-hand line number and an add entry never holds a left-hand one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Union

from differ.constants import ChangeType


@dataclass(frozen=True, slots=True)
class SameEntry:
    """Element present in both sequences."""

    type: ClassVar[ChangeType] = "same"

    content: Any
    left_line: int | None = None
    right_line: int | None = None


@dataclass(frozen=True, slots=True)
class AddEntry:
    """Element present only in the right-hand sequence."""

    type: ClassVar[ChangeType] = "add"

    content: Any
    right_line: int | None = None

    @property
    def left_line(self) -> None:
        """Added entries never have a left-hand position."""
        return None


@dataclass(frozen=True, slots=True)
class DeleteEntry:
    """Element present only in the left-hand sequence."""

    type: ClassVar[ChangeType] = "delete"

    content: Any
    left_line: int | None = None

    @property
    def right_line(self) -> None:
        """Deleted entries never have a right-hand position."""
        return None


DiffEntry = Union[SameEntry, AddEntry, DeleteEntry]


def is_change(entry: DiffEntry) -> bool:
    """Return True for add and delete entries."""
    return entry.type != "same"


@dataclass(frozen=True, slots=True)
class DiffStats:
    """Counts of each entry type in an edit script."""

    added: int = 0
    deleted: int = 0
    unchanged: int = 0

    @property
    def total_changes(self) -> int:
        """Number of added plus deleted entries."""
        return self.added + self.deleted

    @property
    def has_changes(self) -> bool:
        """Whether the edit script contains any add or delete entry."""
        return self.total_changes > 0


def diff_stats(entries: Iterable[DiffEntry]) -> DiffStats:
    """Count added, deleted, and unchanged entries.

    Parameters
    ----------
    entries : iterable of DiffEntry
        Edit script produced by :func:`~differ.diff.sequence.sequential_diff`

    Returns
    -------
    DiffStats
        Per-type counts

    """
    added = deleted = unchanged = 0
    for entry in entries:
        if entry.type == "add":
            added += 1
        elif entry.type == "delete":
            deleted += 1
        else:
            unchanged += 1
    return DiffStats(added=added, deleted=deleted, unchanged=unchanged)
