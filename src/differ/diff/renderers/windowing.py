#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/renderers/windowing.py
"""Context-line windowing shared by the diff renderers.

With ``context_lines == 0`` only changes are emitted, with a
:data:`SEPARATOR` between change clusters that are visually disjoint. With
``context_lines > 0`` every change gets a window of surrounding entries;
overlapping or adjacent windows are merged and the gaps between them are
reported as :class:`OmittedRun` markers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Union

from differ.diff.entries import DiffEntry, is_change


@dataclass(frozen=True, slots=True)
class OmittedRun:
    """A run of unchanged entries left out of the rendered output."""

    count: int

    @property
    def unit(self) -> str:
        """``"line"`` for a single skipped entry, ``"lines"`` otherwise."""
        return "line" if self.count == 1 else "lines"

    @property
    def message(self) -> str:
        """Human-readable marker text."""
        return f"... {self.count} {self.unit} omitted ..."


class _Separator:
    """Boundary between two disjoint change clusters."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "SEPARATOR"


SEPARATOR = _Separator()

WindowItem = Union[DiffEntry, OmittedRun, _Separator]


def change_indexes(entries: Sequence[DiffEntry]) -> list[int]:
    """Return the positions of all add/delete entries."""
    return [index for index, entry in enumerate(entries) if is_change(entry)]


def merge_windows(entries: Sequence[DiffEntry], context_lines: int) -> list[tuple[int, int]]:
    """Build merged inclusive ``(start, end)`` windows around every change.

    Parameters
    ----------
    entries : sequence of DiffEntry
        The edit script
    context_lines : int
        Entries of context on each side of a change

    Returns
    -------
    list of tuple
        Windows sorted by start; windows that overlap or touch are merged.

    """
    last = len(entries) - 1
    windows = sorted(
        (max(0, index - context_lines), min(last, index + context_lines)) for index in change_indexes(entries)
    )
    if not windows:
        return []

    merged: list[tuple[int, int]] = []
    current_start, current_end = windows[0]
    for start, end in windows[1:]:
        if start <= current_end + 1:
            current_end = max(current_end, end)
        else:
            merged.append((current_start, current_end))
            current_start, current_end = start, end
    merged.append((current_start, current_end))
    return merged


def iter_changes_only(entries: Sequence[DiffEntry]) -> Iterator[Union[DiffEntry, _Separator]]:
    """Yield changes, with a separator between disjoint change clusters.

    A run of unchanged entries that follows a change is turned into one
    separator when the next change has a different type than the previous
    one, or when no change follows.
    """
    # next_change[i] is the type of the first change after position i
    next_change: list[str | None] = [None] * len(entries)
    upcoming: str | None = None
    for index in range(len(entries) - 1, -1, -1):
        next_change[index] = upcoming
        if is_change(entries[index]):
            upcoming = entries[index].type

    previous_type: str | None = None
    for index, entry in enumerate(entries):
        if is_change(entry):
            yield entry
            previous_type = entry.type
        elif previous_type is not None:
            next_type = next_change[index]
            if next_type is None or next_type != previous_type:
                yield SEPARATOR
            previous_type = None


def iter_context_windows(entries: Sequence[DiffEntry], context_lines: int) -> Iterator[Union[DiffEntry, OmittedRun]]:
    """Yield entries inside the merged windows and omitted markers for the gaps.

    Yields nothing when ``entries`` contains no change.
    """
    previous_end = -1
    for start, end in merge_windows(entries, context_lines):
        skipped = start - previous_end - 1
        if skipped > 0:
            yield OmittedRun(skipped)
        yield from entries[start : end + 1]
        previous_end = end

    if previous_end >= 0 and previous_end < len(entries) - 1:
        yield OmittedRun(len(entries) - 1 - previous_end)


def iter_windowed(entries: Sequence[DiffEntry], context_lines: int) -> Iterator[WindowItem]:
    """Dispatch to :func:`iter_changes_only` or :func:`iter_context_windows`."""
    if context_lines == 0:
        return iter_changes_only(entries)
    return iter_context_windows(entries, context_lines)


def max_line_number(entries: Sequence[DiffEntry]) -> int:
    """Largest left or right line number carried by ``entries`` (0 if none)."""
    largest = 0
    for entry in entries:
        largest = max(largest, entry.left_line or 0, entry.right_line or 0)
    return largest
