#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/sequence.py
"""Edit scripts for ordered sequences.

:func:`sequential_diff` backtraces the LCS table into a minimal edit script
of same/add/delete entries. When a horizontal and a vertical move keep the
LCS length equally, the backtrace takes the add move, which places deletes
before adds in the final output for a replaced region.

:func:`character_diff` runs the same algorithm over characters and merges
consecutive entries of the same type into runs.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from differ.diff.entries import AddEntry, DeleteEntry, DiffEntry, SameEntry
from differ.diff.lcs import EqualityFn, build_lcs_table, resolve_equality

logger = logging.getLogger(__name__)


def sequential_diff(
    left: Sequence[Any],
    right: Sequence[Any],
    *,
    eq: Optional[EqualityFn] = None,
    with_positions: bool = False,
) -> list[DiffEntry]:
    """Compute the edit script that turns ``left`` into ``right``.

    Parameters
    ----------
    left : sequence
        The original sequence
    right : sequence
        The modified sequence
    eq : callable, optional
        Equality predicate ``eq(a, b) -> bool``. Defaults to ``==``.
    with_positions : bool, default False
        Attach 1-based ``left_line``/``right_line`` numbers to the entries
        that consume each side.

    Returns
    -------
    list of DiffEntry
        Entries in output order. Concatenating the ``same`` and ``delete``
        contents gives back ``left``; ``same`` and ``add`` give ``right``.

    Examples
    --------
    >>> [e.type for e in sequential_diff(["a", "b", "c"], ["a", "d", "c"])]
    ['same', 'delete', 'add', 'same']

    """
    equal = resolve_equality(eq)
    table = build_lcs_table(left, right, equal)
    logger.debug("Built LCS table %dx%d (lcs length %d)", len(left) + 1, len(right) + 1, table[-1][-1])

    i = len(left)
    j = len(right)
    result: list[DiffEntry] = []

    while i > 0 or j > 0:
        if i > 0 and j > 0 and equal(left[i - 1], right[j - 1]):
            if with_positions:
                result.append(SameEntry(left[i - 1], left_line=i, right_line=j))
            else:
                result.append(SameEntry(left[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            result.append(AddEntry(right[j - 1], right_line=j if with_positions else None))
            j -= 1
        else:
            result.append(DeleteEntry(left[i - 1], left_line=i if with_positions else None))
            i -= 1

    result.reverse()
    return result


def character_diff(left: str, right: str) -> list[DiffEntry]:
    """Diff two strings character by character, coalescing runs.

    Parameters
    ----------
    left : str
        The original string
    right : str
        The modified string

    Returns
    -------
    list of DiffEntry
        Entries whose content is the concatenation of a maximal run of
        consecutive characters with the same change type. No line numbers.

    Examples
    --------
    >>> [(e.type, e.content) for e in character_diff("kitten", "sitting")][:3]
    [('delete', 'k'), ('add', 's'), ('same', 'itt')]

    """
    coalesced: list[DiffEntry] = []
    run_type: str | None = None
    run: list[str] = []

    for entry in sequential_diff(left, right):
        if entry.type != run_type and run:
            coalesced.append(_make_run(run_type, run))
            run = []
        run_type = entry.type
        run.append(entry.content)

    if run:
        coalesced.append(_make_run(run_type, run))

    return coalesced


def _make_run(entry_type: str | None, chars: list[str]) -> DiffEntry:
    content = "".join(chars)
    if entry_type == "add":
        return AddEntry(content)
    if entry_type == "delete":
        return DeleteEntry(content)
    return SameEntry(content)
