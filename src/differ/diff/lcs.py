#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/lcs.py
"""Longest-common-subsequence length table.

The table is the input of the edit-script backtrace in
:mod:`differ.diff.sequence`. It is computed bottom-up in O(n*m) time and
space with no chunking, so callers are responsible for bounding input size.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Optional, Sequence

EqualityFn = Callable[[Any, Any], bool]

LcsTable = list[list[int]]


def strict_equal(a: Any, b: Any) -> bool:
    """Equality that also requires matching types, so ``1``, ``True`` and ``1.0`` differ."""
    return type(a) is type(b) and a == b


def resolve_equality(eq: Optional[EqualityFn], default: EqualityFn = operator.eq) -> EqualityFn:
    """Return ``eq``, or ``default`` (structural ``==``) when it is None."""
    return default if eq is None else eq


def build_lcs_table(left: Sequence[Any], right: Sequence[Any], eq: Optional[EqualityFn] = None) -> LcsTable:
    """Compute the LCS dynamic-programming table of two sequences.

    Parameters
    ----------
    left : sequence
        The original sequence
    right : sequence
        The sequence to compare against
    eq : callable, optional
        Equality predicate ``eq(a, b) -> bool``. Defaults to ``==``.

    Returns
    -------
    list of list of int
        Table of shape ``(len(left) + 1) x (len(right) + 1)`` where
        ``table[i][j]`` is the LCS length of ``left[:i]`` and ``right[:j]``.

    Examples
    --------
    >>> build_lcs_table([], [])
    [[0]]
    >>> build_lcs_table("ab", "b")[2][1]
    1

    """
    equal = resolve_equality(eq)
    rows = len(left)
    cols = len(right)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]

    for i in range(1, rows + 1):
        left_item = left[i - 1]
        previous_row = table[i - 1]
        current_row = table[i]
        for j in range(1, cols + 1):
            if equal(left_item, right[j - 1]):
                current_row[j] = previous_row[j - 1] + 1
            else:
                current_row[j] = max(previous_row[j], current_row[j - 1])

    return table
