#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/sets.py
"""Membership comparison of two sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Any

from differ.constants import SetChangeType


@dataclass(frozen=True, slots=True)
class SetDiffEntry:
    """A value that was added, removed, or kept between two sets."""

    type: SetChangeType
    value: Any


def diff_sets(old: AbstractSet[Any], new: AbstractSet[Any], show_unchanged: bool = False) -> list[SetDiffEntry]:
    """Compute the difference between two sets.

    Members of ``old`` are reported first, in ``old`` iteration order,
    followed by members found only in ``new``.

    Parameters
    ----------
    old : set
        The original set
    new : set
        The set to compare against
    show_unchanged : bool, default False
        Include members present in both sets

    Returns
    -------
    list of SetDiffEntry

    """
    result: list[SetDiffEntry] = []
    for value in old:
        if value not in new:
            result.append(SetDiffEntry("removed", value))
        elif show_unchanged:
            result.append(SetDiffEntry("unchanged", value))
    for value in new:
        if value not in old:
            result.append(SetDiffEntry("added", value))
    return result
