#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/maps.py
"""Key-by-key comparison of two mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional, Union

from differ.constants import CollectionChangeType
from differ.diff.lcs import EqualityFn, resolve_equality, strict_equal


@dataclass(frozen=True, slots=True)
class MapAdded:
    """Key present only in the new mapping."""

    type: ClassVar[CollectionChangeType] = "added"

    key: Any
    value: Any


@dataclass(frozen=True, slots=True)
class MapRemoved:
    """Key present only in the old mapping."""

    type: ClassVar[CollectionChangeType] = "removed"

    key: Any
    value: Any


@dataclass(frozen=True, slots=True)
class MapModified:
    """Key present in both mappings with unequal values."""

    type: ClassVar[CollectionChangeType] = "modified"

    key: Any
    old_value: Any
    new_value: Any


@dataclass(frozen=True, slots=True)
class MapUnchanged:
    """Key present in both mappings with equal values."""

    type: ClassVar[CollectionChangeType] = "unchanged"

    key: Any
    value: Any


MapDiffEntry = Union[MapAdded, MapRemoved, MapModified, MapUnchanged]


def diff_maps(
    old: Mapping[Any, Any],
    new: Mapping[Any, Any],
    show_unchanged: bool = False,
    eq: Optional[EqualityFn] = None,
) -> list[MapDiffEntry]:
    """Compute the difference between two mappings.

    Entries for keys of ``old`` come first, in ``old`` iteration order,
    followed by keys found only in ``new``, in ``new`` iteration order.

    Parameters
    ----------
    old : Mapping
        The original mapping
    new : Mapping
        The mapping to compare against
    show_unchanged : bool, default False
        Include keys whose values compare equal
    eq : callable, optional
        Value equality predicate. Defaults to :func:`strict_equal`,
        which treats values of different types as unequal.

    Returns
    -------
    list of MapDiffEntry

    Examples
    --------
    >>> diff_maps({"x": 1, "y": 2}, {"y": 2, "z": 3})
    [MapRemoved(key='x', value=1), MapAdded(key='z', value=3)]

    """
    equal = resolve_equality(eq, strict_equal)
    result: list[MapDiffEntry] = []

    for key, old_value in old.items():
        if key not in new:
            result.append(MapRemoved(key, old_value))
            continue
        new_value = new[key]
        if not equal(old_value, new_value):
            result.append(MapModified(key, old_value, new_value))
        elif show_unchanged:
            result.append(MapUnchanged(key, old_value))

    for key, new_value in new.items():
        if key not in old:
            result.append(MapAdded(key, new_value))

    return result
