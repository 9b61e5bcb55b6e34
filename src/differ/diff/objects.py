#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/objects.py
"""Recursive structural diff of nested plain records.

A value is treated as a record to recurse into only when it is a
:class:`collections.abc.Mapping`. Lists, tuples, sets, strings, numbers,
``None`` and arbitrary objects are opaque leaves, compared by default with
:func:`~differ.diff.lcs.strict_equal`.

Records are expected to be acyclic. The traversal keeps the ids of the
records on the current path and raises :class:`CyclicStructureError` when
one of them is reached again.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Optional, Union

from differ.constants import CollectionChangeType
from differ.diff.lcs import EqualityFn, resolve_equality, strict_equal
from differ.exceptions import CyclicStructureError

logger = logging.getLogger(__name__)

Path = tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class ObjectAdded:
    """Key present only in the new record."""

    type: ClassVar[CollectionChangeType] = "added"

    path: Path
    new_value: Any


@dataclass(frozen=True, slots=True)
class ObjectRemoved:
    """Key present only in the old record."""

    type: ClassVar[CollectionChangeType] = "removed"

    path: Path
    old_value: Any


@dataclass(frozen=True, slots=True)
class ObjectModified:
    """Leaf whose value differs between the two records."""

    type: ClassVar[CollectionChangeType] = "modified"

    path: Path
    old_value: Any
    new_value: Any


@dataclass(frozen=True, slots=True)
class ObjectUnchanged:
    """Leaf whose value compares equal in both records."""

    type: ClassVar[CollectionChangeType] = "unchanged"

    path: Path
    old_value: Any
    new_value: Any


ObjectDiffEntry = Union[ObjectAdded, ObjectRemoved, ObjectModified, ObjectUnchanged]


def is_plain_record(value: Any) -> bool:
    """Return True when ``value`` should be recursed into by :func:`diff_objects`."""
    return isinstance(value, Mapping)


def diff_objects(
    old: Mapping[str, Any],
    new: Mapping[str, Any],
    *,
    include_unchanged: bool = False,
    eq: Optional[EqualityFn] = None,
) -> list[ObjectDiffEntry]:
    """Compute the differences between two nested records.

    Keys are visited in first-seen order: every key of ``old``, then the
    keys found only in ``new``. Nested records present on both sides are
    diffed recursively and their entry paths are prefixed with the key.

    Parameters
    ----------
    old : Mapping
        The original record
    new : Mapping
        The modified record
    include_unchanged : bool, default False
        Report leaves whose values compare equal
    eq : callable, optional
        Leaf equality predicate. Defaults to :func:`strict_equal`, so
        ``1`` and ``True`` are a modification.

    Returns
    -------
    list of ObjectDiffEntry

    Raises
    ------
    CyclicStructureError
        If either record contains itself along the traversed path.

    Examples
    --------
    >>> diff_objects({"a": {"b": 1}}, {"a": {"b": 2}})
    [ObjectModified(path=('a', 'b'), old_value=1, new_value=2)]

    """
    result: list[ObjectDiffEntry] = []
    _diff_records(old, new, (), resolve_equality(eq, strict_equal), include_unchanged, set(), set(), result)
    return result


def _diff_records(
    old: Mapping[str, Any],
    new: Mapping[str, Any],
    prefix: Path,
    equal: EqualityFn,
    include_unchanged: bool,
    old_ancestors: set[int],
    new_ancestors: set[int],
    result: list[ObjectDiffEntry],
) -> None:
    if id(old) in old_ancestors or id(new) in new_ancestors:
        logger.debug("Cycle detected while diffing records at %s", prefix)
        raise CyclicStructureError(prefix)

    old_ancestors.add(id(old))
    new_ancestors.add(id(new))
    try:
        for key in _union_keys(old, new):
            path = prefix + (key,)
            in_old = key in old
            in_new = key in new

            if in_old and in_new:
                old_value = old[key]
                new_value = new[key]
                if is_plain_record(old_value) and is_plain_record(new_value):
                    _diff_records(
                        old_value, new_value, path, equal, include_unchanged, old_ancestors, new_ancestors, result
                    )
                elif not equal(old_value, new_value):
                    result.append(ObjectModified(path, old_value, new_value))
                elif include_unchanged:
                    result.append(ObjectUnchanged(path, old_value, new_value))
            elif in_old:
                result.append(ObjectRemoved(path, old[key]))
            else:
                result.append(ObjectAdded(path, new[key]))
    finally:
        old_ancestors.discard(id(old))
        new_ancestors.discard(id(new))


def _union_keys(old: Mapping[str, Any], new: Mapping[str, Any]) -> list[Any]:
    keys = list(old)
    keys.extend(key for key in new if key not in old)
    return keys


def format_value(value: Any) -> str:
    """Render a leaf value as compact JSON, falling back to ``str`` for other types."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


def format_object_diff(entries: Iterable[ObjectDiffEntry]) -> str:
    """Format object diff entries as text, one line per entry.

    Parameters
    ----------
    entries : iterable of ObjectDiffEntry
        Entries produced by :func:`diff_objects`

    Returns
    -------
    str
        Lines of the form ``+ path: value``, ``- path: value``,
        ``~ path: old → new`` and ``  path: value``, values as JSON.

    """
    lines: list[str] = []
    for entry in entries:
        path = ".".join(str(key) for key in entry.path)
        if isinstance(entry, ObjectAdded):
            lines.append(f"+ {path}: {format_value(entry.new_value)}")
        elif isinstance(entry, ObjectRemoved):
            lines.append(f"- {path}: {format_value(entry.old_value)}")
        elif isinstance(entry, ObjectModified):
            lines.append(f"~ {path}: {format_value(entry.old_value)} → {format_value(entry.new_value)}")
        else:
            lines.append(f"  {path}: {format_value(entry.old_value)}")
    return "\n".join(lines)
