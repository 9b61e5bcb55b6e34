#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/differ/diff/renderers/json.py
"""JSON diff renderer for structured output.

The payload has the shape::

    {
      "options": {"contextLines": 3, "showLineNumbers": true},
      "diff": [
        {"type": "unchanged", "lineNumbers": {"old": 1, "new": 1}, "content": "..."},
        {"type": "removed", "lineNumbers": {"old": 2}, "content": "..."},
        {"type": "added", "lineNumbers": {"new": 2}, "content": "..."},
        {"type": "omitted", "count": 4}
      ]
    }
"""

from __future__ import annotations

import json
from typing import Any, Dict, Sequence

from differ.diff.entries import DiffEntry, is_change
from differ.diff.renderers.windowing import SEPARATOR, OmittedRun, iter_windowed
from differ.options import JsonDiffOptions

_JSON_TYPES = {
    "same": "unchanged",
    "add": "added",
    "delete": "removed",
}


class JsonDiffRenderer:
    """Render an edit script as structured JSON.

    Parameters
    ----------
    options : JsonDiffOptions, optional
        Rendering options; defaults to three context lines with line numbers

    """

    def __init__(self, options: JsonDiffOptions | None = None):
        """Initialize the JSON diff renderer."""
        self.options = options or JsonDiffOptions()

    def render(self, entries: Sequence[DiffEntry]) -> str:
        """Render diff entries to a pretty-printed JSON string."""
        return json.dumps(self.build_payload(entries), indent=self.options.indent, ensure_ascii=False, default=str)

    def build_payload(self, entries: Sequence[DiffEntry]) -> Dict[str, Any]:
        """Build the JSON-serializable payload.

        Unchanged-only input with ``context_lines > 0`` is rendered in full,
        since there is no change to window around.
        """
        context_lines = self.options.context_lines
        diff: list[Dict[str, Any]] = []

        if context_lines > 0 and not any(is_change(entry) for entry in entries):
            diff.extend(self._entry_to_dict(entry) for entry in entries)
        else:
            for item in iter_windowed(entries, context_lines):
                if item is SEPARATOR:
                    continue
                if isinstance(item, OmittedRun):
                    diff.append({"type": "omitted", "count": item.count})
                else:
                    diff.append(self._entry_to_dict(item))

        return {
            "options": {
                "contextLines": context_lines,
                "showLineNumbers": self.options.show_line_numbers,
            },
            "diff": diff,
        }

    def _entry_to_dict(self, entry: DiffEntry) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": _JSON_TYPES[entry.type]}
        if self.options.show_line_numbers:
            line_numbers: Dict[str, int] = {}
            if entry.left_line is not None:
                line_numbers["old"] = entry.left_line
            if entry.right_line is not None:
                line_numbers["new"] = entry.right_line
            data["lineNumbers"] = line_numbers
        data["content"] = entry.content
        return data


def render_json(entries: Sequence[DiffEntry], options: JsonDiffOptions | None = None, **kwargs: Any) -> str:
    """Render diff entries as JSON.

    Parameters
    ----------
    entries : sequence of DiffEntry
        Edit script to render
    options : JsonDiffOptions, optional
        Base options
    **kwargs
        Field overrides applied on top of ``options``

    """
    resolved = options or JsonDiffOptions()
    if kwargs:
        resolved = resolved.create_updated(**kwargs)
    return JsonDiffRenderer(resolved).render(entries)


def render_to_file(entries: Sequence[DiffEntry], output_path: str, **kwargs: Any) -> None:
    """Render diff entries to a JSON file.

    Parameters
    ----------
    entries : sequence of DiffEntry
        Edit script to render
    output_path : str
        Destination path for the generated JSON file.
    **kwargs
        Option fields forwarded to :class:`JsonDiffOptions`.

    """
    json_output = render_json(entries, JsonDiffOptions(**kwargs))

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json_output)
