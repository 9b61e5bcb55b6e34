#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/differ/cli/commands/objects.py
"""Structural diff of two JSON, YAML, or TOML documents."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from differ.cli.commands import add_logging_arguments, setup_logging
from differ.cli.config import load_data_file
from differ.cli.output import should_use_rich_output
from differ.constants import EXIT_ERROR, EXIT_FILE_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from differ.diff.objects import ObjectDiffEntry, diff_objects, format_object_diff, format_value, is_plain_record
from differ.exceptions import ConfigError, CyclicStructureError

logger = logging.getLogger(__name__)

_RICH_STYLES = {
    "added": "green",
    "removed": "red",
    "modified": "yellow",
    "unchanged": "dim",
}


def _create_objects_parser() -> argparse.ArgumentParser:
    """Create argparse parser for objects command."""
    parser = argparse.ArgumentParser(
        prog="differ objects",
        description="Compare two structured documents (JSON, YAML, or TOML) by dotted path",
    )
    parser.add_argument("original", help="Original document")
    parser.add_argument("modified", help="Modified document")
    parser.add_argument(
        "--include-unchanged",
        action="store_true",
        help="Also list leaves that did not change",
    )
    parser.add_argument("--rich", action="store_true", help="Render a table with Rich when writing to a terminal")
    add_logging_arguments(parser)
    return parser


def _print_rich_table(entries: Sequence[ObjectDiffEntry]) -> None:
    from rich.console import Console
    from rich.table import Table

    table = Table(title="Object diff")
    table.add_column("Change")
    table.add_column("Path")
    table.add_column("Old")
    table.add_column("New")

    for entry in entries:
        path = ".".join(str(key) for key in entry.path)
        old: Any = getattr(entry, "old_value", None)
        new: Any = getattr(entry, "new_value", None)
        table.add_row(
            entry.type,
            path,
            format_value(old) if entry.type != "added" else "",
            format_value(new) if entry.type != "removed" else "",
            style=_RICH_STYLES[entry.type],
        )

    Console().print(table)


def handle_objects_command(args: list[str] | None = None) -> int:
    """Handle objects command to compare two structured documents.

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = _create_objects_parser()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    setup_logging(parsed)

    for source in (parsed.original, parsed.modified):
        if not Path(source).is_file():
            print(f"Error: Source file not found: {source}", file=sys.stderr)
            return EXIT_FILE_ERROR

    try:
        old = load_data_file(parsed.original)
        new = load_data_file(parsed.modified)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    for source, document in ((parsed.original, old), (parsed.modified, new)):
        if not is_plain_record(document):
            print(f"Error: {source} must contain a mapping at root level", file=sys.stderr)
            return EXIT_VALIDATION_ERROR

    logger.info("Comparing %s and %s", parsed.original, parsed.modified)

    try:
        entries = diff_objects(old, new, include_unchanged=parsed.include_unchanged)
    except CyclicStructureError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if should_use_rich_output(parsed.rich):
        _print_rich_table(entries)
    elif entries:
        print(format_object_diff(entries))
    else:
        print("No differences found.", file=sys.stderr)

    return EXIT_SUCCESS
