#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/differ/cli/commands/diff.py
"""Line diff command.

Compares two text files line by line and renders the result for a
terminal, as an HTML fragment, or as JSON. Option defaults can come from a
configuration file (see :mod:`differ.cli.config`).
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from differ.cli.commands import add_logging_arguments, setup_logging
from differ.cli.config import load_config_with_priority, options_from_config, resolve_format
from differ.cli.output import should_use_colour, write_output
from differ.constants import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_FORMAT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    SUPPORTED_FORMATS,
)
from differ.diff.api import render_entries
from differ.diff.entries import diff_stats
from differ.diff.sequence import sequential_diff
from differ.exceptions import ConfigError, UnsupportedFormatError

logger = logging.getLogger(__name__)


def _validate_context_lines(value: str) -> int:
    """Validate context lines is a non-negative integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a non-negative integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"context lines must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"context lines must be non-negative, got {ivalue}")

    return ivalue


def _create_diff_parser() -> argparse.ArgumentParser:
    """Create argparse parser for diff command."""
    parser = argparse.ArgumentParser(
        prog="differ diff",
        description="Compare two text files line by line",
        add_help=True,
    )

    parser.add_argument("original", help="Original file (use '-' for stdin)")
    parser.add_argument("modified", help="Modified file (use '-' for stdin)")

    parser.add_argument(
        "--format",
        "-f",
        choices=list(SUPPORTED_FORMATS),
        default=None,
        help="Output format: terminal (default), html, or json",
    )
    parser.add_argument("--output", "-o", help="Write diff to file (default: stdout)")
    parser.add_argument(
        "--color",
        dest="color",
        choices=["auto", "always", "never"],
        default=None,
        help="Colorize terminal output: auto (default, if terminal), always, never",
    )
    parser.add_argument(
        "--context",
        "-C",
        type=_validate_context_lines,
        default=None,
        help="Number of unchanged lines shown around each change (format default if omitted)",
    )
    parser.add_argument(
        "--no-line-numbers",
        dest="show_line_numbers",
        action="store_false",
        default=None,
        help="Hide old/new line numbers",
    )

    parser.add_argument("--config", help="Configuration file (JSON, TOML, or YAML)")
    parser.add_argument("--no-config", action="store_true", help="Ignore discovered configuration files")
    add_logging_arguments(parser)

    return parser


def _read_source(source: str) -> tuple[str, str]:
    """Read a source file or stdin, returning ``(text, label)``."""
    if source == "-":
        return sys.stdin.read(), "stdin"
    path = Path(source)
    return path.read_text(encoding="utf-8"), str(path)


def handle_diff_command(args: list[str] | None = None) -> int:
    """Handle diff command to compare two text files.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (beyond 'diff')

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = _create_diff_parser()
    try:
        parsed = parser.parse_args(args or [])
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    setup_logging(parsed)

    if parsed.original == "-" and parsed.modified == "-":
        print("Error: Cannot read both original and modified from stdin", file=sys.stderr)
        return EXIT_FILE_ERROR

    for source in (parsed.original, parsed.modified):
        if source != "-" and not Path(source).is_file():
            print(f"Error: Source file not found: {source}", file=sys.stderr)
            return EXIT_FILE_ERROR

    try:
        config = load_config_with_priority(parsed.config, no_config=parsed.no_config)
        format_type = resolve_format(config, parsed.format)

        overrides: dict[str, Any] = {}
        if parsed.context is not None:
            overrides["context_lines"] = parsed.context
        if parsed.show_line_numbers is not None:
            overrides["show_line_numbers"] = parsed.show_line_numbers
        if format_type == "terminal":
            colour_mode = parsed.color or config.get("color")
            terminal_section = config.get("terminal")
            # An explicit [terminal] use_colours stands unless a colour mode was given
            if colour_mode is not None or not (
                isinstance(terminal_section, dict) and "use_colours" in terminal_section
            ):
                overrides["use_colours"] = should_use_colour(
                    colour_mode or "auto", writing_to_file=bool(parsed.output)
                )

        options = options_from_config(format_type, config, overrides)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except UnsupportedFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FORMAT_ERROR

    try:
        old_text, old_label = _read_source(parsed.original)
        new_text, new_label = _read_source(parsed.modified)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    logger.info("Comparing %s and %s", old_label, new_label)

    try:
        entries = sequential_diff(old_text.split("\n"), new_text.split("\n"), with_positions=True)
        if not diff_stats(entries).has_changes:
            print("No differences found.", file=sys.stderr)
        output = render_entries(entries, format_type, options)
        write_output(output, parsed.output)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except Exception as e:
        logger.debug("Diff failed", exc_info=True)
        print(f"Error comparing files: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS
