#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/differ/cli/commands/__init__.py
"""CLI subcommand dispatch for differ."""

import argparse
import logging
import sys

from differ.logging_utils import configure_logging

# Command handlers are imported lazily so that --help stays fast

logger = logging.getLogger(__name__)

SUBCOMMANDS = ("diff", "objects")


def dispatch_command(args: list[str] | None = None) -> int | None:
    """Route ``args`` to a subcommand handler.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int or None
        Exit code if a subcommand was handled, None otherwise

    """
    if args is None:
        args = sys.argv[1:]

    if not args:
        return None

    if args[0] == "diff":
        from differ.cli.commands.diff import handle_diff_command

        return handle_diff_command(args[1:])

    if args[0] == "objects":
        from differ.cli.commands.objects import handle_objects_command

        return handle_objects_command(args[1:])

    return None


def add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the ``--log-level``, ``--log-file`` and ``--trace`` flags shared by every subcommand."""
    group = parser.add_argument_group("logging")
    group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    group.add_argument("--log-file", help="Also write log messages to this file")
    group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")


def setup_logging(parsed_args: argparse.Namespace) -> None:
    """Configure logging from parsed subcommand arguments.

    ``--trace`` takes precedence over ``--log-level``.
    """
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)
