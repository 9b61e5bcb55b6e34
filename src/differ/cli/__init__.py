#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/differ/cli/__init__.py
"""Command-line interface for differ.

Usage::

    differ diff OLD NEW [--format terminal|html|json] [-C N] [-o OUT]
    differ objects OLD NEW [--include-unchanged] [--rich]
    differ --version
"""

import argparse
import sys

from differ.cli.commands import SUBCOMMANDS, dispatch_command
from differ.constants import EXIT_SUCCESS, EXIT_VALIDATION_ERROR


def _get_version() -> str:
    from differ import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the top-level parser used for ``--help`` and ``--version``."""
    parser = argparse.ArgumentParser(
        prog="differ",
        description="Compare text files and structured documents",
        epilog=(
            "Commands:\n"
            "  diff      Line diff of two text files (terminal, html, or json output)\n"
            "  objects   Path-by-path diff of two JSON, YAML, or TOML documents\n\n"
            "Run 'differ <command> --help' for command options."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {_get_version()}")
    return parser


def main(args: list[str] | None = None) -> int:
    """Execute the CLI entry point.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    if args is None:
        args = sys.argv[1:]

    command_result = dispatch_command(args)
    if command_result is not None:
        return command_result

    parser = create_parser()
    try:
        parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    if not args:
        parser.print_help(sys.stderr)
    return EXIT_VALIDATION_ERROR


__all__ = ["SUBCOMMANDS", "create_parser", "main"]
