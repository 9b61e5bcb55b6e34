"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/differ/cli/output.py
import sys
from typing import IO, Optional

from differ.constants import ColorMode


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(requested: bool, force: bool = False, stream: Optional[IO[str]] = None) -> bool:
    """Determine if Rich output should be used.

    Parameters
    ----------
    requested : bool
        Whether ``--rich`` was given
    force : bool, default False
        Use Rich even when the stream is not a terminal
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True when Rich was requested, is installed, and the stream is a TTY
        (or ``force`` is set)

    """
    if not requested or not check_rich_available():
        return False

    if force:
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def should_use_colour(mode: ColorMode, writing_to_file: bool, stream: Optional[IO[str]] = None) -> bool:
    """Resolve a ``--color`` mode (``auto``, ``always``, ``never``) to a boolean.

    ``auto`` enables colours only when writing to a terminal.
    """
    if mode == "always":
        return True
    if mode == "never" or writing_to_file:
        return False
    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def write_output(text: str, output_path: Optional[str] = None) -> None:
    """Print ``text`` to stdout or write it to ``output_path``."""
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Diff written to: {output_path}", file=sys.stderr)
    elif text:
        print(text)
