#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the top-level CLI entry point."""

import pytest

from differ import __version__
from differ.cli import main
from differ.cli.commands import dispatch_command
from differ.constants import EXIT_SUCCESS, EXIT_VALIDATION_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Tests for main and dispatch_command."""

    def test_version(self, capsys):
        """--version prints the package version."""
        assert main(["--version"]) == EXIT_SUCCESS
        assert __version__ in capsys.readouterr().out

    def test_help(self, capsys):
        """--help lists the subcommands."""
        assert main(["--help"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "diff" in out
        assert "objects" in out

    def test_no_arguments_prints_help(self, capsys):
        """Running without arguments shows usage on stderr."""
        assert main([]) == EXIT_VALIDATION_ERROR
        assert "usage: differ" in capsys.readouterr().err

    def test_unknown_command(self, capsys):
        """Unknown commands are argument errors."""
        assert main(["frobnicate"]) == 2

    def test_dispatch_unknown_returns_none(self):
        """Unrecognized commands are left to the caller."""
        assert dispatch_command(["--version"]) is None
        assert dispatch_command([]) is None

    def test_dispatch_diff(self, isolated_cwd, capsys):
        """The diff subcommand is routed to its handler."""
        path = isolated_cwd / "a.txt"
        path.write_text("a", encoding="utf-8")
        assert main(["diff", str(path), str(path)]) == EXIT_SUCCESS

    def test_dispatch_objects(self, isolated_cwd, capsys):
        """The objects subcommand is routed to its handler."""
        path = isolated_cwd / "a.json"
        path.write_text("{}", encoding="utf-8")
        assert main(["objects", str(path), str(path)]) == EXIT_SUCCESS

    def test_subcommand_help(self, capsys):
        """Subcommand help exits cleanly."""
        assert main(["diff", "--help"]) == EXIT_SUCCESS
        assert "differ diff" in capsys.readouterr().out
