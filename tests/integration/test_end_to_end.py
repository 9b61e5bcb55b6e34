#  Copyright (c) 2025 Tom Villani, Ph.D.
"""End-to-end tests running the CLI against files on disk."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

import differ
from differ.cli import main


@pytest.mark.integration
class TestEndToEnd:
    """Full pipeline tests from files to rendered output."""

    def test_json_report_matches_library(self, isolated_cwd, capsys):
        """The CLI and diff_text agree on JSON output."""
        from differ import diff_text

        old_text = "one\ntwo\nthree\nfour\nfive\nsix\nseven\n"
        new_text = "one\n2\nthree\nfour\nfive\nsix\nseven\neight\n"
        (isolated_cwd / "old.txt").write_text(old_text, encoding="utf-8")
        (isolated_cwd / "new.txt").write_text(new_text, encoding="utf-8")

        assert main(["diff", "old.txt", "new.txt", "-f", "json", "-C", "1"]) == 0
        cli_payload = json.loads(capsys.readouterr().out)
        assert cli_payload == json.loads(diff_text(old_text, new_text, format="json", context_lines=1))
        assert {"type": "omitted", "count": 3} in cli_payload["diff"]

    def test_html_file_written(self, isolated_cwd):
        """HTML output written to disk is wrapped when configured."""
        (isolated_cwd / ".differ.yaml").write_text(
            "html:\n  wrap_in_container: true\n  class_names:\n    add: ins\n", encoding="utf-8"
        )
        (isolated_cwd / "a.txt").write_text("x\n", encoding="utf-8")
        (isolated_cwd / "b.txt").write_text("y\n", encoding="utf-8")

        assert main(["diff", "a.txt", "b.txt", "-f", "html", "-o", "out.html"]) == 0
        html = (isolated_cwd / "out.html").read_text(encoding="utf-8")
        assert html.startswith('<div class="diff-container">')
        assert '<div class="diff-line ins">' in html

    def test_module_entry_point(self, isolated_cwd):
        """``python -m differ`` runs the CLI."""
        src_dir = str(Path(differ.__file__).resolve().parents[1])
        env = dict(os.environ, PYTHONPATH=os.pathsep.join(filter(None, [src_dir, os.environ.get("PYTHONPATH")])))
        result = subprocess.run(
            [sys.executable, "-m", "differ", "--version"],
            env=env,
            capture_output=True,
            text=True,
            check=False,
        )
        assert result.returncode == 0
        assert "differ" in result.stdout
