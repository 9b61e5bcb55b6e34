#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the objects CLI command."""

import json

import pytest

from differ.cli.commands.objects import handle_objects_command
from differ.constants import EXIT_FILE_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR


@pytest.mark.unit
@pytest.mark.cli
class TestHandleObjectsCommand:
    """Test handle_objects_command function."""

    def test_json_documents(self, isolated_cwd, capsys):
        """Nested changes are listed by dotted path."""
        old = isolated_cwd / "old.json"
        new = isolated_cwd / "new.json"
        old.write_text(json.dumps({"server": {"port": 80, "host": "a"}, "debug": False}), encoding="utf-8")
        new.write_text(json.dumps({"server": {"port": 8080, "host": "a"}, "name": "x"}), encoding="utf-8")

        assert handle_objects_command([str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.splitlines() == [
            "~ server.port: 80 → 8080",
            "- debug: false",
            '+ name: "x"',
        ]

    def test_mixed_formats(self, isolated_cwd, capsys):
        """YAML and TOML documents can be compared with each other."""
        old = isolated_cwd / "old.yaml"
        new = isolated_cwd / "new.toml"
        old.write_text("title: demo\nowner:\n  name: Tom\n", encoding="utf-8")
        new.write_text('title = "demo"\n\n[owner]\nname = "Ann"\n', encoding="utf-8")

        assert handle_objects_command([str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == '~ owner.name: "Tom" → "Ann"'

    def test_type_change_reported(self, isolated_cwd, capsys):
        """An integer flag becoming a boolean is a difference."""
        old = isolated_cwd / "old.json"
        new = isolated_cwd / "new.yaml"
        old.write_text('{"enabled": 1}', encoding="utf-8")
        new.write_text("enabled: true\n", encoding="utf-8")

        assert handle_objects_command([str(old), str(new)]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == "~ enabled: 1 → true"

    def test_include_unchanged(self, isolated_cwd, capsys):
        """Unchanged leaves are listed on request."""
        doc = isolated_cwd / "doc.json"
        doc.write_text('{"a": 1}', encoding="utf-8")
        handle_objects_command([str(doc), str(doc), "--include-unchanged"])
        assert capsys.readouterr().out.strip() == "a: 1"

    def test_no_differences(self, isolated_cwd, capsys):
        """Identical documents print a notice on stderr."""
        doc = isolated_cwd / "doc.json"
        doc.write_text('{"a": 1}', encoding="utf-8")
        assert handle_objects_command([str(doc), str(doc)]) == EXIT_SUCCESS
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "No differences found." in captured.err

    def test_missing_file(self, isolated_cwd, capsys):
        """A missing document is a file error."""
        doc = isolated_cwd / "doc.json"
        doc.write_text("{}", encoding="utf-8")
        assert handle_objects_command([str(doc), "nope.json"]) == EXIT_FILE_ERROR

    def test_invalid_document(self, isolated_cwd, capsys):
        """Unparseable documents are validation errors."""
        good = isolated_cwd / "good.json"
        bad = isolated_cwd / "bad.json"
        good.write_text("{}", encoding="utf-8")
        bad.write_text("{not json", encoding="utf-8")
        assert handle_objects_command([str(good), str(bad)]) == EXIT_VALIDATION_ERROR
        assert "Invalid JSON" in capsys.readouterr().err

    def test_non_mapping_root(self, isolated_cwd, capsys):
        """Documents must have a mapping at the root."""
        good = isolated_cwd / "good.json"
        listing = isolated_cwd / "list.json"
        good.write_text("{}", encoding="utf-8")
        listing.write_text("[1, 2]", encoding="utf-8")
        assert handle_objects_command([str(good), str(listing)]) == EXIT_VALIDATION_ERROR
        assert "mapping" in capsys.readouterr().err

    def test_rich_falls_back_when_not_a_tty(self, isolated_cwd, capsys):
        """--rich prints plain text when stdout is not a terminal."""
        old = isolated_cwd / "old.json"
        new = isolated_cwd / "new.json"
        old.write_text('{"a": 1}', encoding="utf-8")
        new.write_text('{"a": 2}', encoding="utf-8")
        handle_objects_command([str(old), str(new), "--rich"])
        assert capsys.readouterr().out.strip() == "~ a: 1 → 2"

    def test_rich_table(self, isolated_cwd, monkeypatch, capsys):
        """A Rich table is printed when Rich output is enabled."""
        pytest.importorskip("rich")
        monkeypatch.setattr("differ.cli.commands.objects.should_use_rich_output", lambda requested: requested)
        old = isolated_cwd / "old.json"
        new = isolated_cwd / "new.json"
        old.write_text('{"a": 1}', encoding="utf-8")
        new.write_text('{"a": 2, "b": true}', encoding="utf-8")

        assert handle_objects_command([str(old), str(new), "--rich"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Object diff" in out
        assert "modified" in out
        assert "added" in out
