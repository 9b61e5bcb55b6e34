#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for options.py."""

import dataclasses

import pytest

from differ.exceptions import UnsupportedFormatError
from differ.options import (
    HtmlClassNames,
    HtmlDiffOptions,
    JsonDiffOptions,
    TerminalDiffOptions,
    get_options_class,
    options_for_format,
)


@pytest.mark.unit
class TestRendererOptions:
    """Tests for the renderer option dataclasses."""

    def test_per_format_defaults(self):
        """Each format has its own context default."""
        assert TerminalDiffOptions().context_lines == 0
        assert HtmlDiffOptions().context_lines == 0
        assert JsonDiffOptions().context_lines == 3

    def test_shared_defaults(self):
        """Line numbers are on by default everywhere."""
        for options in (TerminalDiffOptions(), HtmlDiffOptions(), JsonDiffOptions()):
            assert options.show_line_numbers is True

    def test_negative_context_rejected(self):
        """Negative context is invalid."""
        with pytest.raises(ValueError, match="context_lines must be non-negative"):
            TerminalDiffOptions(context_lines=-1)

    def test_negative_indent_rejected(self):
        """Negative JSON indentation is invalid."""
        with pytest.raises(ValueError, match="indent"):
            JsonDiffOptions(indent=-2)

    def test_frozen(self):
        """Options cannot be mutated in place."""
        options = TerminalDiffOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.context_lines = 2

    def test_create_updated(self):
        """create_updated returns a modified copy."""
        options = TerminalDiffOptions()
        updated = options.create_updated(context_lines=2, use_colours=False)
        assert updated.context_lines == 2
        assert updated.use_colours is False
        assert options.context_lines == 0

    def test_create_updated_validates(self):
        """Copies go through the same validation."""
        with pytest.raises(ValueError):
            JsonDiffOptions().create_updated(context_lines=-5)

    def test_help_metadata(self):
        """Fields carry help text."""
        field = next(f for f in dataclasses.fields(JsonDiffOptions) if f.name == "indent")
        assert "indent" in field.metadata["help"].lower()


@pytest.mark.unit
class TestHtmlClassNames:
    """Tests for HTML class name handling."""

    def test_defaults(self):
        """Defaults match the documented class names."""
        names = HtmlClassNames()
        assert names.container == "diff-container"
        assert names.line == "diff-line"
        assert names.line_number == "line-number"
        assert names.omitted == "diff-omitted"

    def test_mapping_converted(self):
        """A plain mapping is converted to HtmlClassNames."""
        options = HtmlDiffOptions(class_names={"add": "ins"})
        assert isinstance(options.class_names, HtmlClassNames)
        assert options.class_names.add == "ins"
        assert options.class_names.delete == "diff-delete"

    def test_empty_values_fall_back(self):
        """Empty overrides keep the default."""
        assert HtmlClassNames.from_mapping({"add": ""}).add == "diff-add"

    def test_unknown_slot(self):
        """Unknown slots are rejected."""
        with pytest.raises(ValueError, match="Unknown HTML class slot"):
            HtmlClassNames.from_mapping({"inserted": "x"})

    def test_for_type(self):
        """Entry types map to their class."""
        names = HtmlClassNames(add="a", delete="d", same="s")
        assert [names.for_type(t) for t in ("add", "delete", "same")] == ["a", "d", "s"]


@pytest.mark.unit
class TestOptionsLookup:
    """Tests for format-to-options lookup."""

    @pytest.mark.parametrize(
        "format_type, expected",
        [("terminal", TerminalDiffOptions), ("html", HtmlDiffOptions), ("json", JsonDiffOptions)],
    )
    def test_get_options_class(self, format_type, expected):
        """Each format has an options class."""
        assert get_options_class(format_type) is expected

    def test_unknown_format(self):
        """Unknown formats raise UnsupportedFormatError."""
        with pytest.raises(UnsupportedFormatError):
            get_options_class("pdf")

    def test_options_for_format(self):
        """Overrides are passed to the constructor."""
        options = options_for_format("html", wrap_in_container=True)
        assert isinstance(options, HtmlDiffOptions)
        assert options.wrap_in_container is True

    def test_options_for_format_unknown_field(self):
        """Unknown fields raise TypeError."""
        with pytest.raises(TypeError):
            options_for_format("json", use_colours=True)
