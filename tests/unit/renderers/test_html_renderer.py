#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for diff/renderers/html.py HtmlDiffRenderer."""

import pytest

from differ.diff.renderers.html import HtmlDiffRenderer, render_html, render_to_file
from differ.diff.sequence import sequential_diff
from differ.options import HtmlDiffOptions


@pytest.fixture
def replaced_line():
    """Edit script replacing the middle of three lines."""
    return sequential_diff(["line 1", "line 2", "line 4"], ["line 1", "line 3", "line 4"], with_positions=True)


@pytest.mark.unit
class TestHtmlDiffRenderer:
    """Tests for the HtmlDiffRenderer class."""

    def test_line_classes(self, replaced_line):
        """Each line combines the line class with its type class."""
        result = HtmlDiffRenderer(HtmlDiffOptions(context_lines=1)).render(replaced_line)
        assert '<div class="diff-line diff-delete">' in result
        assert '<div class="diff-line diff-add">' in result
        assert '<div class="diff-line diff-same">' in result

    def test_line_number_spans(self, replaced_line):
        """Line numbers are padded and placed in left/right spans."""
        result = render_html(replaced_line, context_lines=1)
        assert '<span class="line-number left"> 2</span>' in result
        assert '<span class="line-number right"></span>' in result
        assert '<span class="line-number right"> 2</span>' in result

    def test_full_line_markup(self):
        """A single deleted line has the documented structure."""
        entries = sequential_diff(["a"], [], with_positions=True)
        assert render_html(entries) == (
            '<div class="diff-line diff-delete">\n'
            '  <span class="line-number left"> 1</span>\n'
            '  <span class="line-number right"></span>\n'
            '  <span class="diff-prefix">-</span>\n'
            '  <span class="diff-content">a</span>\n'
            "</div>"
        )

    def test_omitted_block(self):
        """Omitted runs get their own block."""
        old = ["a", "b", "c", "d", "e", "g", "h"]
        new = ["a", "b", "d", "e", "f", "g", "h"]
        result = render_html(sequential_diff(old, new, with_positions=True), context_lines=1)
        assert (
            '<div class="diff-omitted">\n'
            '  <span class="diff-omitted-content">... 1 line omitted ...</span>\n'
            "</div>"
        ) in result

    def test_content_is_escaped(self):
        """User content cannot inject markup."""
        entries = sequential_diff([], ['<script>alert("x")</script> & more'], with_positions=True)
        result = render_html(entries)
        assert "<script>" not in result
        assert "&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt; &amp; more" in result

    def test_no_changes_is_empty(self):
        """Unchanged input renders as an empty string."""
        entries = sequential_diff(["x", "y"], ["x", "y"], with_positions=True)
        assert render_html(entries, context_lines=1) == ""
        assert render_html(entries) == ""

    def test_empty_diff(self):
        """An empty edit script renders as an empty string."""
        assert render_html([]) == ""

    def test_all_added(self):
        """Only add blocks appear when everything is new."""
        result = render_html(sequential_diff([], ["a", "b"], with_positions=True))
        assert "diff-line diff-add" in result
        assert "diff-line diff-delete" not in result

    def test_custom_class_names(self):
        """Class overrides replace the defaults for their slot."""
        entries = sequential_diff(["A", "foo"], ["A", "bar"], with_positions=True)
        options = HtmlDiffOptions(context_lines=1, class_names={"add": "my-add", "delete": "my-del", "same": "my-same"})
        result = HtmlDiffRenderer(options).render(entries)
        assert "diff-line my-add" in result
        assert "diff-line my-del" in result
        assert "diff-line my-same" in result
        assert "diff-add" not in result

    def test_line_number_alias(self):
        """``lineNumber`` is accepted as a class slot name."""
        entries = sequential_diff(["a"], ["b"], with_positions=True)
        result = render_html(entries, class_names={"lineNumber": "ln"})
        assert '<span class="ln left"> 1</span>' in result

    def test_hide_line_numbers(self, replaced_line):
        """No line-number spans are emitted when disabled."""
        result = render_html(replaced_line, show_line_numbers=False)
        assert "line-number" not in result
        assert '<span class="diff-prefix">+</span>' in result

    def test_wrap_in_container(self, replaced_line):
        """Non-empty output can be wrapped in the container element."""
        result = render_html(replaced_line, wrap_in_container=True)
        assert result.startswith('<div class="diff-container">\n')
        assert result.endswith("\n</div>")

    def test_container_not_added_to_empty_output(self):
        """Empty output stays empty even with a container."""
        entries = sequential_diff(["x"], ["x"], with_positions=True)
        assert render_html(entries, wrap_in_container=True) == ""

    def test_render_to_file(self, tmp_path, replaced_line):
        """The rendered fragment is written as UTF-8."""
        output = tmp_path / "diff.html"
        render_to_file(replaced_line, str(output), context_lines=1)
        assert output.read_text(encoding="utf-8") == render_html(replaced_line, context_lines=1)
