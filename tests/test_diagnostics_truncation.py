"""Tests for diagnostics/truncation.py.

Span-length and line-length truncation as pure functions, plus the frame
helpers left_pad_width() and caret_prefix().
"""

from __future__ import annotations

from hypothesis import event, given, settings

from sourceref.diagnostics.render_config import RenderConfig
from sourceref.diagnostics.truncation import (
    RenderedLine,
    caret_prefix,
    left_pad_width,
    truncate,
    truncate_long_line,
    truncate_long_span,
)
from tests.strategies import rendered_lines

CONFIG = RenderConfig()


class TestRenderedLine:
    """Test RenderedLine construction and slicing helpers."""

    def test_slices(self) -> None:
        line = RenderedLine("foo = bar;", 6, 9)

        assert line.before == "foo = "
        assert line.highlighted == "bar"
        assert line.after == ";"
        assert line.highlight_length == 3

    def test_clamped_end_past_line(self) -> None:
        assert RenderedLine.clamped("abc", 1, 99) == RenderedLine("abc", 1, 3)

    def test_clamped_start_past_line(self) -> None:
        assert RenderedLine.clamped("abc", 7, 9) == RenderedLine("abc", 3, 3)

    def test_clamped_end_before_start(self) -> None:
        """Inverted columns collapse to an empty span, never negative."""
        assert RenderedLine.clamped("abcdef", 4, 2) == RenderedLine("abcdef", 4, 4)

    def test_clamped_negative_columns(self) -> None:
        assert RenderedLine.clamped("abc", -5, -1) == RenderedLine("abc", 0, 0)


class TestTruncateLongSpan:
    """Test truncate_long_span()."""

    def test_span_at_limit_unchanged(self) -> None:
        line = RenderedLine("z" * 150, 0, 150)

        assert truncate_long_span(line, CONFIG) is line

    def test_span_over_limit_elided(self) -> None:
        text = "ab" + "".join(chr(ord("A") + i % 26) for i in range(151)) + "cd"
        line = RenderedLine(text, 2, 153)

        result = truncate_long_span(line, CONFIG)

        assert result.highlight_length == 75
        assert result.start_column == 2
        assert result.highlighted == text[2:37] + " ... " + text[118:153]
        assert result.before == "ab"
        assert result.after == "cd"

    def test_custom_context_width(self) -> None:
        config = RenderConfig(max_span_length=20, context_width=3)
        line = RenderedLine("0123456789" * 3, 0, 30)

        result = truncate_long_span(line, config)

        assert result.text == "012 ... 789"
        assert result.end_column == 11


class TestTruncateLongLine:
    """Test truncate_long_line()."""

    def test_line_at_limit_unchanged(self) -> None:
        line = RenderedLine("q" * 150, 70, 80)

        assert truncate_long_line(line, CONFIG) is line

    def test_interior_span_gets_both_markers(self) -> None:
        line = RenderedLine("a" * 100 + "XYZ" + "b" * 100, 100, 103)

        result = truncate_long_line(line, CONFIG)

        assert result.text == " ... " + "a" * 35 + "XYZ" + "b" * 35 + " ..."
        assert result.start_column == 40
        assert result.end_column == 43
        assert result.highlighted == "XYZ"

    def test_span_at_line_start(self) -> None:
        line = RenderedLine("XYZ" + "b" * 200, 0, 3)

        result = truncate_long_line(line, CONFIG)

        assert result.text == "XYZ" + "b" * 35 + " ..."
        assert result.start_column == 0

    def test_span_with_exactly_35_before(self) -> None:
        """35 characters of lead-in fit the window: no leading marker."""
        line = RenderedLine("a" * 35 + "XYZ" + "b" * 200, 35, 38)

        result = truncate_long_line(line, CONFIG)

        assert result.text.startswith("a" * 35 + "XYZ")
        assert result.start_column == 35

    def test_span_at_line_end(self) -> None:
        line = RenderedLine("a" * 200 + "XYZ", 200, 203)

        result = truncate_long_line(line, CONFIG)

        assert result.text == " ... " + "a" * 35 + "XYZ"
        assert not result.text.endswith(" ...")
        assert result.highlighted == "XYZ"


class TestTruncate:
    """Test the composed rules."""

    def test_wide_span_in_long_line(self) -> None:
        """Span elision first, then windowing keeps the 75-column span."""
        text = "p" * 100 + "S" * 300 + "t" * 100
        line = RenderedLine(text, 100, 400)

        result = truncate(line, CONFIG)

        assert result.highlight_length == 75
        assert result.start_column == 40
        assert result.text.startswith(" ... ")
        assert result.text.endswith(" ...")
        assert result.highlighted == "S" * 35 + " ... " + "S" * 35

    @given(line=rendered_lines())
    @settings(max_examples=300)
    def test_columns_stay_in_bounds(self, line: RenderedLine) -> None:
        """INVARIANT: 0 <= start <= end <= len(text) after truncation."""
        result = truncate(line, CONFIG)

        assert 0 <= result.start_column <= result.end_column <= len(result.text)

    @given(line=rendered_lines())
    @settings(max_examples=300)
    def test_highlight_length(self, line: RenderedLine) -> None:
        """PROPERTY: span keeps its width unless elided to exactly 75."""
        result = truncate(line, CONFIG)

        if line.highlight_length > 150:
            event("outcome=elided")
            assert result.highlight_length == 75
        else:
            event("outcome=kept")
            assert result.highlighted == line.highlighted

    @given(line=rendered_lines())
    def test_short_lines_untouched(self, line: RenderedLine) -> None:
        """PROPERTY: lines within both limits are returned as-is."""
        result = truncate(line, CONFIG)

        if len(line.text) <= 150:
            assert result == line


class TestFrameHelpers:
    """Test left_pad_width() and caret_prefix()."""

    def test_left_pad_examples(self) -> None:
        assert left_pad_width(7) == 1
        assert left_pad_width(42) == 2
        assert left_pad_width(100) == 3
        assert left_pad_width(0) == 1
        assert left_pad_width(-3) == 1

    def test_caret_prefix_keeps_tabs(self) -> None:
        assert caret_prefix("\tx\ty = 1", 4) == "\t \t "

    def test_caret_prefix_column_beyond_text(self) -> None:
        assert caret_prefix("ab", 10) == "  "
