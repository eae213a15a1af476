"""
Tests for source and span tracking.

This module tests line table construction, offset to line/column
translation and the lazily sliced span views used by every AST node.
"""

import pytest

from irene.core.span import Source, Span


class TestSourceLocation:
    """Tests for Source.location and the line table."""

    def test_single_line_positions(self):
        """Test columns on a single line are 1-based."""
        source = Source("abc")
        assert source.location(0) == (1, 1)
        assert source.location(2) == (1, 3)
        assert source.location(3) == (1, 4)  # end of input

    def test_multi_line_positions(self):
        """Test offsets after newlines move to the next line."""
        source = Source("ab\ncd\n\nef")
        assert source.line_starts == (0, 3, 6, 7)
        assert source.location(3) == (2, 1)
        assert source.location(4) == (2, 2)
        assert source.location(6) == (3, 1)
        assert source.location(8) == (4, 2)

    def test_newline_belongs_to_its_line(self):
        """Test the newline character itself reports the line it ends."""
        source = Source("ab\ncd")
        assert source.location(2) == (1, 3)

    def test_empty_source(self):
        """Test an empty source still has one line."""
        source = Source("")
        assert source.line_starts == (0,)
        assert source.location(0) == (1, 1)

    @pytest.mark.parametrize("offset", [-1, 4])
    def test_location_out_of_range(self, offset):
        """Test offsets outside the source are rejected."""
        with pytest.raises(IndexError):
            Source("abc").location(offset)

    def test_line_text(self):
        """Test retrieving full line text without the newline."""
        source = Source("first\nsecond\n")
        assert source.line_text(1) == "first"
        assert source.line_text(2) == "second"
        assert source.line_text(3) == ""


class TestSpan:
    """Tests for Span views."""

    def setup_method(self):
        """Set up test fixtures."""
        self.source = Source("say hi\nmod.purge 10", name="<test>")

    def test_text_is_sliced_from_source(self):
        """Test span text is the slice between its offsets."""
        span = self.source.span(7, 16)
        assert span.text == "mod.purge"
        assert span.length == 9

    def test_line_and_column(self):
        """Test span coordinates come from the start offset."""
        span = self.source.span(11, 16)
        assert span.line == 2
        assert span.column == 5
        assert str(span) == "2:5"

    def test_zero_width_span(self):
        """Test a span without end is zero-width."""
        span = self.source.span(4)
        assert span.text == ""
        assert span.start == span.end == 4

    def test_line_text(self):
        """Test the line a span starts on is available for diagnostics."""
        assert self.source.span(12, 14).line_text == "mod.purge 10"

    @pytest.mark.parametrize("start,end", [(-1, 2), (3, 2), (0, 100)])
    def test_invalid_bounds(self, start, end):
        """Test spans must lie inside the source with start <= end."""
        with pytest.raises(ValueError, match="Invalid span"):
            Span(self.source, start, end)

    def test_equality_ignores_source_object(self):
        """Test spans over equal text and offsets compare equal."""
        assert Source("abc").span(0, 2) == Source("abc").span(0, 2)
        assert Source("abc").span(0, 2) != Source("abc").span(0, 3)

    def test_spans_are_immutable(self):
        """Test spans cannot be modified after creation."""
        span = self.source.span(0, 3)
        with pytest.raises(AttributeError):
            span.start = 1

