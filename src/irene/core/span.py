"""
Source text and span tracking for Irene scripts.

A `Source` retains the one copy of the script text that every node refers
to. A `Span` is an (offset, end) window into that source; its text and its
line/column coordinates are computed on demand rather than copied while
parsing.
"""

from bisect import bisect_right
from functools import cached_property

from attrs import field, frozen

NEWLINE = "\n"


class Source:
    """
    Script text plus a line table for offset -> (line, column) lookup.

    Offsets are character offsets into the Python string. Lines and
    columns are 1-based.
    """

    def __init__(self, text: str, name: str = "<script>"):
        self.text = text
        self.name = name

    def __repr__(self) -> str:
        return f"Source({self.name!r}, length={len(self.text)})"

    def __len__(self) -> int:
        return len(self.text)

    @cached_property
    def line_starts(self) -> tuple[int, ...]:
        """Offsets at which each line begins."""
        starts = [0]
        index = self.text.find(NEWLINE)
        while index != -1:
            starts.append(index + 1)
            index = self.text.find(NEWLINE, index + 1)
        return tuple(starts)

    def location(self, offset: int) -> tuple[int, int]:
        """
        Translate an offset into a 1-based (line, column) pair.

        Params:
            offset: Character offset, 0 <= offset <= len(text)

        Returns:
            Tuple of (line, column)

        Raises:
            IndexError: If offset lies outside the source
        """
        if offset < 0 or offset > len(self.text):
            raise IndexError(f"Offset {offset} outside source of length {len(self.text)}")
        line_index = bisect_right(self.line_starts, offset) - 1
        return line_index + 1, offset - self.line_starts[line_index] + 1

    def line_text(self, line: int) -> str:
        """Return the text of a 1-based line, without its newline."""
        start = self.line_starts[line - 1]
        end = self.text.find(NEWLINE, start)
        return self.text[start:] if end == -1 else self.text[start:end]

    def span(self, start: int, end: int | None = None) -> "Span":
        """Build a span over [start, end); a missing end gives a zero-width span."""
        return Span(self, start, start if end is None else end)


@frozen
class Span:
    """
    A located slice of a `Source`.

    Equality compares offsets only, so two parses of the same text produce
    equal spans even when they were given separate `Source` objects.
    """

    source: Source = field(eq=False, repr=False)
    start: int
    end: int = field()

    @end.validator
    def _check_bounds(self, attribute, value):
        if not 0 <= self.start <= value <= len(self.source.text):
            raise ValueError(
                f"Invalid span [{self.start}, {value}) for source of length {len(self.source.text)}"
            )

    @property
    def text(self) -> str:
        return self.source.text[self.start : self.end]

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def line(self) -> int:
        return self.source.location(self.start)[0]

    @property
    def column(self) -> int:
        return self.source.location(self.start)[1]

    @property
    def line_text(self) -> str:
        """Full text of the line this span starts on."""
        return self.source.line_text(self.line)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
