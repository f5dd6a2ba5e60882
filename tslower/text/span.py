from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """
    Half-open byte range [start, end) in source text plus 1-based line/column
    coordinates of both ends.

    Invariant:
    - 0 <= start <= end

    Columns count characters, offsets count UTF-8 bytes.
    """

    start: int
    end: int
    start_line: int = 1
    start_col: int = 1
    end_line: int = 1
    end_col: int = 1

    def __post_init__(self):
        if self.start < 0 or self.end < 0:
            raise ValueError("Span offsets cannot be negative")
        if self.start > self.end:
            raise ValueError("Span invariant violated: start > end")
        if self.start_line < 1 or self.start_col < 1 or self.end_line < 1 or self.end_col < 1:
            raise ValueError("Span lines and columns are 1-based")

    @staticmethod
    def point(offset: int, line: int, col: int) -> "Span":
        """Create an empty Span at the given position."""
        return Span(offset, offset, line, col, line, col)

    def len(self) -> int:
        """Get the length of the span in bytes."""
        return self.end - self.start

    def is_empty(self) -> bool:
        """Check if the span is empty."""
        return self.start == self.end

    def as_tuple(self) -> tuple[int, int]:
        """Get the byte range as a tuple of (start, end) integers."""
        return (self.start, self.end)

    @property
    def location(self) -> str:
        """Human-readable `line:col` of the span start."""
        return f"{self.start_line}:{self.start_col}"

    def cover(self, other: "Span") -> "Span":
        """Get the minimal span that covers both this span and another span."""
        first = self if self.start <= other.start else other
        last = self if self.end >= other.end else other
        return Span(
            first.start,
            last.end,
            first.start_line,
            first.start_col,
            last.end_line,
            last.end_col,
        )

    def __repr__(self) -> str:
        return f"Span({self.start}..{self.end} @ {self.start_line}:{self.start_col}-{self.end_line}:{self.end_col})"


EMPTY: Final[Span] = Span(0, 0)
"""Span at the very start of an empty source."""


def slice_span(source: str, span: Span) -> str:
    """Get the substring of the source text covered by the given Span.

    Offsets are byte based, so the slice goes through the UTF-8 encoding.
    """
    return source.encode("utf-8")[span.start : span.end].decode("utf-8")
