"""Positions in markup source.

Every token, AST node and parse failure carries a SourceLocation. Lines and
columns are what an editor shows (1-indexed); offsets index the source
string (0-indexed, end-exclusive, in characters). ``byte_span`` converts
an offset pair to byte positions in the encoded source.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A span of markup source.

    Attributes:
        lineno: Line of the first character (1-indexed)
        col_offset: Column of the first character (1-indexed)
        offset: Index of the first character
        end_offset: Index one past the last character
        end_lineno: Line of the span end (optional)
        end_col_offset: Column one past the span end (optional)
        source_file: Path of the markup file (optional)

    Examples:
            >>> loc = SourceLocation(3, 1, 9, 13, source_file="intro.adoc")
            >>> str(loc)
            'intro.adoc:3:1'
            >>> loc.text_of("= Intro\\n\\nThe **end**")
            'The '

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """``file:line:col``, or ``line:col`` without a source file."""
        position = f"{self.lineno}:{self.col_offset}"
        return f"{self.source_file}:{position}" if self.source_file else position

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Span from the start of this location to the end of ``end``."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            end_lineno=end.end_lineno or end.lineno,
            end_col_offset=end.end_col_offset or end.col_offset,
            source_file=self.source_file,
        )

    def end(self) -> SourceLocation:
        """Zero-width location just past this span.

        Used for failures that point at missing input, e.g. a section
        marker at the very end of the source.
        """
        return SourceLocation(
            lineno=self.end_lineno or self.lineno,
            col_offset=self.end_col_offset or self.col_offset,
            offset=self.end_offset,
            end_offset=self.end_offset,
            source_file=self.source_file,
        )

    def text_of(self, source: str) -> str:
        """The slice of ``source`` this location covers."""
        return source[self.offset : self.end_offset]

    def byte_span(self, source: str, encoding: str = "utf-8") -> tuple[int, int]:
        """``(start, end)`` of this span as byte offsets into encoded ``source``.

        Example:
            >>> SourceLocation(1, 6, 5, 7).byte_span("café **x**")
            (6, 8)
        """
        start = len(source[: self.offset].encode(encoding))
        return start, start + len(self.text_of(source).encode(encoding))

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for nodes built by hand rather than parsed."""
        return cls(lineno=0, col_offset=0)
