"""The token vocabulary shared by the lexer and the parser.

The parser only ever sees a materialized list of Tokens, read left to right
with one token of lookahead. A token records where it came from as plain
integers; the SourceLocation object is built the first time something asks
for it (a failure, or the AST node the token ends up in).

Thread Safety:
Tokens are frozen. The one-time location cache write is idempotent, so
sharing a token list across threads is safe.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from doctora.location import SourceLocation

MAX_SECTION_LEVEL = 6


class TokenType(Enum):
    """What a token means to the parser."""

    # Block structure
    SECTION_MARKER = auto()  # = through ====== at column 1
    LINE_BREAK = auto()  # exactly one newline
    BLOCK_SEPARATOR = auto()  # a newline run containing a blank line

    # Span delimiters
    BOLD_DELIMITER = auto()  # **
    ITALIC_DELIMITER = auto()  # _

    TEXT = auto()  # one word


# Wording used for "expected X, got Y" failure messages
_DESCRIPTIONS: dict[TokenType, str] = {
    TokenType.SECTION_MARKER: "section marker",
    TokenType.LINE_BREAK: "line break",
    TokenType.BLOCK_SEPARATOR: "block separator",
    TokenType.BOLD_DELIMITER: "bold delimiter (**)",
    TokenType.ITALIC_DELIMITER: "italic delimiter (_)",
    TokenType.TEXT: "text",
}

INLINE_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.TEXT, TokenType.BOLD_DELIMITER, TokenType.ITALIC_DELIMITER}
)


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical unit of markup.

    Attributes:
        type: Token kind
        value: Exact source text of the token (newline tokens keep any
            whitespace-only lines they folded in)
        line: Line of the first character (1-indexed)
        column: Column of the first character (1-indexed)
        start: Source index of the first character
        end: Source index one past the last character
        source_file: Path of the markup file, if known

    """

    type: TokenType
    value: str
    line: int
    column: int
    start: int
    end: int
    source_file: str | None = None
    _location: SourceLocation | None = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def location(self) -> SourceLocation:
        """Source span of the token, built on first access."""
        cached = self._location
        if cached is None:
            newlines = self.value.count("\n")
            if newlines:
                end_column = len(self.value) - self.value.rfind("\n")
            else:
                end_column = self.column + (self.end - self.start)
            cached = SourceLocation(
                lineno=self.line,
                col_offset=self.column,
                offset=self.start,
                end_offset=self.end,
                end_lineno=self.line + newlines,
                end_col_offset=end_column,
                source_file=self.source_file,
            )
            object.__setattr__(self, "_location", cached)
        return cached

    @property
    def level(self) -> int:
        """Heading level of a SECTION_MARKER (its number of ``=``).

        Raises:
            ValueError: If the token is not a section marker.
        """
        if self.type is not TokenType.SECTION_MARKER:
            raise ValueError(f"{self.type.name} token has no section level")
        return len(self.value)

    @property
    def description(self) -> str:
        """Wording for this token in failure messages."""
        if self.type is TokenType.SECTION_MARKER:
            return f"level {len(self.value)} section marker ({self.value})"
        return _DESCRIPTIONS[self.type]

    def __repr__(self) -> str:
        shown = self.value if len(self.value) <= 20 else self.value[:17] + "..."
        return f"Token({self.type.name}, {shown!r}, {self.line}:{self.column})"
