"""Line-oriented scanner producing the doctora token stream.

Scans one line at a time: classify the line start (section marker or not),
then split the rest of the line into words and delimiters, then fold the
newlines that follow into a LINE_BREAK or BLOCK_SEPARATOR.

No regex. Every branch advances the position, so scanning is O(n).

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from doctora.tokens import MAX_SECTION_LEVEL, Token, TokenType


class Lexer:
    """Scanner for the doctora markup subset.

    Token rules:
        - ``=`` through ``======`` at the start of a line, followed by
          whitespace or end of line: SECTION_MARKER
        - ``**``: BOLD_DELIMITER
        - ``_``: ITALIC_DELIMITER
        - spaces and tabs: skipped
        - any other run of characters: TEXT (one token per word)
        - one newline: LINE_BREAK
        - two or more newlines (whitespace-only lines count): BLOCK_SEPARATOR

    Leading blank lines produce no tokens.

    Usage:
            >>> for token in Lexer("= Hello\\n\\nSome **bold**").tokenize():
            ...     print(token)
        Token(SECTION_MARKER, '=', 1:1)
        Token(TEXT, 'Hello', 1:3)
        Token(BLOCK_SEPARATOR, '\\n\\n', 1:8)
        Token(TEXT, 'Some', 3:1)
        Token(BOLD_DELIMITER, '**', 3:6)
        Token(TEXT, 'bold', 3:8)
        Token(BOLD_DELIMITER, '**', 3:12)

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_emitted",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markup source text
            source_file: Optional source file path, copied into every token
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._emitted = False

    def tokenize(self) -> Iterator[Token]:
        """Tokenize the source.

        Yields:
            Tokens in source order
        """
        while self._pos < self._source_len:
            yield from self._scan_line()
            newline = self._scan_newlines()
            if newline is not None:
                yield newline

    # =========================================================================
    # Line scanning
    # =========================================================================

    def _scan_line(self) -> Iterator[Token]:
        """Scan one line up to (not including) its newline."""
        marker = self._scan_section_marker()
        if marker is not None:
            yield marker

        source = self._source
        while self._pos < self._source_len:
            char = source[self._pos]
            if self._is_newline_at(self._pos):
                return
            if char.isspace():
                self._skip(1)
            elif char == "*" and source.startswith("**", self._pos):
                yield self._emit(TokenType.BOLD_DELIMITER, 2)
            elif char == "_":
                yield self._emit(TokenType.ITALIC_DELIMITER, 1)
            else:
                yield self._emit(TokenType.TEXT, self._word_length())

    def _scan_section_marker(self) -> Token | None:
        """Classify the line start as a section marker.

        A marker is 1-6 ``=`` at column 1 followed by whitespace or end of line.
        """
        if self._col != 1:
            return None
        source = self._source
        count = 0
        while (
            self._pos + count < self._source_len
            and source[self._pos + count] == "="
            and count <= MAX_SECTION_LEVEL
        ):
            count += 1
        if not 1 <= count <= MAX_SECTION_LEVEL:
            return None
        end = self._pos + count
        if end < self._source_len and not source[end].isspace():
            return None
        return self._emit(TokenType.SECTION_MARKER, count)

    def _word_length(self) -> int:
        """Length of the word starting at the current position."""
        source = self._source
        end = self._pos
        while end < self._source_len:
            char = source[end]
            if char.isspace() or char == "_":
                break
            if char == "*" and source.startswith("**", end):
                break
            end += 1
        return end - self._pos

    # =========================================================================
    # Newline folding
    # =========================================================================

    def _scan_newlines(self) -> Token | None:
        """Fold the newline run at the current position into one token.

        Whitespace-only lines between newlines belong to the run. Returns
        None at end of input or for leading blank lines.
        """
        width = self._newline_width(self._pos)
        if not width:
            return None

        start = self._pos
        start_lineno, start_col = self._lineno, self._col
        end = start + width
        count = 1
        while True:
            probe = end
            while probe < self._source_len and self._is_blank_char(probe):
                probe += 1
            next_width = self._newline_width(probe)
            if not next_width:
                break
            end = probe + next_width
            count += 1

        value = self._source[start:end]
        self._pos = end
        self._lineno += count
        self._col = 1

        if not self._emitted:
            return None
        token_type = TokenType.LINE_BREAK if count == 1 else TokenType.BLOCK_SEPARATOR
        return Token(
            type=token_type,
            value=value,
            line=start_lineno,
            column=start_col,
            start=start,
            end=end,
            source_file=self._source_file,
        )

    def _newline_width(self, pos: int) -> int:
        """Width of the newline at pos: 1 for ``\\n``, 2 for ``\\r\\n``, else 0."""
        source = self._source
        if pos >= self._source_len:
            return 0
        if source[pos] == "\n":
            return 1
        if source.startswith("\r\n", pos):
            return 2
        return 0

    def _is_newline_at(self, pos: int) -> bool:
        return self._newline_width(pos) > 0

    def _is_blank_char(self, pos: int) -> bool:
        char = self._source[pos]
        return char.isspace() and not self._is_newline_at(pos)

    # =========================================================================
    # Emission
    # =========================================================================

    def _skip(self, count: int) -> None:
        self._pos += count
        self._col += count

    def _emit(self, token_type: TokenType, length: int) -> Token:
        """Create a token covering the next ``length`` characters and advance."""
        start = self._pos
        token = Token(
            type=token_type,
            value=self._source[start : start + length],
            line=self._lineno,
            column=self._col,
            start=start,
            end=start + length,
            source_file=self._source_file,
        )
        self._skip(length)
        self._emitted = True
        return token
