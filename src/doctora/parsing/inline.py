"""Inline parsing for the doctora parser.

Recursive descent over a bounded run of inline tokens::

    inline := bold | italic | text
    bold   := BoldDelimiter inline+ BoldDelimiter
    italic := ItalicDelimiter inline+ ItalicDelimiter
    text   := TextRun

A delimiter closes the innermost open span when that span has the same kind.
Otherwise it opens a new span, so bold and italic alternate to any depth.
A delimiter never closes a span of the same kind that has another span
open inside it: ``**a _b** c_`` reports unclosed delimiters instead of
guessing.

Recovery never drops text: an unclosed span's children are spliced into the
enclosing sequence, and an empty span produces no node.

Thread Safety:
All methods use instance-local state only.

"""

from doctora.errors import (
    DelimiterKind,
    InvalidStructure,
    UnclosedDelimiter,
    UnexpectedToken,
)
from doctora.nodes import Bold, Inline, Italic, Text
from doctora.tokens import Token, TokenType

_DELIMITER_KINDS: dict[TokenType, DelimiterKind] = {
    TokenType.BOLD_DELIMITER: "bold",
    TokenType.ITALIC_DELIMITER: "italic",
}


class _NestingTooDeep(Exception):
    """Unwinds an inline run whose span nesting exceeds the configured limit."""

    def __init__(self, token: Token, position: int) -> None:
        super().__init__(position)
        self.token = token
        self.position = position


class InlineParsingMixin:
    """Mixin for inline content parsing.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _pos: int
        - _current: Token | None
        - _errors: ErrorCollector
        - _max_nesting_depth: int

    Required Host Methods:
        - _advance() -> Token | None
        - _record(failure) -> None

    """

    def _parse_inline_run(self, end: int) -> tuple[Inline, ...]:
        """Parse tokens from the cursor up to ``end`` into inline nodes.

        The caller guarantees every token in the run is an inline token.
        On return the cursor is at ``end``.
        """
        start = self._pos
        mark = self._errors.mark()
        try:
            nodes = self._parse_inlines(end, None, 0)
        except _NestingTooDeep as exc:
            self._errors.rollback(mark)
            self._record(
                InvalidStructure(
                    f"inline nesting exceeds maximum depth of {self._max_nesting_depth}"
                    f" at position {exc.position}",
                    location=exc.token.location,
                )
            )
            return self._flatten_run(start, end)
        return tuple(nodes)

    def _parse_inlines(
        self, end: int, closing: TokenType | None, depth: int
    ) -> list[Inline]:
        """Parse ``inline*`` until ``end`` or a delimiter of kind ``closing``.

        Leaves the cursor on the closing delimiter without consuming it.
        """
        nodes: list[Inline] = []
        while self._pos < end:
            token = self._current
            assert token is not None
            if token.type is TokenType.TEXT:
                nodes.append(Text(location=token.location, content=token.value))
                self._advance()
            elif token.type is closing:
                break
            else:
                nodes.extend(self._parse_span(end, depth))
        return nodes

    def _parse_span(self, end: int, depth: int) -> list[Inline]:
        """Parse a bold or italic span starting at the cursor.

        Returns a list so recovery can splice children in place of the span.
        """
        opener = self._current
        assert opener is not None
        opener_pos = self._pos
        if depth >= self._max_nesting_depth:
            raise _NestingTooDeep(opener, opener_pos)

        kind = opener.type
        self._advance()
        children = self._parse_inlines(end, kind, depth + 1)

        if self._pos >= end:
            self._record(
                UnclosedDelimiter(
                    kind=_DELIMITER_KINDS[kind],
                    opening_position=opener_pos,
                    location=opener.location,
                )
            )
            return children

        closer = self._current
        assert closer is not None
        self._advance()
        if not children:
            self._record(
                UnexpectedToken(
                    position=opener_pos + 1,
                    expected="inline content",
                    actual=closer.description,
                    location=closer.location,
                )
            )
            return []

        location = opener.location.span_to(closer.location)
        if kind is TokenType.BOLD_DELIMITER:
            return [Bold(location=location, children=tuple(children))]
        return [Italic(location=location, children=tuple(children))]

    def _flatten_run(self, start: int, end: int) -> tuple[Inline, ...]:
        """Turn every TEXT token in ``[start, end)`` into a Text leaf.

        Used when a run cannot be parsed structurally; keeps every word.
        """
        nodes = tuple(
            Text(location=token.location, content=token.value)
            for token in self._tokens[start:end]
            if token.type is TokenType.TEXT
        )
        self._pos = end - 1
        self._advance()
        return nodes
