"""Block parsing for the doctora parser.

Grammar::

    document  := BlockSeparator* (block BlockSeparator*)* end-of-input
    block     := section | paragraph
    section   := SectionMarker title_tokens+ (LineBreak | BlockSeparator | end-of-input) block*
    paragraph := inline+ LineBreak?

Alternation is left-factored on the first token. Sections are nested with an
explicit stack of open sections keyed by level: a heading closes every open
section of the same or deeper level, then opens as a child of whatever
remains on top of the stack. Section nesting therefore never recurses.

"""

from __future__ import annotations

from doctora.errors import InvalidStructure, UnexpectedEndOfInput, UnexpectedToken
from doctora.location import SourceLocation
from doctora.nodes import Block, Document, Inline, Paragraph, Section
from doctora.tokens import INLINE_TOKEN_TYPES, MAX_SECTION_LEVEL, TokenType


class _OpenSection:
    """A section whose heading has been parsed but whose body is still open."""

    __slots__ = ("level", "title", "location", "children")

    def __init__(
        self, level: int, title: tuple[Inline, ...], location: SourceLocation
    ) -> None:
        self.level = level
        self.title = title
        self.location = location
        self.children: list[Block] = []

    def close(self) -> Section:
        location = self.location
        if self.children:
            location = location.span_to(self.children[-1].location)
        return Section(
            location=location,
            level=self.level,
            title=self.title,
            children=tuple(self.children),
        )


class BlockParsingMixin:
    """Mixin for block-level parsing.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _pos: int
        - _current: Token | None

    Required Host Methods:
        - _at_end() -> bool
        - _advance() -> Token | None
        - _check(token_type) -> bool
        - _inline_run_end() -> int
        - _parse_inline_run(end) -> tuple[Inline, ...]
        - _record(failure) -> None
        - _synchronize() -> None

    """

    def _parse_document(self) -> Document:
        """Parse the whole token stream into a Document."""
        root: list[Block] = []
        stack: list[_OpenSection] = []

        self._skip_block_separators()
        while not self._at_end():
            token = self._current
            assert token is not None
            if token.type is TokenType.SECTION_MARKER:
                section = self._parse_section_heading()
                if section is not None:
                    self._close_sections(stack, root, section.level)
                    stack.append(section)
            elif token.type in INLINE_TOKEN_TYPES:
                paragraph = self._parse_paragraph()
                if paragraph is not None:
                    (stack[-1].children if stack else root).append(paragraph)
            else:
                self._record(
                    UnexpectedToken(
                        position=self._pos,
                        expected="section marker or inline content",
                        actual=token.description,
                        location=token.location,
                    )
                )
                self._synchronize()
            self._skip_block_separators()

        self._close_sections(stack, root, 1)
        return Document(location=self._document_location(), children=tuple(root))

    def _close_sections(
        self, stack: list[_OpenSection], root: list[Block], level: int
    ) -> None:
        """Close every open section whose level is ``level`` or deeper."""
        while stack and stack[-1].level >= level:
            section = stack.pop().close()
            (stack[-1].children if stack else root).append(section)

    def _parse_section_heading(self) -> _OpenSection | None:
        """Parse a heading line: marker, title, and line terminator.

        Returns None when the heading has no usable title or level; the
        failure is recorded and the cursor is resynchronized. A title that
        inline recovery emptied (``= ****``) also yields None, after the
        line terminator has been consumed.
        """
        marker = self._current
        assert marker is not None
        level = marker.level
        self._advance()

        if not 1 <= level <= MAX_SECTION_LEVEL:
            self._record(
                InvalidStructure(
                    f"section level {level} is outside 1..{MAX_SECTION_LEVEL}",
                    location=marker.location,
                )
            )
            self._synchronize()
            return None

        run_end = self._inline_run_end()
        if run_end == self._pos:
            if self._at_end():
                self._record(
                    UnexpectedEndOfInput(
                        "section title", location=marker.location.end()
                    )
                )
            else:
                assert self._current is not None
                self._record(
                    UnexpectedToken(
                        position=self._pos,
                        expected="section title",
                        actual=self._current.description,
                        location=self._current.location,
                    )
                )
                self._synchronize()
            return None

        last_title_token = self._tokens[run_end - 1]
        title = self._parse_inline_run(run_end)
        section = _OpenSection(
            level, title, marker.location.span_to(last_title_token.location)
        )

        current = self._current
        if current is None or current.type is TokenType.BLOCK_SEPARATOR:
            pass
        elif current.type is TokenType.LINE_BREAK:
            self._advance()
        else:
            self._record(
                UnexpectedToken(
                    position=self._pos,
                    expected="line break after section title",
                    actual=current.description,
                    location=current.location,
                )
            )
            self._synchronize()
        if not title:
            return None
        return section

    def _parse_paragraph(self) -> Paragraph | None:
        """Parse ``inline+ LineBreak?``.

        Returns None when recovery left no inline content (e.g. ``****``).
        """
        first = self._current
        assert first is not None
        run_end = self._inline_run_end()
        last = self._tokens[run_end - 1]
        children = self._parse_inline_run(run_end)
        if self._check(TokenType.LINE_BREAK):
            self._advance()
        if not children:
            return None
        return Paragraph(
            location=first.location.span_to(last.location), children=children
        )

    def _skip_block_separators(self) -> None:
        while self._check(TokenType.BLOCK_SEPARATOR):
            self._advance()

    def _document_location(self) -> SourceLocation:
        if not self._tokens:
            return SourceLocation(lineno=1, col_offset=1)
        return self._tokens[0].location.span_to(self._tokens[-1].location)

