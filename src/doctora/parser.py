"""Recursive descent parser producing typed AST.

Consumes a materialized token stream and builds typed AST nodes.
Produces immutable (frozen) dataclass nodes for thread-safety.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token stream traversal
- `RecoveryMixin`: Failure recording and resynchronization
- `InlineParsingMixin`: Bold, italic and text
- `BlockParsingMixin`: Sections and paragraphs

Thread Safety:
- Parser instances are single-use; parse() creates one per call
- Configuration is read from ContextVar (thread-local)
- Safe to share the resulting AST across threads

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from doctora.config import get_parse_config
from doctora.errors import ParseError, ParseFailure
from doctora.nodes import Document
from doctora.parsing import (
    BlockParsingMixin,
    ErrorCollector,
    InlineParsingMixin,
    RecoveryMixin,
    TokenNavigationMixin,
)
from doctora.tokens import Token
from doctora.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of a parse: the (possibly partial) tree plus every failure.

    Attributes:
        document: The parsed document. When ``errors`` is non-empty this is
            the partial tree built around the failures.
        errors: Failures in source order.

    """

    document: Document
    errors: tuple[ParseFailure, ...] = ()

    @property
    def ok(self) -> bool:
        """True when the parse recorded no failures."""
        return not self.errors

    def unwrap(self) -> Document:
        """Return the document, or raise ParseError if any failure was recorded.

        Raises:
            ParseError: Carrying every recorded failure.
        """
        if self.errors:
            raise ParseError(self.errors)
        return self.document


class Parser(
    TokenNavigationMixin,
    RecoveryMixin,
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Recursive descent parser for the doctora markup subset.

    Usage:
            >>> from doctora.lexer import tokenize
            >>> result = Parser(tokenize("= Hello\\n\\nWorld")).parse()
            >>> result.document.children[0]
        Section(level=1, title=(Text(content='Hello'),), ...)

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
        "_errors",
        "_max_nesting_depth",
    )

    def __init__(self, tokens: Sequence[Token]) -> None:
        """Initialize parser with a materialized token sequence.

        Configuration is read from ContextVar, not passed as parameters.

        Args:
            tokens: Tokens in source order
        """
        self._tokens = tokens
        self._tokens_len = len(tokens)
        self._pos = 0
        self._current: Token | None = tokens[0] if tokens else None
        self._errors = ErrorCollector()
        self._max_nesting_depth = get_parse_config().max_nesting_depth

    def parse(self) -> ParseResult:
        """Parse the token stream.

        Returns:
            ParseResult with the document and any recorded failures
        """
        document = self._parse_document()
        errors = self._errors.errors()
        if errors:
            logger.debug(
                "Parsed %d tokens into %d top-level blocks with %d failure(s)",
                self._tokens_len,
                len(document.children),
                len(errors),
            )
        return ParseResult(document=document, errors=errors)
