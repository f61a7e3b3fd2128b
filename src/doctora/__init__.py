"""
doctora: token-stream parser for a lightweight AsciiDoc-style markup.

Turns a flat token sequence into a typed, immutable document tree:
sections nested by heading level, paragraphs, and nested bold/italic spans.
Parsing never stops at the first problem; every failure is reported with
its source location alongside the partial tree.

Quick Start:
    >>> from doctora import parse_text
    >>> result = parse_text("= Hello\\n\\nSome **bold** text\\n")
    >>> result.ok
    True
    >>> section = result.document.children[0]
    >>> section.level, section.children[0].children[1]
    (1, Bold(children=(Text(content='bold'),), ...))

    >>> # Token-level entry point
    >>> from doctora import parse, tokenize
    >>> parse(tokenize("**word")).errors
    (UnclosedDelimiter(kind='bold', opening_position=0),)

Installation:
    pip install doctora              # zero runtime dependencies
"""

from collections.abc import Sequence

from doctora.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from doctora.errors import (
    DoctoraError,
    InvalidStructure,
    ParseError,
    ParseFailure,
    RenderError,
    UnclosedDelimiter,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from doctora.lexer import Lexer, tokenize
from doctora.location import SourceLocation
from doctora.nodes import (
    Block,
    Bold,
    Document,
    Inline,
    Italic,
    Node,
    Paragraph,
    Section,
    Text,
)
from doctora.parser import ParseResult, Parser
from doctora.renderers.protocol import ASTRenderer
from doctora.renderers.text import TextRenderer
from doctora.text import extract_text
from doctora.tokens import Token, TokenType
from doctora.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(tokens: Sequence[Token]) -> ParseResult:
    """Parse a token sequence into a document tree.

    Args:
        tokens: Materialized tokens in source order (see ``tokenize``)

    Returns:
        ParseResult holding the document and every recorded failure. The
        document is the full tree when ``result.ok``, otherwise the partial
        tree built around the failures.

    Example:
        >>> result = parse(tokenize("= A\\n\\n= B\\n"))
        >>> [s.level for s in result.document.children]
        [1, 1]

    """
    return Parser(tokens).parse()


def parse_text(source: str, *, source_file: str | None = None) -> ParseResult:
    """Tokenize and parse markup source text.

    Args:
        source: Markup source text
        source_file: Optional source file path, carried into every location

    Returns:
        ParseResult (see ``parse``)

    """
    return parse(tokenize(source, source_file))


def render(doc: Document) -> str:
    """Render a document back to canonical markup text.

    Example:
        >>> render(parse_text("=  Title\\n").document)
        '= Title\\n'

    """
    return TextRenderer().render(doc)


__all__ = [
    # Main API
    "parse",
    "parse_text",
    "render",
    # Core classes
    "Lexer",
    "Parser",
    "ParseResult",
    "tokenize",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Tokens
    "Token",
    "TokenType",
    # Location
    "SourceLocation",
    # AST nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Section",
    "Paragraph",
    "Text",
    "Bold",
    "Italic",
    # Failures and errors
    "ParseFailure",
    "UnexpectedToken",
    "UnclosedDelimiter",
    "InvalidStructure",
    "UnexpectedEndOfInput",
    "DoctoraError",
    "ParseError",
    "RenderError",
    # Renderers and traversal
    "ASTRenderer",
    "TextRenderer",
    "BaseVisitor",
    "transform",
    "extract_text",
]
