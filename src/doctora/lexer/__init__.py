"""Scanner for the doctora markup subset.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
└── core.py              # Lexer class (line scanning + newline folding)

Usage:
    >>> from doctora.lexer import tokenize
    >>> [t.type.name for t in tokenize("= Title\\n")]
    ['SECTION_MARKER', 'TEXT', 'LINE_BREAK']

"""

from doctora.lexer.core import Lexer
from doctora.tokens import Token


def tokenize(source: str, source_file: str | None = None) -> list[Token]:
    """Tokenize source text into a materialized token list."""
    return list(Lexer(source, source_file).tokenize())


__all__ = ["Lexer", "tokenize"]
