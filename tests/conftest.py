"""Shared fixtures for doctora tests."""

from collections.abc import Callable

import pytest

from doctora.tokens import Token, TokenType

_SHORTHAND = {
    "\n": TokenType.LINE_BREAK,
    "\n\n": TokenType.BLOCK_SEPARATOR,
    "**": TokenType.BOLD_DELIMITER,
    "_": TokenType.ITALIC_DELIMITER,
}


def build_tokens(*values: str) -> list[Token]:
    """Build a token list from shorthand values.

    ``=`` runs are section markers, ``**``/``_`` are delimiters, ``\\n`` and
    ``\\n\\n`` are line breaks and separators; anything else is TEXT.
    Tokens are laid out one space apart so offsets increase.
    """
    tokens = []
    offset = 0
    lineno = 1
    col = 1
    for value in values:
        if value and set(value) == {"="}:
            token_type = TokenType.SECTION_MARKER
        else:
            token_type = _SHORTHAND.get(value, TokenType.TEXT)
        tokens.append(
            Token(
                type=token_type,
                value=value,
                line=lineno,
                column=col,
                start=offset,
                end=offset + len(value),
            )
        )
        offset += len(value) + 1
        if "\n" in value:
            lineno += value.count("\n")
            col = 1
        else:
            col += len(value) + 1
    return tokens


@pytest.fixture
def make_tokens() -> Callable[..., list[Token]]:
    """Token list builder for inputs the lexer cannot produce."""
    return build_tokens
