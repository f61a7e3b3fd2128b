"""Token navigation utilities for the doctora parser.

Provides mixin for token stream navigation and inline run scanning.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from doctora.tokens import INLINE_TOKEN_TYPES, Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _tokens_len: int (cached len(_tokens) for hot loops)
        - _pos: int
        - _current: Token | None

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token | None

    def _at_end(self) -> bool:
        """Check if at end of token stream."""
        return self._current is None

    def _advance(self) -> Token | None:
        """Advance to next token and return it."""
        self._pos += 1
        if self._pos < self._tokens_len:
            self._current = self._tokens[self._pos]
        else:
            self._current = None
        return self._current

    def _check(self, token_type: TokenType) -> bool:
        """Check whether the current token has the given type."""
        return self._current is not None and self._current.type is token_type

    def _inline_run_end(self) -> int:
        """Index one past the maximal run of inline tokens at the cursor."""
        end = self._pos
        tokens = self._tokens
        while end < self._tokens_len and tokens[end].type in INLINE_TOKEN_TYPES:
            end += 1
        return end
