"""Parsing subsystem for the doctora parser.

Provides mixin classes for modular parsing functionality:
- `TokenNavigationMixin`: Token stream traversal
- `RecoveryMixin`: Failure recording and resynchronization
- `InlineParsingMixin`: Bold, italic and text spans
- `BlockParsingMixin`: Sections and paragraphs

Example:
    >>> from doctora.parsing import (
    ...     BlockParsingMixin,
    ...     InlineParsingMixin,
    ...     RecoveryMixin,
    ...     TokenNavigationMixin,
    ... )
    >>> class Parser(TokenNavigationMixin, RecoveryMixin, InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from doctora.parsing.blocks import BlockParsingMixin
from doctora.parsing.inline import InlineParsingMixin
from doctora.parsing.recovery import ErrorCollector, RecoveryMixin
from doctora.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "BlockParsingMixin",
    "ErrorCollector",
    "InlineParsingMixin",
    "RecoveryMixin",
    "TokenNavigationMixin",
]
