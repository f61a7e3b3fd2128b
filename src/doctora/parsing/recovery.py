"""Error collection and resynchronization for the doctora parser.

The parser never stops at the first failure. Each failure is recorded in an
ErrorCollector, and block-level failures are followed by the synchronization
production::

    synchronize := (any token except BlockSeparator | SectionMarker)*

which leaves the cursor on the next block separator or section marker (or at
end of input), where block parsing can resume.

Thread Safety:
ErrorCollector instances are per-parse state. Create one per parse.

"""

from doctora.errors import ParseFailure
from doctora.tokens import Token, TokenType
from doctora.utils.logger import get_logger

logger = get_logger(__name__)

# Tokens where block parsing can resume after a failure
SYNC_TOKEN_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.BLOCK_SEPARATOR, TokenType.SECTION_MARKER}
)


class ErrorCollector:
    """Accumulates parse failures in source order.

    Supports mark/rollback so a speculative parse can discard the failures
    it recorded.

    Usage:
            >>> errors = ErrorCollector()
            >>> mark = errors.mark()
            >>> errors.record(InvalidStructure("too deep"))
            >>> errors.rollback(mark)
            >>> errors.has_errors()
            False

    """

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: list[ParseFailure] = []

    def record(self, failure: ParseFailure) -> None:
        """Record a failure."""
        self._errors.append(failure)

    def mark(self) -> int:
        """Return a marker for the current number of failures."""
        return len(self._errors)

    def rollback(self, mark: int) -> None:
        """Discard every failure recorded after ``mark``."""
        del self._errors[mark:]

    def has_errors(self) -> bool:
        return bool(self._errors)

    def errors(self) -> tuple[ParseFailure, ...]:
        """Failures recorded so far, in source order."""
        return tuple(sorted(self._errors, key=lambda f: f.location.offset))

    def __len__(self) -> int:
        return len(self._errors)


class RecoveryMixin:
    """Mixin providing failure recording and the synchronization production.

    Required Host Attributes:
        - _errors: ErrorCollector
        - _pos: int
        - _current: Token | None

    Required Host Methods:
        - _at_end() -> bool
        - _advance() -> Token | None

    """

    _errors: ErrorCollector
    _pos: int
    _current: Token | None

    def _record(self, failure: ParseFailure) -> None:
        """Record a failure and keep parsing."""
        logger.debug("Recovering from parse failure: %s", failure)
        self._errors.record(failure)

    def _synchronize(self) -> None:
        """Skip to the next block separator or section marker."""
        start = self._pos
        while not self._at_end():
            assert self._current is not None
            if self._current.type in SYNC_TOKEN_TYPES:
                break
            self._advance()
        if self._pos != start:
            logger.debug(
                "Resynchronized at token %d after skipping %d token(s)",
                self._pos,
                self._pos - start,
            )
