"""Exception classes and structured parse failures for doctora.

Two layers:

- Parse failures (``ParseFailure`` and subclasses) are frozen values. The
  parser records them and keeps going, so one pass reports every problem.
- Exceptions (``DoctoraError`` and subclasses) are raised when a caller asks
  for a result that cannot be produced, e.g. ``ParseResult.unwrap()`` on a
  document that had failures.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from doctora.location import SourceLocation

DelimiterKind: TypeAlias = Literal["bold", "italic"]


# =============================================================================
# Structured parse failures
# =============================================================================


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Base class for structured parse failures.

    Subclasses provide ``message``.

    ``location`` points at the offending token in source text. It is excluded
    from comparison so failures can be matched by their structured fields.

    """

    location: SourceLocation = field(
        default_factory=SourceLocation.unknown, compare=False, repr=False, kw_only=True
    )

    def __str__(self) -> str:
        if self.location.lineno:
            return f"{self.location} {self.message}"
        return self.message


@dataclass(frozen=True, slots=True)
class UnexpectedToken(ParseFailure):
    """A token matched no alternative of the production being parsed."""

    position: int
    expected: str
    actual: str

    @property
    def message(self) -> str:
        return (
            f"unexpected token at position {self.position}: "
            f"expected {self.expected}, got {self.actual}"
        )


@dataclass(frozen=True, slots=True)
class UnclosedDelimiter(ParseFailure):
    """An inline span was opened but never closed."""

    kind: DelimiterKind
    opening_position: int

    @property
    def message(self) -> str:
        return f"unclosed {self.kind} delimiter starting at position {self.opening_position}"


@dataclass(frozen=True, slots=True)
class InvalidStructure(ParseFailure):
    """Input is well-formed token by token but violates a structural limit."""

    message: str


@dataclass(frozen=True, slots=True)
class UnexpectedEndOfInput(ParseFailure):
    """A production needed at least one more token."""

    context: str

    @property
    def message(self) -> str:
        return f"unexpected end of input: {self.context}"


# =============================================================================
# Exceptions
# =============================================================================


class DoctoraError(Exception):
    """Base exception for all doctora errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(DoctoraError):
    """Error raised when a parse produced failures and a clean tree was required.

    The message is prefixed with the location of the first failure; every
    failure is available on ``failures``.
    """

    def __init__(
        self,
        failures: Sequence[ParseFailure],
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error from recorded failures.

        Args:
            failures: Failures recorded during the parse (at least one)
            source_file: Path to source file (optional)
        """
        self.failures = tuple(failures)
        first = self.failures[0] if self.failures else None
        self.lineno = first.location.lineno if first and first.location.lineno else None
        self.col_offset = first.location.col_offset if self.lineno is not None else None
        self.source_file = source_file or (first.location.source_file if first else None)

        # Build formatted message
        location = ""
        if self.source_file:
            location = f"{self.source_file}:"
        if self.lineno is not None:
            location += f"{self.lineno}:"
            if self.col_offset is not None:
                location += f"{self.col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        message = first.message if first else "parse failed"
        extra = len(self.failures) - 1
        if extra > 0:
            message += f" (and {extra} more error{'s' if extra > 1 else ''})"

        super().__init__(f"{location}{message}")


class RenderError(DoctoraError):
    """Error during rendering.

    Raised when a renderer encounters a node it cannot handle.
    """

    pass
