"""Typed AST nodes for doctora.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Document
├── Block (block-level elements)
│   ├── Section
│   └── Paragraph
└── Inline (inline elements)
    ├── Text
    ├── Bold
    └── Italic

Equality is structural: ``location`` is excluded from comparison, so the
same document parsed from differently spaced source compares equal.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from doctora.location import SourceLocation
from doctora.tokens import MAX_SECTION_LEVEL

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation = field(compare=False)


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    One TEXT token's value, verbatim.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold text.

    Markup: **text**

    """

    children: tuple[Inline, ...]

    def __post_init__(self) -> None:
        if not self.children:
            raise ValueError("Bold must contain at least one inline node")


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic text.

    Markup: _text_

    """

    children: tuple[Inline, ...]

    def __post_init__(self) -> None:
        if not self.children:
            raise ValueError("Italic must contain at least one inline node")


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph: one line of inline content.

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Section(Node):
    """Section: a heading line plus every block up to the next heading of
    the same or shallower level.

    Markup: = Title through ====== Title

    """

    level: int
    title: tuple[Inline, ...]
    children: tuple[Block, ...] = ()

    def __post_init__(self) -> None:
        if not 1 <= self.level <= MAX_SECTION_LEVEL:
            raise ValueError(
                f"Section level must be between 1 and {MAX_SECTION_LEVEL}, got {self.level}"
            )


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: owns every top-level block."""

    children: tuple[Block, ...] = ()


# =============================================================================
# Type Aliases
# =============================================================================

Inline: TypeAlias = Text | Bold | Italic
Block: TypeAlias = Section | Paragraph


__all__ = [
    "Block",
    "Bold",
    "Document",
    "Inline",
    "Italic",
    "Node",
    "Paragraph",
    "Section",
    "Text",
]
