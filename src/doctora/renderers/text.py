"""Canonical markup renderer.

Writes a Document back out as markup text in one normalized layout:

- every block is followed by a blank line
- a section is its heading line followed by its children
- inline nodes are separated by single spaces
- a paragraph starting with a bare ``=`` run is indented by one space

Re-tokenizing and re-parsing the output yields an equal tree.

Example:
    >>> from doctora import parse_text, render
    >>> render(parse_text("=  Title\\nSome   **bold**  text").document)
    '= Title\\n\\nSome **bold** text\\n'
"""

from doctora.errors import RenderError
from doctora.nodes import Block, Bold, Document, Inline, Italic, Paragraph, Section, Text
from doctora.stringbuilder import StringBuilder
from doctora.tokens import MAX_SECTION_LEVEL


class TextRenderer:
    """Render AST to canonical markup text."""

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document to canonical markup."""
        sb = StringBuilder()
        for child in node.children:
            self._render_block(child, sb)
        return sb.build()

    def _render_block(self, block: Block, sb: StringBuilder) -> None:
        match block:
            case Section():
                sb.append("=" * block.level).append(" ")
                sb.append(self.render_inlines(block.title)).end_block()
                for child in block.children:
                    self._render_block(child, sb)
            case Paragraph():
                if block.children and _looks_like_marker(block.children[0]):
                    # Markers only start at column 1
                    sb.append(" ")
                sb.append(self.render_inlines(block.children)).end_block()
            case _:
                raise RenderError(f"Cannot render block node {type(block).__name__}")

    def render_inlines(self, nodes: tuple[Inline, ...]) -> str:
        """Render an inline sequence, words separated by single spaces."""
        return " ".join(self._render_inline(node) for node in nodes)

    def _render_inline(self, node: Inline) -> str:
        match node:
            case Text():
                return node.content
            case Bold():
                return f"**{self.render_inlines(node.children)}**"
            case Italic():
                return f"_{self.render_inlines(node.children)}_"
            case _:
                raise RenderError(f"Cannot render inline node {type(node).__name__}")


def _looks_like_marker(node: Inline) -> bool:
    """True for a Text that would lex as a section marker at line start."""
    return (
        isinstance(node, Text)
        and 1 <= len(node.content) <= MAX_SECTION_LEVEL
        and node.content.count("=") == len(node.content)
    )
