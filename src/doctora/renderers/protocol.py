"""ASTRenderer protocol: stable interface for AST renderers.

Any renderer that implements ``render(node) -> str`` conforms to this protocol.
The built-in ``TextRenderer`` is the reference implementation.

Example:
    from doctora.renderers.protocol import ASTRenderer

    def render_page(renderer: ASTRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from doctora.nodes import Document


class ASTRenderer(Protocol):
    """Protocol for AST renderers."""

    def render(self, node: Document) -> str:
        """Render a Document AST to a string."""
        ...
