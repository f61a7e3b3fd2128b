"""Renderers for doctora AST.

Available renderers:
- TextRenderer: canonical markup text

"""

from doctora.renderers.protocol import ASTRenderer
from doctora.renderers.text import TextRenderer

__all__ = ["ASTRenderer", "TextRenderer"]
