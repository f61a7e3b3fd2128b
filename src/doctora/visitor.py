"""Walking and rewriting doctora trees.

``BaseVisitor`` walks a tree top-down, calling one ``visit_*`` hook per node
type. ``transform`` rebuilds a tree bottom-up through a function, sharing
every subtree the function leaves alone.

Example (list every section title):

    class Outline(BaseVisitor[None]):
        def __init__(self) -> None:
            self.titles: list[str] = []

        def visit_section(self, node: Section) -> None:
            self.titles.append(" ".join(text_leaves(node)))

    outline = Outline()
    outline.visit(doc)

Example (promote every section one level):

    def promote(node: Node) -> Node:
        if isinstance(node, Section) and node.level > 1:
            return dataclasses.replace(node, level=node.level - 1)
        return node

    flatter = transform(doc, promote)

Thread Safety:
    A visitor usually accumulates state, so use one instance per thread.
    ``transform`` has no state of its own.

"""

import dataclasses
from collections.abc import Callable
from typing import Generic, TypeAlias, TypeVar

from doctora.nodes import Bold, Document, Italic, Node, Paragraph, Section, Text

NodeFn: TypeAlias = Callable[[Node], Node | None]

T = TypeVar("T")


class BaseVisitor(Generic[T]):
    """Top-down visitor.

    Override the ``visit_*`` hooks you need; the rest call ``visit_default``.
    ``visit`` returns the hook's result for the node it was given, then
    descends into the node's children. A Section's title is visited before
    its body.

    """

    def visit(self, node: Node) -> T:
        result = self._hook(node)
        for child in _children_of(node):
            self.visit(child)
        return result

    def visit_default(self, node: Node) -> T:
        return None  # type: ignore[return-value]

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_section(self, node: Section) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def _hook(self, node: Node) -> T:
        match node:
            case Text():
                return self.visit_text(node)
            case Bold():
                return self.visit_bold(node)
            case Italic():
                return self.visit_italic(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case Section():
                return self.visit_section(node)
            case Document():
                return self.visit_document(node)
            case _:
                return self.visit_default(node)


def _children_of(node: Node) -> tuple[Node, ...]:
    match node:
        case Section():
            return (*node.title, *node.children)
        case Document() | Paragraph() | Bold() | Italic():
            return node.children
        case _:
            return ()


def transform(doc: Document, fn: NodeFn) -> Document:
    """Rebuild ``doc`` by passing every node through ``fn``, children first.

    ``fn`` returns the node to keep (the same object, or a replacement) or
    None to delete it. A Bold or Italic whose children were all deleted is
    deleted too. Subtrees ``fn`` did not touch are reused, not copied.

    Raises:
        TypeError: If ``fn`` deletes the Document or replaces it with
            something that is not a Document.
    """
    result = _rebuild(doc, fn)
    if not isinstance(result, Document):
        raise TypeError(
            "transform fn must return a Document for the root (cannot remove root)"
        )
    return result


def _rebuild(node: Node, fn: NodeFn) -> Node | None:
    match node:
        case Section():
            title = _rebuild_all(node.title, fn)
            children = _rebuild_all(node.children, fn)
            if title is not node.title or children is not node.children:
                node = dataclasses.replace(node, title=title, children=children)
        case Bold() | Italic():
            children = _rebuild_all(node.children, fn)
            if not children:
                return None
            if children is not node.children:
                node = dataclasses.replace(node, children=children)
        case Document() | Paragraph():
            children = _rebuild_all(node.children, fn)
            if children is not node.children:
                node = dataclasses.replace(node, children=children)
    return fn(node)


def _rebuild_all(nodes: tuple, fn: NodeFn) -> tuple:
    """Rebuild a child tuple; returns ``nodes`` itself when nothing changed."""
    rebuilt = []
    changed = False
    for child in nodes:
        new = _rebuild(child, fn)
        if new is not child:
            changed = True
        if new is not None:
            rebuilt.append(new)
    return tuple(rebuilt) if changed else nodes
