"""Extract plain text from doctora AST nodes.

Example:
    >>> from doctora import parse_text, extract_text
    >>> doc = parse_text("= Hello **World**\\n").document
    >>> extract_text(doc.children[0])
    'Hello World'
"""

from doctora.nodes import Bold, Document, Italic, Node, Paragraph, Section, Text


def text_leaves(node: Node) -> list[str]:
    """Content of every Text leaf under ``node``, in document order.

    For a Section only the title is walked; use ``extract_text`` for the
    whole subtree.
    """
    match node:
        case Text():
            return [node.content]
        case Bold() | Italic() | Paragraph():
            return [leaf for child in node.children for leaf in text_leaves(child)]
        case Section():
            return [leaf for child in node.title for leaf in text_leaves(child)]
        case _:
            return []


def extract_text(node: Node) -> str:
    """Extract plain text from any AST node.

    Words are joined by single spaces; blocks are joined by single spaces.
    """
    match node:
        case Text():
            return node.content
        case Bold() | Italic() | Paragraph():
            return " ".join(extract_text(c) for c in node.children)
        case Section():
            title = " ".join(extract_text(c) for c in node.title)
            return " ".join([title, *(extract_text(c) for c in node.children)])
        case Document():
            return " ".join(extract_text(c) for c in node.children)
        case _:
            return ""


def inline_depth(node: Node) -> int:
    """Deepest Bold/Italic nesting under ``node`` (0 when there is none)."""
    match node:
        case Text():
            return 0
        case Bold() | Italic():
            return 1 + max(inline_depth(c) for c in node.children)
        case Paragraph():
            return max((inline_depth(c) for c in node.children), default=0)
        case Section():
            return max(
                (inline_depth(c) for c in (*node.title, *node.children)), default=0
            )
        case Document():
            return max((inline_depth(c) for c in node.children), default=0)
        case _:
            return 0
