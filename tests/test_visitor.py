"""Tests for BaseVisitor and transform()."""

import dataclasses

import pytest

from doctora import parse_text
from doctora.nodes import Bold, Document, Italic, Node, Paragraph, Section, Text
from doctora.visitor import BaseVisitor, transform


def _doc(source: str) -> Document:
    return parse_text(source).unwrap()


class _Counter(BaseVisitor[None]):
    def __init__(self) -> None:
        self.counts: dict[str, int] = {}

    def visit_default(self, node: Node) -> None:
        name = type(node).__name__
        self.counts[name] = self.counts.get(name, 0) + 1


class _WordCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.words: list[str] = []

    def visit_text(self, node: Text) -> None:
        self.words.append(node.content)


class TestBaseVisitor:
    def test_counts_every_node(self) -> None:
        counter = _Counter()
        counter.visit(_doc("= A **b**\n\none _two_\n\n== C\n"))
        assert counter.counts == {
            "Document": 1,
            "Section": 2,
            "Paragraph": 1,
            "Text": 5,
            "Bold": 1,
            "Italic": 1,
        }

    def test_title_walked_before_children(self) -> None:
        collector = _WordCollector()
        collector.visit(_doc("= Title\n\nbody\n\n== Sub\n"))
        assert collector.words == ["Title", "body", "Sub"]

    def test_return_value_from_visit(self) -> None:
        class LevelVisitor(BaseVisitor[int | None]):
            def visit_section(self, node: Section) -> int:
                return node.level

        section = _doc("=== Deep").children[0]
        assert LevelVisitor().visit(section) == 3

    def test_default_returns_none(self) -> None:
        assert BaseVisitor().visit(_doc("text")) is None


class TestTransform:
    def test_identity_returns_same_nodes(self) -> None:
        doc = _doc("= A\n\nsome **text**\n")
        assert transform(doc, lambda node: node) is doc

    def test_demote_sections(self) -> None:
        def demote(node: Node) -> Node:
            if isinstance(node, Section):
                return dataclasses.replace(node, level=min(node.level + 1, 6))
            return node

        new = transform(_doc("= A\n\n== B\n"), demote)
        outer = new.children[0]
        assert outer.level == 2
        assert outer.children[0].level == 3

    def test_uppercase_text(self) -> None:
        def upper(node: Node) -> Node:
            if isinstance(node, Text):
                return dataclasses.replace(node, content=node.content.upper())
            return node

        new = transform(_doc("a **b**"), upper)
        para = new.children[0]
        assert para.children[0].content == "A"
        assert para.children[1].children[0].content == "B"

    def test_remove_node(self) -> None:
        new = transform(
            _doc("keep\n\ndrop\n"),
            lambda node: None
            if isinstance(node, Paragraph) and node.children[0].content == "drop"
            else node,
        )
        assert len(new.children) == 1

    def test_span_emptied_by_removal_is_dropped(self) -> None:
        def drop_secret(node: Node) -> Node | None:
            if isinstance(node, Text) and node.content == "secret":
                return None
            return node

        new = transform(_doc("a **_secret_** b"), drop_secret)
        para = new.children[0]
        assert [type(c) for c in para.children] == [Text, Text]

    def test_location_only_change_is_kept(self) -> None:
        doc = _doc("word")
        marker = doc.children[0].children[0].location

        def relocate(node: Node) -> Node:
            if isinstance(node, Text):
                return dataclasses.replace(node, location=dataclasses.replace(marker, lineno=9))
            return node

        new = transform(doc, relocate)
        assert new.children[0].children[0].location.lineno == 9

    def test_cannot_remove_root(self) -> None:
        with pytest.raises(TypeError, match="cannot remove root"):
            transform(_doc("x"), lambda node: None if isinstance(node, Document) else node)

    def test_original_unchanged(self) -> None:
        doc = _doc("_a_")
        transform(doc, lambda node: None if isinstance(node, Italic) else node)
        assert isinstance(doc.children[0].children[0], Italic)

    def test_bold_rebuilt_when_child_changes(self) -> None:
        def swap(node: Node) -> Node:
            if isinstance(node, Text) and node.content == "x":
                return dataclasses.replace(node, content="y")
            return node

        new = transform(_doc("**x z**"), swap)
        bold = new.children[0].children[0]
        assert isinstance(bold, Bold)
        assert [c.content for c in bold.children] == ["y", "z"]
