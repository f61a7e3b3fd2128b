"""Tests for block structure: documents, sections and paragraphs."""

from doctora import parse, parse_text
from doctora.location import SourceLocation
from doctora.nodes import Bold, Document, Paragraph, Section, Text
from doctora.text import extract_text

LOC = SourceLocation(lineno=1, col_offset=1)


def _text(s: str) -> Text:
    return Text(location=LOC, content=s)


def _para(*words: str) -> Paragraph:
    return Paragraph(location=LOC, children=tuple(_text(w) for w in words))


def _section(level: int, title: str, *children) -> Section:
    return Section(
        location=LOC,
        level=level,
        title=tuple(_text(w) for w in title.split()),
        children=children,
    )


def _doc(source: str) -> Document:
    result = parse_text(source)
    assert result.ok, result.errors
    return result.document


class TestEmptyInput:
    def test_empty_token_list(self) -> None:
        result = parse([])
        assert result.ok
        assert result.document == Document(location=LOC)

    def test_empty_source(self) -> None:
        assert _doc("").children == ()

    def test_blank_lines_only(self) -> None:
        assert _doc("\n\n   \n").children == ()

    def test_leading_separators_skipped(self, make_tokens) -> None:
        result = parse(make_tokens("\n\n", "word"))
        assert result.ok
        assert result.document.children == (_para("word"),)


class TestSectionNesting:
    """Sections nest by level using the open-section stack."""

    def test_single_section(self) -> None:
        assert _doc("= Title").children == (_section(1, "Title"),)

    def test_child_section(self) -> None:
        doc = _doc("= A\n\n== B\n")
        assert doc.children == (_section(1, "A", _section(2, "B")),)

    def test_sibling_sections(self) -> None:
        doc = _doc("= A\n\n= B\n")
        assert doc.children == (_section(1, "A"), _section(1, "B"))

    def test_deeper_then_shallower(self) -> None:
        source = "= T\n\nintro\n\n== S1\n\np1\n\n=== S1a\n\np2\n\n== S2\n\np3\n"
        doc = _doc(source)
        assert doc.children == (
            _section(
                1,
                "T",
                _para("intro"),
                _section(2, "S1", _para("p1"), _section(3, "S1a", _para("p2"))),
                _section(2, "S2", _para("p3")),
            ),
        )

    def test_skipped_levels(self) -> None:
        doc = _doc("= A\n\n=== C\n\n== B\n")
        assert doc.children == (_section(1, "A", _section(3, "C"), _section(2, "B")),)

    def test_shallower_section_after_deeper_start(self) -> None:
        doc = _doc("== B\n\n= A\n")
        assert doc.children == (_section(2, "B"), _section(1, "A"))

    def test_six_levels(self) -> None:
        source = "\n\n".join(f"{'=' * n} L{n}" for n in range(1, 7))
        section = _doc(source).children[0]
        levels = []
        while True:
            levels.append(section.level)
            if not section.children:
                break
            (section,) = section.children
        assert levels == [1, 2, 3, 4, 5, 6]

    def test_heading_directly_followed_by_text(self) -> None:
        doc = _doc("= Title\nbody text\n")
        assert doc.children == (_section(1, "Title", _para("body", "text")),)

    def test_heading_directly_followed_by_heading_line(self) -> None:
        doc = _doc("= A\n== B\n")
        assert doc.children == (_section(1, "A", _section(2, "B")),)

    def test_title_with_bold(self) -> None:
        section = _doc("= The **big** one\n").children[0]
        assert section.title == (
            _text("The"),
            Bold(location=LOC, children=(_text("big"),)),
            _text("one"),
        )
        assert extract_text(section) == "The big one"


class TestParagraphs:
    def test_paragraph_before_first_section(self) -> None:
        doc = _doc("intro\n\n= A\n")
        assert doc.children == (_para("intro"), _section(1, "A"))

    def test_each_line_is_a_paragraph(self) -> None:
        doc = _doc("line one\nline two")
        assert doc.children == (_para("line", "one"), _para("line", "two"))

    def test_paragraphs_in_section(self) -> None:
        doc = _doc("= A\n\nfirst\n\nsecond\n")
        assert doc.children == (_section(1, "A", _para("first"), _para("second")),)

    def test_paragraph_after_nested_section_belongs_to_it(self) -> None:
        doc = _doc("= A\n\n== B\n\ntext\n")
        assert doc.children == (_section(1, "A", _section(2, "B", _para("text"))),)


class TestLocations:
    """Node locations point back into the source."""

    def test_paragraph_span(self) -> None:
        para = _doc("one two three").children[0]
        assert (para.location.offset, para.location.end_offset) == (0, 13)

    def test_section_spans_its_children(self) -> None:
        source = "= A\n\nbody text\n"
        section = _doc(source).children[0]
        assert section.location.offset == 0
        assert source[section.location.end_offset - 4 : section.location.end_offset] == "text"

    def test_section_without_children_spans_heading(self) -> None:
        section = _doc("== Title here\n").children[0]
        assert (section.location.offset, section.location.end_offset) == (0, 13)

    def test_source_file_in_locations(self) -> None:
        doc = parse_text("= A\n\nbody", source_file="doc.adoc").document
        assert doc.children[0].location.source_file == "doc.adoc"
        assert doc.location.source_file == "doc.adoc"

    def test_equality_ignores_location(self) -> None:
        assert _doc("= A\n\nbody") == _doc("\n\n=   A\n\n\n   body   \n")
