"""Tests for bold/italic inline parsing.

Covers the closing rule: a delimiter closes the innermost open span of
the same kind, otherwise it opens a nested span.
"""

from doctora import parse_text
from doctora.location import SourceLocation
from doctora.nodes import Bold, Italic, Paragraph, Text
from doctora.text import extract_text, inline_depth

LOC = SourceLocation(lineno=1, col_offset=1)


def _text(s: str) -> Text:
    return Text(location=LOC, content=s)


def _bold(*children) -> Bold:
    return Bold(location=LOC, children=tuple(_text(c) if isinstance(c, str) else c for c in children))


def _italic(*children) -> Italic:
    return Italic(location=LOC, children=tuple(_text(c) if isinstance(c, str) else c for c in children))


def _inlines(source: str) -> tuple:
    result = parse_text(source)
    assert result.ok, result.errors
    (paragraph,) = result.document.children
    assert isinstance(paragraph, Paragraph)
    return paragraph.children


class TestSpans:
    def test_plain_words(self) -> None:
        assert _inlines("just some words") == (_text("just"), _text("some"), _text("words"))

    def test_bold(self) -> None:
        assert _inlines("**word**") == (_bold("word"),)

    def test_italic(self) -> None:
        assert _inlines("_word_") == (_italic("word"),)

    def test_multi_word_span(self) -> None:
        assert _inlines("a **b c** d") == (_text("a"), _bold("b", "c"), _text("d"))

    def test_adjacent_spans(self) -> None:
        assert _inlines("**a** b **c**") == (_bold("a"), _text("b"), _bold("c"))

    def test_back_to_back_italics(self) -> None:
        assert _inlines("_a_ _b_") == (_italic("a"), _italic("b"))

    def test_lone_star_is_text(self) -> None:
        assert _inlines("5 * 3") == (_text("5"), _text("*"), _text("3"))


class TestNesting:
    def test_italic_in_bold(self) -> None:
        assert _inlines("**bold with _nested italic_**") == (
            _bold("bold", "with", _italic("nested", "italic")),
        )

    def test_bold_in_italic(self) -> None:
        assert _inlines("_a **b** c_") == (_italic("a", _bold("b"), "c"),)

    def test_three_levels(self) -> None:
        assert _inlines("_a **b _c_ d** e_") == (
            _italic("a", _bold("b", _italic("c"), "d"), "e"),
        )

    def test_delimiter_directly_inside_other_kind(self) -> None:
        assert _inlines("**_x_**") == (_bold(_italic("x")),)

    def test_bold_italic_bold(self) -> None:
        assert _inlines("**_**x**_**") == (_bold(_italic(_bold("x"))),)

    def test_only_innermost_span_can_close(self) -> None:
        # The third ** is inside the italic, so it opens a bold there
        assert _inlines("**a _b **c** d_ e**") == (
            _bold("a", _italic("b", _bold("c"), "d"), "e"),
        )

    def test_same_kind_closes_instead_of_nesting(self) -> None:
        # The second ** closes the first span; bold never nests directly in bold
        assert _inlines("**a **b** c**") == (_bold("a"), _text("b"), _bold("c"))

    def test_depth(self) -> None:
        (node,) = _inlines("_a **b _c_ d** e_")
        assert inline_depth(node) == 3

    def test_deep_alternation(self) -> None:
        openers = ["_" if i % 2 == 0 else "**" for i in range(40)]
        source = " ".join([*openers, "core", *reversed(openers)])
        (node,) = _inlines(source)
        assert inline_depth(node) == 40
        assert extract_text(node) == "core"


class TestTextFidelity:
    """Text leaves come out in the same order as TEXT tokens went in."""

    def test_leaves_in_order(self) -> None:
        from doctora.text import text_leaves

        result = parse_text("one **two _three_ four** five")
        assert text_leaves(result.document.children[0]) == [
            "one",
            "two",
            "three",
            "four",
            "five",
        ]

    def test_span_locations_cover_delimiters(self) -> None:
        source = "a **b c** d"
        bold = _inlines(source)[1]
        assert source[bold.location.offset : bold.location.end_offset] == "**b c**"
