"""Tests for the inline scanner: escapes, code spans, links, images,
footnote references and paragraph line joining."""

import pytest

from plumas import (
    Bold,
    Code,
    FootnoteReference,
    Image,
    ImageLink,
    Italic,
    LineBreak,
    Link,
    Paragraph,
    ParseConfig,
    Text,
    parse,
)


def _inlines(source: str, config: ParseConfig | None = None) -> tuple:
    """Inline children of the single paragraph source parses to."""
    result = parse(source, config=config)
    assert len(result.children) == 1
    para = result.children[0]
    assert isinstance(para, Paragraph)
    return para.children


class TestEscapes:
    def test_escaped_asterisks_are_literal(self) -> None:
        assert _inlines(r"\*not italic\*") == (Text("*not italic*"),)

    @pytest.mark.parametrize("char", list("\\`*_[]()#+-.!~|"))
    def test_punctuation_escapes(self, char: str) -> None:
        assert _inlines(f"a\\{char}b") == (Text(f"a{char}b"),)

    def test_backslash_before_letter_is_kept(self) -> None:
        assert _inlines(r"C:\path") == (Text(r"C:\path"),)

    def test_escaped_bracket_is_not_a_link(self) -> None:
        assert _inlines(r"\[text](url)") == (Text("[text](url)"),)


class TestCodeSpans:
    def test_simple_code_span(self) -> None:
        assert _inlines("Use `print()` here") == (
            Text("Use "),
            Code(content="print()"),
            Text(" here"),
        )

    def test_code_span_content_is_stripped(self) -> None:
        assert _inlines("` spaced `") == (Code(content="spaced"),)

    def test_code_span_content_is_not_parsed(self) -> None:
        assert _inlines("`**not bold**`") == (Code(content="**not bold**"),)

    def test_unterminated_code_span_is_literal(self) -> None:
        assert _inlines("a `b c") == (Text("a `b c"),)

    def test_empty_code_span_is_literal(self) -> None:
        assert _inlines("a `` b") == (Text("a `` b"),)

    def test_code_span_is_inline(self) -> None:
        (code,) = _inlines("`x`")
        assert code.is_block is False
        assert code.language is None


class TestLinks:
    def test_inline_link(self) -> None:
        assert _inlines("[link](https://example.com)") == (
            Link(url="https://example.com", children=(Text("link"),)),
        )

    def test_link_text_is_parsed(self) -> None:
        assert _inlines("[**bold** link](/x)") == (
            Link(url="/x", children=(Bold(children=(Text("bold"),)), Text(" link"))),
        )

    def test_nested_brackets_in_link_text(self) -> None:
        assert _inlines("[a [b] c](u)") == (Link(url="u", children=(Text("a [b] c"),)),)

    def test_balanced_parentheses_in_url(self) -> None:
        (link,) = _inlines("[w](https://en.wikipedia.org/wiki/Foo_(bar))")
        assert link.url == "https://en.wikipedia.org/wiki/Foo_(bar)"

    def test_url_is_stripped_and_unescaped(self) -> None:
        (link,) = _inlines(r"[x]( /a\_b )")
        assert link.url == "/a_b"

    def test_empty_url_is_allowed(self) -> None:
        assert _inlines("[x]()") == (Link(url="", children=(Text("x"),)),)

    def test_bracket_without_destination_is_literal(self) -> None:
        assert _inlines("[not a link] here") == (Text("[not a link] here"),)

    def test_unclosed_destination_is_literal(self) -> None:
        assert _inlines("[x](open") == (Text("[x](open"),)

    def test_surrounding_text(self) -> None:
        assert _inlines("see [docs](/d) now") == (
            Text("see "),
            Link(url="/d", children=(Text("docs"),)),
            Text(" now"),
        )


class TestImages:
    def test_image(self) -> None:
        assert _inlines("![alt text](img.png)") == (
            Image(url="img.png", alt_text="alt text"),
        )

    def test_alt_text_is_not_parsed(self) -> None:
        (image,) = _inlines(r"![*a* \_b](i.png)")
        assert image.alt_text == "*a* _b"

    def test_image_with_empty_url_is_not_an_image(self) -> None:
        children = _inlines("![x]()")
        assert not any(isinstance(c, Image) for c in children)
        assert children[0] == Text("!")

    def test_image_link(self) -> None:
        assert _inlines("[![logo](logo.png)](https://example.com)") == (
            ImageLink(image_url="logo.png", alt_text="logo", link_url="https://example.com"),
        )

    def test_image_plus_text_in_link_is_a_link(self) -> None:
        (link,) = _inlines("[![a](i.png) more](u)")
        assert isinstance(link, Link)
        assert link.children == (Image(url="i.png", alt_text="a"), Text(" more"))


class TestFootnoteReferences:
    def test_reference(self) -> None:
        assert _inlines("Text[^1] more") == (
            Text("Text"),
            FootnoteReference(identifier="1"),
            Text(" more"),
        )

    def test_named_reference(self) -> None:
        assert _inlines("[^note-a]") == (FootnoteReference(identifier="note-a"),)

    def test_identifier_without_whitespace(self) -> None:
        assert _inlines("[^a b]") == (Text("[^a b]"),)

    def test_disabled_footnotes_are_literal(self) -> None:
        config = ParseConfig(footnotes_enabled=False)
        assert _inlines("x[^1]", config) == (Text("x[^1]"),)


class TestLineJoining:
    def test_soft_wrap_joins_with_space(self) -> None:
        assert _inlines("line one\nline two") == (Text("line one line two"),)

    def test_trailing_spaces_join_with_single_space(self) -> None:
        assert _inlines("line one  \nline two") == (Text("line one line two"),)

    def test_trailing_backslash_stays_literal(self) -> None:
        assert _inlines("line one\\\nline two") == (Text("line one\\ line two"),)

    def test_trailing_spaces_on_last_line_are_dropped(self) -> None:
        assert _inlines("only line   ") == (Text("only line"),)

    @pytest.mark.parametrize(
        "lines",
        [
            ["foo  ", "bar"],
            ["  indented   ", "\tnext\t", "last  "],
            ["one", "two    ", "three"],
        ],
    )
    def test_text_round_trips_with_spaces(self, lines: list[str]) -> None:
        inlines = _inlines("\n".join(lines))
        assert not any(isinstance(node, LineBreak) for node in inlines)
        assert "".join(node.content for node in inlines) == " ".join(
            line.strip() for line in lines
        )


class TestNestingDepth:
    def test_spans_beyond_limit_become_text(self) -> None:
        config = ParseConfig(max_nesting_depth=1)
        assert _inlines(r"*a **b \* c** d*", config) == (
            Italic(
                children=(
                    Text("a "),
                    Bold(children=(Text("b * c"),)),
                    Text(" d"),
                )
            ),
        )

    def test_deep_nesting_within_limit(self) -> None:
        source = "[" * 10 + "x" + "](u)" * 10
        node = _inlines(source)[0]
        depth = 0
        while isinstance(node, Link):
            depth += 1
            node = node.children[0]
        assert depth == 10
        assert node == Text("x")
