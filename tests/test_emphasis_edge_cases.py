"""Edge case tests for emphasis and strikethrough parsing.

These tests exercise the closing-delimiter search: escapes and code spans
inside spans, whitespace-flanked candidates, underscore word boundaries and
delimiter runs longer than the opener.
"""

import pytest

from plumas import (
    Bold,
    Code,
    Italic,
    Link,
    Paragraph,
    ParseConfig,
    Strikethrough,
    Text,
    parse,
)


def _inlines(source: str, config: ParseConfig | None = None) -> tuple:
    para = parse(source, config=config).children[0]
    assert isinstance(para, Paragraph)
    return para.children


class TestBalancedEmphasis:
    def test_bold_containing_italic(self) -> None:
        assert _inlines("**bold *and italic* text**") == (
            Bold(
                children=(
                    Text("bold "),
                    Italic(children=(Text("and italic"),)),
                    Text(" text"),
                )
            ),
        )

    def test_italic_containing_bold(self) -> None:
        assert _inlines("*a **b** c*") == (
            Italic(children=(Text("a "), Bold(children=(Text("b"),)), Text(" c"))),
        )

    @pytest.mark.parametrize(
        ("source", "node_type"),
        [
            ("*x*", Italic),
            ("_x_", Italic),
            ("**x**", Bold),
            ("__x__", Bold),
            ("~~x~~", Strikethrough),
        ],
    )
    def test_each_delimiter(self, source: str, node_type: type) -> None:
        assert _inlines(source) == (node_type(children=(Text("x"),)),)

    def test_triple_run_nests_italic_in_bold(self) -> None:
        assert _inlines("***both***") == (
            Bold(children=(Italic(children=(Text("both"),)),)),
        )

    def test_emphasis_around_link(self) -> None:
        assert _inlines("*see [x](u)*") == (
            Italic(children=(Text("see "), Link(url="u", children=(Text("x"),)))),
        )

    def test_strikethrough_with_bold(self) -> None:
        assert _inlines("~~**gone**~~") == (
            Strikethrough(children=(Bold(children=(Text("gone"),)),)),
        )


class TestUnterminatedEmphasis:
    def test_unclosed_italic_is_literal(self) -> None:
        assert _inlines("*oops") == (Text("*oops"),)

    def test_unclosed_bold_is_literal(self) -> None:
        assert _inlines("**oops") == (Text("**oops"),)

    def test_unclosed_strikethrough_is_literal(self) -> None:
        assert _inlines("~~oops") == (Text("~~oops"),)

    def test_single_tilde_is_literal(self) -> None:
        assert _inlines("~x~") == (Text("~x~"),)

    def test_empty_span_is_literal(self) -> None:
        assert _inlines("****") == (Text("****"),)

    def test_literal_opener_then_valid_span(self) -> None:
        assert _inlines("**a *b*") == (
            Text("**a "),
            Italic(children=(Text("b"),)),
        )


class TestFlankingWhitespace:
    def test_spaced_asterisks_are_literal(self) -> None:
        assert _inlines("a * b * c") == (Text("a * b * c"),)

    def test_closer_before_punctuation(self) -> None:
        assert _inlines("*word*.") == (Italic(children=(Text("word"),)), Text("."))

    def test_closer_at_end_after_space_is_rejected(self) -> None:
        assert _inlines("*a *") == (Text("*a *"),)


class TestUnderscoreWordBoundaries:
    def test_snake_case_is_literal(self) -> None:
        assert _inlines("snake_case_name") == (Text("snake_case_name"),)

    def test_intraword_closer_is_rejected(self) -> None:
        assert _inlines("_a_b") == (Text("_a_b"),)

    def test_asterisks_work_intraword(self) -> None:
        assert _inlines("un*frigging*believable") == (
            Text("un"),
            Italic(children=(Text("frigging"),)),
            Text("believable"),
        )


class TestOpaqueRegions:
    def test_delimiter_inside_code_span_does_not_close(self) -> None:
        assert _inlines("*a `*` b*") == (
            Italic(children=(Text("a "), Code(content="*"), Text(" b"))),
        )

    def test_escaped_delimiter_does_not_close(self) -> None:
        assert _inlines(r"*a \* b*") == (Italic(children=(Text("a * b"),)),)


class TestStrikethroughConfig:
    def test_disabled_strikethrough_is_literal(self) -> None:
        config = ParseConfig(strikethrough_enabled=False)
        assert _inlines("~~gone~~", config) == (Text("~~gone~~"),)
