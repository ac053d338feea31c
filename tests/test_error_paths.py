"""Error-path and malformed input tests.

Malformed Markdown never raises; it degrades to text. These tests cover the
exception hierarchy and the graceful-degradation paths.
"""

import time

import pytest

from plumas import Code, Link, Paragraph, Strikethrough, Table, Text, parse
from plumas.errors import ParseError, PlumasError, RenderError, TableFormatError

# =========================================================================
# Exception hierarchy and formatting
# =========================================================================


class TestErrorHierarchy:
    def test_all_errors_share_base(self) -> None:
        assert issubclass(ParseError, PlumasError)
        assert issubclass(TableFormatError, ParseError)
        assert issubclass(RenderError, PlumasError)

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.lineno is None

    def test_with_line_number(self) -> None:
        err = TableFormatError("invalid separator", lineno=3)
        assert str(err) == "3: invalid separator"
        assert err.message == "invalid separator"
        assert err.lineno == 3


# =========================================================================
# Graceful degradation
# =========================================================================


class TestDegradation:
    @pytest.mark.parametrize(
        "source",
        [
            "```",
            "```python\nno close",
            "[unclosed link(",
            "![img](",
            "**",
            "`",
            "| a |\n|---|:|",
            "[^",
            "\\",
            "# ",
            ">",
            "1. ",
        ],
    )
    def test_malformed_input_never_raises(self, source: str) -> None:
        parse(source)

    def test_unclosed_fence_has_no_code_block(self) -> None:
        blocks = parse("```\nsome code\nmore code").children
        assert not any(isinstance(b, Code) for b in blocks)
        assert blocks[0] == Paragraph(children=(Text("``` some code more code"),))

    def test_separator_without_dash_is_not_a_table(self) -> None:
        blocks = parse("| a | b |\n|:|:|").children
        assert not any(isinstance(b, Table) for b in blocks)

    def test_trailing_backslash_at_end(self) -> None:
        assert parse("end\\").children == (Paragraph(children=(Text("end\\"),)),)

    def test_empty_header(self) -> None:
        (header,) = parse("# ").children
        assert header.children == ()


# =========================================================================
# Unmatched openers
# =========================================================================


class TestUnmatchedOpeners:
    """Runs of openers that never close are scanned in time linear in the input."""

    @pytest.mark.parametrize(
        "unit",
        ["[", "[a](", "![a](", "x * a ", "_a ", "__a "],
    )
    def test_long_runs_parse_quickly(self, unit: str) -> None:
        source = unit * (40_000 // len(unit))
        started = time.perf_counter()
        (para,) = parse(source).children
        elapsed = time.perf_counter() - started
        assert isinstance(para, Paragraph)
        assert "".join(node.content for node in para.children) == source.strip()
        assert elapsed < 5.0

    def test_outer_unmatched_bracket_keeps_inner_link(self) -> None:
        (para,) = parse("[[a](u)").children
        assert para.children == (Text("["), Link(url="u", children=(Text("a"),)))

    def test_bracket_without_destination_then_link(self) -> None:
        (para,) = parse("[a] [b](u)").children
        assert para.children == (Text("[a] "), Link(url="u", children=(Text("b"),)))

    def test_unmatched_strikethrough_after_match(self) -> None:
        (para,) = parse("~~x~~ ~~y").children
        assert para.children == (Strikethrough(children=(Text("x"),)), Text(" ~~y"))
