"""Tests for IR serialization (to_dict/from_dict, to_json/from_json)."""

import json

import pytest

from plumas import parse
from plumas.nodes import (
    Code,
    ColumnAlignment,
    Document,
    FootnoteDefinition,
    LineBreak,
    Paragraph,
    Text,
)
from plumas.serialization import (
    footnotes_from_dict,
    footnotes_to_dict,
    from_dict,
    from_json,
    to_dict,
    to_json,
)

COMPLEX = (
    "# Title\n"
    "> quote\n"
    "---\n"
    "- item\n"
    "- [x] task\n"
    "1. first\n"
    "```py\ncode\n```\n"
    "| a | b |\n|:--|:-:|\n| 1 | 2 |\n"
    "\n"
    "Term\n: details\n"
    "\n"
    "*i* **b** ~~s~~ `c` [l](u) ![a](i) [![a](i)](u) x[^1]  \nnext"
)


class TestToDict:
    def test_leaf(self) -> None:
        assert to_dict(Text("hi")) == {"_type": "Text", "content": "hi"}

    def test_fieldless_node(self) -> None:
        assert to_dict(LineBreak()) == {"_type": "LineBreak"}

    def test_nested(self) -> None:
        assert to_dict(Paragraph(children=(Text("a"),))) == {
            "_type": "Paragraph",
            "children": [{"_type": "Text", "content": "a"}],
        }

    def test_code_fields(self) -> None:
        assert to_dict(Code(content="x", language="py", is_block=True)) == {
            "_type": "Code",
            "content": "x",
            "language": "py",
            "is_block": True,
        }

    def test_alignments_are_strings(self) -> None:
        table = parse("| a | b | c |\n|---|--:|:-:|").children[0]
        assert to_dict(table)["alignments"] == ["left", "right", "center"]


class TestRoundTrip:
    def test_complex_document(self) -> None:
        doc = parse(COMPLEX).document
        assert from_dict(to_dict(doc)) == doc

    def test_alignments_restored_as_enum(self) -> None:
        table = parse("| a |\n|--:|").children[0]
        restored = from_dict(to_dict(table))
        assert restored.alignments == (ColumnAlignment.RIGHT,)

    def test_empty_document(self) -> None:
        assert from_json(to_json(Document(children=()))) == Document(children=())

    def test_footnote_table(self) -> None:
        result = parse("[^a]: *one*\n[^b]: two")
        data = footnotes_to_dict(result.footnotes)
        assert list(data) == ["a", "b"]
        assert footnotes_from_dict(data) == result.footnotes


class TestJson:
    def test_json_round_trip(self) -> None:
        doc = parse(COMPLEX).document
        assert from_json(to_json(doc)) == doc

    def test_json_deterministic(self) -> None:
        doc = parse(COMPLEX).document
        assert to_json(doc) == to_json(parse(COMPLEX).document)

    def test_json_valid(self) -> None:
        data = json.loads(to_json(parse("# x").document))
        assert data["_type"] == "Document"

    def test_json_with_indent(self) -> None:
        assert "\n" in to_json(parse("# x").document, indent=2)


class TestErrorHandling:
    def test_missing_type_field(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"content": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Heading"})

    def test_from_json_non_document(self) -> None:
        with pytest.raises(ValueError, match="Expected Document"):
            from_json(json.dumps(to_dict(Text("x"))))

    def test_footnote_table_rejects_other_nodes(self) -> None:
        with pytest.raises(ValueError, match="Expected FootnoteDefinition"):
            footnotes_from_dict({"a": to_dict(Text("x"))})

    def test_footnote_definition_type_is_registered(self) -> None:
        node = FootnoteDefinition(identifier="a", children=(Text("x"),))
        assert from_dict(to_dict(node)) == node
