"""Footnote numbering for renderers.

Reference nodes carry only their identifier. Display numbers are computed
out of band, in reading order, so the same tree can be rendered many times
(or in parallel) with stable results.

Example:
    >>> result = parse("See[^b] and[^a].\\n\\n[^a]: A\\n[^b]: B")
    >>> number_footnotes(result.document, result.footnotes)
    {'b': 1, 'a': 2}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plumas.nodes import Document, FootnoteDefinition, FootnoteReference
from plumas.visitor import BaseVisitor

if TYPE_CHECKING:
    from plumas.parser import ParseResult


class _ReferenceNumberer(BaseVisitor[None]):
    """Assigns 1, 2, ... to identifiers on first sight."""

    def __init__(self, numbers: dict[str, int]) -> None:
        self.numbers = numbers

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        if node.identifier not in self.numbers:
            self.numbers[node.identifier] = len(self.numbers) + 1


def number_footnotes(
    document: Document,
    footnotes: dict[str, FootnoteDefinition] | None = None,
) -> dict[str, int]:
    """Number footnote references in reading order.

    References inside referenced definitions are numbered after the body,
    following the definitions in number order.

    Args:
        document: Parsed document
        footnotes: Definition table, used to follow nested references

    Returns:
        Mapping of identifier to display number (starting at 1)
    """
    numbers: dict[str, int] = {}
    numberer = _ReferenceNumberer(numbers)
    numberer.visit(document)

    if footnotes:
        order = list(numbers)
        index = 0
        while index < len(order):
            definition = footnotes.get(order[index])
            if definition is not None:
                numberer.visit(definition)
                order.extend(list(numbers)[len(order):])
            index += 1

    return numbers


def ordered_definitions(result: ParseResult) -> list[tuple[int, FootnoteDefinition]]:
    """Definitions in display order with their numbers.

    Referenced definitions come first, in number order; unreferenced ones
    follow in definition order with the next numbers.
    """
    numbers = number_footnotes(result.document, result.footnotes)

    ordered = sorted(
        (
            (number, result.footnotes[identifier])
            for identifier, number in numbers.items()
            if identifier in result.footnotes
        ),
        key=lambda pair: pair[0],
    )
    next_number = len(numbers) + 1
    for identifier, definition in result.footnotes.items():
        if identifier not in numbers:
            ordered.append((next_number, definition))
            next_number += 1

    return ordered
