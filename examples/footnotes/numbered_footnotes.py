"""Number footnotes at render time without touching the IR."""

from plumas import extract_text, number_footnotes, ordered_definitions, parse
from plumas.nodes import FootnoteReference
from plumas.visitor import BaseVisitor

source = """Plumas keeps the tree immutable[^immutable] and numbers
references in reading order[^order].

[^order]: First reference gets 1.
[^immutable]: Frozen dataclasses.
[^unused]: Listed last.
"""

result = parse(source)
numbers = number_footnotes(result.document, result.footnotes)


class RefPrinter(BaseVisitor[None]):
    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        print(f"[{numbers[node.identifier]}] -> {node.identifier}")


RefPrinter().visit(result.document)

print("Footnotes:")
for number, definition in ordered_definitions(result):
    print(f"  {number}. {extract_text(definition)}")
