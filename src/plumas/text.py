"""Extract plain text from Plumas IR nodes.

Provides a public API for extracting text content from any node type,
used for anchors, excerpts, and search indexing.

Example:
    >>> from plumas import parse, extract_text
    >>> result = parse("# Hello **World**")
    >>> extract_text(result.children[0])
    'Hello World'
"""

from plumas.errors import RenderError
from plumas.nodes import (
    BlockQuote,
    Bold,
    Code,
    DefinitionDetails,
    DefinitionItem,
    DefinitionList,
    DefinitionTerm,
    Document,
    FootnoteDefinition,
    FootnoteReference,
    Header,
    HorizontalRule,
    Image,
    ImageLink,
    Italic,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Table,
    TableCell,
    TableRow,
    TaskListItem,
    Text,
)


def extract_text(node: Node) -> str:
    """Extract plain text from any IR node.

    Recursively walks the tree, concatenating text content. Inline content
    is joined directly; sibling blocks, list items and table cells are
    separated by a space. LineBreak contributes a space. Images contribute
    their alt text.

    Args:
        node: Any IR node (block or inline).

    Returns:
        Concatenated plain text from the node and its descendants.

    Raises:
        RenderError: If node is not an IR node.

    """
    match node:
        case Text() | Code():
            return node.content
        case Image() | ImageLink():
            return node.alt_text
        case LineBreak():
            return " "
        case HorizontalRule() | FootnoteReference():
            return ""
        case Bold() | Italic() | Strikethrough() | Link():
            return "".join(extract_text(c) for c in node.children)
        case Paragraph() | Header() | BlockQuote() | FootnoteDefinition():
            return "".join(extract_text(c) for c in node.children)
        case ListItem() | TaskListItem() | TableCell():
            return "".join(extract_text(c) for c in node.children)
        case DefinitionTerm() | DefinitionDetails():
            return "".join(extract_text(c) for c in node.children)
        case DefinitionItem():
            return " ".join(extract_text(c) for c in (node.term, *node.details))
        case List() | DefinitionList():
            return " ".join(extract_text(item) for item in node.items)
        case Table():
            return " ".join(extract_text(row) for row in node.rows)
        case TableRow():
            return " ".join(extract_text(c) for c in node.cells)
        case Document():
            return " ".join(
                text
                for c in node.children
                if not isinstance(c, LineBreak) and (text := extract_text(c))
            )
        case _:
            raise RenderError(f"Not an IR node: {type(node).__name__}")
