"""Typed IR nodes for Plumas.

All IR nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: Python 3.10+ match statements work naturally

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Header
│   ├── Paragraph
│   ├── Code (is_block=True)
│   ├── BlockQuote
│   ├── List
│   ├── ListItem
│   ├── TaskListItem
│   ├── HorizontalRule
│   ├── Table / TableRow / TableCell
│   ├── DefinitionList / DefinitionItem / DefinitionTerm / DefinitionDetails
│   └── FootnoteDefinition
└── Inline (inline elements)
    ├── Text
    ├── Bold
    ├── Italic
    ├── Strikethrough
    ├── Link
    ├── Image
    ├── ImageLink
    ├── Code (is_block=False)
    ├── FootnoteReference
    └── LineBreak

FootnoteDefinition nodes never appear in a Document's children; the parser
returns them in a separate identifier -> definition mapping.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

# Raw leading spaces per logical list nesting level
SPACES_PER_INDENT_LEVEL = 2


class ColumnAlignment(Enum):
    """Text alignment of a table column, taken from the separator line."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all IR nodes."""


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    The most common inline node, representing literal text.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold (strong) text.

    Markdown: **text** or __text__

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic (emphasized) text.

    Markdown: *text* or _text_

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Strikethrough (deleted) text.

    Markdown: ~~deleted~~

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url)

    """

    url: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](url)

    """

    url: str
    alt_text: str


@dataclass(frozen=True, slots=True)
class ImageLink(Node):
    """Image that is also a hyperlink.

    Markdown: [![alt](image-url)](link-url)

    """

    image_url: str
    alt_text: str
    link_url: str


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Code span or fenced code block.

    Markdown: `code` (is_block=False) or ```lang ... ``` (is_block=True)

    Content is raw: no inline parsing is applied to it.

    """

    content: str
    language: str | None = None  # Block only
    is_block: bool = False


@dataclass(frozen=True, slots=True)
class FootnoteReference(Node):
    """Footnote reference.

    Markdown: [^1] or [^note]

    The display number is not stored here; see plumas.footnotes.

    """

    identifier: str


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Line break marker."""



# PEP 695 type alias for inline elements
type Inline = (
    Text
    | Bold
    | Italic
    | Strikethrough
    | Link
    | Image
    | ImageLink
    | Code
    | FootnoteReference
    | LineBreak
)


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Header(Node):
    """ATX header.

    Markdown: # Header ... ###### Header

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Markdown: consecutive text lines separated by blank lines

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Single-line block quote.

    Markdown: > quoted text

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """Ordered or unordered list item.

    Markdown: - item or 1. item

    ``indent`` is the raw count of leading whitespace characters;
    ``level`` converts it to a logical nesting level.

    """

    children: tuple[Inline, ...]
    order: int | None = None  # Only set for ordered items
    indent: int = 0

    @property
    def level(self) -> int:
        return self.indent // SPACES_PER_INDENT_LEVEL


@dataclass(frozen=True, slots=True)
class TaskListItem(Node):
    """Task list item.

    Markdown: - [ ] todo or - [x] done

    """

    checked: bool
    children: tuple[Inline, ...]
    indent: int = 0

    @property
    def level(self) -> int:
        return self.indent // SPACES_PER_INDENT_LEVEL


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    The parser emits flat list items; List containers are built by
    plumas.lists.group_lists.

    """

    items: tuple[ListItem | TaskListItem, ...]
    ordered: bool = False


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule.

    Markdown: --- or *** or ___

    """



@dataclass(frozen=True, slots=True)
class TableCell(Node):
    """Table cell.

    Markdown: | cell content |

    """

    children: tuple[Inline, ...]
    is_header: bool = False


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    """Table row.

    Markdown: | cell1 | cell2 |

    """

    cells: tuple[TableCell, ...]
    is_header: bool = False


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Table (GFM-style).

    Markdown:
        | A | B |
        |---|--:|
        | 1 | 2 |

    The first row is the header row. Every row has exactly
    ``len(alignments)`` cells.

    """

    rows: tuple[TableRow, ...]
    alignments: tuple[ColumnAlignment, ...]


@dataclass(frozen=True, slots=True)
class DefinitionTerm(Node):
    """Term of a definition list item."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class DefinitionDetails(Node):
    """One ``: details`` line of a definition list item."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class DefinitionItem(Node):
    """A term with one or more details."""

    term: DefinitionTerm
    details: tuple[DefinitionDetails, ...]


@dataclass(frozen=True, slots=True)
class DefinitionList(Node):
    """Definition list.

    Markdown:
        Term
        : Details
        : More details

    """

    items: tuple[DefinitionItem, ...]


@dataclass(frozen=True, slots=True)
class FootnoteDefinition(Node):
    """Footnote definition.

    Markdown: [^1]: Footnote content here.

    """

    identifier: str
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    children: tuple[Block, ...]


# PEP 695 type alias for block elements
type Block = (
    Document
    | Header
    | Paragraph
    | Code
    | BlockQuote
    | List
    | ListItem
    | TaskListItem
    | HorizontalRule
    | LineBreak
    | Table
    | TableRow
    | TableCell
    | DefinitionList
    | DefinitionItem
    | DefinitionTerm
    | DefinitionDetails
    | FootnoteDefinition
)

# Every IR variant
type MarkdownElement = Block | Inline
