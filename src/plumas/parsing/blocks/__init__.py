"""Block parsing subsystem for Plumas parser.

Provides mixins for parsing block-level Markdown content:
- Headers, block quotes, horizontal rules, paragraphs
- Fenced code blocks
- List items (ordered, unordered, task)
- Tables (GFM)
- Footnote definitions
- Definition lists

Architecture:
Block parsing is split into logical modules:
- core: Block segmenter and single-line blocks
- fence: Fenced code blocks
- list: List item classification
- table: GFM table parsing
- footnote: Footnote definition parsing
- definition: Definition list parsing

"""

from plumas.parsing.blocks.core import BlockParsingCoreMixin
from plumas.parsing.blocks.definition import DefinitionListMixin
from plumas.parsing.blocks.fence import CodeFenceMixin
from plumas.parsing.blocks.footnote import FootnoteParsingMixin
from plumas.parsing.blocks.list import ListItemMixin
from plumas.parsing.blocks.table import TableParsingMixin


class BlockParsingMixin(
    BlockParsingCoreMixin,
    CodeFenceMixin,
    TableParsingMixin,
    ListItemMixin,
    FootnoteParsingMixin,
    DefinitionListMixin,
):
    """Combined block parsing mixin.

    Combines all block parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _lines: list[str]
        - _fence_closers: list[int]
        - _footnotes: dict[str, FootnoteDefinition]
        - _tables_enabled: bool
        - _task_lists_enabled: bool
        - _footnotes_enabled: bool
        - _definition_lists_enabled: bool
        - _blank_line_breaks: bool

    Required Host Methods:
        - _parse_inline(text, depth) -> tuple[Inline, ...]

    """


__all__ = [
    "BlockParsingCoreMixin",
    "BlockParsingMixin",
    "CodeFenceMixin",
    "DefinitionListMixin",
    "FootnoteParsingMixin",
    "ListItemMixin",
    "TableParsingMixin",
]
