"""Parsing subsystem for Plumas Markdown parser.

Provides mixin classes for modular parsing functionality:
- `InlineParsingMixin`: Inline content (emphasis, links, code spans)
- `BlockParsingMixin`: Block-level content (paragraphs, lists, tables)

Architecture:
The parser uses a mixin-based design for separation of concerns.
Each mixin handles one aspect of the Markdown grammar.

Example:
    >>> from plumas.parsing import InlineParsingMixin, BlockParsingMixin
    >>> class Parser(InlineParsingMixin, BlockParsingMixin):
    ...     pass

"""

from plumas.parsing.blocks import BlockParsingMixin
from plumas.parsing.inline import InlineParsingMixin

__all__ = [
    "InlineParsingMixin",
    "BlockParsingMixin",
]
