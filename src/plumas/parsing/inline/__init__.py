"""Inline parsing subsystem for Plumas parser.

Provides mixins for parsing inline Markdown content:
- Escapes and code spans (`)
- Bold, italic (*, _) and strikethrough (~~)
- Links, images and image links
- Footnote references

"""

from __future__ import annotations

from plumas.parsing.inline.core import InlineParsingCoreMixin
from plumas.parsing.inline.delimiters import DelimiterMixin
from plumas.parsing.inline.links import LinkParsingMixin


class InlineParsingMixin(
    InlineParsingCoreMixin,
    DelimiterMixin,
    LinkParsingMixin,
):
    """Combined inline parsing mixin.

    Combines all inline parsing functionality into a single mixin
    that can be inherited by the Parser class.

    Required Host Attributes:
        - _strikethrough_enabled: bool
        - _footnotes_enabled: bool
        - _max_nesting_depth: int
        - _bracket_pairs: dict[tuple[str, str], dict[int, int]]
        - _closer_misses: dict[tuple[str, str], set[int]]

    """

    pass


__all__ = [
    "InlineParsingMixin",
    "InlineParsingCoreMixin",
    "DelimiterMixin",
    "LinkParsingMixin",
]
