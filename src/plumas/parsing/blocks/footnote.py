"""Footnote parsing for Plumas parser.

Handles single-line footnote definitions:

    [^identifier]: content

Definitions never appear in the document body; they are collected into the
parser's footnote table, keyed by identifier.
"""

from __future__ import annotations

from plumas.nodes import FootnoteDefinition
from plumas.parsing.patterns import FOOTNOTE_DEF
from plumas.utils.logger import get_logger

logger = get_logger(__name__)


class FootnoteParsingMixin:
    """Mixin for footnote definition parsing.

    Required Host Attributes:
        - _footnotes: dict[str, FootnoteDefinition]

    Required Host Methods:
        - _parse_inline(text, depth) -> tuple[Inline, ...]

    """

    _footnotes: dict[str, FootnoteDefinition]

    def _is_footnote_def_line(self, line: str) -> bool:
        return FOOTNOTE_DEF.match(line.strip()) is not None

    def _try_parse_footnote_def(self, line: str) -> FootnoteDefinition | None:
        """Parse a footnote definition line.

        Returns:
            FootnoteDefinition with inline-parsed content, or None
        """
        match = FOOTNOTE_DEF.match(line.strip())
        if match is None:
            return None

        identifier = match.group(1)
        content = match.group(2).strip()
        return FootnoteDefinition(
            identifier=identifier,
            children=self._parse_inline(content),
        )

    def _register_footnote(self, definition: FootnoteDefinition, lineno: int) -> None:
        """Store a definition; the first definition of an identifier wins."""
        if definition.identifier in self._footnotes:
            logger.debug(
                "Duplicate footnote definition [^%s] at line %d ignored",
                definition.identifier,
                lineno,
            )
            return
        self._footnotes[definition.identifier] = definition
