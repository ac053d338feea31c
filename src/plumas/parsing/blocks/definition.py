"""Definition list parsing for Plumas parser.

Handles term/details groups:

    Term
    : First definition
    : Second definition
    Another term
    : Its definition

A group is a term line followed by one or more lines whose stripped form
starts with ``:``. Groups repeat while the pattern holds.
"""

from __future__ import annotations

from plumas.nodes import DefinitionDetails, DefinitionItem, DefinitionList, DefinitionTerm
from plumas.utils.logger import get_logger

logger = get_logger(__name__)


class DefinitionListMixin:
    """Mixin for definition list parsing.

    Required Host Methods:
        - _parse_inline(text, depth) -> tuple[Inline, ...]
        - _is_block_marker(lines, index) -> bool

    """

    def _is_details_line(self, line: str) -> bool:
        return line.strip().startswith(":")

    def _is_definition_start(self, lines: list[str], start: int) -> bool:
        """Check if lines[start] is a term followed by a details line."""
        return (
            start + 1 < len(lines)
            and bool(lines[start].strip())
            and not self._is_details_line(lines[start])
            and self._is_details_line(lines[start + 1])
        )

    def _try_parse_definition_list(
        self, lines: list[str], start: int
    ) -> tuple[DefinitionList, int] | None:
        """Try to parse a definition list starting at line start.

        Returns:
            (DefinitionList, consumed_lines) or None
        """
        if not self._is_definition_start(lines, start):
            return None

        items: list[DefinitionItem] = []
        i = start
        while self._is_definition_start(lines, i):
            # Later terms must not be the start of another block
            if i > start and self._is_block_marker(lines, i):
                break

            term = DefinitionTerm(children=self._parse_inline(lines[i].strip()))
            i += 1

            details: list[DefinitionDetails] = []
            while i < len(lines) and self._is_details_line(lines[i]):
                content = lines[i].strip()[1:].strip()
                details.append(DefinitionDetails(children=self._parse_inline(content)))
                i += 1

            items.append(DefinitionItem(term=term, details=tuple(details)))

        logger.debug("Definition list at line %d: %d terms", start + 1, len(items))
        return DefinitionList(items=tuple(items)), i - start
