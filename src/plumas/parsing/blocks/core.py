"""Core block parsing for Plumas parser.

Provides the block segmenter: a single cursor over the source lines that
tries each block detector in priority order and falls back to a paragraph.

Priority (first match wins):
1. Blank line
2. Table (header + separator)
3. Code fence
4. Footnote definition
5. List item
6. Header
7. Block quote
8. Horizontal rule
9. Definition list
10. Paragraph

"""

from __future__ import annotations

from plumas.nodes import (
    Block,
    BlockQuote,
    FootnoteDefinition,
    Header,
    HorizontalRule,
    LineBreak,
    Paragraph,
)
from plumas.parsing.patterns import HEADER, HEADER_CLOSING, HORIZONTAL_RULE
from plumas.utils.logger import get_logger

logger = get_logger(__name__)


def _join_paragraph_lines(lines: list[str]) -> str:
    """Strip each paragraph line and join them with single spaces."""
    return " ".join(line.strip() for line in lines)


class BlockParsingCoreMixin:
    """Block segmenter and the simple single-line blocks.

    Required Host Attributes:
        - _lines: list[str]
        - _footnotes: dict[str, FootnoteDefinition]
        - _tables_enabled: bool
        - _footnotes_enabled: bool
        - _definition_lists_enabled: bool
        - _blank_line_breaks: bool

    Required Host Methods:
        - _parse_inline(text, depth) -> tuple[Inline, ...]
        - _try_parse_table / _is_table_start (TableParsingMixin)
        - _try_parse_code_fence / _is_code_fence_start (CodeFenceMixin)
        - _try_parse_footnote_def / _register_footnote (FootnoteParsingMixin)
        - _classify_list_item / _is_list_item_line (ListItemMixin)
        - _try_parse_definition_list / _is_definition_start (DefinitionListMixin)

    """

    _lines: list[str]
    _footnotes: dict[str, FootnoteDefinition]

    def _parse_blocks(self) -> tuple[tuple[Block, ...], dict[str, FootnoteDefinition]]:
        """Segment the source lines into blocks.

        Returns:
            (blocks, footnote definitions by identifier)
        """
        lines = self._lines
        line_count = len(lines)
        blocks: list[Block] = []
        i = 0

        while i < line_count:
            if not lines[i].strip():
                if self._blank_line_breaks and blocks and not isinstance(blocks[-1], LineBreak):
                    blocks.append(LineBreak())
                i += 1
                continue

            block, consumed = self._parse_block(lines, i)
            if block is not None:
                if isinstance(block, HorizontalRule) and blocks and isinstance(blocks[-1], LineBreak):
                    blocks.pop()
                blocks.append(block)
            i += consumed

        # Trailing blank-line marker carries no meaning
        if blocks and isinstance(blocks[-1], LineBreak):
            blocks.pop()

        return tuple(blocks), self._footnotes

    def _parse_block(self, lines: list[str], i: int) -> tuple[Block | None, int]:
        """Parse the block starting at non-blank line i.

        Returns:
            (block, consumed_lines). block is None for lines that produce
            nothing in the body (footnote definitions).
        """
        line = lines[i]

        if self._tables_enabled:
            table = self._try_parse_table(lines, i)
            if table is not None:
                return table

        fence = self._try_parse_code_fence(lines, i)
        if fence is not None:
            return fence

        if self._footnotes_enabled:
            definition = self._try_parse_footnote_def(line)
            if definition is not None:
                self._register_footnote(definition, i + 1)
                return None, 1

        item = self._classify_list_item(line)
        if item is not None:
            return item, 1

        header = self._try_parse_header(line)
        if header is not None:
            return header, 1

        quote = self._try_parse_block_quote(line)
        if quote is not None:
            return quote, 1

        if HORIZONTAL_RULE.match(line):
            return HorizontalRule(), 1

        if self._definition_lists_enabled:
            definitions = self._try_parse_definition_list(lines, i)
            if definitions is not None:
                return definitions

        return self._parse_paragraph(lines, i)

    def _try_parse_header(self, line: str) -> Header | None:
        """Parse an ATX header: 1-6 ``#``, whitespace, content.

        An optional closing ``#`` run is stripped.
        """
        match = HEADER.match(line)
        if match is None:
            return None

        content = HEADER_CLOSING.sub("", match.group(2).strip()).strip()
        return Header(
            level=len(match.group(1)),  # type: ignore[arg-type]
            children=self._parse_inline(content),
        )

    def _is_quote_line(self, line: str) -> bool:
        return line.startswith("> ") or line.rstrip() == ">"

    def _try_parse_block_quote(self, line: str) -> BlockQuote | None:
        """Parse a single-line block quote (``> text``)."""
        if not self._is_quote_line(line):
            return None
        content = line[1:].strip()
        return BlockQuote(children=self._parse_inline(content))

    def _is_block_marker(self, lines: list[str], j: int) -> bool:
        """Check if line j starts any block other than a definition list."""
        line = lines[j]
        if self._tables_enabled and self._is_table_start(lines, j):
            return True
        if self._is_code_fence_start(lines, j):
            return True
        if self._footnotes_enabled and self._is_footnote_def_line(line):
            return True
        if self._is_list_item_line(line):
            return True
        return (
            HEADER.match(line) is not None
            or self._is_quote_line(line)
            or HORIZONTAL_RULE.match(line) is not None
        )

    def _starts_block(self, lines: list[str], j: int) -> bool:
        """Lookahead predicate: does line j end the current paragraph?

        Constructs that would degrade to text (an unclosed fence) do not
        start a block, so they stay inside the paragraph.
        """
        if self._is_block_marker(lines, j):
            return True
        return self._definition_lists_enabled and self._is_definition_start(lines, j)

    def _parse_paragraph(self, lines: list[str], start: int) -> tuple[Paragraph, int]:
        """Collect lines up to a blank line or block start into a paragraph."""
        collected: list[str] = []
        i = start
        while i < len(lines):
            line = lines[i]
            if not line.strip():
                break
            if i > start and self._starts_block(lines, i):
                break
            collected.append(line)
            i += 1

        text = _join_paragraph_lines(collected)
        return Paragraph(children=self._parse_inline(text)), i - start
