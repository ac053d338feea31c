"""Table parsing for Plumas parser.

Handles GFM-style pipe tables:

    | Header 1 | Header 2 |   <- header row
    |:---------|---------:|   <- separator row (required)
    | Cell 1   | Cell 2   |   <- body rows

The separator fixes the column count and alignments; every row is
normalized to that many cells.
"""

from __future__ import annotations

from plumas.errors import TableFormatError
from plumas.nodes import ColumnAlignment, Table, TableCell, TableRow
from plumas.parsing.charsets import TABLE_SEPARATOR_CHARS
from plumas.utils.logger import get_logger

logger = get_logger(__name__)


class TableParsingMixin:
    """Mixin for pipe table parsing.

    Required Host Methods:
        - _parse_inline(text, depth) -> tuple[Inline, ...]
        - _is_fence_line(line) -> bool

    """

    def _is_separator_line(self, line: str) -> bool:
        """Check if line looks like a table separator (|---|:--:|)."""
        stripped = line.strip()
        if "|" not in stripped or "-" not in stripped:
            return False
        return all(c in TABLE_SEPARATOR_CHARS or c.isspace() for c in stripped)

    def _is_table_start(self, lines: list[str], start: int) -> bool:
        """Check if lines start and start+1 form a header + separator pair."""
        return (
            start + 1 < len(lines)
            and "|" in lines[start]
            and not self._is_separator_line(lines[start])
            and self._is_separator_line(lines[start + 1])
        )

    def _try_parse_table(self, lines: list[str], start: int) -> tuple[Table, int] | None:
        """Try to parse a table starting at line start.

        Returns:
            (Table, consumed_lines) if valid, None if not a table.
        """
        if not self._is_table_start(lines, start):
            return None

        end = self._find_table_end(lines, start)
        try:
            table = self._build_table(lines[start:end])
        except TableFormatError as exc:
            logger.debug("Abandoning table at line %d: %s", start + 1, exc)
            return None

        logger.debug(
            "Table at lines %d-%d: %d rows, %d columns",
            start + 1,
            end,
            len(table.rows),
            len(table.alignments),
        )
        return table, end - start

    def _find_table_end(self, lines: list[str], start: int) -> int:
        """Index of the first line after the table starting at start.

        The body stops at a line without a pipe, a fence line, a stray
        separator line, or the header of another table.
        """
        end = start + 2
        while end < len(lines):
            line = lines[end]
            if "|" not in line or self._is_fence_line(line) or self._is_separator_line(line):
                break
            if self._is_table_start(lines, end):
                break
            end += 1
        return end

    def _build_table(self, lines: list[str]) -> Table:
        """Build a Table from header, separator and body lines.

        Raises:
            TableFormatError: If the header or separator line is missing or
                the separator line is malformed
        """
        if len(lines) < 2:
            raise TableFormatError(f"Table needs a header and a separator line, got {len(lines)}")
        if not self._is_separator_line(lines[1]):
            raise TableFormatError(f"Invalid table separator line: {lines[1]!r}")

        alignments = self._parse_alignments(lines[1])
        column_count = len(alignments)

        rows = [self._parse_table_row(lines[0], column_count, is_header=True)]
        for line in lines[2:]:
            rows.append(self._parse_table_row(line, column_count, is_header=False))

        return Table(rows=tuple(rows), alignments=alignments)

    def _parse_alignments(self, line: str) -> tuple[ColumnAlignment, ...]:
        """Parse separator cells into column alignments.

        Colons on both ends give CENTER, a trailing colon gives RIGHT and
        anything else (a dashless cell included) is LEFT.
        """
        alignments: list[ColumnAlignment] = []
        for cell in self._split_table_row(line):
            cell = cell.strip()
            if cell.startswith(":") and cell.endswith(":"):
                alignments.append(ColumnAlignment.CENTER)
            elif cell.endswith(":"):
                alignments.append(ColumnAlignment.RIGHT)
            else:
                alignments.append(ColumnAlignment.LEFT)

        return tuple(alignments)

    def _parse_table_row(self, line: str, column_count: int, *, is_header: bool) -> TableRow:
        """Parse one row, padding or truncating it to column_count cells."""
        contents = self._split_table_row(line)

        if len(contents) > column_count:
            logger.warning(
                "Table row has %d cells, expected %d; dropping extra cells: %r",
                len(contents),
                column_count,
                line,
            )
            contents = contents[:column_count]
        elif len(contents) < column_count:
            contents.extend([""] * (column_count - len(contents)))

        return TableRow(
            cells=tuple(
                TableCell(children=self._parse_inline(content.strip()), is_header=is_header)
                for content in contents
            ),
            is_header=is_header,
        )

    def _split_table_row(self, line: str) -> list[str]:
        """Split a row into raw cell strings.

        One leading and one trailing empty field are dropped when the line
        starts or ends with a pipe. ``\\|`` is a literal pipe.
        """
        line = line.strip()

        # Remove leading/trailing pipes
        if line.startswith("|"):
            line = line[1:]
        if line.endswith("|") and not line.endswith("\\|"):
            line = line[:-1]

        # Split on unescaped pipes
        cells: list[str] = []
        current_cell: list[str] = []
        i = 0
        while i < len(line):
            if line[i] == "\\" and i + 1 < len(line) and line[i + 1] == "|":
                # Escaped pipe
                current_cell.append("|")
                i += 2
            elif line[i] == "|":
                cells.append("".join(current_cell))
                current_cell = []
                i += 1
            else:
                current_cell.append(line[i])
                i += 1

        # Add last cell
        cells.append("".join(current_cell))

        return cells
