"""Line-oriented parser producing the Plumas IR.

Splits the source into lines and runs the block segmenter over them; block
content is handed to the inline scanner. Produces immutable (frozen)
dataclass nodes.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `InlineParsingMixin`: Inline content (emphasis, links, code spans)
- `BlockParsingMixin`: Block-level content (paragraphs, lists, tables)

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share the result across threads

"""

from __future__ import annotations

from dataclasses import dataclass

from plumas.config import ParseConfig, get_parse_config
from plumas.lists import group_lists
from plumas.nodes import Block, Document, FootnoteDefinition
from plumas.parsing import BlockParsingMixin, InlineParsingMixin
from plumas.parsing.patterns import LINE_SPLIT
from plumas.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Output of one parse: the document tree and the footnote table.

    Attributes:
        document: Root of the IR tree; never contains footnote definitions
        footnotes: Definitions by identifier, in first-definition order

    """

    document: Document
    footnotes: dict[str, FootnoteDefinition]

    @property
    def children(self) -> tuple[Block, ...]:
        """Top-level blocks of the document."""
        return self.document.children


class Parser(
    InlineParsingMixin,
    BlockParsingMixin,
):
    """Markdown parser.

    Usage:
        >>> result = Parser("# Hello\\n\\nWorld").parse()
        >>> result.children[0]
        Header(level=1, children=(Text(content='Hello'),))

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting tree is immutable and thread-safe.

    """

    __slots__ = (
        # Per-parse state only
        "_lines",
        "_fence_closers",
        "_footnotes",
        "_bracket_pairs",
        "_closer_misses",
    )

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markdown source text

        """
        self._lines: list[str] = LINE_SPLIT.split(source) if source else []
        self._fence_closers = self._index_fence_closers(self._lines)
        self._footnotes: dict[str, FootnoteDefinition] = {}
        # Inline scan memos, keyed by (text, delimiter)
        self._bracket_pairs: dict[tuple[str, str], dict[int, int]] = {}
        self._closer_misses: dict[tuple[str, str], set[int]] = {}

    # =========================================================================
    # Configuration Properties (read from ContextVar)
    # =========================================================================

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    @property
    def _tables_enabled(self) -> bool:
        """Whether GFM table parsing is enabled."""
        return self._config.tables_enabled

    @property
    def _strikethrough_enabled(self) -> bool:
        """Whether ~~strikethrough~~ syntax is enabled."""
        return self._config.strikethrough_enabled

    @property
    def _task_lists_enabled(self) -> bool:
        """Whether - [ ] task list items are enabled."""
        return self._config.task_lists_enabled

    @property
    def _footnotes_enabled(self) -> bool:
        """Whether [^ref] footnotes are enabled."""
        return self._config.footnotes_enabled

    @property
    def _definition_lists_enabled(self) -> bool:
        """Whether term / : details definition lists are enabled."""
        return self._config.definition_lists_enabled

    @property
    def _blank_line_breaks(self) -> bool:
        """Whether blank lines emit LineBreak markers between blocks."""
        return self._config.blank_line_breaks

    @property
    def _max_nesting_depth(self) -> int:
        """Inline recursion limit."""
        return self._config.max_nesting_depth

    def parse(self) -> ParseResult:
        """Parse source into a document and footnote table.

        Returns:
            ParseResult

        Thread Safety:
            Returns immutable AST (frozen dataclasses).
        """
        blocks, footnotes = self._parse_blocks()

        if self._config.group_lists:
            blocks = group_lists(blocks)

        logger.debug(
            "Parsed %d lines into %d blocks, %d footnote definitions",
            len(self._lines),
            len(blocks),
            len(footnotes),
        )
        return ParseResult(document=Document(children=blocks), footnotes=dict(footnotes))
