"""
Plumas: Markdown to renderer-agnostic IR for Python

Parses Markdown into an immutable tree of typed nodes (the IR) plus a
separate footnote-definition table. Rendering is left to the consumer;
helpers for walking, numbering footnotes and extracting text are included.
Zero runtime dependencies.

Quick Start:
    >>> from plumas import parse
    >>> result = parse("# Hello, **World**!")
    >>> result.children[0]
    Header(level=1, children=(Text(content='Hello, '), Bold(children=(Text(content='World'),)), Text(content='!')))

Configuration:
    >>> from plumas import ParseConfig
    >>> result = parse("| a |\\n|---|", config=ParseConfig(tables_enabled=False))
    >>> type(result.children[0]).__name__
    'Paragraph'

Supported syntax:
    Headers, paragraphs, single-line block quotes, fenced
    code, horizontal rules, lists and task lists, GFM tables, footnotes,
    definition lists, bold, italic, strikethrough, code spans, links,
    images and linked images.
"""

from plumas.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from plumas.errors import ParseError, PlumasError, RenderError, TableFormatError
from plumas.footnotes import number_footnotes, ordered_definitions
from plumas.lists import group_lists
from plumas.nodes import (
    SPACES_PER_INDENT_LEVEL,
    Block,
    BlockQuote,
    Bold,
    Code,
    ColumnAlignment,
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
    Inline,
    Italic,
    LineBreak,
    Link,
    List,
    ListItem,
    MarkdownElement,
    Node,
    Paragraph,
    Strikethrough,
    Table,
    TableCell,
    TableRow,
    TaskListItem,
    Text,
)
from plumas.parser import ParseResult, Parser
from plumas.serialization import from_dict, from_json, to_dict, to_json
from plumas.text import extract_text
from plumas.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def parse(source: str, *, config: ParseConfig | None = None) -> ParseResult:
    """Parse Markdown source into the IR.

    Malformed or ambiguous syntax never raises; it degrades to plain text.

    Args:
        source: Markdown source text
        config: Parse configuration for this call. When omitted, the
            configuration active in the current context is used.

    Returns:
        ParseResult with the document and the footnote definitions

    Raises:
        TypeError: If source is not a string

    Example:
        >>> result = parse("Hi[^1]\\n\\n[^1]: A note")
        >>> list(result.footnotes)
        ['1']

    """
    if not isinstance(source, str):
        msg = f"source must be str, not {type(source).__name__}"
        raise TypeError(msg)

    if config is None:
        return Parser(source).parse()

    with parse_config_context(config):
        return Parser(source).parse()


__all__ = [
    # Main API
    "parse",
    "Parser",
    "ParseResult",
    "__version__",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "PlumasError",
    "ParseError",
    "TableFormatError",
    "RenderError",
    # Helpers
    "BaseVisitor",
    "transform",
    "extract_text",
    "group_lists",
    "number_footnotes",
    "ordered_definitions",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "MarkdownElement",
    "SPACES_PER_INDENT_LEVEL",
    "ColumnAlignment",
    "Document",
    "Header",
    "Paragraph",
    "BlockQuote",
    "List",
    "ListItem",
    "TaskListItem",
    "HorizontalRule",
    "Table",
    "TableRow",
    "TableCell",
    "DefinitionList",
    "DefinitionItem",
    "DefinitionTerm",
    "DefinitionDetails",
    "FootnoteDefinition",
    "Text",
    "Bold",
    "Italic",
    "Strikethrough",
    "Link",
    "Image",
    "ImageLink",
    "Code",
    "FootnoteReference",
    "LineBreak",
]
