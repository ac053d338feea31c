"""Core inline scanning for Plumas parser.

A single left-to-right cursor with a plain-text accumulator. At each
position the productions are tried in priority order and the first match
wins:

1. Backslash escape
2. Code span
3. Footnote reference
4. Link / image link
5. Image
6. Strikethrough
7. Bold
8. Italic

Anything else is accumulated as plain text. Matched delimiter content is
scanned again recursively, so emphasis and links nest.

Thread Safety:
All methods are stateless or use instance-local state only.
Safe for concurrent use when each parser instance is used by one thread.

"""

from __future__ import annotations

from plumas.nodes import Code, Inline, Text
from plumas.parsing.charsets import ESCAPABLE, INLINE_SPECIAL
from plumas.parsing.patterns import process_escapes


class InlineParsingCoreMixin:
    """Core inline scanning loop.

    Required Host Attributes:
        - _footnotes_enabled: bool
        - _max_nesting_depth: int

    Required Host Methods (from other mixins):
        - _try_parse_footnote_ref(text, pos) -> tuple | None
        - _try_parse_link(text, pos, depth) -> tuple | None
        - _try_parse_image(text, pos) -> tuple | None
        - _parse_delimited(text, pos, depth) -> tuple

    """

    # Required host attributes (documented, not declared, to avoid override conflicts)
    # _footnotes_enabled: bool
    # _max_nesting_depth: int

    def _parse_inline(self, text: str, depth: int = 0) -> tuple[Inline, ...]:
        """Scan text into inline nodes.

        Concatenating the Text content of the result reproduces the text
        minus consumed markup.

        Args:
            text: Text run to scan (a paragraph, cell, header, ...)
            depth: Current recursion depth; spans nested deeper than
                max_nesting_depth are returned as a single Text node

        Returns:
            Tuple of inline nodes
        """
        if not text:
            return ()

        if depth > self._max_nesting_depth:
            return (Text(content=process_escapes(text)),)

        nodes: list[Inline] = []
        buffer: list[str] = []
        pos = 0
        text_len = len(text)  # Cache length for hot loop

        while pos < text_len:
            char = text[pos]

            if char not in INLINE_SPECIAL:
                buffer.append(char)
                pos += 1
                continue

            # Escaped character
            if char == "\\":
                if pos + 1 < text_len and text[pos + 1] in ESCAPABLE:
                    buffer.append(text[pos + 1])
                    pos += 2
                else:
                    buffer.append(char)
                    pos += 1
                continue

            # Code span: `code`
            if char == "`":
                code_result = self._try_parse_code_span(text, pos)
                if code_result:
                    node, pos = code_result
                    self._flush_text(buffer, nodes)
                    nodes.append(node)
                else:
                    buffer.append(char)
                    pos += 1
                continue

            # Footnote reference [^id], link [text](url), image link
            if char == "[":
                if self._footnotes_enabled:
                    fn_result = self._try_parse_footnote_ref(text, pos)
                    if fn_result:
                        node, pos = fn_result
                        self._flush_text(buffer, nodes)
                        nodes.append(node)
                        continue

                link_result = self._try_parse_link(text, pos, depth)
                if link_result:
                    node, pos = link_result
                    self._flush_text(buffer, nodes)
                    nodes.append(node)
                    continue

                buffer.append(char)
                pos += 1
                continue

            # Image: ![alt](url)
            if char == "!":
                img_result = self._try_parse_image(text, pos)
                if img_result:
                    node, pos = img_result
                    self._flush_text(buffer, nodes)
                    nodes.append(node)
                    continue
                buffer.append(char)
                pos += 1
                continue

            # Strikethrough, bold, italic
            delimited, new_pos = self._parse_delimited(text, pos, depth)
            if delimited is None:
                # Unmatched opener: the delimiter chars are literal text
                buffer.append(text[pos:new_pos])
            else:
                self._flush_text(buffer, nodes)
                nodes.append(delimited)
            pos = new_pos

        self._flush_text(buffer, nodes)
        return tuple(nodes)

    def _flush_text(self, buffer: list[str], nodes: list[Inline]) -> None:
        """Emit accumulated plain text as one Text node."""
        if buffer:
            nodes.append(Text(content="".join(buffer)))
            buffer.clear()

    def _try_parse_code_span(self, text: str, pos: int) -> tuple[Code, int] | None:
        """Parse `code` starting at pos.

        The span ends at the first following backtick; there is no nesting.
        Content is stripped and never inline-parsed.

        Returns:
            (Code, end_pos) or None if the span is unterminated or empty
        """
        close = text.find("`", pos + 1)
        if close == -1 or close == pos + 1:
            return None
        return Code(content=text[pos + 1 : close].strip()), close + 1
