"""Link and image parsing for Plumas parser.

Handles inline links, images, image links and footnote references.

Link text and destinations are found with a balanced-bracket scan, so
``[a [b] c](url)`` and ``(https://en.wikipedia.org/wiki/Foo_(bar))`` work.
Backslash escapes and code spans are opaque to the scan.

Bracket pairs are indexed with one stack pass per text and remembered on
the parser, so a run of unmatched openers is scanned once, not once per
opener.
"""

from __future__ import annotations

from plumas.nodes import FootnoteReference, Image, ImageLink, Inline, Link
from plumas.parsing.patterns import FOOTNOTE_REF, process_escapes


def _index_bracket_pairs(
    text: str, start: int, open_char: str, close_char: str, pairs: dict[int, int]
) -> None:
    """Record the closing bracket of every opener on the scan path from start.

    The path skips escaped characters and code span interiors. Every opener
    on it gets the index a depth-counting scan starting at that opener
    would return; openers that are never closed get -1.

    Args:
        text: The full text being parsed
        start: Position of an opening bracket
        open_char: ``[`` or ``(``
        close_char: ``]`` or ``)``
        pairs: Opener index -> closer index, updated in place

    """
    stack: list[int] = []
    text_len = len(text)
    i = start

    while i < text_len:
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == "`":
            end = text.find("`", i + 1)
            i = end + 1 if end != -1 else i + 1
            continue
        if char == open_char:
            stack.append(i)
        elif char == close_char and stack:
            pairs.setdefault(stack.pop(), i)
        i += 1

    for opener in stack:
        pairs.setdefault(opener, -1)


class LinkParsingMixin:
    """Mixin for link, image, and footnote reference parsing.

    Required Host Attributes:
        - _bracket_pairs: dict[tuple[str, str], dict[int, int]]

    Required Host Methods:
        - _parse_inline(text, depth) -> tuple[Inline, ...]

    """

    _bracket_pairs: dict[tuple[str, str], dict[int, int]]

    def _find_matching_bracket(
        self, text: str, start: int, open_char: str, close_char: str
    ) -> int:
        """Find the bracket closing the one at start.

        Returns:
            Index of the matching closing bracket, or -1 if not found
        """
        pairs = self._bracket_pairs.setdefault((text, open_char), {})
        if start not in pairs:
            _index_bracket_pairs(text, start, open_char, close_char, pairs)
        return pairs.get(start, -1)

    def _parse_destination(self, text: str, bracket_close: int) -> tuple[str, int] | None:
        """Parse ``(url)`` directly after the ``]`` at bracket_close.

        Returns:
            (raw_url, end_pos) or None if there is no balanced destination
        """
        paren_open = bracket_close + 1
        if paren_open >= len(text) or text[paren_open] != "(":
            return None
        paren_close = self._find_matching_bracket(text, paren_open, "(", ")")
        if paren_close == -1:
            return None
        return text[paren_open + 1 : paren_close].strip(), paren_close + 1

    def _try_parse_footnote_ref(
        self, text: str, pos: int
    ) -> tuple[FootnoteReference, int] | None:
        """Try to parse footnote reference at position.

        Format: [^identifier], identifier has no whitespace or ``]``

        Returns:
            (FootnoteReference, end_pos) or None
        """
        match = FOOTNOTE_REF.match(text, pos)
        if match is None:
            return None
        return FootnoteReference(identifier=match.group(1)), match.end()

    def _try_parse_link(
        self, text: str, pos: int, depth: int
    ) -> tuple[Inline, int] | None:
        """Try to parse an inline link at position.

        Format: [text](url). When the bracket content is exactly one image,
        ``[![alt](img)](url)``, the result is an ImageLink.

        Returns:
            (Link | ImageLink, end_pos) or None
        """
        bracket_close = self._find_matching_bracket(text, pos, "[", "]")
        if bracket_close == -1:
            return None

        destination = self._parse_destination(text, bracket_close)
        if destination is None:
            return None
        raw_url, end = destination
        url = process_escapes(raw_url)

        label = text[pos + 1 : bracket_close]
        image = self._match_whole_image(label)
        if image is not None:
            return (
                ImageLink(image_url=image.url, alt_text=image.alt_text, link_url=url),
                end,
            )

        return Link(url=url, children=self._parse_inline(label, depth + 1)), end

    def _try_parse_image(self, text: str, pos: int) -> tuple[Image, int] | None:
        """Try to parse image at position.

        Format: ![alt](url). An empty URL is not an image.

        Returns:
            (Image, end_pos) or None
        """
        if not text.startswith("![", pos):
            return None

        bracket_close = self._find_matching_bracket(text, pos + 1, "[", "]")
        if bracket_close == -1:
            return None

        destination = self._parse_destination(text, bracket_close)
        if destination is None:
            return None
        raw_url, end = destination
        if not raw_url:
            return None

        alt = process_escapes(text[pos + 2 : bracket_close])
        return Image(url=process_escapes(raw_url), alt_text=alt), end

    def _match_whole_image(self, label: str) -> Image | None:
        """Return the Image if label consists of exactly one image."""
        if not label.startswith("!["):
            return None
        result = self._try_parse_image(label, 0)
        if result is None:
            return None
        image, end = result
        return image if end == len(label) else None
