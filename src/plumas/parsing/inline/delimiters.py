"""Emphasis and strikethrough parsing for Plumas parser.

Matches an opening delimiter (``~~``, ``**``, ``__``, ``*``, ``_``) with
the nearest valid closing delimiter. This is a simplified take on
CommonMark's flanking rules:

- Escaped characters and code span interiors never close a span.
- A single ``*`` / ``_`` closer is rejected when it is flanked by
  whitespace on both sides (``a * b * c`` stays literal).
- Underscores do not open or close inside words (``snake_case_name``).
- Empty spans (``****``) are not emphasis.

Thread Safety:
All methods are stateless. Safe for concurrent use.

"""

from __future__ import annotations

from plumas.nodes import Bold, Inline, Italic, Strikethrough
from plumas.parsing.charsets import is_unicode_whitespace


class DelimiterMixin:
    """Mixin for delimiter-based inline spans.

    Required Host Attributes:
        - _strikethrough_enabled: bool
        - _closer_misses: dict[tuple[str, str], set[int]]

    Required Host Methods:
        - _parse_inline(text, depth) -> tuple[Inline, ...]

    """

    _closer_misses: dict[tuple[str, str], set[int]]

    def _parse_delimited(
        self, text: str, pos: int, depth: int
    ) -> tuple[Inline | None, int]:
        """Parse a strikethrough, bold or italic span opening at pos.

        Args:
            text: Text being scanned
            pos: Position of a ``~``, ``*`` or ``_`` character
            depth: Current inline recursion depth

        Returns:
            (node, end_pos) on a match. (None, end_pos) when there is no
            match; text[pos:end_pos] is then literal text.
        """
        char = text[pos]

        if char == "~":
            if not (self._strikethrough_enabled and text.startswith("~~", pos)):
                return None, pos + 1
            delim = "~~"
        elif text.startswith(char * 2, pos):
            # Doubled opener is bold only; never italic
            delim = char * 2
        else:
            delim = char

        start = pos + len(delim)

        # Intraword underscores are literal
        if char == "_" and pos > 0 and text[pos - 1].isalnum():
            return None, start

        close = self._find_closing_delimiter(text, start, delim)
        if close == -1:
            return None, start

        children = self._parse_inline(text[start:close], depth + 1)
        end = close + len(delim)

        if delim == "~~":
            return Strikethrough(children=children), end
        if len(delim) == 2:
            return Bold(children=children), end
        return Italic(children=children), end

    def _find_closing_delimiter(self, text: str, start: int, delim: str) -> int:
        """Find the closing delimiter for a span whose content starts at start.

        Skips escaped characters and code span interiors. Runs of the
        delimiter character are examined as a whole: single-char delimiters
        only close on a run of length one; double delimiters close on the
        last two characters of a run.

        Positions walked by a failed search are remembered per text and
        delimiter: past its start, whether a position can close depends only
        on the text, so any later search reaching one of them fails as well.

        Returns:
            Index of the closing delimiter, or -1 if not found
        """
        char = delim[0]
        width = len(delim)
        text_len = len(text)
        misses = self._closer_misses.setdefault((text, delim), set())
        walked: list[int] = []
        i = start

        while i < text_len:
            if i in misses:
                break
            if i > start:
                walked.append(i)
            c = text[i]

            if c == "\\" and i + 1 < text_len:
                i += 2
                continue

            if c == "`":
                end = text.find("`", i + 1)
                i = end + 1 if end != -1 else i + 1
                continue

            if c != char:
                i += 1
                continue

            run_end = i
            while run_end < text_len and text[run_end] == char:
                run_end += 1
            run = run_end - i

            if width == 1:
                if run == 1 and self._is_valid_single_closer(text, i, start):
                    return i
            elif run >= width:
                close = run_end - width
                if close > start and not self._closes_inside_word(text, close, delim):
                    return close

            i = run_end

        misses.update(walked)
        return -1

    def _is_valid_single_closer(self, text: str, pos: int, start: int) -> bool:
        """Check a lone ``*`` or ``_`` candidate closer at pos."""
        if pos <= start:
            return False
        before = text[pos - 1]
        after = text[pos + 1] if pos + 1 < len(text) else ""
        if is_unicode_whitespace(before) and is_unicode_whitespace(after):
            return False
        return not self._closes_inside_word(text, pos, text[pos])

    def _closes_inside_word(self, text: str, pos: int, delim: str) -> bool:
        """Underscore closers must not be followed by a word character."""
        if delim[0] != "_":
            return False
        after = pos + len(delim)
        return after < len(text) and text[after].isalnum()
