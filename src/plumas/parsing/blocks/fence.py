"""Fenced code block parsing for Plumas parser.

Handles ``` fences with an optional language tag:

    ```python
    print("hi")
    ```

A fence without a closing line is not a code block; the opening line falls
back to ordinary text.
"""

from __future__ import annotations

from bisect import bisect_right

from plumas.nodes import Code
from plumas.parsing.patterns import FENCE_INLINE, FENCE_OPEN
from plumas.utils.logger import get_logger

logger = get_logger(__name__)


class CodeFenceMixin:
    """Mixin for fenced code block parsing.

    Required Host Attributes:
        - _fence_closers: list[int] (sorted indices of closing fence lines)

    """

    _fence_closers: list[int]

    @staticmethod
    def _index_fence_closers(lines: list[str]) -> list[int]:
        """Indices of every line that can close a fence, in order."""
        return [i for i, line in enumerate(lines) if FENCE_OPEN.match(line.strip())]

    def _is_fence_line(self, line: str) -> bool:
        """Check if line opens a fence (``` + optional language)."""
        return FENCE_OPEN.match(line.strip()) is not None

    def _find_closing_fence(self, start: int) -> int | None:
        """Index of the first closing fence after line start, if any."""
        pos = bisect_right(self._fence_closers, start)
        if pos < len(self._fence_closers):
            return self._fence_closers[pos]
        return None

    def _is_code_fence_start(self, lines: list[str], start: int) -> bool:
        """Check if a code block (fenced or single-line) starts at start."""
        stripped = lines[start].strip()
        if FENCE_INLINE.match(stripped) is not None:
            return True
        return self._is_fence_line(stripped) and self._find_closing_fence(start) is not None

    def _try_parse_code_fence(self, lines: list[str], start: int) -> tuple[Code, int] | None:
        """Try to parse a fenced code block opening at line start.

        Returns:
            (Code, consumed_lines) including both fences, or None if the line
            is not a fence or the fence is never closed.
        """
        stripped = lines[start].strip()

        match = FENCE_OPEN.match(stripped)
        if match is None:
            # Single-line form: ```code```
            inline = FENCE_INLINE.match(stripped)
            if inline is None:
                return None
            logger.debug("Single-line code block at line %d", start + 1)
            return Code(content=inline.group(1), is_block=True), 1

        close = self._find_closing_fence(start)
        if close is None:
            logger.debug(
                "Code fence at line %d has no closing fence; treating as text", start + 1
            )
            return None

        language = match.group(1) or None
        content = "\n".join(lines[start + 1 : close]).rstrip("\n")
        logger.debug(
            "Code block at lines %d-%d (language: %s)", start + 1, close + 1, language
        )
        return Code(content=content, language=language, is_block=True), close - start + 1
