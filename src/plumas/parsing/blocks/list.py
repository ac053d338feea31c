"""List item classification for Plumas parser.

Each list line becomes exactly one ListItem or TaskListItem. Items are not
grouped here; see plumas.lists.group_lists for the optional post-pass.

Marker precedence:
1. Task:      - [ ] / - [x] / - [X]
2. Unordered: - * + •
3. Ordered:   <digits>.

"""

from __future__ import annotations

from plumas.nodes import ListItem, TaskListItem
from plumas.parsing.patterns import (
    HORIZONTAL_RULE,
    ORDERED_ITEM,
    TASK_ITEM,
    UNORDERED_ITEM,
)
from plumas.utils.logger import get_logger

logger = get_logger(__name__)

# Largest ordered-list number (signed 32-bit)
_MAX_ORDER = 2**31 - 1


def _parse_order(digits: str) -> int | None:
    """Parse an ordered-list number, or None if it is too large."""
    significant = digits.lstrip("0")
    if len(significant) > len(str(_MAX_ORDER)):
        return None
    order = int(digits)
    return order if order <= _MAX_ORDER else None


class ListItemMixin:
    """Mixin for list item classification.

    Required Host Attributes:
        - _task_lists_enabled: bool

    Required Host Methods:
        - _parse_inline(text, depth) -> tuple[Inline, ...]

    """

    def _is_list_item_line(self, line: str) -> bool:
        """Check if line would be classified as a list item.

        Same decision as _classify_list_item without inline parsing.
        """
        if HORIZONTAL_RULE.match(line):
            return False
        if UNORDERED_ITEM.match(line):
            # Task items are a subset of unordered items
            return True
        match = ORDERED_ITEM.match(line)
        return match is not None and _parse_order(match.group(2)) is not None

    def _classify_list_item(self, line: str) -> ListItem | TaskListItem | None:
        """Classify a single line as a list item.

        Lines shaped like a horizontal rule (``- - -``, ``* * *``) are
        declined so the rule detector can claim them.

        Returns:
            TaskListItem, ListItem, or None if the line is not a list item
        """
        if HORIZONTAL_RULE.match(line):
            return None

        if self._task_lists_enabled:
            match = TASK_ITEM.match(line)
            if match:
                return TaskListItem(
                    checked=match.group(2) in "xX",
                    children=self._parse_inline(match.group(3).strip()),
                    indent=len(match.group(1)),
                )

        match = UNORDERED_ITEM.match(line)
        if match:
            return ListItem(
                children=self._parse_inline(match.group(2).strip()),
                indent=len(match.group(1)),
            )

        match = ORDERED_ITEM.match(line)
        if match:
            order = _parse_order(match.group(2))
            if order is None:
                logger.debug("Ordered list number too large: %r", match.group(2))
                return None
            return ListItem(
                children=self._parse_inline(match.group(3).strip()),
                order=order,
                indent=len(match.group(1)),
            )

        return None
