"""Grouping of list items into List containers.

The parser emits one ListItem / TaskListItem per line. Consumers that want
containers run this post-pass (or set ``ParseConfig(group_lists=True)``).

Example:
    >>> blocks = parse("- a\\n- b\\n1. c").children
    >>> [type(b).__name__ for b in group_lists(blocks)]
    ['List', 'List']
"""

from collections.abc import Iterable

from plumas.nodes import Block, List, ListItem, TaskListItem


def _is_ordered(item: ListItem | TaskListItem) -> bool:
    return isinstance(item, ListItem) and item.order is not None


def group_lists(blocks: Iterable[Block]) -> tuple[Block, ...]:
    """Group runs of consecutive list items into List nodes.

    A run breaks on any other block or when items switch between ordered
    and unordered. Task items join unordered lists. Nesting levels are kept
    on the items (``item.level``); lists are not nested.

    Args:
        blocks: Top-level blocks as produced by the parser

    Returns:
        New tuple of blocks with list items wrapped
    """
    grouped: list[Block] = []
    run: list[ListItem | TaskListItem] = []

    def flush() -> None:
        if run:
            grouped.append(List(items=tuple(run), ordered=_is_ordered(run[0])))
            run.clear()

    for block in blocks:
        if isinstance(block, ListItem | TaskListItem):
            if run and _is_ordered(run[0]) != _is_ordered(block):
                flush()
            run.append(block)
        else:
            flush()
            grouped.append(block)

    flush()
    return tuple(grouped)
