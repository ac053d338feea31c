"""IR Visitor and Transformer for Plumas.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example (collect all headers):

    class HeaderCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.headers: list[Header] = []

        def visit_header(self, node: Header) -> None:
            self.headers.append(node)

    collector = HeaderCollector()
    collector.visit(result.document)

Example (drop every image):

    new_doc = transform(doc, lambda n: None if isinstance(n, Image) else n)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from plumas.errors import RenderError
from plumas.nodes import (
    BlockQuote,
    Bold,
    Code,
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
    Italic,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Table,
    TableCell,
    TableRow,
    TaskListItem,
    Text,
)


def _not_a_node(node: object) -> RenderError:
    return RenderError(f"Not an IR node: {type(node).__name__}")


class BaseVisitor[T]:
    """Base IR visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    Raises:
        RenderError: When handed an object that is not an IR node

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_header(self, node: Header) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_block_quote(self, node: BlockQuote) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_task_list_item(self, node: TaskListItem) -> T:
        return self.visit_default(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> T:
        return self.visit_default(node)

    def visit_table(self, node: Table) -> T:
        return self.visit_default(node)

    def visit_table_row(self, node: TableRow) -> T:
        return self.visit_default(node)

    def visit_table_cell(self, node: TableCell) -> T:
        return self.visit_default(node)

    def visit_definition_list(self, node: DefinitionList) -> T:
        return self.visit_default(node)

    def visit_definition_item(self, node: DefinitionItem) -> T:
        return self.visit_default(node)

    def visit_definition_term(self, node: DefinitionTerm) -> T:
        return self.visit_default(node)

    def visit_definition_details(self, node: DefinitionDetails) -> T:
        return self.visit_default(node)

    def visit_footnote_definition(self, node: FootnoteDefinition) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def visit_strikethrough(self, node: Strikethrough) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    def visit_image(self, node: Image) -> T:
        return self.visit_default(node)

    def visit_image_link(self, node: ImageLink) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        """Code spans and code blocks; check ``node.is_block``."""
        return self.visit_default(node)

    def visit_line_break(self, node: LineBreak) -> T:
        return self.visit_default(node)

    def visit_footnote_reference(self, node: FootnoteReference) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Header():
                return self.visit_header(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case BlockQuote():
                return self.visit_block_quote(node)
            case List():
                return self.visit_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case TaskListItem():
                return self.visit_task_list_item(node)
            case HorizontalRule():
                return self.visit_horizontal_rule(node)
            case Table():
                return self.visit_table(node)
            case TableRow():
                return self.visit_table_row(node)
            case TableCell():
                return self.visit_table_cell(node)
            case DefinitionList():
                return self.visit_definition_list(node)
            case DefinitionItem():
                return self.visit_definition_item(node)
            case DefinitionTerm():
                return self.visit_definition_term(node)
            case DefinitionDetails():
                return self.visit_definition_details(node)
            case FootnoteDefinition():
                return self.visit_footnote_definition(node)
            case Text():
                return self.visit_text(node)
            case Bold():
                return self.visit_bold(node)
            case Italic():
                return self.visit_italic(node)
            case Strikethrough():
                return self.visit_strikethrough(node)
            case Link():
                return self.visit_link(node)
            case Image():
                return self.visit_image(node)
            case ImageLink():
                return self.visit_image_link(node)
            case Code():
                return self.visit_code(node)
            case LineBreak():
                return self.visit_line_break(node)
            case FootnoteReference():
                return self.visit_footnote_reference(node)
            case _:
                raise _not_a_node(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        for child in _child_nodes(node):
            self.visit(child)


def _child_nodes(node: Node) -> tuple[Node, ...]:
    """Direct children of node, in reading order."""
    match node:
        case (
            Document(children=children)
            | Header(children=children)
            | Paragraph(children=children)
            | BlockQuote(children=children)
            | ListItem(children=children)
            | TaskListItem(children=children)
            | TableCell(children=children)
            | DefinitionTerm(children=children)
            | DefinitionDetails(children=children)
            | FootnoteDefinition(children=children)
            | Bold(children=children)
            | Italic(children=children)
            | Strikethrough(children=children)
            | Link(children=children)
        ):
            return children
        case List(items=items) | DefinitionList(items=items):
            return items
        case Table(rows=rows):
            return rows
        case TableRow(cells=cells):
            return cells
        case DefinitionItem(term=term, details=details):
            return (term, *details)
        case _:
            return ()  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children. This ensures ``fn``
    always receives nodes with already-transformed children.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    Document cannot be removed; returning None for it raises TypeError.
    Removing a DefinitionTerm leaves an empty term in its item.

    Since all nodes are frozen dataclasses, this produces a new immutable tree.
    The original tree is untouched.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    if not isinstance(node, Node):
        raise _not_a_node(node)
    transformed = _transform_children(node, fn)
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; filter out None (removed) nodes."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    match node:
        case DefinitionItem(term=term, details=details):
            new_term = _transform_node(term, fn) or DefinitionTerm(children=())
            new_details = _filtered(details)
            if new_term != term or new_details != details:
                return dataclasses.replace(node, term=new_term, details=new_details)
        case List(items=items) | DefinitionList(items=items):
            new_items = _filtered(items)
            if new_items != items:
                return dataclasses.replace(node, items=new_items)
        case Table(rows=rows):
            new_rows = _filtered(rows)
            if new_rows != rows:
                return dataclasses.replace(node, rows=new_rows)
        case TableRow(cells=cells):
            new_cells = _filtered(cells)
            if new_cells != cells:
                return dataclasses.replace(node, cells=new_cells)
        case _:
            children = _child_nodes(node)
            if children:
                new_children = _filtered(children)
                if new_children != children:
                    return dataclasses.replace(node, children=new_children)

    return node
