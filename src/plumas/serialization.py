"""IR serialization: JSON round-trip for Plumas nodes.

Converts typed IR nodes to/from JSON-compatible dicts. Useful for:
- Caching parsed documents to disk
- Handing the IR to a renderer in another process
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from plumas import parse
    from plumas.serialization import to_json, from_json

    doc = parse("# Hello **World**").document
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any

from plumas import nodes
from plumas.nodes import ColumnAlignment, Document, FootnoteDefinition, Node

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    name: cls
    for name, cls in vars(nodes).items()
    if isinstance(cls, type) and issubclass(cls, Node) and cls is not Node and is_dataclass(cls)
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an IR node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes; column alignments become their
    string values.

    Args:
        node: Any Plumas IR node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, ColumnAlignment):
        return value.value
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed IR node from a dict.

    Uses the ``_type`` discriminator to determine the node class.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed IR node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name], f.name)

    return node_cls(**kwargs)


def _deserialize_value(value: Any, field_name: str) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        if field_name == "alignments":
            return tuple(ColumnAlignment(item) for item in value)
        return tuple(_deserialize_value(item, field_name) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Document node.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node


def footnotes_to_dict(footnotes: dict[str, FootnoteDefinition]) -> dict[str, Any]:
    """Serialize a footnote table, keyed by identifier."""
    return {identifier: to_dict(definition) for identifier, definition in footnotes.items()}


def footnotes_from_dict(data: dict[str, Any]) -> dict[str, FootnoteDefinition]:
    """Reconstruct a footnote table produced by footnotes_to_dict.

    Raises:
        ValueError: If an entry is not a FootnoteDefinition.

    """
    footnotes: dict[str, FootnoteDefinition] = {}
    for identifier, raw in data.items():
        node = from_dict(raw)
        if not isinstance(node, FootnoteDefinition):
            msg = f"Expected FootnoteDefinition, got {type(node).__name__}"
            raise ValueError(msg)
        footnotes[identifier] = node
    return footnotes
