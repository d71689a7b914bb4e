"""Document serialization: JSON round-trip for unleashed-md values.

Converts Documents (and their spans, styles and breaks) to and from
JSON-compatible dicts. Useful for:
- Caching parsed documents next to the raw markup they came from
- Handing documents to a presentation layer in another process
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from unleashed_md import parse_markup
    from unleashed_md.serialization import to_json, from_json

    doc = parse_markup("**Hello** [World](home)")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from dataclasses import fields, is_dataclass
from typing import Any

from unleashed_md.errors import SerializationError
from unleashed_md.nodes import (
    Bold,
    Break,
    Document,
    Italic,
    Link,
    LinkStyle,
    Span,
    StyleSpan,
)

# Registry of type names to classes for deserialization
_VALUE_TYPES: dict[str, type] = {
    "Document": Document,
    "StyleSpan": StyleSpan,
    "Span": Span,
    "Break": Break,
    "Italic": Italic,
    "Bold": Bold,
    "LinkStyle": LinkStyle,
    "Link": Link,
}


def to_dict(value: Any) -> dict[str, Any]:
    """Convert a document value to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization and
    recursively serializes nested values.

    Args:
        value: Document, StyleSpan, Span, Break, a Style or a Link.

    Returns:
        Dict with ``_type`` and all fields.

    """
    result: dict[str, Any] = {"_type": type(value).__name__}
    for f in fields(value):
        result[f.name] = _serialize_value(getattr(value, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a typed value from a dict.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Frozen dataclass value.

    Raises:
        SerializationError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized value"
        raise SerializationError(msg)

    value_cls = _VALUE_TYPES.get(type_name)
    if value_cls is None:
        msg = f"Unknown value type: {type_name!r}"
        raise SerializationError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(value_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    try:
        return value_cls(**kwargs)
    except TypeError as e:
        msg = f"Cannot build {type_name} from serialized fields: {e}"
        raise SerializationError(msg) from e


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
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
        Document value.

    Raises:
        SerializationError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise SerializationError(msg)
    value = from_dict(raw)
    if not isinstance(value, Document):
        msg = f"Expected Document, got {type(value).__name__}"
        raise SerializationError(msg)
    return value


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
