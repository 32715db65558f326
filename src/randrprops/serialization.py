"""Result serialization: JSON round-trip for PropsOutput.

Converts the typed result model to/from JSON-compatible dicts. Useful for:
- Storing a snapshot of the display configuration on disk
- Handing parsed outputs to tools written in other languages
- Debugging and inspection

All output is deterministic (sorted keys) so equal results serialize to
equal strings.

Example:
    from randrprops import parse_props
    from randrprops.serialization import to_json, from_json

    result = parse_props(report)
    json_str = to_json(result)
    assert from_json(json_str) == result

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from randrprops.nodes import (
    Dimensions,
    Output,
    OutputMode,
    Position,
    PropsOutput,
    Rate,
    Reflection,
    Resolution,
    Rotation,
)

# Registry of model type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "PropsOutput": PropsOutput,
    "Output": Output,
    "OutputMode": OutputMode,
    "Rate": Rate,
    "Resolution": Resolution,
    "Position": Position,
    "Dimensions": Dimensions,
}

# Fields holding enum members, serialized as their values
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "rotation": Rotation,
    "reflection": Reflection,
}


def to_dict(node: Any) -> dict[str, Any]:
    """Convert a model object to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: PropsOutput or any object it contains.

    Returns:
        Dict with ``_type`` and all fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if is_dataclass(value):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, float, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a typed model object from a dict.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Model object (frozen dataclass).

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
    if field_name in _ENUM_FIELDS:
        return _ENUM_FIELDS[field_name](value)
    if field_name == "properties":
        return MappingProxyType(dict(value))
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item, field_name) for item in value)
    return value


def to_json(result: PropsOutput, *, indent: int | None = None) -> str:
    """Serialize a PropsOutput to a JSON string.

    Args:
        result: Parse result to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(result), sort_keys=True, indent=indent)


def from_json(data: str) -> PropsOutput:
    """Deserialize a PropsOutput from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a PropsOutput.

    """
    raw = json.loads(data)
    node = from_dict(raw)
    if not isinstance(node, PropsOutput):
        msg = f"Expected PropsOutput, got {type(node).__name__}"
        raise ValueError(msg)
    return node
