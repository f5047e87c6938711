"""Generic entity encoder: immutable entity -> minimal JSON object.

Fields holding None are omitted; the API treats an absent key, not an
explicit null, as "unset". Encoding cannot fail for a constructed entity.
"""

from __future__ import annotations

import copy
import json
from typing import Any

from stripe_entities.codec.enum_codec import encode_enum
from stripe_entities.domain.schema import (
    EntityType,
    EnumType,
    MappingType,
    OpaqueType,
    SequenceType,
    WireType,
    schema_for,
)
from stripe_entities.domain.value_objects import JsonValue


def encode(entity: Any) -> dict[str, Any]:
    """Encode ``entity`` into a fresh JSON-compatible dict keyed by wire keys."""
    payload: dict[str, Any] = {}
    for spec in schema_for(type(entity)).fields:
        value = getattr(entity, spec.name)
        if value is None:
            continue
        payload[spec.wire_key] = _encode_value(spec.wire_type, value)
    return payload


def _encode_value(wire_type: WireType, value: Any) -> Any:
    if value is None:
        return None

    if isinstance(wire_type, OpaqueType):
        if isinstance(value, JsonValue):
            return value.to_json()
        return copy.deepcopy(value)

    if isinstance(wire_type, EnumType):
        return encode_enum(value)

    if isinstance(wire_type, EntityType):
        return encode(value)

    if isinstance(wire_type, MappingType):
        return {key: _encode_value(wire_type.value_type, item) for key, item in value.items()}

    if isinstance(wire_type, SequenceType):
        items = [_encode_value(wire_type.element_type, item) for item in value]
        if wire_type.container is frozenset:
            # Sets have no wire order; sort so output is deterministic.
            items.sort(key=lambda item: json.dumps(item, sort_keys=True))
        return items

    return value
