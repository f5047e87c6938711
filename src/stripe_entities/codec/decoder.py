"""Generic entity decoder: untyped JSON object -> immutable entity.

Fields are processed in declaration order; order only decides which error
is reported first. Unknown keys in the payload are ignored.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from stripe_entities.codec.enum_codec import decode_enum
from stripe_entities.domain.exceptions import CodecError, TypeMismatchError
from stripe_entities.domain.schema import (
    EntityType,
    EnumType,
    MappingType,
    OpaqueType,
    ScalarType,
    SequenceType,
    WireType,
    check_scalar,
    schema_for,
)
from stripe_entities.domain.value_objects import JsonValue, is_json_compatible

T = TypeVar("T")


def decode(entity_type: type[T], payload: Any, *, strict_enums: bool | None = None) -> T:
    """Decode a JSON object into an instance of ``entity_type``.

    Args:
        entity_type: Entity dataclass to build.
        payload: JSON object as produced by ``json.loads``.
        strict_enums: Reject unknown enum values even where a fallback is
            declared. Defaults to the ``strict_enums`` setting.

    Returns:
        A new, fully constructed entity.

    Raises:
        MissingRequiredFieldError: A required field is absent or null.
        UnknownEnumValueError: An enum value is unknown and no fallback applies.
        TypeMismatchError: A value has the wrong JSON shape.
    """
    return _decode_entity(entity_type, payload, strict_enums)


def _decode_entity(entity_type: type[T], payload: Any, strict: bool | None, path: tuple[str, ...] = ()) -> T:
    if not isinstance(payload, Mapping):
        raise TypeMismatchError(None, f"{entity_type.__name__} object", payload)

    values: dict[str, Any] = {}
    for spec in schema_for(entity_type).fields:
        raw = payload.get(spec.wire_key)
        value = None
        if raw is not None:
            try:
                value = _decode_value(spec.wire_type, raw, spec.fallback, strict, (*path, spec.name))
            except CodecError as exc:
                raise exc.with_parent(spec.name) from exc
        values[spec.name] = spec.resolve(value)

    return entity_type(**values)


def _decode_value(
    wire_type: WireType, raw: Any, fallback: Any, strict: bool | None, path: tuple[str, ...]
) -> Any:
    # ``path`` only labels log records; error paths are built by ``with_parent``.
    if isinstance(wire_type, OpaqueType):
        if wire_type.wrapped:
            return JsonValue(raw)
        if not is_json_compatible(raw):
            raise TypeMismatchError(None, wire_type.describe(), raw)
        return copy.deepcopy(raw)

    if raw is None:
        raise TypeMismatchError(None, wire_type.describe(), raw)

    if isinstance(wire_type, ScalarType):
        return check_scalar(wire_type.py_type, raw)

    if isinstance(wire_type, EnumType):
        return decode_enum(raw, wire_type.enum_type, fallback, strict=strict, where=".".join(path))

    if isinstance(wire_type, EntityType):
        return _decode_entity(wire_type.entity_type, raw, strict, path)

    if isinstance(wire_type, MappingType):
        if not isinstance(raw, Mapping):
            raise TypeMismatchError(None, wire_type.describe(), raw)
        decoded = {}
        for key, item in raw.items():
            if not isinstance(key, str):
                raise TypeMismatchError(None, "str key", key)
            try:
                decoded[key] = _decode_value(wire_type.value_type, item, fallback, strict, (*path, key))
            except CodecError as exc:
                raise exc.with_parent(key) from exc
        return MappingProxyType(decoded)

    if isinstance(wire_type, SequenceType):
        if not isinstance(raw, (list, tuple)):
            raise TypeMismatchError(None, wire_type.describe(), raw)
        elements = []
        for index, item in enumerate(raw):
            try:
                elements.append(
                    _decode_value(wire_type.element_type, item, fallback, strict, (*path, str(index)))
                )
            except CodecError as exc:
                raise exc.with_parent(str(index)) from exc
        return wire_type.container(elements)

    raise TypeError(f"Unsupported wire type: {wire_type!r}")
