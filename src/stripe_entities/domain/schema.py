"""Declarative field schema for wire entities.

Each entity is a frozen dataclass. Its fields declare their wire policy
either implicitly (the annotation alone) or through ``wire_field``:

    id: str                                         # required, wire key "id"
    object_type: str = wire_field("object", default="payment_intent")
    theme: ElementTheme = wire_field(fallback=ElementTheme.STRIPE)
    customer: str | None = None                     # optional

``schema_for`` turns those declarations into an immutable ``EntitySchema``
once per entity type. Both the entity constructor and the codec read the
same schema, so defaults and required-field checks behave identically for
directly constructed and decoded entities.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Union

from stripe_entities.domain.exceptions import CodecError, MissingRequiredFieldError, TypeMismatchError
from stripe_entities.domain.value_objects import JsonValue, to_plain_json

POLICY_KEY = "stripe_entities.policy"

_SCALAR_TYPES = (str, int, float, bool)


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


# "No default declared". Distinct from ``dataclasses.MISSING``, which a
# dataclass attribute cannot carry as its own default.
UNSET: Any = _Unset()


# =============================================================================
# Field policy
# =============================================================================


@dataclass(frozen=True, slots=True)
class FieldPolicy:
    """Per-field wire policy attached to ``dataclasses.field`` metadata."""

    key: str | None = None
    default: Any = UNSET
    default_factory: Any = UNSET
    fallback: Enum | None = None


def wire_field(
    key: str | None = None,
    *,
    default: Any = UNSET,
    default_factory: Callable[[], Any] | Any = UNSET,
    fallback: Enum | None = None,
) -> Any:
    """Declare a dataclass field with an explicit wire policy.

    Args:
        key: Wire key when it differs from the field name.
        default: Value substituted when the field is absent or null.
        default_factory: Zero-argument callable producing the default, for
            mutable defaults such as empty mappings.
        fallback: Enum member used when the wire value is null or is not a
            known member. Implies ``default=fallback`` when no default is
            given.

    Returns:
        A ``dataclasses.field`` carrying the policy in its metadata.
    """
    if default is not UNSET and default_factory is not UNSET:
        raise ValueError("cannot specify both default and default_factory")

    if fallback is not None and default is UNSET and default_factory is UNSET:
        default = fallback

    policy = FieldPolicy(key=key, default=default, default_factory=default_factory, fallback=fallback)
    metadata = {POLICY_KEY: policy}

    if default_factory is not UNSET:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    if default is not UNSET:
        return dataclasses.field(default=default, metadata=metadata)
    return dataclasses.field(metadata=metadata)


# =============================================================================
# Wire types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ScalarType:
    py_type: type

    def describe(self) -> str:
        return self.py_type.__name__


@dataclass(frozen=True, slots=True)
class OpaqueType:
    """Arbitrary JSON. ``wrapped`` values are carried as ``JsonValue``."""

    wrapped: bool

    def describe(self) -> str:
        return "JsonValue" if self.wrapped else "JSON value"


@dataclass(frozen=True, slots=True)
class EnumType:
    enum_type: type[Enum]

    def describe(self) -> str:
        return self.enum_type.__name__


@dataclass(frozen=True, slots=True)
class EntityType:
    entity_type: type

    def describe(self) -> str:
        return self.entity_type.__name__


@dataclass(frozen=True, slots=True)
class MappingType:
    value_type: WireType

    def describe(self) -> str:
        return f"mapping of str to {self.value_type.describe()}"


@dataclass(frozen=True, slots=True)
class SequenceType:
    element_type: WireType
    container: type  # tuple or frozenset

    def describe(self) -> str:
        kind = "set" if self.container is frozenset else "list"
        return f"{kind} of {self.element_type.describe()}"


WireType = Union[ScalarType, OpaqueType, EnumType, EntityType, MappingType, SequenceType]


def _strip_optional(annotation: Any) -> tuple[Any, bool]:
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        optional = len(args) != len(typing.get_args(annotation))
        if len(args) != 1:
            raise TypeError(f"Unsupported union annotation: {annotation!r}")
        return args[0], optional
    return annotation, False


@lru_cache(maxsize=None)
def resolve_wire_type(annotation: Any) -> WireType:
    """Map a (non-optional) type annotation to its wire type."""
    if annotation is Any:
        return OpaqueType(wrapped=False)
    if annotation is JsonValue:
        return OpaqueType(wrapped=True)

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin in (Mapping, dict):
        if args and args[0] is not str:
            raise TypeError(f"Mapping keys must be str: {annotation!r}")
        return MappingType(resolve_wire_type(args[1] if args else Any))
    if origin is tuple:
        if len(args) != 2 or args[1] is not Ellipsis:
            raise TypeError(f"Only homogeneous tuple[X, ...] is supported: {annotation!r}")
        return SequenceType(resolve_wire_type(args[0]), tuple)
    if origin is frozenset:
        return SequenceType(resolve_wire_type(args[0]), frozenset)

    if isinstance(annotation, type):
        if issubclass(annotation, Enum):
            return EnumType(annotation)
        if annotation in _SCALAR_TYPES:
            return ScalarType(annotation)
        if dataclasses.is_dataclass(annotation):
            return EntityType(annotation)

    raise TypeError(f"Unsupported field annotation: {annotation!r}")


# =============================================================================
# Construction-time freezing
# =============================================================================


def check_scalar(py_type: type, value: Any, path: tuple[str, ...] = ()) -> Any:
    """Return ``value`` if it is a ``py_type`` scalar, widening int to float.

    Raises:
        TypeMismatchError: If ``value`` has another type.
    """
    # bool is a subclass of int; true/false never satisfies a number field.
    if py_type is bool:
        ok = isinstance(value, bool)
    elif py_type is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif py_type is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        if ok:
            value = float(value)
    else:
        ok = isinstance(value, py_type)

    if not ok:
        raise TypeMismatchError(None, py_type.__name__, value, path=path)
    return value


def freeze(wire_type: WireType, value: Any, path: tuple[str, ...] = ()) -> Any:
    """Convert a constructor argument into its immutable stored form.

    Mappings become ``MappingProxyType``, sequences tuples, sets frozensets,
    and raw values for ``JsonValue`` fields are wrapped.
    """
    if value is None:
        return None

    if isinstance(wire_type, MappingType):
        if not isinstance(value, Mapping):
            raise TypeMismatchError(None, wire_type.describe(), value, path=path)
        return types.MappingProxyType(
            {key: freeze(wire_type.value_type, item, (*path, str(key))) for key, item in value.items()}
        )

    if isinstance(wire_type, SequenceType):
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, (list, tuple, set, frozenset)):
            raise TypeMismatchError(None, wire_type.describe(), value, path=path)
        return wire_type.container(freeze(wire_type.element_type, item, path) for item in value)

    if isinstance(wire_type, OpaqueType):
        if wire_type.wrapped:
            return value if isinstance(value, JsonValue) else JsonValue(value)
        return to_plain_json(value, path)

    if isinstance(wire_type, ScalarType):
        return check_scalar(wire_type.py_type, value, path)

    if isinstance(wire_type, EnumType):
        if not isinstance(value, wire_type.enum_type):
            raise TypeMismatchError(None, wire_type.describe(), value, path=path)
    elif isinstance(wire_type, EntityType):
        if not isinstance(value, wire_type.entity_type):
            raise TypeMismatchError(None, wire_type.describe(), value, path=path)

    return value


# =============================================================================
# Schema
# =============================================================================


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Resolved wire policy of one entity field."""

    name: str
    wire_key: str
    wire_type: WireType
    optional: bool
    default: Any = UNSET
    default_factory: Any = UNSET
    fallback: Enum | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not UNSET or self.default_factory is not UNSET

    @property
    def required(self) -> bool:
        return not self.optional

    def make_default(self) -> Any:
        if self.default_factory is not UNSET:
            return self.default_factory()
        return self.default

    def resolve(self, value: Any) -> Any:
        """Apply default substitution, the required check and freezing.

        Raises:
            MissingRequiredFieldError: If a required field is still None.
            TypeMismatchError: If a container value has the wrong shape.
        """
        if value is None and self.has_default:
            value = self.make_default()

        if value is None:
            if self.required:
                raise MissingRequiredFieldError(self.name, self.wire_key)
            return None

        try:
            return freeze(self.wire_type, value)
        except CodecError as exc:
            raise exc.with_parent(self.name) from exc


@dataclass(frozen=True, slots=True)
class EntitySchema:
    entity_type: type
    fields: tuple[FieldSpec, ...]

    @property
    def wire_keys(self) -> tuple[str, ...]:
        return tuple(spec.wire_key for spec in self.fields)

    @property
    def required_wire_keys(self) -> tuple[str, ...]:
        """Keys present in every encoded payload (required or defaulted)."""
        return tuple(spec.wire_key for spec in self.fields if spec.required or spec.has_default)

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(name)


@lru_cache(maxsize=None)
def schema_for(entity_type: type) -> EntitySchema:
    """Build the schema of an entity dataclass from its field declarations.

    Evaluated once per type; the result is cached and immutable.
    """
    if not dataclasses.is_dataclass(entity_type):
        raise TypeError(f"{entity_type!r} is not a dataclass entity")

    hints = typing.get_type_hints(entity_type)
    specs = []
    for dc_field in dataclasses.fields(entity_type):
        annotation, optional = _strip_optional(hints[dc_field.name])
        policy = dc_field.metadata.get(POLICY_KEY, FieldPolicy())

        default = policy.default
        default_factory = policy.default_factory
        if POLICY_KEY not in dc_field.metadata:
            # Plain ``x: T = value`` declarations; a None default means "unset".
            if dc_field.default is not None and dc_field.default is not dataclasses.MISSING:
                default = dc_field.default
            if dc_field.default_factory is not dataclasses.MISSING:
                default_factory = dc_field.default_factory

        wire_type = resolve_wire_type(annotation)
        if policy.fallback is not None and not (
            isinstance(wire_type, EnumType)
            or (isinstance(wire_type, SequenceType) and isinstance(wire_type.element_type, EnumType))
        ):
            raise TypeError(f"fallback is only valid on enum fields: {entity_type.__name__}.{dc_field.name}")

        specs.append(
            FieldSpec(
                name=dc_field.name,
                wire_key=policy.key or dc_field.name,
                wire_type=wire_type,
                optional=optional,
                default=default,
                default_factory=default_factory,
                fallback=policy.fallback,
            )
        )

    return EntitySchema(entity_type=entity_type, fields=tuple(specs))
