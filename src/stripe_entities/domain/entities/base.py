from __future__ import annotations

from dataclasses import dataclass

from stripe_entities.domain.schema import schema_for


@dataclass(frozen=True, slots=True, kw_only=True)
class Entity:
    """Base class for immutable API resources and their sub-objects.

    Subclasses are frozen, slotted, keyword-only dataclasses. On construction
    every field goes through its schema policy: declared defaults replace
    None, required fields left as None raise MissingRequiredFieldError, and
    containers are frozen (dict -> MappingProxyType, list -> tuple,
    set -> frozenset).

    Entities are immutable. Use ``dataclasses.replace`` to derive a modified
    copy; the replacement runs the same construction checks.
    """

    def __post_init__(self) -> None:
        for spec in schema_for(type(self)).fields:
            object.__setattr__(self, spec.name, spec.resolve(getattr(self, spec.name)))
