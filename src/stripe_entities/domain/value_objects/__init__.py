"""Value objects - Immutable objects defined by their attributes."""

from stripe_entities.domain.value_objects.json_value import JsonValue, is_json_compatible, to_plain_json

__all__ = [
    "JsonValue",
    "is_json_compatible",
    "to_plain_json",
]
