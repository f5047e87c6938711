from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stripe_entities.domain.exceptions import TypeMismatchError

_SCALARS = (str, int, float, bool, type(None))


def is_json_compatible(value: Any) -> bool:
    """Return True if ``value`` is made only of JSON-representable parts."""
    if isinstance(value, _SCALARS):
        return True
    if isinstance(value, (list, tuple)):
        return all(is_json_compatible(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and is_json_compatible(v) for k, v in value.items())
    return False


def to_plain_json(value: Any, path: tuple[str, ...] = ()) -> Any:
    """Return a fresh copy of ``value`` built from plain dicts and lists.

    Read-only mappings (e.g. another entity's ``MappingProxyType`` leaves)
    and tuples are accepted and converted.

    Raises:
        TypeMismatchError: If any part of ``value`` has no JSON form.
    """
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, (list, tuple)):
        return [to_plain_json(item, (*path, str(index))) for index, item in enumerate(value)]
    if isinstance(value, Mapping):
        plain = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeMismatchError(None, "str key", key, path=path)
            plain[key] = to_plain_json(item, (*path, key))
        return plain
    raise TypeMismatchError(None, "JSON value", value, path=path)


@dataclass(frozen=True, slots=True)
class JsonValue:
    """Opaque JSON value carried through the codec unchanged.

    Used for API fields whose shape depends on the API version (e.g. a
    PaymentIntent's ``next_action``). The wrapped value is deep-copied on
    the way in and on the way out so entities never share mutable state
    with callers.

    A JsonValue holding ``None`` represents an explicit JSON null, which is
    distinct from the field being unset.
    """

    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_plain_json(self.value))

    def to_json(self) -> Any:
        """Return a deep copy of the raw JSON value."""
        return copy.deepcopy(self.value)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up ``key`` when the wrapped value is a JSON object."""
        if not isinstance(self.value, dict):
            return default
        return self.value.get(key, default)
