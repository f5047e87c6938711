"""Enum wire codec.

Every enum used on the wire has a table mapping wire strings to members.
Tables are built once per enum type and are read-only afterwards.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

from stripe_entities.config import get_settings
from stripe_entities.domain.exceptions import (
    MissingRequiredFieldError,
    TypeMismatchError,
    UnknownEnumValueError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


@lru_cache(maxsize=None)
def enum_table(enum_type: type[E]) -> Mapping[str, E]:
    """Return the wire string -> member table of ``enum_type``.

    Raises:
        TypeError: If a member value is not a string or two members share a
            wire string.
    """
    table: dict[str, E] = {}
    for member in enum_type.__members__.values():
        if not isinstance(member.value, str):
            raise TypeError(f"{enum_type.__name__}.{member.name} has a non-string wire value")
        if member.value in table and table[member.value] is not member:
            raise TypeError(f"{enum_type.__name__} maps {member.value!r} to more than one member")
        table[member.value] = member
    return MappingProxyType(table)


def decode_enum(
    wire_value: Any,
    enum_type: type[E],
    fallback: E | None = None,
    *,
    field: str | None = None,
    strict: bool | None = None,
    where: str | None = None,
) -> E:
    """Decode a wire string into a member of ``enum_type``.

    Args:
        wire_value: Raw JSON value, None when the key was absent.
        enum_type: Target enumeration.
        fallback: Member returned for null or unrecognised values.
        field: Field name used in error messages.
        strict: Ignore ``fallback`` for unrecognised (non-null) values.
            Defaults to the ``strict_enums`` setting.
        where: Dotted field path named in the fallback log record.
            Defaults to ``field``.

    Returns:
        The matching member, or ``fallback``.

    Raises:
        MissingRequiredFieldError: ``wire_value`` is None and there is no fallback.
        UnknownEnumValueError: No member matches and no fallback applies.
        TypeMismatchError: ``wire_value`` is not a string.
    """
    if wire_value is None:
        if fallback is not None:
            return fallback
        raise MissingRequiredFieldError(field or enum_type.__name__)

    if not isinstance(wire_value, str):
        raise TypeMismatchError(field, f"{enum_type.__name__} wire string", wire_value)

    member = enum_table(enum_type).get(wire_value)
    if member is not None:
        return member

    settings = get_settings()
    if strict is None:
        strict = settings.strict_enums

    if fallback is None or strict:
        raise UnknownEnumValueError(field, wire_value, enum_type)

    if settings.log_enum_fallbacks:
        logger.debug(
            "Unknown %s value %r for field %s; substituting %s",
            enum_type.__name__,
            wire_value,
            where or field or "<root>",
            fallback.name,
        )
    return fallback


def encode_enum(member: Enum) -> str:
    """Return the wire string of ``member``."""
    return member.value
