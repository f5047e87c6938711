"""JSON text boundary.

Transport collaborators hand over raw response bodies; these helpers parse
them and run the codec, and serialise entities for request bodies.
"""

from __future__ import annotations

import json
from typing import Any, TypeVar

from stripe_entities.codec import decode, encode
from stripe_entities.domain.exceptions import MalformedPayloadError

T = TypeVar("T")


def loads_entity(entity_type: type[T], text: str | bytes, *, strict_enums: bool | None = None) -> T:
    """Parse JSON text and decode it into ``entity_type``.

    Raises:
        MalformedPayloadError: If ``text`` is not valid JSON.
        CodecError: If the parsed object does not decode.
    """
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedPayloadError(str(e)) from e
    return decode(entity_type, payload, strict_enums=strict_enums)


def dumps_entity(entity: Any, *, indent: int | None = None, sort_keys: bool = False) -> str:
    """Encode ``entity`` and serialise it as UTF-8 friendly JSON text."""
    return json.dumps(encode(entity), ensure_ascii=False, indent=indent, sort_keys=sort_keys)
