from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from stripe_entities.codec.decoder import decode
from stripe_entities.codec.encoder import encode
from stripe_entities.domain.exceptions import CodecError
from stripe_entities.domain.schema import EntitySchema, schema_for

T = TypeVar("T")


class EntityCodec(Generic[T]):
    """Decoder/encoder pair bound to one entity type.

    The entity schema is resolved when the codec is created, so schema
    declaration errors surface at import time of the module that builds the
    codec rather than on the first payload.
    """

    def __init__(self, entity_type: type[T], *, strict_enums: bool | None = None) -> None:
        self._entity_type = entity_type
        self._schema = schema_for(entity_type)
        self._strict_enums = strict_enums

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    @property
    def schema(self) -> EntitySchema:
        return self._schema

    def decode(self, payload: Mapping[str, Any]) -> T:
        return decode(self._entity_type, payload, strict_enums=self._strict_enums)

    def decode_many(self, payloads: Iterable[Mapping[str, Any]]) -> list[T]:
        """Decode a list of objects, e.g. the ``data`` array of a list response.

        Raises:
            CodecError: For the first failing element, with its index
                prefixed to the error path.
        """
        entities = []
        for index, payload in enumerate(payloads):
            try:
                entities.append(self.decode(payload))
            except CodecError as exc:
                raise exc.with_parent(str(index)) from exc
        return entities

    def encode(self, entity: T) -> dict[str, Any]:
        if not isinstance(entity, self._entity_type):
            raise TypeError(
                f"{type(self).__name__} for {self._entity_type.__name__} "
                f"cannot encode {type(entity).__name__}"
            )
        return encode(entity)

    def __repr__(self) -> str:
        return f"EntityCodec({self._entity_type.__name__})"
