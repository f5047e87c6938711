"""Codec layer - Generic JSON mapping driven by the entity schema.

This layer contains:
- Enum codec: wire string <-> enum member, with optional fallback
- Decoder: untyped JSON object -> immutable entity
- Encoder: immutable entity -> minimal JSON object
- EntityCodec: decoder/encoder pair bound to one entity type

All operations are pure and synchronous; the only shared state is cached,
read-only lookup tables.
"""

from stripe_entities.codec.decoder import decode
from stripe_entities.codec.encoder import encode
from stripe_entities.codec.entity_codec import EntityCodec
from stripe_entities.codec.enum_codec import decode_enum, encode_enum, enum_table

__all__ = [
    "EntityCodec",
    "decode",
    "decode_enum",
    "encode",
    "encode_enum",
    "enum_table",
]
