"""Infrastructure layer - Boundaries to transport collaborators.

This layer contains:
- JSON text parsing and serialisation around the codec

HTTP clients, retries and authentication live outside this package; they
pass raw payloads in and take raw payloads out.
"""

from stripe_entities.infrastructure.json_payload import dumps_entity, loads_entity

__all__ = [
    "dumps_entity",
    "loads_entity",
]
