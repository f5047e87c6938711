"""Domain layer - Entity model, field schema, and domain exceptions.

This layer contains:
- Entities: Immutable API resources (e.g., PaymentIntent, ElementAppearance)
- Enums: Closed sets of wire strings (e.g., PaymentIntentsStatus)
- Value Objects: Immutable values defined by their content (e.g., JsonValue)
- Schema: Declarative per-field wire policies (rename, default, fallback)
- Domain Exceptions: Decode failures

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
