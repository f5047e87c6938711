from __future__ import annotations

from dataclasses import dataclass

from stripe_entities.domain.entities.base import Entity


@dataclass(frozen=True, slots=True, kw_only=True)
class Address(Entity):
    """Postal address. Every part is optional on the wire."""

    city: str | None = None
    country: str | None = None  # two-letter ISO code
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ShippingDetails(Entity):
    """Shipping information attached to a PaymentIntent."""

    address: Address
    name: str
    carrier: str | None = None
    phone: str | None = None
    tracking_number: str | None = None
