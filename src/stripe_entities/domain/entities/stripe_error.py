from __future__ import annotations

from dataclasses import dataclass

from stripe_entities.domain.entities.base import Entity
from stripe_entities.domain.schema import wire_field


@dataclass(frozen=True, slots=True, kw_only=True)
class StripeError(Entity):
    """Error object returned by the API, e.g. a PaymentIntent's last_payment_error.

    ``error_type`` is kept as a plain string (``card_error``,
    ``invalid_request_error``, ...) because new error types are added to the
    API without notice.
    """

    error_type: str = wire_field("type")
    code: str | None = None
    decline_code: str | None = None
    doc_url: str | None = None
    message: str | None = None
    param: str | None = None
    charge: str | None = None
