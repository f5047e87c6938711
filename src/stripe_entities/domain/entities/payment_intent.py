"""PaymentIntent resource.

A PaymentIntent guides the process of collecting a payment from a customer.
It transitions through multiple statuses as it interfaces with Stripe to
perform authentication flows, and creates at most one successful charge.

See https://stripe.com/docs/api/payment_intents for field semantics.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stripe_entities.domain.entities.base import Entity
from stripe_entities.domain.entities.shipping import ShippingDetails
from stripe_entities.domain.entities.stripe_error import StripeError
from stripe_entities.domain.enums import (
    PaymentIntentCancellationReason,
    PaymentIntentCaptureMethod,
    PaymentIntentConfirmationMethod,
    PaymentIntentSetupFutureUsage,
    PaymentIntentsStatus,
    PaymentMethodType,
)
from stripe_entities.domain.schema import wire_field
from stripe_entities.domain.value_objects import JsonValue


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentIntentTip(Entity):
    # Portion of the amount that corresponds to a tip, smallest currency unit.
    amount: int | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentIntentAmountDetails(Entity):
    """Details about items included in the amount."""

    tip: PaymentIntentTip | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentIntentAutomaticPaymentMethods(Entity):
    """Settings to configure compatible payment methods from the Dashboard."""

    enabled: bool | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentIntent(Entity):
    """PaymentIntent as returned by the API.

    Amounts are integers in the smallest currency unit (e.g. 100 cents to
    charge $1.00). Timestamps are seconds since the Unix epoch.

    Connect-only fields: application, application_fee_amount,
    on_behalf_of, transfer_data, transfer_group.

    next_action, processing, transfer_data and transfer_group change shape
    between API versions and are carried as opaque JsonValue.
    """

    id: str
    object_type: str = wire_field("object", default="payment_intent")
    amount: int
    amount_capturable: int | None = None
    amount_details: PaymentIntentAmountDetails | None = None
    amount_received: int | None = None
    application: str | None = None
    application_fee_amount: int | None = None
    automatic_payment_methods: PaymentIntentAutomaticPaymentMethods | None = None
    canceled_at: int | None = None
    cancellation_reason: PaymentIntentCancellationReason | None = None
    # Used for client-side retrieval with a publishable key. Do not log it.
    client_secret: str
    capture_method: PaymentIntentCaptureMethod = wire_field(
        default=PaymentIntentCaptureMethod.AUTOMATIC
    )
    confirmation_method: PaymentIntentConfirmationMethod = wire_field(
        default=PaymentIntentConfirmationMethod.AUTOMATIC
    )
    created: int | None = None
    currency: str
    customer: str | None = None
    description: str | None = None
    invoice: str | None = None
    last_payment_error: StripeError | None = None
    latest_charge: str | None = None
    livemode: bool
    metadata: Mapping[str, Any] = wire_field(default_factory=dict)
    next_action: JsonValue | None = None
    on_behalf_of: str | None = None
    payment_method: str | None = None
    payment_method_options: Mapping[str, Mapping[str, Any]] = wire_field(default_factory=dict)
    # No fallback: an unlisted payment method type fails the whole decode
    # with UnknownEnumValueError. Add new types to PaymentMethodType.
    payment_method_types: tuple[PaymentMethodType, ...] = wire_field(default=())
    processing: JsonValue | None = None
    receipt_email: str | None = None
    review: str | None = None
    setup_future_usage: PaymentIntentSetupFutureUsage | None = None
    shipping: ShippingDetails | None = None
    statement_descriptor: str | None = None
    statement_descriptor_suffix: str | None = None
    status: PaymentIntentsStatus
    transfer_data: JsonValue | None = None
    transfer_group: JsonValue | None = None

    @property
    def requires_action(self) -> bool:
        return self.status == PaymentIntentsStatus.REQUIRES_ACTION
