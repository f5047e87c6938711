"""Domain entities - Immutable API resources and their nested sub-objects."""

from stripe_entities.domain.entities.base import Entity
from stripe_entities.domain.entities.element_appearance import ElementAppearance
from stripe_entities.domain.entities.payment_intent import (
    PaymentIntent,
    PaymentIntentAmountDetails,
    PaymentIntentAutomaticPaymentMethods,
    PaymentIntentTip,
)
from stripe_entities.domain.entities.shipping import Address, ShippingDetails
from stripe_entities.domain.entities.stripe_error import StripeError

__all__ = [
    "Address",
    "ElementAppearance",
    "Entity",
    "PaymentIntent",
    "PaymentIntentAmountDetails",
    "PaymentIntentAutomaticPaymentMethods",
    "PaymentIntentTip",
    "ShippingDetails",
    "StripeError",
]
