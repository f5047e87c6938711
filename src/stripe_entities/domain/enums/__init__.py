"""Enumerations - Closed sets of wire strings."""

from stripe_entities.domain.enums.element_appearance import ElementAppearanceLabel, ElementTheme
from stripe_entities.domain.enums.payment_intent import (
    PaymentIntentCancellationReason,
    PaymentIntentCaptureMethod,
    PaymentIntentConfirmationMethod,
    PaymentIntentSetupFutureUsage,
    PaymentIntentsStatus,
)
from stripe_entities.domain.enums.payment_method import PaymentMethodType

__all__ = [
    "ElementAppearanceLabel",
    "ElementTheme",
    "PaymentIntentCancellationReason",
    "PaymentIntentCaptureMethod",
    "PaymentIntentConfirmationMethod",
    "PaymentIntentSetupFutureUsage",
    "PaymentIntentsStatus",
    "PaymentMethodType",
]
