"""Typed Stripe API entities and their JSON codec."""

from stripe_entities.codec import EntityCodec, decode, encode
from stripe_entities.domain.entities import (
    Address,
    ElementAppearance,
    Entity,
    PaymentIntent,
    PaymentIntentAmountDetails,
    PaymentIntentAutomaticPaymentMethods,
    PaymentIntentTip,
    ShippingDetails,
    StripeError,
)
from stripe_entities.domain.enums import (
    ElementAppearanceLabel,
    ElementTheme,
    PaymentIntentCancellationReason,
    PaymentIntentCaptureMethod,
    PaymentIntentConfirmationMethod,
    PaymentIntentSetupFutureUsage,
    PaymentIntentsStatus,
    PaymentMethodType,
)
from stripe_entities.domain.exceptions import (
    CodecError,
    DomainException,
    MalformedPayloadError,
    MissingRequiredFieldError,
    TypeMismatchError,
    UnknownEnumValueError,
)
from stripe_entities.domain.schema import wire_field
from stripe_entities.domain.value_objects import JsonValue

__all__ = [
    "Address",
    "CodecError",
    "DomainException",
    "ElementAppearance",
    "ElementAppearanceLabel",
    "ElementTheme",
    "Entity",
    "EntityCodec",
    "JsonValue",
    "MalformedPayloadError",
    "MissingRequiredFieldError",
    "PaymentIntent",
    "PaymentIntentAmountDetails",
    "PaymentIntentAutomaticPaymentMethods",
    "PaymentIntentCancellationReason",
    "PaymentIntentCaptureMethod",
    "PaymentIntentConfirmationMethod",
    "PaymentIntentSetupFutureUsage",
    "PaymentIntentTip",
    "PaymentIntentsStatus",
    "PaymentMethodType",
    "ShippingDetails",
    "StripeError",
    "TypeMismatchError",
    "UnknownEnumValueError",
    "decode",
    "encode",
    "wire_field",
]
