"""Closed string enumerations used by the PaymentIntent resource.

Member values are the exact wire strings.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class PaymentIntentCancellationReason(Enum):
    """Reason for cancellation of a PaymentIntent.

    Either user-provided (duplicate, fraudulent, requested_by_customer,
    abandoned) or generated by Stripe internally (failed_invoice,
    void_invoice, automatic).
    """

    DUPLICATE = "duplicate"
    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"
    ABANDONED = "abandoned"
    FAILED_INVOICE = "failed_invoice"
    VOID_INVOICE = "void_invoice"
    AUTOMATIC = "automatic"


@unique
class PaymentIntentCaptureMethod(Enum):
    """Controls when the funds will be captured from the customer's account."""

    # Funds are captured as soon as the customer authorizes the payment.
    AUTOMATIC = "automatic"
    # Funds are held on authorization and captured later.
    MANUAL = "manual"


@unique
class PaymentIntentConfirmationMethod(Enum):
    AUTOMATIC = "automatic"
    MANUAL = "manual"


@unique
class PaymentIntentSetupFutureUsage(Enum):
    """Whether the payment method will be reused with the customer present."""

    ON_SESSION = "on_session"
    OFF_SESSION = "off_session"


@unique
class PaymentIntentsStatus(Enum):
    """PaymentIntent lifecycle status as reported by the API."""

    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    REQUIRES_CAPTURE = "requires_capture"
    CANCELED = "canceled"
    SUCCEEDED = "succeeded"

    @property
    def is_terminal(self) -> bool:
        return self in (PaymentIntentsStatus.CANCELED, PaymentIntentsStatus.SUCCEEDED)
