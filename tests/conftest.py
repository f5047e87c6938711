"""Shared pytest fixtures for the test suite."""

from collections.abc import Iterator
from typing import Any

import pytest

from stripe_entities.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate each test from environment-provided codec settings."""
    monkeypatch.delenv("STRIPE_ENTITIES_STRICT_ENUMS", raising=False)
    monkeypatch.delenv("STRIPE_ENTITIES_LOG_ENUM_FALLBACKS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def minimal_payment_intent_payload() -> dict[str, Any]:
    """A PaymentIntent payload carrying only the required keys."""
    return {
        "id": "pi_3MtwBwLkdIwHu7ix28a3tqPa",
        "amount": 2000,
        "client_secret": "pi_3MtwBwLkdIwHu7ix28a3tqPa_secret_YrKJUKribcBjcG8HVhfZluoGH",
        "currency": "usd",
        "livemode": False,
        "status": "requires_payment_method",
    }


@pytest.fixture
def full_payment_intent_payload(minimal_payment_intent_payload: dict[str, Any]) -> dict[str, Any]:
    """A PaymentIntent payload populating every field, as the API returns it."""
    return {
        **minimal_payment_intent_payload,
        "object": "payment_intent",
        "amount_capturable": 500,
        "amount_details": {"tip": {"amount": 150}},
        "amount_received": 1500,
        "application": "ca_1234",
        "application_fee_amount": 100,
        "automatic_payment_methods": {"enabled": True},
        "canceled_at": 1680800504,
        "cancellation_reason": "requested_by_customer",
        "capture_method": "manual",
        "confirmation_method": "manual",
        "created": 1680800504,
        "customer": "cus_NffrFeUfNV2Hib",
        "description": "Order #1042",
        "invoice": "in_1MtHbELkdIwHu7ixl4OzzPMv",
        "last_payment_error": {
            "type": "card_error",
            "code": "card_declined",
            "decline_code": "insufficient_funds",
            "doc_url": "https://stripe.com/docs/error-codes/card-declined",
            "message": "Your card has insufficient funds.",
            "charge": "ch_3MtwBwLkdIwHu7ix28a3tqPa",
        },
        "latest_charge": "ch_3MtwBwLkdIwHu7ix28a3tqPa",
        "metadata": {"order_id": "1042", "channel": "web"},
        "next_action": {
            "type": "redirect_to_url",
            "redirect_to_url": {"return_url": "https://example.com/return", "url": "https://hooks.stripe.com/x"},
        },
        "on_behalf_of": "acct_1032D82eZvKYlo2C",
        "payment_method": "pm_1MtwBwLkdIwHu7ixQ2xG0Tz4",
        "payment_method_options": {
            "card": {"request_three_d_secure": "automatic", "installments": None},
            "link": {"persistent_token": None},
        },
        "payment_method_types": ["card", "link"],
        "processing": {"type": "card", "card": {"customer_notification": {"approval_requested": False}}},
        "receipt_email": "jenny.rosen@example.com",
        "review": "prv_1NGNuB2eZvKYlo2C",
        "setup_future_usage": "off_session",
        "shipping": {
            "address": {
                "city": "San Francisco",
                "country": "US",
                "line1": "510 Townsend St",
                "line2": None,
                "postal_code": "94103",
                "state": "CA",
            },
            "name": "Jenny Rosen",
            "carrier": "UPS",
            "phone": "+15555555555",
            "tracking_number": "1Z999AA10123456784",
        },
        "statement_descriptor": "EXAMPLE STORE",
        "statement_descriptor_suffix": "1042",
        "status": "requires_capture",
        "transfer_data": {"destination": "acct_1032D82eZvKYlo2C", "amount": 1800},
        "transfer_group": "ORDER_1042",
    }
