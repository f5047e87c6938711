"""Tests for EntityCodec and decode/encode round trips.

Tests cover:
- decode(encode(e)) == e for entities without enum fallback substitution
- Fallback substitution is the documented exception to the round trip
- decode_many error paths
- Codec/entity type binding
"""

from dataclasses import replace
from typing import Any

import pytest

from stripe_entities.codec import EntityCodec, decode, encode
from stripe_entities.domain.entities import (
    Address,
    ElementAppearance,
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
    PaymentIntentsStatus,
    PaymentMethodType,
)
from stripe_entities.domain.exceptions import MissingRequiredFieldError, UnknownEnumValueError
from stripe_entities.domain.value_objects import JsonValue


@pytest.fixture
def codec() -> EntityCodec[PaymentIntent]:
    return EntityCodec(PaymentIntent)


@pytest.fixture
def populated_intent() -> PaymentIntent:
    return PaymentIntent(
        id="pi_3MtwBwLkdIwHu7ix28a3tqPa",
        amount=2000,
        amount_capturable=500,
        amount_details=PaymentIntentAmountDetails(tip=PaymentIntentTip(amount=150)),
        automatic_payment_methods=PaymentIntentAutomaticPaymentMethods(enabled=False),
        cancellation_reason=PaymentIntentCancellationReason.ABANDONED,
        client_secret="pi_3MtwBwLkdIwHu7ix28a3tqPa_secret_abc",
        capture_method=PaymentIntentCaptureMethod.MANUAL,
        currency="eur",
        last_payment_error=StripeError(error_type="card_error", decline_code="lost_card"),
        livemode=True,
        metadata={"order_id": "1042", "attempt": 2, "tags": ["gift", "priority"]},
        next_action=JsonValue({"type": "redirect_to_url", "redirect_to_url": {"url": "https://x"}}),
        payment_method_options={"card": {"request_three_d_secure": "any"}},
        payment_method_types=[PaymentMethodType.CARD, PaymentMethodType.SEPA_DEBIT],
        shipping=ShippingDetails(address=Address(line1="1 Rue de Rivoli", country="FR"), name="Jenny"),
        status=PaymentIntentsStatus.CANCELED,
        transfer_group=JsonValue("ORDER_1042"),
    )


# =============================================================================
# Round-trip Tests
# =============================================================================


class TestRoundTrip:
    def test_minimal_intent_round_trips(self, codec: EntityCodec[PaymentIntent]) -> None:
        intent = PaymentIntent(
            id="pi_123",
            amount=100,
            client_secret="secret",
            currency="usd",
            livemode=False,
            status=PaymentIntentsStatus.SUCCEEDED,
        )

        assert codec.decode(codec.encode(intent)) == intent

    def test_populated_intent_round_trips(
        self, codec: EntityCodec[PaymentIntent], populated_intent: PaymentIntent
    ) -> None:
        assert codec.decode(codec.encode(populated_intent)) == populated_intent

    def test_decoded_api_payload_round_trips(
        self, codec: EntityCodec[PaymentIntent], full_payment_intent_payload: dict[str, Any]
    ) -> None:
        intent = codec.decode(full_payment_intent_payload)

        assert codec.decode(codec.encode(intent)) == intent

    def test_appearance_round_trips(self) -> None:
        appearance = ElementAppearance(
            theme=ElementTheme.FLAT,
            variables={"colorPrimary": "#0570de"},
            rules={".Tab:focus": {"border": "1px", "boxShadow": "none"}},
            label=ElementAppearanceLabel.FLOATING,
        )

        assert decode(ElementAppearance, encode(appearance)) == appearance

    def test_fallback_substitution_loses_the_original_value(self) -> None:
        appearance = decode(ElementAppearance, {"theme": "aurora"})

        assert encode(appearance)["theme"] == "stripe"


# =============================================================================
# EntityCodec Tests
# =============================================================================


class TestEntityCodec:
    def test_schema_is_resolved_on_creation(self, codec: EntityCodec[PaymentIntent]) -> None:
        assert codec.schema.entity_type is PaymentIntent
        assert codec.schema.field("object_type").wire_key == "object"

    def test_decode_many_decodes_every_element(
        self, codec: EntityCodec[PaymentIntent], minimal_payment_intent_payload: dict[str, Any]
    ) -> None:
        second = {**minimal_payment_intent_payload, "id": "pi_456"}

        intents = codec.decode_many([minimal_payment_intent_payload, second])

        assert [intent.id for intent in intents] == ["pi_3MtwBwLkdIwHu7ix28a3tqPa", "pi_456"]

    def test_decode_many_reports_failing_index(
        self, codec: EntityCodec[PaymentIntent], minimal_payment_intent_payload: dict[str, Any]
    ) -> None:
        broken = {key: value for key, value in minimal_payment_intent_payload.items() if key != "currency"}

        with pytest.raises(MissingRequiredFieldError) as exc_info:
            codec.decode_many([minimal_payment_intent_payload, broken])

        assert exc_info.value.path == ("1", "currency")

    def test_strict_codec_rejects_unknown_fallback_values(self) -> None:
        strict = EntityCodec(ElementAppearance, strict_enums=True)

        with pytest.raises(UnknownEnumValueError) as exc_info:
            strict.decode({"label": "floating-left"})

        assert exc_info.value.path == ("label",)

    def test_encode_rejects_other_entity_types(self, codec: EntityCodec[PaymentIntent]) -> None:
        with pytest.raises(TypeError):
            codec.encode(ElementAppearance())  # type: ignore[arg-type]

    def test_mutation_by_replace_is_reflected_in_encoding(
        self, codec: EntityCodec[PaymentIntent], populated_intent: PaymentIntent
    ) -> None:
        updated = replace(populated_intent, description="Gift order")

        assert codec.encode(updated)["description"] == "Gift order"
        assert "description" not in codec.encode(populated_intent)
