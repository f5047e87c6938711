"""Tests for the JSON text boundary."""

import json
from typing import Any

import pytest

from stripe_entities.domain.entities import ElementAppearance, PaymentIntent
from stripe_entities.domain.enums import ElementTheme, PaymentIntentsStatus
from stripe_entities.domain.exceptions import MalformedPayloadError, TypeMismatchError, UnknownEnumValueError
from stripe_entities.infrastructure import dumps_entity, loads_entity


class TestLoadsEntity:
    def test_parses_and_decodes_text(self, minimal_payment_intent_payload: dict[str, Any]) -> None:
        intent = loads_entity(PaymentIntent, json.dumps(minimal_payment_intent_payload))

        assert intent.status == PaymentIntentsStatus.REQUIRES_PAYMENT_METHOD

    def test_accepts_utf8_bytes(self) -> None:
        body = '{"variables": {"fontFamily": "Søhne"}}'.encode()

        appearance = loads_entity(ElementAppearance, body)

        assert appearance.variables == {"fontFamily": "Søhne"}

    def test_malformed_text_raises(self) -> None:
        with pytest.raises(MalformedPayloadError):
            loads_entity(PaymentIntent, '{"id": "pi_123",')

    def test_top_level_array_raises_type_mismatch(self) -> None:
        with pytest.raises(TypeMismatchError):
            loads_entity(PaymentIntent, "[]")

    def test_strict_enums_are_forwarded(self) -> None:
        with pytest.raises(UnknownEnumValueError):
            loads_entity(ElementAppearance, '{"theme": "aurora"}', strict_enums=True)


class TestDumpsEntity:
    def test_serialises_encoded_entity(self) -> None:
        text = dumps_entity(ElementAppearance(theme=ElementTheme.NIGHT))

        assert json.loads(text) == {"theme": "night", "label": "above"}

    def test_keeps_non_ascii_characters(self) -> None:
        text = dumps_entity(ElementAppearance(variables={"fontFamily": "Søhne"}))

        assert "Søhne" in text

    def test_sort_keys(self) -> None:
        text = dumps_entity(ElementAppearance(), sort_keys=True)

        assert text == '{"label": "above", "theme": "stripe"}'

    def test_text_round_trip(self, full_payment_intent_payload: dict[str, Any]) -> None:
        intent = loads_entity(PaymentIntent, json.dumps(full_payment_intent_payload))

        assert loads_entity(PaymentIntent, dumps_entity(intent, indent=2)) == intent
