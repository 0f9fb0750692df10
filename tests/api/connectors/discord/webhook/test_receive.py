"""Testes de parse_interaction_request (verificação antes do decode)."""

from __future__ import annotations

import json

import pytest

from api.connectors.discord.webhook.receive import (
    InvalidSignatureError,
    WebhookRequestError,
    parse_interaction_request,
)
from app.interactions.errors import MalformedInteractionError
from app.interactions.models import CommandInteraction, PingInteraction


def test_returns_decoded_interaction_when_signature_valid(
    verify_key, sign, command_payload
) -> None:
    body = json.dumps(command_payload()).encode("utf-8")

    interaction = parse_interaction_request(body, sign(body), verify_key)

    assert isinstance(interaction, CommandInteraction)
    assert interaction.name == "city"


def test_ping_is_decoded(verify_key, sign) -> None:
    body = b'{"type": 1}'

    assert isinstance(parse_interaction_request(body, sign(body), verify_key), PingInteraction)


def test_invalid_signature_raises_before_decoding(verify_key, sign) -> None:
    body = b"not json at all"
    headers = sign(b"something else")

    with pytest.raises(InvalidSignatureError):
        parse_interaction_request(body, headers, verify_key)


def test_missing_headers_raise_invalid_signature(verify_key) -> None:
    with pytest.raises(InvalidSignatureError, match="missing_headers"):
        parse_interaction_request(b'{"type": 1}', {}, verify_key)


def test_signed_but_malformed_body_raises_malformed(verify_key, sign) -> None:
    body = b'{"type": 99}'

    with pytest.raises(MalformedInteractionError):
        parse_interaction_request(body, sign(body), verify_key)


def test_invalid_signature_is_webhook_request_error() -> None:
    assert issubclass(InvalidSignatureError, WebhookRequestError)
