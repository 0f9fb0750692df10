"""Verificação e decodificação inicial de interações (sem PII)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.discord.signature import verify_interaction_signature
from app.interactions.decoder import decode_interaction

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

    from app.interactions.models import Interaction


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura ausente, malformada ou divergente."""


def parse_interaction_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    verify_key: Ed25519PublicKey,
) -> Interaction:
    """Valida assinatura e decodifica a interação.

    A decodificação só acontece depois que a assinatura foi aceita.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        verify_key: Chave pública da aplicação

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        MalformedInteractionError: Se o payload estiver fora do schema

    Returns:
        Interação tipada
    """
    signature_result = verify_interaction_signature(raw_body, headers, verify_key)
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    return decode_interaction(raw_body)
