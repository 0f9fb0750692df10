"""Verificação Ed25519 das interações recebidas.

A plataforma assina `timestamp + corpo bruto` com a chave privada da
aplicação. A verificação roda sobre os bytes exatos recebidos, antes de
qualquer parse de JSON.
"""

from __future__ import annotations

import binascii
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-signature-ed25519"
TIMESTAMP_HEADER = "x-signature-timestamp"

PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64


class InvalidPublicKeyError(ValueError):
    """Chave pública configurada não é uma chave Ed25519 válida."""


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação.

    `error` é um código interno para logs; nunca é devolvido ao cliente.
    """

    valid: bool
    error: str | None = None


def load_verify_key(public_key_hex: str) -> Ed25519PublicKey:
    """Carrega a chave pública da aplicação (hex, 32 bytes).

    Raises:
        InvalidPublicKeyError: Hex malformado ou tamanho incorreto
    """
    try:
        raw = bytes.fromhex(public_key_hex.strip())
    except ValueError as exc:
        raise InvalidPublicKeyError("public key is not valid hex") from exc
    if len(raw) != PUBLIC_KEY_SIZE:
        raise InvalidPublicKeyError(f"public key must have {PUBLIC_KEY_SIZE} bytes")
    return Ed25519PublicKey.from_public_bytes(raw)


def verify_interaction_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    verify_key: Ed25519PublicKey,
) -> SignatureResult:
    """Valida a assinatura Ed25519 de uma interação.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (nomes em qualquer caixa)
        verify_key: Chave pública da aplicação

    Returns:
        SignatureResult (valid=False para header ausente, hex malformado
        ou assinatura divergente)
    """
    normalized = {key.lower(): value for key, value in headers.items()}
    signature_hex = normalized.get(SIGNATURE_HEADER)
    timestamp = normalized.get(TIMESTAMP_HEADER)
    if not signature_hex or not timestamp:
        return SignatureResult(valid=False, error="missing_headers")

    try:
        signature = binascii.unhexlify(signature_hex)
    except (binascii.Error, ValueError):
        return SignatureResult(valid=False, error="malformed_signature")
    if len(signature) != SIGNATURE_SIZE:
        return SignatureResult(valid=False, error="malformed_signature")

    try:
        verify_key.verify(signature, timestamp.encode("utf-8") + raw_body)
    except InvalidSignature:
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)
