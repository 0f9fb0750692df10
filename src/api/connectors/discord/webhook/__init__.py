"""Recebimento de interações (outgoing webhook)."""

from .receive import (
    InvalidSignatureError,
    WebhookRequestError,
    parse_interaction_request,
)

__all__ = [
    "InvalidSignatureError",
    "WebhookRequestError",
    "parse_interaction_request",
]
