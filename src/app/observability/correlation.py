"""Gerenciamento de correlation_id para rastreamento de interações.

O correlation_id é injetado em todos os logs emitidos durante o
processamento de uma interação. Usa ContextVar para ser async-safe:
cada request concorrente enxerga apenas o próprio valor.

Uso:
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    try:
        # processar interação
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None/vazio, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def bind_interaction_id(interaction_id: str) -> None:
    """Substitui o correlation_id pelo ID da interação já decodificada.

    O valor é restaurado pelo reset_correlation_id() do token original.
    """
    if interaction_id:
        _correlation_id.set(interaction_id)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())
