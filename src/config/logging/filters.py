"""Filters de logging: contexto da interação e mascaramento de segredos.

CorrelationIdFilter injeta:
- correlation_id: ID da interação em processamento (ou do request)
- service: Nome do serviço (ex: citygen)

SecretRedactionFilter mascara, na mensagem e nos campos de `extra`:
- valores configurados como segredo (BOT_KEY)
- token de interação embutido em URLs de webhook (/webhooks/<app>/<token>)
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "<REDACTED>"

_WEBHOOK_TOKEN_PATTERN = re.compile(r"(/webhooks/\d+/)[^/?#\s\"']+")

# Atributos nativos do LogRecord; o resto veio de `extra`
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "correlation_id", "service"}


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Mascara segredos conhecidos antes da formatação.

    Args:
        secrets: Valores literais a mascarar (strings vazias são ignoradas).
    """

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        super().__init__()
        self._secrets = tuple(secret for secret in secrets if secret)

    def redact(self, text: str) -> str:
        for secret in self._secrets:
            text = text.replace(secret, REDACTED)
        return _WEBHOOK_TOKEN_PATTERN.sub(rf"\g<1>{REDACTED}", text)

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None

        for key, value in list(vars(record).items()):
            if key in _RECORD_ATTRIBUTES or not isinstance(value, str):
                continue
            cleaned = self.redact(value)
            if cleaned != value:
                setattr(record, key, cleaned)
        return True
