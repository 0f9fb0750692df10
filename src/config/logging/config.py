"""Configuração centralizada de logging.

Um único handler JSON no root logger, com dois filters:
- CorrelationIdFilter: correlation_id e service em todo record
- SecretRedactionFilter: BOT_KEY e tokens de interação mascarados

httpx/httpcore ficam em WARNING: em INFO logam a URL completa, e a URL de
follow-up carrega o token da interação.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do processo (app/bootstrap/)
    configure_logging(level="INFO", service_name="citygen", secrets=[bot_key])

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("command_dispatched", extra={"command": "city"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "citygen"

QUIET_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    secrets: Iterable[str] = (),
) -> None:
    """Configura logging JSON estruturado para o processo.

    Substitui os handlers do root logger; chamar novamente reconfigura.

    Args:
        level: Nível de log (case-insensitive).
        service_name: Valor do campo `service`.
        correlation_id_getter: Retorna o correlation_id do contexto atual.
        secrets: Valores que nunca devem aparecer nos logs.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(SecretRedactionFilter(secrets))
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
