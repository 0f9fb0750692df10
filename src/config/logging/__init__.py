"""Logging estruturado JSON do citygen.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="citygen", secrets=[bot_key])
    logger = get_logger(__name__)
    logger.info("command_dispatched", extra={"command": "city"})

Todo record sai com: asctime, level, logger, message, correlation_id, service.
Mensagens são nomes de evento; dados vão em `extra`. Nunca logar conteúdo de
mensagens de usuário.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import REDACTED, CorrelationIdFilter, SecretRedactionFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
