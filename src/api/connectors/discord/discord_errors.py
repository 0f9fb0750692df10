"""Erros e helpers de parsing/logging para a API do Discord."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

RATE_LIMITED_STATUS = 429


@dataclass(frozen=True)
class DiscordApiError:
    """Erro retornado pela API do Discord (`{"code": ..., "message": ...}`)."""

    status_code: int
    error_code: int
    error_message: str

    @property
    def is_permanent(self) -> bool:
        """4xx (exceto 429) indicam erro de requisição/credencial."""
        return 400 <= self.status_code < 500 and self.status_code != RATE_LIMITED_STATUS


def parse_discord_error(status_code: int, body: object) -> DiscordApiError:
    """Extrai code/message do corpo de erro (tolerante a corpo não-JSON)."""
    error_code = 0
    error_message = "unknown_error"
    if isinstance(body, dict):
        raw_code = body.get("code")
        if isinstance(raw_code, int):
            error_code = raw_code
        raw_message = body.get("message")
        if isinstance(raw_message, str) and raw_message:
            error_message = raw_message
    return DiscordApiError(
        status_code=status_code,
        error_code=error_code,
        error_message=error_message,
    )


def log_discord_error(error: DiscordApiError, method: str, route: str) -> None:
    """Loga erro da API usando o template da rota (sem IDs nem tokens)."""
    logger.warning(
        "discord_api_error",
        extra={
            "method": method,
            "route": route,
            "status_code": error.status_code,
            "error_code": error.error_code,
            "error_message": error.error_message,
            "permanent": error.is_permanent,
        },
    )


def log_success(method: str, route: str, status_code: int) -> None:
    logger.debug(
        "discord_api_success",
        extra={"method": method, "route": route, "status_code": status_code},
    )
