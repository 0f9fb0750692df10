"""Cliente HTTP especializado para a API de controle do Discord.

Estende HttpClient genérico com comportamentos específicos de Discord:
- Header `Authorization: Bot <token>` nas rotas de aplicação
- User-Agent no formato exigido pela API
- Erros da API (code, message) convertidos em UpstreamApiError
- Logging pelo template da rota, nunca com token do bot ou da interação

Usado no bootstrap (registro de comandos, URL do endpoint) e no envio de
mensagens de follow-up.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.discord.discord_errors import (
    log_discord_error,
    log_success,
    parse_discord_error,
)
from app.infra.http import HttpClient, HttpClientConfig
from utils.errors import UpstreamApiError

if TYPE_CHECKING:
    import httpx

    from config.settings import DiscordSettings

logger: logging.Logger = logging.getLogger(__name__)

USER_AGENT = "DiscordBot (https://github.com/citygen/citygen, 1.0.0)"

ROUTE_CURRENT_APPLICATION = "/applications/@me"
ROUTE_GLOBAL_COMMANDS = "/applications/{application_id}/commands"
ROUTE_FOLLOWUP = "/webhooks/{application_id}/{token}"


class DiscordHttpClient(HttpClient):
    """Cliente da API de controle (uma tentativa por chamada, sem retry)."""

    def __init__(
        self,
        bot_key: str,
        api_endpoint: str,
        config: HttpClientConfig | None = None,
    ) -> None:
        """Inicializa cliente Discord.

        Args:
            bot_key: Token do bot
            api_endpoint: URL base com versão (ex: https://discord.com/api/v10)
            config: Configuração HTTP base

        Raises:
            ValueError: Se bot_key vazio
        """
        if not bot_key or not bot_key.strip():
            raise ValueError("bot_key é obrigatório. Verifique se BOT_KEY está configurado.")
        super().__init__(config)
        self._bot_key = bot_key.strip()
        self._api_endpoint = api_endpoint.rstrip("/")

    async def get_current_application(self) -> dict[str, Any]:
        """Retorna a aplicação dona do token (inclui `id` e `verify_key`)."""
        return await self._call("GET", ROUTE_CURRENT_APPLICATION)

    async def bulk_overwrite_global_commands(
        self,
        application_id: str,
        commands: list[dict[str, object]],
    ) -> list[dict[str, Any]]:
        """Substitui todos os comandos globais da aplicação."""
        return await self._call(
            "PUT",
            ROUTE_GLOBAL_COMMANDS,
            path=ROUTE_GLOBAL_COMMANDS.format(application_id=application_id),
            json=commands,
        )

    async def set_interactions_endpoint_url(self, url: str) -> dict[str, Any]:
        """Aponta os callbacks de interação da aplicação para `url`."""
        return await self._call(
            "PATCH",
            ROUTE_CURRENT_APPLICATION,
            json={"interactions_endpoint_url": url},
        )

    async def create_followup_message(
        self,
        application_id: str,
        token: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Envia follow-up pela webhook da interação (autenticada pelo token)."""
        return await self._call(
            "POST",
            ROUTE_FOLLOWUP,
            path=ROUTE_FOLLOWUP.format(application_id=application_id, token=token),
            json=payload,
            authenticated=False,
        )

    async def _call(
        self,
        method: str,
        route: str,
        *,
        path: str | None = None,
        json: Any = None,
        authenticated: bool = True,
    ) -> Any:
        headers = {"User-Agent": USER_AGENT}
        if authenticated:
            headers["Authorization"] = f"Bot {self._bot_key}"

        response = await self.request(
            method,
            f"{self._api_endpoint}{path or route}",
            json=json,
            headers=headers,
        )
        return self._process_response(response, method, route)

    def _process_response(self, response: httpx.Response, method: str, route: str) -> Any:
        if response.is_success:
            log_success(method, route, response.status_code)
            if not response.content:
                return {}
            return response.json()

        try:
            body: object = response.json()
        except ValueError:
            body = None
        error = parse_discord_error(response.status_code, body)
        log_discord_error(error, method, route)
        raise UpstreamApiError(
            f"Discord API error: {error.error_message} ({error.error_code})",
            status_code=error.status_code,
            error_code=error.error_code,
        )


def create_discord_http_client(
    settings: DiscordSettings | None = None,
) -> DiscordHttpClient:
    """Factory para criar cliente Discord com config padrão.

    Args:
        settings: DiscordSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_discord_settings

    discord = settings or get_discord_settings()
    config = HttpClientConfig(timeout_seconds=discord.request_timeout_seconds)
    return DiscordHttpClient(
        bot_key=discord.bot_key,
        api_endpoint=discord.api_endpoint,
        config=config,
    )
