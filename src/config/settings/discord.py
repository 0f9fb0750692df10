"""Settings específicas de Discord.

Configurações do endpoint de interações (outgoing webhook) e da API de
controle usada no bootstrap (registro de comandos e URL do endpoint).
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

# Constantes da Discord API
DISCORD_API_VERSION: str = "v10"
DISCORD_API_BASE_URL: str = "https://discord.com/api"

_PUBLIC_KEY_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")
_LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


@dataclass(frozen=True)
class DiscordSettings:
    """Configurações do canal Discord.

    Attributes:
        bot_key: Token do bot (header Authorization nas chamadas de controle)
        interactions_endpoint_url: URL pública anunciada como callback
        application_id: ID da aplicação (opcional, descoberto via /applications/@me)
        public_key: Chave pública Ed25519 em hex (opcional, descoberta via API)
        api_version: Versão da API
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para chamadas de bootstrap
        followup_timeout_seconds: Timeout para mensagens de follow-up
    """

    # Credenciais
    bot_key: str = ""
    interactions_endpoint_url: str = ""
    application_id: str = ""
    public_key: str = ""

    # API
    api_version: str = DISCORD_API_VERSION
    api_base_url: str = DISCORD_API_BASE_URL

    # Timeouts
    request_timeout_seconds: float = 10.0
    followup_timeout_seconds: float = 5.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    @property
    def interactions_path(self) -> str:
        """Path do endpoint de interações (componente path da URL pública)."""
        if not self.interactions_endpoint_url:
            return "/"
        path = urlparse(self.interactions_endpoint_url).path
        return path or "/"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Discord.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.bot_key:
            errors.append("BOT_KEY não configurado")

        if self.interactions_endpoint_url:
            parsed = urlparse(self.interactions_endpoint_url)
            local = parsed.hostname in _LOCAL_HOSTS
            if not parsed.netloc or parsed.scheme not in ("https", "http"):
                errors.append("INTERACTIONS_ENDPOINT_URL deve ser uma URL absoluta")
            elif parsed.scheme == "http" and not local:
                errors.append("INTERACTIONS_ENDPOINT_URL deve usar https")

        if self.public_key and not _PUBLIC_KEY_PATTERN.match(self.public_key):
            errors.append("PUBLIC_KEY deve ter 64 caracteres hexadecimais")

        if self.request_timeout_seconds <= 0:
            errors.append("DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.followup_timeout_seconds <= 0:
            errors.append("DISCORD_FOLLOWUP_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> DiscordSettings:
    """Carrega DiscordSettings de variáveis de ambiente."""
    return DiscordSettings(
        bot_key=os.getenv("BOT_KEY", ""),
        interactions_endpoint_url=os.getenv("INTERACTIONS_ENDPOINT_URL", ""),
        application_id=os.getenv("APPLICATION_ID", ""),
        public_key=os.getenv("PUBLIC_KEY", ""),
        api_version=os.getenv("DISCORD_API_VERSION", DISCORD_API_VERSION),
        api_base_url=os.getenv("DISCORD_API_BASE_URL", DISCORD_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("DISCORD_REQUEST_TIMEOUT_SECONDS", "10")
        ),
        followup_timeout_seconds=float(
            os.getenv("DISCORD_FOLLOWUP_TIMEOUT_SECONDS", "5")
        ),
    )


@lru_cache(maxsize=1)
def get_discord_settings() -> DiscordSettings:
    """Retorna instância cacheada de DiscordSettings."""
    return _load_from_env()
