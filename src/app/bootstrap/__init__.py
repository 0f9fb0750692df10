"""Bootstrap da aplicação — inicialização e chamadas únicas de startup.

Este módulo é o composition root: configura logging, valida settings e
executa as chamadas de controle que precisam acontecer antes (registro de
comandos) e logo depois (URL do endpoint) de o listener aceitar tráfego.

Uso:
    from app.bootstrap import initialize_app, run_bootstrap

    initialize_app()
    result = asyncio.run(run_bootstrap(settings, registry, client))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_discord_settings
from utils.errors import BootstrapError, UpstreamApiError

if TYPE_CHECKING:
    from app.commands.registry import CommandRegistry
    from app.protocols import ControlApiClientProtocol
    from config.settings import DiscordSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BootstrapResult:
    """Dados resolvidos no bootstrap.

    Atributos:
        application_id: ID da aplicação
        public_key: Chave pública Ed25519 (hex) usada na verificação
        registered_commands: Quantidade de comandos aceitos pela API
    """

    application_id: str
    public_key: str
    registered_commands: int


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    BOT_KEY entra como segredo mascarado em todo record.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
        secrets=(get_discord_settings().bot_key,),
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Sem BOT_KEY não há como registrar comandos, então qualquer erro é fatal
    em todos os ambientes.

    Raises:
        RuntimeError: Se alguma setting for inválida
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"discord: {error}" for error in get_discord_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.error(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    details = "\n".join(f"- {error}" for error in errors)
    raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


async def run_bootstrap(
    settings: DiscordSettings,
    registry: CommandRegistry,
    client: ControlApiClientProtocol,
) -> BootstrapResult:
    """Resolve a aplicação e sobrescreve os comandos globais.

    Executa uma vez, sequencialmente, antes de o listener subir.

    Raises:
        BootstrapError: Se qualquer chamada for rejeitada (ex: BOT_KEY inválido)
    """
    try:
        application_id, public_key = await _resolve_application(settings, client)
        registered = await client.bulk_overwrite_global_commands(
            application_id,
            registry.registration_payloads(),
        )
    except UpstreamApiError as exc:
        logger.error(
            "bootstrap_upstream_failed",
            extra={
                "component": "bootstrap",
                "status_code": exc.status_code,
                "error_code": exc.error_code,
            },
        )
        raise BootstrapError(f"bootstrap falhou: {exc}") from exc

    logger.info(
        "commands_registered",
        extra={
            "component": "bootstrap",
            "commands": [definition.name for definition in registry.definitions()],
        },
    )
    return BootstrapResult(
        application_id=application_id,
        public_key=public_key,
        registered_commands=len(registered),
    )


async def update_interactions_endpoint(client: ControlApiClientProtocol, url: str) -> bool:
    """Aponta os callbacks da aplicação para `url`.

    A plataforma valida a URL enviando um PING, por isso roda depois que o
    listener já aceita conexões. Falha é logada; o serviço continua no ar
    com a URL configurada anteriormente.
    """
    try:
        await client.set_interactions_endpoint_url(url)
    except UpstreamApiError as exc:
        logger.error(
            "interactions_endpoint_update_failed",
            extra={
                "component": "bootstrap",
                "status_code": exc.status_code,
                "error_code": exc.error_code,
            },
        )
        return False

    logger.info("interactions_endpoint_updated", extra={"component": "bootstrap"})
    return True


async def _resolve_application(
    settings: DiscordSettings,
    client: ControlApiClientProtocol,
) -> tuple[str, str]:
    application_id = settings.application_id
    public_key = settings.public_key
    if application_id and public_key:
        return application_id, public_key

    application = await client.get_current_application()
    application_id = application_id or str(application.get("id") or "")
    public_key = public_key or str(application.get("verify_key") or "")
    if not application_id or not public_key:
        raise BootstrapError("aplicação sem id/verify_key na resposta da API")
    return application_id, public_key
