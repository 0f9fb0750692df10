"""Entrypoint da aplicação citygen.

Sequência de startup:
1. Configura logging e valida settings
2. Registra os comandos globais (falha → exit 1, listener não sobe)
3. Sobe o listener (uvicorn) com a chave pública e o registry prontos
4. Atualiza a URL do endpoint de interações (a plataforma valida com PING)

Uso:
    citygen
    python -m app.app
"""

from __future__ import annotations

import asyncio
import contextlib
import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import uvicorn
from fastapi import FastAPI

from api.connectors.discord.http_client import create_discord_http_client
from api.connectors.discord.signature import InvalidPublicKeyError, load_verify_key
from api.routes import create_api_router
from app.bootstrap import (
    initialize_app,
    run_bootstrap,
    update_interactions_endpoint,
    validate_runtime_settings,
)
from app.commands import build_default_registry
from app.interactions.followups import FollowupDispatcher
from app.interactions.router import CommandRouter
from config.logging import get_logger
from config.settings import get_base_settings, get_discord_settings
from utils.errors import BootstrapError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

    from app.commands.registry import CommandRegistry
    from app.protocols import ControlApiClientProtocol, FollowupClientProtocol
    from config.settings import DiscordSettings

logger = get_logger(__name__)

SHUTDOWN_DRAIN_SECONDS = 10.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Agenda atualização da URL do endpoint (quando configurada)

    Shutdown:
    - Aguarda follow-ups pendentes
    """
    logger.info("app_starting", extra={"service": "citygen"})
    endpoint_task: asyncio.Task[Any] | None = None
    endpoint_url = app.state.interactions_endpoint_url
    if endpoint_url and app.state.control_client is not None:
        endpoint_task = asyncio.create_task(
            update_interactions_endpoint(app.state.control_client, endpoint_url)
        )

    yield

    logger.info("app_shutting_down", extra={"service": "citygen"})
    if endpoint_task is not None and not endpoint_task.done():
        endpoint_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await endpoint_task
    await app.state.followups.drain(timeout_seconds=SHUTDOWN_DRAIN_SECONDS)


def create_app(
    *,
    verify_key: Ed25519PublicKey,
    registry: CommandRegistry,
    followup_client: FollowupClientProtocol,
    settings: DiscordSettings | None = None,
    control_client: ControlApiClientProtocol | None = None,
    commands_registered: int | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Chave pública e registry são definidos aqui e apenas lidos pelas rotas.

    Args:
        verify_key: Chave pública Ed25519 da aplicação
        registry: Registry de comandos (imutável)
        followup_client: Cliente usado pelas mensagens de follow-up
        settings: DiscordSettings (default: ambiente)
        control_client: Cliente de controle para atualizar a URL do endpoint
        commands_registered: Comandos aceitos pela API no bootstrap
            (default: tamanho do registry)
    """
    discord = settings or get_discord_settings()
    fastapi_app = FastAPI(
        title="citygen",
        description="Outgoing webhook de interações do bot citygen",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    fastapi_app.state.verify_key = verify_key
    fastapi_app.state.command_router = CommandRouter(registry)
    fastapi_app.state.followups = FollowupDispatcher(
        followup_client,
        timeout_seconds=discord.followup_timeout_seconds,
    )
    fastapi_app.state.control_client = control_client
    fastapi_app.state.interactions_endpoint_url = discord.interactions_endpoint_url
    fastapi_app.state.commands_registered = (
        len(registry) if commands_registered is None else commands_registered
    )

    fastapi_app.include_router(create_api_router(interactions_path=discord.interactions_path))

    logger.info(
        "app_configured",
        extra={"service": "citygen", "interactions_path": discord.interactions_path},
    )
    return fastapi_app


def main() -> None:
    """Entrypoint do processo.

    Sai com código 1 se settings forem inválidas ou o bootstrap falhar;
    nesses casos o listener nunca é iniciado.
    """
    try:
        initialize_app()
    except ValueError as exc:
        # Logging ainda não configurado: mensagem vai direto para stderr
        sys.exit(f"startup_aborted: {exc}")

    try:
        validate_runtime_settings()
    except (RuntimeError, ValueError):
        logger.exception("startup_aborted", extra={"reason": "invalid_settings"})
        sys.exit(1)

    discord = get_discord_settings()
    base = get_base_settings()
    client = create_discord_http_client(discord)
    registry = build_default_registry()

    try:
        result = asyncio.run(run_bootstrap(discord, registry, client))
        verify_key = load_verify_key(result.public_key)
    except (BootstrapError, InvalidPublicKeyError):
        logger.exception("startup_aborted", extra={"reason": "bootstrap_failed"})
        sys.exit(1)

    app = create_app(
        verify_key=verify_key,
        registry=registry,
        followup_client=client,
        settings=discord,
        control_client=client,
        commands_registered=result.registered_commands,
    )

    logger.info("listener_starting", extra={"host": base.host, "port": base.port})
    uvicorn.run(app, host=base.host, port=base.port, log_config=None)


if __name__ == "__main__":
    main()
