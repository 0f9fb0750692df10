"""Endpoint do outgoing webhook de interações.

Fluxo por request:
1. Lê o corpo bruto e verifica a assinatura Ed25519 (falha → 401)
2. Decodifica o envelope (falha → 400)
3. PING → PONG; demais tipos → router → encoder (sempre 200)
4. Follow-ups são agendados depois de montar a resposta

Segurança:
- Nada é decodificado antes da verificação
- O 401 não diz qual verificação falhou
- O token da interação nunca vai para os logs
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.discord.webhook.receive import (
    InvalidSignatureError,
    parse_interaction_request,
)
from app.interactions.encoder import encode_pong, encode_response
from app.interactions.errors import MalformedInteractionError
from app.interactions.models import PingInteraction
from app.observability import (
    bind_interaction_id,
    get_correlation_id,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from app.interactions.followups import FollowupDispatcher
    from app.interactions.router import CommandRouter

logger = logging.getLogger(__name__)


async def receive_interaction(request: Request) -> Response:
    """Recebe uma interação assinada e responde de forma síncrona.

    Returns:
        JSON de callback (200), ou texto puro em 401/400.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))
    started_at = time.perf_counter()

    try:
        state = request.app.state
        raw_body = await request.body()

        try:
            interaction = parse_interaction_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                verify_key=state.verify_key,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "interaction_signature_invalid",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return Response(
                content="Unauthorized",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except MalformedInteractionError as exc:
            logger.warning(
                "interaction_malformed",
                extra={"correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return Response(
                content="Bad Request",
                media_type="text/plain",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        if isinstance(interaction, PingInteraction):
            logger.info("interaction_ping", extra={"correlation_id": get_correlation_id()})
            record_latency(
                "interactions",
                "ping",
                (time.perf_counter() - started_at) * 1000,
                get_correlation_id(),
            )
            return JSONResponse(content=encode_pong(), status_code=status.HTTP_200_OK)

        context = interaction.context
        bind_interaction_id(context.interaction_id)
        logger.info(
            "interaction_received",
            extra={
                "correlation_id": get_correlation_id(),
                "interaction_type": interaction.type.name,
                "payload_size": len(raw_body),
            },
        )

        command_router: CommandRouter = state.command_router
        response = command_router.dispatch(interaction)
        payload = encode_response(response)

        if response.followups:
            followups: FollowupDispatcher = state.followups
            followups.schedule(context.application_id, context.token, response.followups)

        record_latency(
            "interactions",
            interaction.type.name.lower(),
            (time.perf_counter() - started_at) * 1000,
            get_correlation_id(),
        )
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    finally:
        reset_correlation_id(token)
