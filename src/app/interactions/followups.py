"""Envio de mensagens de follow-up fora do caminho síncrono.

A resposta inicial precisa sair dentro do prazo da plataforma (~3s). Tudo
que depende de chamada externa roda em tasks asyncio separadas, com timeout
e uma única tentativa. Falha é logada e, quando possível, comunicada ao
usuário com uma mensagem efêmera genérica.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

from app.interactions.encoder import encode_followup
from app.observability import get_correlation_id
from utils.errors import UpstreamApiError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols import FollowupClientProtocol

logger = logging.getLogger(__name__)

FOLLOWUP_FAILURE_MESSAGE = "Something went wrong while sending the rest of this answer."


class FollowupDispatcher:
    """Agenda e acompanha tasks de follow-up."""

    def __init__(self, client: FollowupClientProtocol, timeout_seconds: float) -> None:
        self._client = client
        self._timeout_seconds = timeout_seconds
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(
        self,
        application_id: str,
        token: str,
        messages: Sequence[str],
    ) -> asyncio.Task[None] | None:
        """Agenda envio das mensagens, em ordem, numa task independente."""
        if not messages:
            return None
        task = asyncio.create_task(self._deliver(application_id, token, tuple(messages)))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        logger.info(
            "followup_scheduled",
            extra={"messages": len(messages), "pending_tasks": len(self._tasks)},
        )
        return task

    async def _deliver(self, application_id: str, token: str, messages: tuple[str, ...]) -> None:
        for index, content in enumerate(messages):
            if not await self._send(application_id, token, encode_followup(content)):
                logger.warning(
                    "followup_failed",
                    extra={"message_index": index, "correlation_id": get_correlation_id()},
                )
                await self._send(
                    application_id,
                    token,
                    encode_followup(FOLLOWUP_FAILURE_MESSAGE, ephemeral=True),
                )
                return
        logger.info("followup_delivered", extra={"messages": len(messages)})

    async def _send(self, application_id: str, token: str, payload: dict[str, Any]) -> bool:
        try:
            await asyncio.wait_for(
                self._client.create_followup_message(application_id, token, payload),
                timeout=self._timeout_seconds,
            )
        except TimeoutError:
            logger.warning("followup_timeout", extra={"timeout_seconds": self._timeout_seconds})
            return False
        except UpstreamApiError as exc:
            logger.warning(
                "followup_upstream_error",
                extra={"status_code": exc.status_code, "error_code": exc.error_code},
            )
            return False
        return True

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        with contextlib.suppress(asyncio.CancelledError):
            exc = task.exception()
            if exc is not None:
                logger.error(
                    "followup_task_failed",
                    extra={"error_type": type(exc).__name__, "pending_tasks": len(self._tasks)},
                )

    async def drain(self, timeout_seconds: float = 10.0) -> None:
        """Aguarda tasks pendentes durante shutdown do processo."""
        if not self._tasks:
            return

        pending_now = list(self._tasks)
        logger.info(
            "followup_shutdown_wait",
            extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
        )
        _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
        if not pending:
            return

        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        logger.warning("followup_shutdown_cancelled", extra={"cancelled_tasks": len(pending)})
