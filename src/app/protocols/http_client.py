"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class FollowupClientProtocol(Protocol):
    """Contrato mínimo para envio de mensagens de follow-up."""

    async def create_followup_message(
        self,
        application_id: str,
        token: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]: ...


class ControlApiClientProtocol(Protocol):
    """Contrato da API de controle usada no bootstrap."""

    async def get_current_application(self) -> dict[str, Any]: ...

    async def bulk_overwrite_global_commands(
        self,
        application_id: str,
        commands: list[dict[str, object]],
    ) -> list[dict[str, Any]]: ...

    async def set_interactions_endpoint_url(self, url: str) -> dict[str, Any]: ...
