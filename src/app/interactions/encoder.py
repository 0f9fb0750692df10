"""Serialização de respostas no envelope esperado pela plataforma.

Formato:
    {"type": <callback>, "data": {"content": ..., "flags": ..., "embeds": [...],
     "components": [...], "allowed_mentions": {...}}}

O caminho de liveness-check responde sempre e somente {"type": 1}.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.interactions.responses import InteractionCallbackType, MessageFlags

if TYPE_CHECKING:
    from app.interactions.responses import Button, CommandResponse

MAX_CONTENT_LENGTH = 2000
MAX_EMBEDS = 10
MAX_BUTTONS_PER_ROW = 5
MAX_ACTION_ROWS = 5
ACTION_ROW_TYPE = 1
ELLIPSIS = "…"


def encode_pong() -> dict[str, int]:
    return {"type": int(InteractionCallbackType.PONG)}


def encode_response(response: CommandResponse) -> dict[str, Any]:
    """Converte CommandResponse no payload JSON de callback."""
    data: dict[str, Any] = {
        "content": _truncate(response.content),
        # Conteúdo gerado a partir de input do usuário não deve mencionar ninguém
        "allowed_mentions": {"parse": []},
    }
    if response.embeds:
        data["embeds"] = [embed.to_payload() for embed in response.embeds[:MAX_EMBEDS]]
    if response.buttons:
        data["components"] = _action_rows(response.buttons)
    if response.ephemeral:
        data["flags"] = int(MessageFlags.EPHEMERAL)

    return {"type": int(response.kind), "data": data}


def encode_followup(content: str, *, ephemeral: bool = False) -> dict[str, Any]:
    """Payload de execute-webhook para mensagens de follow-up."""
    payload: dict[str, Any] = {
        "content": _truncate(content),
        "allowed_mentions": {"parse": []},
    }
    if ephemeral:
        payload["flags"] = int(MessageFlags.EPHEMERAL)
    return payload


def _truncate(content: str) -> str:
    if len(content) <= MAX_CONTENT_LENGTH:
        return content
    return content[: MAX_CONTENT_LENGTH - len(ELLIPSIS)] + ELLIPSIS


def _action_rows(buttons: tuple[Button, ...]) -> list[dict[str, Any]]:
    rows = []
    limit = MAX_BUTTONS_PER_ROW * MAX_ACTION_ROWS
    for start in range(0, min(len(buttons), limit), MAX_BUTTONS_PER_ROW):
        chunk = buttons[start : start + MAX_BUTTONS_PER_ROW]
        rows.append(
            {"type": ACTION_ROW_TYPE, "components": [button.to_payload() for button in chunk]}
        )
    return rows
