"""Decodificação do envelope de interação (corpo bruto → variante tipada).

Chamado somente depois da verificação de assinatura. Rejeita estrutura fora
do schema (campos ausentes ou com tipo errado) em vez de assumir defaults.
Conteúdo bem formado que o bot não atende (menu de contexto, subcomando) é
decodificado mesmo assim e recusado pelo router com resposta efêmera.
"""

from __future__ import annotations

import json
from typing import Any

from app.interactions.errors import MalformedInteractionError
from app.interactions.models import (
    CommandInteraction,
    CommandOption,
    ComponentInteraction,
    Interaction,
    InteractionType,
    InvocationContext,
    InvokingUser,
    PingInteraction,
)

# Tipos de opção que agrupam subcomandos: opções aninhadas, sem `value`
_SUBCOMMAND_OPTION_TYPES = frozenset({1, 2})


def decode_interaction(raw_body: bytes) -> Interaction:
    """Decodifica o corpo bruto em uma interação tipada.

    Args:
        raw_body: Corpo já verificado, byte a byte como recebido

    Raises:
        MalformedInteractionError: JSON inválido ou fora do schema

    Returns:
        PingInteraction | CommandInteraction | ComponentInteraction
    """
    try:
        payload = json.loads(raw_body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MalformedInteractionError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise MalformedInteractionError("payload_not_object")

    raw_type = payload.get("type")
    if not isinstance(raw_type, int) or isinstance(raw_type, bool):
        raise MalformedInteractionError("missing_type")
    try:
        interaction_type = InteractionType(raw_type)
    except ValueError as exc:
        raise MalformedInteractionError(f"unsupported_type:{raw_type}") from exc

    # PING é respondido independentemente dos demais campos
    if interaction_type is InteractionType.PING:
        ping_id = payload.get("id")
        application_id = payload.get("application_id")
        return PingInteraction(
            id=ping_id if isinstance(ping_id, str) else "",
            application_id=application_id if isinstance(application_id, str) else "",
        )

    context = _decode_context(payload)
    data = payload.get("data")
    if not isinstance(data, dict):
        raise MalformedInteractionError("missing_data")

    if interaction_type is InteractionType.APPLICATION_COMMAND:
        return _decode_command(data, context)
    return _decode_component(data, context)


def _decode_context(payload: dict[str, Any]) -> InvocationContext:
    member = payload.get("member")
    if member is not None:
        if not isinstance(member, dict):
            raise MalformedInteractionError("invalid_member")
        raw_user = member.get("user")
    else:
        raw_user = payload.get("user")

    if not isinstance(raw_user, dict):
        raise MalformedInteractionError("missing_user")

    user = InvokingUser(
        id=_require_str(raw_user, "id"),
        username=_require_str(raw_user, "username"),
        global_name=_optional_str(raw_user, "global_name"),
    )
    return InvocationContext(
        interaction_id=_require_str(payload, "id"),
        application_id=_require_str(payload, "application_id"),
        token=_require_str(payload, "token"),
        user=user,
        guild_id=_optional_str(payload, "guild_id"),
        channel_id=_optional_str(payload, "channel_id"),
        locale=_optional_str(payload, "locale"),
    )


def _decode_command(data: dict[str, Any], context: InvocationContext) -> CommandInteraction:
    command_type = data.get("type")
    if not isinstance(command_type, int) or isinstance(command_type, bool):
        raise MalformedInteractionError("missing_command_type")

    return CommandInteraction(
        context=context,
        command_id=_require_str(data, "id"),
        name=_require_str(data, "name"),
        options=_decode_options(data),
        command_type=command_type,
    )


def _decode_options(source: dict[str, Any]) -> tuple[CommandOption, ...]:
    raw_options = source.get("options", [])
    if not isinstance(raw_options, list):
        raise MalformedInteractionError("invalid_options")
    return tuple(_decode_option(raw) for raw in raw_options)


def _decode_option(raw: object) -> CommandOption:
    if not isinstance(raw, dict):
        raise MalformedInteractionError("invalid_option")

    option_type = raw.get("type")
    if not isinstance(option_type, int) or isinstance(option_type, bool):
        raise MalformedInteractionError("invalid_option_type")
    if option_type in _SUBCOMMAND_OPTION_TYPES:
        return CommandOption(
            name=_require_str(raw, "name"),
            type=option_type,
            options=_decode_options(raw),
        )
    if "value" not in raw:
        raise MalformedInteractionError("missing_option_value")

    return CommandOption(
        name=_require_str(raw, "name"),
        type=option_type,
        value=raw["value"],
    )


def _decode_component(data: dict[str, Any], context: InvocationContext) -> ComponentInteraction:
    component_type = data.get("component_type")
    if not isinstance(component_type, int) or isinstance(component_type, bool):
        raise MalformedInteractionError("missing_component_type")

    raw_values = data.get("values", [])
    if not isinstance(raw_values, list) or not all(isinstance(v, str) for v in raw_values):
        raise MalformedInteractionError("invalid_component_values")

    return ComponentInteraction(
        context=context,
        custom_id=_require_str(data, "custom_id"),
        component_type=component_type,
        values=tuple(raw_values),
    )


def _require_str(source: dict[str, Any], key: str) -> str:
    value = source.get(key)
    if not isinstance(value, str) or not value:
        raise MalformedInteractionError(f"missing_field:{key}")
    return value


def _optional_str(source: dict[str, Any], key: str) -> str | None:
    value = source.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedInteractionError(f"invalid_field:{key}")
    return value
