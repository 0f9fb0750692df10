"""Modelos tipados de interação (envelope decodificado).

Cada tipo de interação é uma variante própria; o tipo é decidido pelo
campo `type` do payload, nunca por presença de campos.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

# data.type de application command: slash command (menus de contexto são 2 e 3)
CHAT_INPUT_COMMAND_TYPE = 1


class InteractionType(IntEnum):
    """Tipos de interação suportados."""

    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3


@dataclass(frozen=True, slots=True)
class InvokingUser:
    """Usuário que disparou a interação."""

    id: str
    username: str
    global_name: str | None = None

    @property
    def display_name(self) -> str:
        return self.global_name or self.username


@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Contexto da interação repassado aos handlers.

    Atributos:
        interaction_id: ID da interação
        application_id: ID da aplicação destinatária
        token: Token da interação (usado apenas para follow-ups; nunca logar)
        user: Usuário que invocou
        guild_id: Servidor de origem (None em DM)
        channel_id: Canal de origem
        locale: Idioma do cliente do usuário
    """

    interaction_id: str
    application_id: str
    token: str = field(repr=False)
    user: InvokingUser
    guild_id: str | None = None
    channel_id: str | None = None
    locale: str | None = None


@dataclass(frozen=True, slots=True)
class CommandOption:
    """Opção informada pelo usuário, na ordem recebida.

    Subcomandos (type 1/2) não têm `value`; trazem as próprias opções em
    `options`.
    """

    name: str
    type: int
    value: object = None
    options: tuple[CommandOption, ...] = ()


@dataclass(frozen=True, slots=True)
class PingInteraction:
    """Liveness-check da plataforma; respondido sempre com PONG."""

    type: ClassVar[InteractionType] = InteractionType.PING

    id: str = ""
    application_id: str = ""


@dataclass(frozen=True, slots=True)
class CommandInteraction:
    """Invocação de application command (slash ou menu de contexto)."""

    type: ClassVar[InteractionType] = InteractionType.APPLICATION_COMMAND

    context: InvocationContext
    command_id: str
    name: str
    options: tuple[CommandOption, ...] = ()
    command_type: int = CHAT_INPUT_COMMAND_TYPE


@dataclass(frozen=True, slots=True)
class ComponentInteraction:
    """Clique em componente (botão/select) de uma mensagem do bot."""

    type: ClassVar[InteractionType] = InteractionType.MESSAGE_COMPONENT

    context: InvocationContext
    custom_id: str
    component_type: int
    values: tuple[str, ...] = ()


Interaction = PingInteraction | CommandInteraction | ComponentInteraction
