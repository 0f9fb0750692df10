"""Respostas produzidas pelos handlers (antes da serialização)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class InteractionCallbackType(IntEnum):
    """Tipos de callback usados no caminho síncrono."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    UPDATE_MESSAGE = 7


class MessageFlags(IntFlag):
    EPHEMERAL = 1 << 6


class ButtonStyle(IntEnum):
    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4


@dataclass(frozen=True, slots=True)
class EmbedField:
    name: str
    value: str
    inline: bool = False


@dataclass(frozen=True, slots=True)
class Embed:
    """Embed de mensagem (subconjunto usado pelos comandos)."""

    title: str | None = None
    description: str | None = None
    color: int | None = None
    fields: tuple[EmbedField, ...] = ()
    footer: str | None = None

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {}
        if self.title:
            payload["title"] = self.title
        if self.description:
            payload["description"] = self.description
        if self.color is not None:
            payload["color"] = self.color
        if self.fields:
            payload["fields"] = [
                {"name": f.name, "value": f.value, "inline": f.inline} for f in self.fields
            ]
        if self.footer:
            payload["footer"] = {"text": self.footer}
        return payload


@dataclass(frozen=True, slots=True)
class Button:
    """Botão interativo roteado pelo custom_id."""

    label: str
    custom_id: str
    style: ButtonStyle = ButtonStyle.SECONDARY

    def to_payload(self) -> dict[str, object]:
        return {
            "type": 2,
            "style": int(self.style),
            "label": self.label,
            "custom_id": self.custom_id,
        }


@dataclass(frozen=True, slots=True)
class CommandResponse:
    """Resultado de um handler.

    Atributos:
        kind: Tipo de callback (mensagem nova ou atualização da mensagem do componente)
        content: Texto da mensagem
        embeds: Embeds anexados
        buttons: Botões (agrupados em action rows pelo encoder)
        ephemeral: Visível apenas para quem invocou
        followups: Mensagens enviadas depois da resposta, fora do caminho síncrono
    """

    kind: InteractionCallbackType = InteractionCallbackType.CHANNEL_MESSAGE_WITH_SOURCE
    content: str = ""
    embeds: tuple[Embed, ...] = ()
    buttons: tuple[Button, ...] = ()
    ephemeral: bool = False
    followups: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind is InteractionCallbackType.PONG:
            raise ValueError("PONG não é uma resposta de handler")
        if not self.content and not self.embeds:
            raise ValueError("resposta precisa de content ou embeds")

    @classmethod
    def message(
        cls,
        content: str = "",
        *,
        embeds: tuple[Embed, ...] = (),
        buttons: tuple[Button, ...] = (),
        ephemeral: bool = False,
        followups: tuple[str, ...] = (),
    ) -> CommandResponse:
        return cls(
            kind=InteractionCallbackType.CHANNEL_MESSAGE_WITH_SOURCE,
            content=content,
            embeds=embeds,
            buttons=buttons,
            ephemeral=ephemeral,
            followups=followups,
        )

    @classmethod
    def update(
        cls,
        content: str = "",
        *,
        embeds: tuple[Embed, ...] = (),
        buttons: tuple[Button, ...] = (),
    ) -> CommandResponse:
        """Atualiza a mensagem que contém o componente clicado."""
        return cls(
            kind=InteractionCallbackType.UPDATE_MESSAGE,
            content=content,
            embeds=embeds,
            buttons=buttons,
        )

    @classmethod
    def error(cls, content: str) -> CommandResponse:
        """Erro de aplicação exibido só para quem invocou."""
        return cls(content=content, ephemeral=True)
