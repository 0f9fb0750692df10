"""Comando `about`: lista os comandos disponíveis (resposta efêmera)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.commands.definitions import CommandDefinition
from app.interactions.responses import CommandResponse, Embed, EmbedField

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.interactions.models import InvocationContext

ABOUT_DEFINITION = CommandDefinition(
    name="about",
    description="show information about this bot",
)

EMBED_COLOR = 0x5865F2


class AboutCommand:
    def __init__(self, definitions: tuple[CommandDefinition, ...]) -> None:
        self._embed = Embed(
            title="citygen",
            description="Random city names, on demand.",
            color=EMBED_COLOR,
            fields=tuple(
                EmbedField(name=f"/{d.name}", value=d.description) for d in definitions
            ),
        )

    def handle(
        self,
        arguments: Mapping[str, object],
        context: InvocationContext,
    ) -> CommandResponse:
        return CommandResponse.message(embeds=(self._embed,), ephemeral=True)
