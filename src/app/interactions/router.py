"""Roteamento de interações decodificadas para os handlers do registry.

Erros de aplicação (comando desconhecido, argumentos inválidos, falha no
handler) viram respostas efêmeras; nunca falham a troca HTTP.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.interactions.arguments import bind_arguments
from app.interactions.errors import ArgumentValidationError, CommandNotFoundError
from app.interactions.models import (
    CHAT_INPUT_COMMAND_TYPE,
    CommandInteraction,
    ComponentInteraction,
)
from app.interactions.responses import CommandResponse
from app.observability import get_correlation_id, record_interaction

if TYPE_CHECKING:
    from app.commands.registry import CommandRegistry

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND_MESSAGE = "This command is not available anymore."
COMPONENT_NOT_SUPPORTED_MESSAGE = "This interaction is not supported anymore."
HANDLER_FAILURE_MESSAGE = "Something went wrong while running this command. Please try again."


class CommandRouter:
    """Despacha interações para handlers registrados."""

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def dispatch(self, interaction: CommandInteraction | ComponentInteraction) -> CommandResponse:
        """Executa o handler da interação e retorna a resposta.

        PING não passa por aqui: é respondido direto pela rota.
        """
        if isinstance(interaction, CommandInteraction):
            return self._dispatch_command(interaction)
        if isinstance(interaction, ComponentInteraction):
            return self._dispatch_component(interaction)
        raise TypeError(f"interação não roteável: {type(interaction).__name__}")

    def _dispatch_command(self, interaction: CommandInteraction) -> CommandResponse:
        type_name = interaction.type.name
        try:
            # Só slash commands são registrados; menus de contexto nunca resolvem
            if interaction.command_type != CHAT_INPUT_COMMAND_TYPE:
                raise CommandNotFoundError(interaction.name)
            command = self._registry.require(interaction.name)
            arguments = bind_arguments(command.definition, interaction.options)
        except CommandNotFoundError:
            logger.warning("command_not_found", extra={"command": interaction.name})
            record_interaction(type_name, "not_found", interaction.name, get_correlation_id())
            return CommandResponse.error(COMMAND_NOT_FOUND_MESSAGE)
        except ArgumentValidationError as exc:
            logger.info(
                "command_arguments_invalid",
                extra={"command": interaction.name, "error": str(exc)},
            )
            record_interaction(
                type_name, "invalid_arguments", interaction.name, get_correlation_id()
            )
            return CommandResponse.error(str(exc))

        try:
            response = command.handler(arguments, interaction.context)
        except Exception:
            logger.exception("command_handler_failed", extra={"command": interaction.name})
            record_interaction(type_name, "handler_failed", interaction.name, get_correlation_id())
            return CommandResponse.error(HANDLER_FAILURE_MESSAGE)

        record_interaction(type_name, "ok", interaction.name, get_correlation_id())
        return response

    def _dispatch_component(self, interaction: ComponentInteraction) -> CommandResponse:
        type_name = interaction.type.name
        try:
            handler, argument = self._registry.require_component(interaction.custom_id)
        except CommandNotFoundError:
            logger.warning("component_not_found", extra={"custom_id": interaction.custom_id})
            record_interaction(
                type_name, "not_found", interaction.custom_id, get_correlation_id()
            )
            return CommandResponse.error(COMPONENT_NOT_SUPPORTED_MESSAGE)

        try:
            response = handler(argument, interaction.context)
        except Exception:
            logger.exception(
                "component_handler_failed", extra={"custom_id": interaction.custom_id}
            )
            record_interaction(
                type_name, "handler_failed", interaction.custom_id, get_correlation_id()
            )
            return CommandResponse.error(HANDLER_FAILURE_MESSAGE)

        record_interaction(type_name, "ok", interaction.custom_id, get_correlation_id())
        return response
