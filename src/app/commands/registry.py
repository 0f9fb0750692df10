"""Registry estático de comandos: nome → (definição, handler).

Construído uma vez no startup e apenas lido em tempo de request, por isso
dispensa locks.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.interactions.errors import CommandNotFoundError

if TYPE_CHECKING:
    from app.commands.definitions import CommandDefinition
    from app.interactions.models import InvocationContext
    from app.interactions.responses import CommandResponse

CommandHandler = Callable[[Mapping[str, object], "InvocationContext"], "CommandResponse"]
ComponentHandler = Callable[[str, "InvocationContext"], "CommandResponse"]

# custom_id = "<prefixo>:<argumento>"
CUSTOM_ID_SEPARATOR = ":"


@dataclass(frozen=True, slots=True)
class RegisteredCommand:
    definition: CommandDefinition
    handler: CommandHandler

    @property
    def name(self) -> str:
        return self.definition.name


class CommandRegistry:
    """Mapping imutável de comandos e handlers de componentes."""

    def __init__(
        self,
        commands: Mapping[str, RegisteredCommand],
        components: Mapping[str, ComponentHandler] | None = None,
    ) -> None:
        self._commands = MappingProxyType(dict(commands))
        self._components = MappingProxyType(dict(components or {}))

    @classmethod
    def from_commands(
        cls,
        commands: Iterable[RegisteredCommand],
        components: Mapping[str, ComponentHandler] | None = None,
    ) -> CommandRegistry:
        """Cria registry rejeitando nomes duplicados."""
        by_name: dict[str, RegisteredCommand] = {}
        for command in commands:
            if command.name in by_name:
                raise ValueError(f"comando duplicado no registry: {command.name}")
            by_name[command.name] = command

        for prefix in components or {}:
            if not prefix or CUSTOM_ID_SEPARATOR in prefix:
                raise ValueError(f"prefixo de componente inválido: {prefix!r}")

        return cls(by_name, components)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def get(self, name: str) -> RegisteredCommand | None:
        return self._commands.get(name)

    def require(self, name: str) -> RegisteredCommand:
        command = self._commands.get(name)
        if command is None:
            raise CommandNotFoundError(name)
        return command

    def require_component(self, custom_id: str) -> tuple[ComponentHandler, str]:
        """Resolve handler pelo prefixo do custom_id.

        Returns:
            (handler, argumento após o separador)
        """
        prefix, _, argument = custom_id.partition(CUSTOM_ID_SEPARATOR)
        handler = self._components.get(prefix)
        if handler is None:
            raise CommandNotFoundError(custom_id)
        return handler, argument

    def definitions(self) -> tuple[CommandDefinition, ...]:
        return tuple(command.definition for command in self._commands.values())

    def registration_payloads(self) -> list[dict[str, object]]:
        """Payloads para o bulk overwrite de comandos globais."""
        return [definition.to_registration_payload() for definition in self.definitions()]


def build_default_registry(rng: random.Random | None = None) -> CommandRegistry:
    """Monta o registry com os comandos do bot.

    Args:
        rng: Fonte de aleatoriedade (injetável para testes)
    """
    from app.commands.about import ABOUT_DEFINITION, AboutCommand
    from app.commands.city import CITY_DEFINITION, REROLL_PREFIX, CityCommand, load_cities

    city = CityCommand(load_cities(), rng or random.Random())
    about = AboutCommand((CITY_DEFINITION, ABOUT_DEFINITION))

    return CommandRegistry.from_commands(
        [
            RegisteredCommand(CITY_DEFINITION, city.handle),
            RegisteredCommand(ABOUT_DEFINITION, about.handle),
        ],
        components={REROLL_PREFIX: city.handle_reroll},
    )
