"""Definições estáticas de comandos (nome, descrição, parâmetros tipados).

Usadas tanto no bootstrap (payload de registro) quanto na validação de
argumentos em tempo de request.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

_NAME_PATTERN = re.compile(r"^[-_a-z0-9]{1,32}$")
MAX_DESCRIPTION_LENGTH = 100
MAX_PARAMETERS = 25

# Tipo de comando registrado: slash command
CHAT_INPUT = 1


class OptionType(IntEnum):
    """Tipos de opção de application command."""

    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


# Opções cujo valor chega como snowflake (string numérica)
SNOWFLAKE_OPTION_TYPES = frozenset(
    {
        OptionType.USER,
        OptionType.CHANNEL,
        OptionType.ROLE,
        OptionType.MENTIONABLE,
        OptionType.ATTACHMENT,
    }
)


def _validate_name_and_description(kind: str, name: str, description: str) -> None:
    if not _NAME_PATTERN.match(name):
        raise ValueError(f"nome de {kind} inválido: {name!r}")
    if not 1 <= len(description) <= MAX_DESCRIPTION_LENGTH:
        raise ValueError(
            f"descrição de {kind} '{name}' deve ter 1-{MAX_DESCRIPTION_LENGTH} caracteres"
        )


@dataclass(frozen=True, slots=True)
class CommandParameter:
    """Parâmetro declarado de um comando.

    Atributos:
        name: Nome da opção (único no comando)
        description: Descrição exibida no cliente
        type: Tipo da opção
        required: Opção obrigatória
        choices: Valores permitidos (STRING/INTEGER/NUMBER)
        min_value: Limite inferior (INTEGER/NUMBER)
        max_value: Limite superior (INTEGER/NUMBER)
        default: Valor usado quando a opção opcional não é informada
    """

    name: str
    description: str
    type: OptionType
    required: bool = False
    choices: tuple[str | int | float, ...] = ()
    min_value: int | float | None = None
    max_value: int | float | None = None
    default: object = None

    def __post_init__(self) -> None:
        _validate_name_and_description("parâmetro", self.name, self.description)
        if self.type in (OptionType.SUB_COMMAND, OptionType.SUB_COMMAND_GROUP):
            raise ValueError("subcomandos não são suportados")
        numeric = self.type in (OptionType.INTEGER, OptionType.NUMBER)
        if (self.min_value is not None or self.max_value is not None) and not numeric:
            raise ValueError(f"min/max só se aplicam a opções numéricas ({self.name})")
        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise ValueError(f"min_value > max_value em '{self.name}'")
        if self.required and self.default is not None:
            raise ValueError(f"opção obrigatória '{self.name}' não pode ter default")

    def to_registration_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "type": int(self.type),
            "name": self.name,
            "description": self.description,
            "required": self.required,
        }
        if self.choices:
            payload["choices"] = [{"name": str(c), "value": c} for c in self.choices]
        if self.min_value is not None:
            payload["min_value"] = self.min_value
        if self.max_value is not None:
            payload["max_value"] = self.max_value
        return payload


@dataclass(frozen=True, slots=True)
class CommandDefinition:
    """Descritor estático de um comando."""

    name: str
    description: str
    parameters: tuple[CommandParameter, ...] = ()

    def __post_init__(self) -> None:
        _validate_name_and_description("comando", self.name, self.description)
        if len(self.parameters) > MAX_PARAMETERS:
            raise ValueError(f"comando '{self.name}' excede {MAX_PARAMETERS} parâmetros")

        names = [p.name for p in self.parameters]
        if len(names) != len(set(names)):
            raise ValueError(f"parâmetros duplicados em '{self.name}'")

        seen_optional = False
        for parameter in self.parameters:
            if parameter.required and seen_optional:
                raise ValueError(
                    f"'{self.name}': obrigatórios devem vir antes dos opcionais"
                )
            seen_optional = seen_optional or not parameter.required

    def parameter(self, name: str) -> CommandParameter | None:
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None

    def to_registration_payload(self) -> dict[str, object]:
        """Payload JSON aceito pelo bulk overwrite de comandos globais."""
        return {
            "name": self.name,
            "description": self.description,
            "type": CHAT_INPUT,
            "options": [p.to_registration_payload() for p in self.parameters],
        }
