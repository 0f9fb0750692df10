"""Validação e coerção das opções recebidas contra a definição do comando."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from app.commands.definitions import SNOWFLAKE_OPTION_TYPES, CommandParameter, OptionType
from app.interactions.errors import ArgumentValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from app.commands.definitions import CommandDefinition
    from app.interactions.models import CommandOption

_SUBCOMMAND_TYPES = frozenset({OptionType.SUB_COMMAND, OptionType.SUB_COMMAND_GROUP})


def bind_arguments(
    definition: CommandDefinition,
    options: Iterable[CommandOption],
) -> Mapping[str, object]:
    """Associa opções recebidas aos parâmetros declarados.

    Args:
        definition: Definição do comando no registry
        options: Opções decodificadas, na ordem recebida

    Raises:
        ArgumentValidationError: Subcomando, opção desconhecida/duplicada,
            tipo divergente, valor fora do domínio ou obrigatória ausente

    Returns:
        Mapping imutável nome → valor, com todos os parâmetros declarados
    """
    supplied: dict[str, object] = {}
    for option in options:
        if option.type in _SUBCOMMAND_TYPES:
            raise ArgumentValidationError(f"Subcommand `{option.name}` is not supported.")
        parameter = definition.parameter(option.name)
        if parameter is None:
            raise ArgumentValidationError(f"Unknown option `{option.name}`.")
        if option.name in supplied:
            raise ArgumentValidationError(f"Option `{option.name}` was given more than once.")
        if option.type != parameter.type:
            raise ArgumentValidationError(f"Option `{option.name}` has the wrong type.")
        supplied[option.name] = _coerce(parameter, option.value)

    bound: dict[str, object] = {}
    for parameter in definition.parameters:
        if parameter.name in supplied:
            bound[parameter.name] = supplied[parameter.name]
        elif parameter.required:
            raise ArgumentValidationError(f"Missing required option `{parameter.name}`.")
        else:
            bound[parameter.name] = parameter.default
    return MappingProxyType(bound)


def _coerce(parameter: CommandParameter, value: object) -> object:
    option_type = parameter.type

    if option_type is OptionType.STRING:
        if not isinstance(value, str):
            raise _invalid(parameter)
        coerced: object = value
    elif option_type is OptionType.INTEGER:
        if not isinstance(value, int) or isinstance(value, bool):
            raise _invalid(parameter)
        coerced = value
    elif option_type is OptionType.NUMBER:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise _invalid(parameter)
        coerced = float(value)
    elif option_type is OptionType.BOOLEAN:
        if not isinstance(value, bool):
            raise _invalid(parameter)
        coerced = value
    elif option_type in SNOWFLAKE_OPTION_TYPES:
        if not isinstance(value, str) or not value.isdigit():
            raise _invalid(parameter)
        coerced = value
    else:
        raise _invalid(parameter)

    _check_domain(parameter, coerced)
    return coerced


def _check_domain(parameter: CommandParameter, value: object) -> None:
    if parameter.choices and value not in parameter.choices:
        allowed = ", ".join(str(choice) for choice in parameter.choices)
        raise ArgumentValidationError(
            f"Option `{parameter.name}` must be one of: {allowed}."
        )
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return
    if parameter.min_value is not None and value < parameter.min_value:
        raise ArgumentValidationError(
            f"Option `{parameter.name}` must be at least {parameter.min_value}."
        )
    if parameter.max_value is not None and value > parameter.max_value:
        raise ArgumentValidationError(
            f"Option `{parameter.name}` must be at most {parameter.max_value}."
        )


def _invalid(parameter: CommandParameter) -> ArgumentValidationError:
    return ArgumentValidationError(f"Invalid value for option `{parameter.name}`.")
