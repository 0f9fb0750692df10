"""Testes das definições estáticas de comandos."""

from __future__ import annotations

import pytest

from app.commands.definitions import CommandDefinition, CommandParameter, OptionType


class TestCommandParameter:
    def test_registration_payload(self) -> None:
        parameter = CommandParameter(
            "count", "how many", OptionType.INTEGER, min_value=1, max_value=5, default=1
        )

        assert parameter.to_registration_payload() == {
            "type": 4,
            "name": "count",
            "description": "how many",
            "required": False,
            "min_value": 1,
            "max_value": 5,
        }

    def test_choices_payload(self) -> None:
        parameter = CommandParameter("size", "a size", OptionType.STRING, choices=("s", "m"))

        assert parameter.to_registration_payload()["choices"] == [
            {"name": "s", "value": "s"},
            {"name": "m", "value": "m"},
        ]

    @pytest.mark.parametrize("name", ["", "Count", "with space", "x" * 33])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValueError):
            CommandParameter(name, "desc", OptionType.STRING)

    @pytest.mark.parametrize("description", ["", "x" * 101])
    def test_invalid_description(self, description: str) -> None:
        with pytest.raises(ValueError):
            CommandParameter("name", description, OptionType.STRING)

    @pytest.mark.parametrize("option_type", [OptionType.SUB_COMMAND, OptionType.SUB_COMMAND_GROUP])
    def test_subcommands_rejected(self, option_type: OptionType) -> None:
        with pytest.raises(ValueError, match="subcomandos"):
            CommandParameter("sub", "desc", option_type)

    def test_min_max_only_for_numeric(self) -> None:
        with pytest.raises(ValueError):
            CommandParameter("name", "desc", OptionType.STRING, min_value=1)

    def test_min_greater_than_max(self) -> None:
        with pytest.raises(ValueError):
            CommandParameter("n", "desc", OptionType.INTEGER, min_value=5, max_value=1)

    def test_required_with_default(self) -> None:
        with pytest.raises(ValueError):
            CommandParameter("n", "desc", OptionType.INTEGER, required=True, default=1)


class TestCommandDefinition:
    def test_registration_payload(self) -> None:
        definition = CommandDefinition(
            "greet",
            "say hello",
            (CommandParameter("who", "someone", OptionType.USER, required=True),),
        )

        assert definition.to_registration_payload() == {
            "name": "greet",
            "description": "say hello",
            "type": 1,
            "options": [
                {"type": 6, "name": "who", "description": "someone", "required": True},
            ],
        }

    def test_parameter_lookup(self) -> None:
        parameter = CommandParameter("who", "someone", OptionType.USER)
        definition = CommandDefinition("greet", "say hello", (parameter,))

        assert definition.parameter("who") is parameter
        assert definition.parameter("missing") is None

    def test_duplicate_parameters(self) -> None:
        parameter = CommandParameter("who", "someone", OptionType.USER)

        with pytest.raises(ValueError, match="duplicados"):
            CommandDefinition("greet", "say hello", (parameter, parameter))

    def test_required_after_optional(self) -> None:
        with pytest.raises(ValueError, match="obrigatórios"):
            CommandDefinition(
                "greet",
                "say hello",
                (
                    CommandParameter("a", "optional", OptionType.STRING),
                    CommandParameter("b", "required", OptionType.STRING, required=True),
                ),
            )

    def test_invalid_command_name(self) -> None:
        with pytest.raises(ValueError):
            CommandDefinition("Greet", "say hello")
