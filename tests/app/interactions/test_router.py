"""Testes do CommandRouter."""

from __future__ import annotations

import logging

import pytest

from app.commands.definitions import CommandDefinition, CommandParameter, OptionType
from app.commands.registry import CommandRegistry, RegisteredCommand
from app.interactions.models import (
    CommandInteraction,
    CommandOption,
    ComponentInteraction,
    InvocationContext,
    InvokingUser,
    PingInteraction,
)
from app.interactions.responses import CommandResponse
from app.interactions.router import (
    COMMAND_NOT_FOUND_MESSAGE,
    COMPONENT_NOT_SUPPORTED_MESSAGE,
    HANDLER_FAILURE_MESSAGE,
    CommandRouter,
)

CONTEXT = InvocationContext(
    interaction_id="1",
    application_id="42",
    token="t",
    user=InvokingUser(id="5", username="ana"),
)

GREET = CommandDefinition(
    "greet",
    "say hello",
    (CommandParameter("who", "someone", OptionType.STRING, required=True),),
)


class CountingHandler:
    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    def __call__(self, arguments, context) -> CommandResponse:
        self.calls.append(dict(arguments))
        return CommandResponse.message(f"hello {arguments['who']}")


def _router(handler=None, components=None) -> CommandRouter:
    registry = CommandRegistry.from_commands(
        [RegisteredCommand(GREET, handler or CountingHandler())],
        components=components,
    )
    return CommandRouter(registry)


def _command(name: str = "greet", *options: CommandOption) -> CommandInteraction:
    return CommandInteraction(context=CONTEXT, command_id="9", name=name, options=options)


def test_dispatches_to_handler_with_bound_arguments() -> None:
    handler = CountingHandler()

    response = _router(handler).dispatch(
        _command("greet", CommandOption("who", int(OptionType.STRING), "bob"))
    )

    assert response.content == "hello bob"
    assert response.ephemeral is False
    assert handler.calls == [{"who": "bob"}]


@pytest.mark.parametrize("name", ["unknown", "city", "GREET", ""])
def test_unregistered_command_yields_ephemeral_not_found(name: str) -> None:
    response = _router().dispatch(_command(name))

    assert response.content == COMMAND_NOT_FOUND_MESSAGE
    assert response.ephemeral is True


def test_context_menu_command_yields_not_found_even_when_name_matches() -> None:
    handler = CountingHandler()
    interaction = CommandInteraction(
        context=CONTEXT, command_id="9", name="greet", command_type=2
    )

    response = _router(handler).dispatch(interaction)

    assert response.content == COMMAND_NOT_FOUND_MESSAGE
    assert response.ephemeral is True
    assert handler.calls == []


def test_subcommand_on_registered_command_is_invalid_arguments() -> None:
    handler = CountingHandler()
    subcommand = CommandOption(
        "sub",
        int(OptionType.SUB_COMMAND),
        options=(CommandOption("who", int(OptionType.STRING), "bob"),),
    )

    response = _router(handler).dispatch(_command("greet", subcommand))

    assert response.ephemeral is True
    assert "sub" in response.content
    assert handler.calls == []


def test_missing_required_argument_never_invokes_handler() -> None:
    handler = CountingHandler()

    response = _router(handler).dispatch(_command("greet"))

    assert response.ephemeral is True
    assert "who" in response.content
    assert handler.calls == []


def test_invalid_argument_type_never_invokes_handler() -> None:
    handler = CountingHandler()

    response = _router(handler).dispatch(
        _command("greet", CommandOption("who", int(OptionType.STRING), 3))
    )

    assert response.ephemeral is True
    assert handler.calls == []


def test_handler_exception_becomes_generic_ephemeral(caplog: pytest.LogCaptureFixture) -> None:
    def _boom(arguments, context) -> CommandResponse:
        raise RuntimeError("secret internal detail")

    with caplog.at_level(logging.ERROR, logger="app.interactions.router"):
        response = _router(_boom).dispatch(
            _command("greet", CommandOption("who", int(OptionType.STRING), "bob"))
        )

    assert response.content == HANDLER_FAILURE_MESSAGE
    assert response.ephemeral is True
    assert "secret internal detail" not in response.content
    assert any(record.exc_info for record in caplog.records)


def test_component_dispatch() -> None:
    seen: list[str] = []

    def _vote(argument, context) -> CommandResponse:
        seen.append(argument)
        return CommandResponse.update(f"voted {argument}")

    response = _router(components={"vote": _vote}).dispatch(
        ComponentInteraction(context=CONTEXT, custom_id="vote:yes", component_type=2)
    )

    assert response.content == "voted yes"
    assert seen == ["yes"]


def test_unknown_component_yields_ephemeral() -> None:
    response = _router().dispatch(
        ComponentInteraction(context=CONTEXT, custom_id="gone:1", component_type=2)
    )

    assert response.content == COMPONENT_NOT_SUPPORTED_MESSAGE
    assert response.ephemeral is True


def test_component_handler_exception() -> None:
    def _boom(argument, context) -> CommandResponse:
        raise ValueError("nope")

    response = _router(components={"vote": _boom}).dispatch(
        ComponentInteraction(context=CONTEXT, custom_id="vote:1", component_type=2)
    )

    assert response.content == HANDLER_FAILURE_MESSAGE


def test_ping_is_not_routable() -> None:
    with pytest.raises(TypeError):
        _router().dispatch(PingInteraction())  # type: ignore[arg-type]
