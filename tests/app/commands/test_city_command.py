"""Testes dos comandos city e about."""

from __future__ import annotations

import random
from types import MappingProxyType

import pytest

from app.commands.about import ABOUT_DEFINITION, AboutCommand
from app.commands.city import (
    CITY_DEFINITION,
    MAX_CITIES,
    REROLL_CUSTOM_ID,
    CityCommand,
    load_cities,
)
from app.interactions.models import InvocationContext, InvokingUser
from app.interactions.responses import InteractionCallbackType

CONTEXT = InvocationContext(
    interaction_id="1",
    application_id="42",
    token="t",
    user=InvokingUser(id="5", username="ana"),
)
CITIES = ("Avalon", "Brigadoon", "Camelot", "Dunwich", "Eldorado", "Fairhaven")


def test_bundled_city_list_loads() -> None:
    cities = load_cities()

    assert len(cities) > MAX_CITIES
    assert all(city and city == city.strip() for city in cities)
    assert load_cities() is cities


def test_empty_city_list_rejected() -> None:
    with pytest.raises(ValueError):
        CityCommand((), random.Random())


def test_city_default_picks_one_with_reroll_button() -> None:
    command = CityCommand(CITIES, random.Random(1))

    response = command.handle(MappingProxyType({"count": 1}), CONTEXT)

    assert response.kind is InteractionCallbackType.CHANNEL_MESSAGE_WITH_SOURCE
    assert response.content in CITIES
    assert response.ephemeral is False
    assert [button.custom_id for button in response.buttons] == [REROLL_CUSTOM_ID]
    assert [button.label for button in response.buttons] == ["Reroll"]


def test_city_count_picks_distinct_cities() -> None:
    command = CityCommand(CITIES, random.Random(2))

    response = command.handle(MappingProxyType({"count": MAX_CITIES}), CONTEXT)
    picked = response.content.split("\n")

    assert len(picked) == MAX_CITIES
    assert len(set(picked)) == MAX_CITIES
    assert set(picked) <= set(CITIES)


def test_pick_is_bounded_by_list_size() -> None:
    command = CityCommand(("Only",), random.Random())

    assert command.pick(3) == ["Only"]


def test_same_seed_same_city() -> None:
    first = CityCommand(CITIES, random.Random(7)).pick()
    second = CityCommand(CITIES, random.Random(7)).pick()

    assert first == second


def test_reroll_updates_message() -> None:
    command = CityCommand(CITIES, random.Random(3))

    response = command.handle_reroll("city", CONTEXT)

    assert response.kind is InteractionCallbackType.UPDATE_MESSAGE
    assert response.content in CITIES
    assert response.buttons[0].custom_id == REROLL_CUSTOM_ID


def test_city_definition_count_bounds() -> None:
    count = CITY_DEFINITION.parameter("count")

    assert count is not None
    assert (count.min_value, count.max_value, count.default) == (1, MAX_CITIES, 1)
    assert count.required is False


def test_about_lists_commands_ephemerally() -> None:
    command = AboutCommand((CITY_DEFINITION, ABOUT_DEFINITION))

    response = command.handle(MappingProxyType({}), CONTEXT)

    assert response.ephemeral is True
    assert response.content == ""
    fields = response.embeds[0].fields
    assert [field.name for field in fields] == ["/city", "/about"]
    assert fields[0].value == "generate a random city"
