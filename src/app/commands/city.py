"""Comando `city`: sorteia cidades da lista embarcada no pacote."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from app.commands.definitions import CommandDefinition, CommandParameter, OptionType
from app.interactions.responses import Button, ButtonStyle, CommandResponse

if TYPE_CHECKING:
    import random
    from collections.abc import Mapping

    from app.interactions.models import InvocationContext

MAX_CITIES = 5
REROLL_PREFIX = "reroll"
REROLL_CUSTOM_ID = f"{REROLL_PREFIX}:city"

_CITIES_PATH = Path(__file__).resolve().parent / "data" / "cities.txt"

CITY_DEFINITION = CommandDefinition(
    name="city",
    description="generate a random city",
    parameters=(
        CommandParameter(
            name="count",
            description="how many cities to generate",
            type=OptionType.INTEGER,
            min_value=1,
            max_value=MAX_CITIES,
            default=1,
        ),
    ),
)


@lru_cache(maxsize=1)
def load_cities() -> tuple[str, ...]:
    """Carrega a lista de cidades (uma por linha) uma única vez."""
    with _CITIES_PATH.open("r", encoding="utf-8") as f:
        cities = tuple(line.strip() for line in f if line.strip())
    if not cities:
        raise RuntimeError("lista de cidades vazia")
    return cities


class CityCommand:
    """Handlers do comando `city` e do botão de novo sorteio."""

    def __init__(self, cities: tuple[str, ...], rng: random.Random) -> None:
        if not cities:
            raise ValueError("cities não pode ser vazio")
        self._cities = cities
        self._rng = rng

    def pick(self, count: int = 1) -> list[str]:
        return self._rng.sample(self._cities, min(count, len(self._cities)))

    def handle(
        self,
        arguments: Mapping[str, object],
        context: InvocationContext,
    ) -> CommandResponse:
        count = arguments.get("count")
        cities = self.pick(count if isinstance(count, int) else 1)
        return CommandResponse.message(
            "\n".join(cities),
            buttons=(_reroll_button(),),
        )

    def handle_reroll(self, argument: str, context: InvocationContext) -> CommandResponse:
        return CommandResponse.update(self.pick(1)[0], buttons=(_reroll_button(),))


def _reroll_button() -> Button:
    return Button(label="Reroll", custom_id=REROLL_CUSTOM_ID, style=ButtonStyle.PRIMARY)
