"""Option catalogs: the selectable objects and who beats whom."""

from __future__ import annotations

import os
import random
from collections.abc import Iterable, Mapping

from models.option import GameOption
from services.exceptions import CatalogError

DEFAULT_CATALOG = "classic"


class Catalog:
    """
    Ordered option list plus an explicit beat table.

    ``beats`` maps winner -> {loser: verb}. The table must form a tournament:
    every pair of distinct options has exactly one winner.
    """

    def __init__(
        self,
        options: Iterable[GameOption],
        beats: Mapping[str, Mapping[str, str]],
    ) -> None:
        self._options = tuple(options)
        self._by_value = {opt.value: opt for opt in self._options}
        if len(self._by_value) != len(self._options):
            raise CatalogError("Duplicate option values in catalog")
        self._beats = {winner: dict(losers) for winner, losers in beats.items()}
        self._validate()

    def _validate(self) -> None:
        values = list(self._by_value)
        if len(values) < 3 or len(values) % 2 == 0:
            raise CatalogError(f"Catalog needs an odd number (>=3) of options, got {len(values)}")

        unknown = {
            v
            for winner, losers in self._beats.items()
            for v in (winner, *losers)
            if v not in self._by_value
        }
        if unknown:
            raise CatalogError(f"Beat table references unknown options: {sorted(unknown)}")

        for i, x in enumerate(values):
            if x in self._beats.get(x, {}):
                raise CatalogError(f"{x!r} cannot beat itself")
            for y in values[i + 1:]:
                x_wins = y in self._beats.get(x, {})
                y_wins = x in self._beats.get(y, {})
                if x_wins and y_wins:
                    raise CatalogError(f"{x!r} and {y!r} both beat each other")
                if not x_wins and not y_wins:
                    raise CatalogError(f"No winner defined between {x!r} and {y!r}")

    @property
    def options(self) -> tuple[GameOption, ...]:
        return self._options

    def values(self) -> list[str]:
        return [opt.value for opt in self._options]

    def get(self, value: str) -> GameOption:
        try:
            return self._by_value[value]
        except KeyError:
            raise CatalogError(f"Unknown option {value!r}") from None

    def __contains__(self, value: object) -> bool:
        return value in self._by_value

    def __len__(self) -> int:
        return len(self._options)

    def beats(self, x: str, y: str) -> bool:
        return y in self._beats.get(x, {})

    def verb(self, winner: str, loser: str) -> str:
        try:
            return self._beats[winner][loser]
        except KeyError:
            raise CatalogError(f"{winner!r} does not beat {loser!r}") from None

    def shuffled_options(self) -> list[GameOption]:
        """Fresh uniformly shuffled copy of the options, for presentation only."""
        shuffled = list(self._options)
        random.shuffle(shuffled)
        return shuffled


CLASSIC = Catalog(
    [
        GameOption("rock", "Rock", "solid and dependable"),
        GameOption("paper", "Paper", "versatile and iconic"),
        GameOption("scissors", "Scissors", "careful ! sharp ! edges !!"),
    ],
    {
        "rock": {"scissors": "crushes"},
        "scissors": {"paper": "cuts"},
        "paper": {"rock": "covers"},
    },
)

# Seven objects, each beating exactly three of the others.
EXTENDED = Catalog(
    [
        GameOption("rock", "Rock", "sedimentary, igneous, or perhaps even metamorphic"),
        GameOption("cowboy", "Cowboy", "yeehaw~"),
        GameOption("scissors", "Scissors", "careful ! sharp ! edges !!"),
        GameOption("virus", "Virus", "genetic mutation, malware, or something inbetween"),
        GameOption("computer", "Computer", "beep boop beep bzzrrhggggg"),
        GameOption("wumpus", "Wumpus", "the purple Discord fella"),
        GameOption("paper", "Paper", "versatile and iconic"),
    ],
    {
        "rock": {"virus": "outwaits", "computer": "smashes", "scissors": "crushes"},
        "cowboy": {"scissors": "puts away", "wumpus": "lassos", "rock": "steel-toe kicks"},
        "scissors": {"paper": "cuts", "computer": "cuts cord of", "virus": "cuts DNA of"},
        "virus": {"cowboy": "infects", "computer": "corrupts", "wumpus": "infects"},
        "computer": {"cowboy": "overwhelms", "paper": "uninstalls firmware for", "wumpus": "deletes assets for"},
        "wumpus": {"paper": "draws picture on", "rock": "paints cute face on", "scissors": "admires own reflection in"},
        "paper": {"virus": "ignores", "cowboy": "gets signature from", "rock": "covers"},
    },
)

CATALOGS: dict[str, Catalog] = {"classic": CLASSIC, "extended": EXTENDED}


def get_catalog_name() -> str:
    """Catalog name from RPS_CATALOG env or default."""
    return os.environ.get("RPS_CATALOG", "").strip().lower() or DEFAULT_CATALOG


def get_catalog(name: str | None = None) -> Catalog:
    name = name or get_catalog_name()
    try:
        return CATALOGS[name]
    except KeyError:
        raise CatalogError(f"Unknown catalog {name!r}; expected one of {sorted(CATALOGS)}") from None
