"""
presets — gotowe wtyczki dla programu referencyjnego i CLI.

  divisibility  reguły Fizz / Buzz / FizzBuzz (domyślna)
  lucky         nieparzyste wielokrotności 7 lub 11
"""

from data_model import Plugin

from .divisibility import (
    DIVISIBILITY_PLUGIN,
    NOT_DIVISIBLE_PREFIX,
    PIPE_SEPARATOR,
    not_divisible,
    pipe_formatter,
)
from .lucky import LUCKY_PLUGIN

DEFAULT_PRESET = "divisibility"

PRESETS: dict[str, Plugin] = {
    "divisibility": DIVISIBILITY_PLUGIN,
    "lucky":        LUCKY_PLUGIN,
}


def get_plugins(names: list[str] | None) -> list[Plugin]:
    """Zwraca wtyczki w podanej kolejności; nieznana nazwa → ValueError."""
    selected = names or [DEFAULT_PRESET]
    unknown  = [n for n in selected if n not in PRESETS]
    if unknown:
        raise ValueError(
            f"Nieznane presety: {', '.join(unknown)}. "
            f"Dostępne: {', '.join(sorted(PRESETS))}"
        )
    return [PRESETS[n] for n in selected]


__all__ = [
    "DEFAULT_PRESET",
    "PRESETS",
    "get_plugins",
    "DIVISIBILITY_PLUGIN",
    "LUCKY_PLUGIN",
    "NOT_DIVISIBLE_PREFIX",
    "PIPE_SEPARATOR",
    "not_divisible",
    "pipe_formatter",
]
