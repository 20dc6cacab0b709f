"""Domyślne parametry przebiegu — konfiguracja przez zmienne środowiskowe.

Opcjonalnie plik .env w katalogu głównym projektu:
  RBZ_START=10
  RBZ_END=50
  RBZ_STEP=2
  RBZ_SEPARATOR=|
  RBZ_DEFAULT_PREFIX=NotDivisible-
  RBZ_LOG_LEVEL=WARNING
"""

from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

ENV_FILE = pathlib.Path(__file__).resolve().parent.parent / ".env"


@dataclass(frozen=True)
class RunDefaults:
    start:          int
    end:            int
    step:           int
    separator:      str
    default_prefix: str
    log_level:      str


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Zmienna {name} musi być liczbą całkowitą, jest: {raw!r}") from None


def _level_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = raw.strip().upper()
    known = logging.getLevelNamesMapping()
    if level not in known:
        allowed = ", ".join(sorted(known, key=known.get))
        raise ValueError(
            f"Zmienna {name} musi być poziomem logowania ({allowed}), jest: {raw!r}"
        )
    return level


def load_defaults(env_file: pathlib.Path | None = ENV_FILE) -> RunDefaults:
    if env_file is not None and env_file.exists():
        load_dotenv(env_file, override=False)
    return RunDefaults(
        start          = _int_env("RBZ_START", 10),
        end            = _int_env("RBZ_END",   50),
        step           = _int_env("RBZ_STEP",  2),
        separator      = os.getenv("RBZ_SEPARATOR",      "|"),
        default_prefix = os.getenv("RBZ_DEFAULT_PREFIX", "NotDivisible-"),
        log_level      = _level_env("RBZ_LOG_LEVEL", "WARNING"),
    )
