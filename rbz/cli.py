"""
rbz — narzędzie CLI dla rulebuzz.

Użycie:
  rbz [-v] <komenda> [opcje]

Komendy:
  run        Generuje ciąg etykiet dla zakresu liczb i wypisuje jeden napis.
  evaluate   Wyznacza etykiety dla wskazanych liczb (tabela).
  rules      Listuje zestawy reguł i grupy presetów dla wybranej liczby.
"""

from __future__ import annotations

import argparse
import sys

if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.console import Console

from rbz._config import load_defaults
from rbz._logging import configure_logging
from rbz.commands import run as cmd_run
from rbz.commands import evaluate as cmd_evaluate
from rbz.commands import rules as cmd_rules

console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rbz",
        description="rulebuzz — generator ciągów etykiet sterowany regułami.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="rbz 0.1.0"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logi diagnostyczne (DEBUG) na stderr.",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_run.add_parser(subparsers)
    cmd_evaluate.add_parser(subparsers)
    cmd_rules.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.config = load_defaults()
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    configure_logging(args.config.log_level, verbose=args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
