"""Komenda: rbz evaluate — etykiety dla pojedynczych liczb."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table   import Table
from rich         import box
from rich.text    import Text

from pipeline import aggregate_plugins, evaluate
from presets import get_plugins

console = Console(width=200)


def run(args: argparse.Namespace) -> None:
    prefix = args.default_prefix
    if prefix is None:
        prefix = args.config.default_prefix

    try:
        plugins = get_plugins(args.preset)
    except ValueError as e:
        console.print(f"[red]Błąd presetu:[/red] {e}")
        raise SystemExit(1)

    functions = aggregate_plugins(plugins)

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("LICZBA",   style="cyan", no_wrap=True, justify="right")
    table.add_column("ETYKIETA", no_wrap=True)

    for num in args.numbers:
        try:
            label = evaluate(
                num,
                functions.rule_group_selectors,
                functions.rule_selectors,
                default_output=lambda n: f"{prefix}{n}",
            )
        except Exception as e:
            console.print(f"[red]Błąd ewaluacji liczby {num}:[/red] {type(e).__name__}: {e}")
            raise SystemExit(1)
        style = "green" if label.startswith("[") else "dim"
        table.add_row(str(num), Text(label, style=style))

    console.print(table)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "evaluate",
        help="Wyznacza etykiety dla wskazanych liczb.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Uruchamia ewaluator reguł osobno dla każdej podanej liczby.

Przykłady:
  rbz evaluate 12 13 15
  rbz evaluate 21 77 --preset lucky
        """,
    )
    p.add_argument(
        "numbers",
        type=int,
        nargs="+",
        metavar="LICZBA",
        help="Liczby do oceny.",
    )
    p.add_argument(
        "--preset", "-p",
        action="append",
        metavar="NAZWA",
        help="Preset wtyczki (można podać wielokrotnie; domyślnie: divisibility).",
    )
    p.add_argument(
        "--default-prefix",
        dest="default_prefix",
        metavar="PREFIKS",
        help="Prefiks etykiety domyślnej (domyślnie: 'NotDivisible-').",
    )
    p.set_defaults(func=run)
