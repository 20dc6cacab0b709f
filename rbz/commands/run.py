"""Komenda: rbz run — przebieg potoku po zakresie liczb."""

from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.table   import Table
from rich         import box
from rich.text    import Text

from pipeline import evaluate_sequence, sequence_numbers
from pipeline import run as run_pipeline
from presets import get_plugins

console = Console(width=200)
logger  = logging.getLogger(__name__)


def _resolve(value, fallback):
    return fallback if value is None else value


def _show_table(numbers: list[int], labels: list[str]) -> None:
    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("LICZBA",   style="cyan", no_wrap=True, justify="right")
    table.add_column("ETYKIETA", no_wrap=True)
    for num, label in zip(numbers, labels):
        style = "green" if label.startswith("[") else "dim"
        table.add_row(str(num), Text(label, style=style))
    console.print(table)
    matched = sum(1 for label in labels if label.startswith("["))
    console.print(f"  [dim]{len(labels)} liczb, {matched} dopasowanych[/dim]")


def run(args: argparse.Namespace) -> None:
    config = args.config
    start  = _resolve(args.start,          config.start)
    end    = _resolve(args.end,            config.end)
    step   = _resolve(args.step,           config.step)
    sep    = _resolve(args.separator,      config.separator)
    prefix = _resolve(args.default_prefix, config.default_prefix)

    try:
        plugins = get_plugins(args.preset)
    except ValueError as e:
        console.print(f"[red]Błąd presetu:[/red] {e}")
        raise SystemExit(1)

    logger.debug("run: start=%s end=%s step=%s presety=%s", start, end, step, args.preset)

    def default_output(num: int) -> str:
        return f"{prefix}{num}"

    try:
        if args.table:
            labels = evaluate_sequence(start, end, step, plugins, default_output)
        else:
            result = run_pipeline(start, end, step, plugins, default_output, sep.join)
    except Exception as e:
        console.print(f"[red]Błąd ewaluacji:[/red] {type(e).__name__}: {e}")
        raise SystemExit(1)

    if args.table:
        _show_table(sequence_numbers(start, end, step), labels)
        return

    print(result)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "run",
        help="Generuje ciąg etykiet dla zakresu liczb.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dla każdej liczby start, start+step, ... wyznacza etykietę z reguł presetów
(lub etykietę domyślną) i łączy wszystkie etykiety separatorem.

Długość ciągu: ceil((end - start + 1) / step); przy dodatnim kroku ostatnia
liczba nie przekracza end.

Wartości domyślne pochodzą ze zmiennych RBZ_START, RBZ_END, RBZ_STEP,
RBZ_SEPARATOR, RBZ_DEFAULT_PREFIX (lub pliku .env).

Przykłady:
  rbz run
  rbz run --start 1 --end 15 --step 1
  rbz run --preset divisibility --preset lucky --separator " "
  rbz run --start 1 --end 30 --table
        """,
    )
    p.add_argument("--start", type=int, metavar="N", help="Pierwsza liczba (domyślnie: 10).")
    p.add_argument("--end",   type=int, metavar="N", help="Koniec zakresu (domyślnie: 50).")
    p.add_argument("--step",  type=int, metavar="N", help="Krok (domyślnie: 2).")
    p.add_argument(
        "--preset", "-p",
        action="append",
        metavar="NAZWA",
        help="Preset wtyczki (można podać wielokrotnie; domyślnie: divisibility).",
    )
    p.add_argument(
        "--separator", "-s",
        metavar="SEP",
        help="Separator etykiet (domyślnie: '|').",
    )
    p.add_argument(
        "--default-prefix",
        dest="default_prefix",
        metavar="PREFIKS",
        help="Prefiks etykiety domyślnej (domyślnie: 'NotDivisible-').",
    )
    p.add_argument(
        "--table",
        action="store_true",
        help="Zamiast jednego napisu wyświetl tabelę liczba → etykieta.",
    )
    p.set_defaults(func=run)
