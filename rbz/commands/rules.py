"""Komenda: rbz rules — listowanie zestawów reguł i grup presetów."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from data_model import NO_CONTEXT
from pipeline import aggregate_plugins, collect_groups, collect_rule_sets, order_rules
from presets import PRESETS, get_plugins

console = Console(width=200)


def _fmt_tags(rule, groups) -> str:
    tags = [group.tag for group in groups if group.contains(rule)]
    return ", ".join(tags) if tags else "[dim](Default)[/dim]"


def run(args: argparse.Namespace) -> None:
    names = args.preset or sorted(PRESETS)
    try:
        plugins = get_plugins(names)
    except ValueError as e:
        console.print(f"[red]Błąd presetu:[/red] {e}")
        raise SystemExit(1)

    num = args.num
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("PRESET",    no_wrap=True)
    table.add_column("ZESTAW",    no_wrap=True, justify="right")
    table.add_column("AKTYWNY",   no_wrap=True)
    table.add_column("REGUŁA",    no_wrap=True, style="bold")
    table.add_column("WYJŚCIE",   no_wrap=True)
    table.add_column("PRIORYTET", no_wrap=True, justify="right")
    table.add_column("PASUJE",    no_wrap=True)
    table.add_column("GRUPY",     no_wrap=False, max_width=40)

    total = 0
    for name, plugin in zip(names, plugins):
        functions = aggregate_plugins([plugin])
        groups    = collect_groups(functions.rule_group_selectors, num)
        rule_sets = collect_rule_sets(functions.rule_selectors, num)

        for index, rule_set in enumerate(rule_sets):
            active = bool(rule_set.condition(num, NO_CONTEXT))
            for rule in order_rules(rule_set.rules):
                matched = rule.passes_filter(num) and rule.matches(num)
                table.add_row(
                    name,
                    str(index),
                    Text("tak" if active else "nie", style="green" if active else "red"),
                    rule.name or "—",
                    rule.output,
                    str(rule.sort_priority),
                    Text("tak" if matched else "nie", style="green" if matched else ""),
                    _fmt_tags(rule, groups),
                )
                total += 1

    if total == 0:
        console.print("[yellow]Brak reguł dla wybranych presetów.[/yellow]")
        return

    console.print(f"\nReguły dla liczby [bold cyan]{num}[/bold cyan]:")
    console.print(table)
    console.print(f"  [dim]{total} reguł[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "rules",
        help="Listuje zestawy reguł i grupy presetów dla wybranej liczby.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Selektory wtyczek są funkcjami liczby, więc listing pokazuje zestawy
reguł i grupy wybrane dla konkretnej liczby (--num), w kolejności
ewaluacji (priorytet rosnąco).

Przykłady:
  rbz rules
  rbz rules --num 30
  rbz rules --preset lucky --num 77
        """,
    )
    p.add_argument(
        "--preset", "-p",
        action="append",
        metavar="NAZWA",
        help="Preset wtyczki (można podać wielokrotnie; domyślnie: wszystkie).",
    )
    p.add_argument(
        "--num", "-n",
        type=int,
        default=15,
        metavar="LICZBA",
        help="Liczba, dla której wywoływane są selektory (domyślnie: 15).",
    )
    p.set_defaults(func=run)
