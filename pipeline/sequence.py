"""
pipeline/sequence.py — przebieg po zakresie liczb i formatowanie wyniku.

Długość ciągu: ceil((end - start + 1) / step). Przy dodatnim kroku ostatnia
liczba nie przekracza end. step = 0 kończy się ZeroDivisionError (brak osłony).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from typing import Any

from data_model import NO_CONTEXT, DefaultOutput, Plugin, ResultFormatter

from .aggregator import aggregate_plugins
from .evaluator import evaluate

logger = logging.getLogger(__name__)


def space_join(results: list[str]) -> str:
    return " ".join(results)


def sequence_length(start: int, end: int, step: int) -> int:
    return max(math.ceil((end - start + 1) / step), 0)


def sequence_numbers(start: int, end: int, step: int) -> list[int]:
    """Liczby start + i*step dla i w [0, length)."""
    return [start + index * step for index in range(sequence_length(start, end, step))]


def evaluate_sequence(
    start: int,
    end: int,
    step: int,
    plugins: Iterable[Plugin] = (),
    default_output: DefaultOutput = str,
    context: Any = NO_CONTEXT,
) -> list[str]:
    """Etykiety dla kolejnych liczb, jeszcze przed sformatowaniem."""
    functions = aggregate_plugins(plugins)
    numbers   = sequence_numbers(start, end, step)
    logger.debug(
        "Ciąg %d..%d co %d: %d liczb, %d selektorów grup, %d selektorów reguł",
        start, end, step, len(numbers),
        len(functions.rule_group_selectors), len(functions.rule_selectors),
    )
    return [
        evaluate(
            num,
            functions.rule_group_selectors,
            functions.rule_selectors,
            default_output,
            context,
        )
        for num in numbers
    ]


def run(
    start: int,
    end: int,
    step: int,
    plugins: Iterable[Plugin] = (),
    default_output: DefaultOutput = str,
    result_formatter: ResultFormatter = space_join,
    context: Any = NO_CONTEXT,
) -> str:
    """
    Uruchamia cały potok i zwraca jeden napis.

    Formatery dostarczone przez wtyczki (Plugin.result_formatters) są
    agregowane, ale o wyniku decyduje result_formatter wywołującego.
    """
    results = evaluate_sequence(start, end, step, plugins, default_output, context)
    return result_formatter(results)
