"""Fixtury pytest dla testów potoku reguł."""

from typing import Any

import pytest

from data_model import NO_CONTEXT, Plugin, Rule, RuleSet


def always(num: int, context: Any = NO_CONTEXT) -> bool:
    return True


def never(num: int, context: Any = NO_CONTEXT) -> bool:
    return False


def multiple_of(divisor: int):
    def _check(num: int, context: Any = NO_CONTEXT) -> bool:
        return num % divisor == 0
    return _check


def not_divisible(num: int) -> str:
    return f"NotDivisible-{num}"


# =============================================================================
# Reguły i wtyczki
# =============================================================================


@pytest.fixture
def fizz_rule() -> Rule:
    """Reguła zawsze pasująca z wyjściem "Fizz"."""
    return Rule(output="Fizz", evaluator=always)


@pytest.fixture
def fizz_plugin(fizz_rule: Rule) -> Plugin:
    """Dla wielokrotności 3 zwraca zestaw z jedną regułą "Fizz"."""
    def selector(num: int, context: Any = NO_CONTEXT):
        if num % 3 == 0:
            return [RuleSet(condition=always, rules=[fizz_rule])]
        return None

    return Plugin(rule_selectors=[selector])


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Usuwa zmienne RBZ_* ze środowiska."""
    for name in (
        "RBZ_START", "RBZ_END", "RBZ_STEP",
        "RBZ_SEPARATOR", "RBZ_DEFAULT_PREFIX", "RBZ_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
