"""
presets/divisibility.py — wtyczka podzielności dla programu referencyjnego.

Reguły:
  FIZZBUZZ   n % 15 == 0   priority 0
  FIZZ       n % 3  == 0   priority 1
  BUZZ       n % 5  == 0   priority 2

Grupy:
  Divisible  wszystkie trzy reguły
  Combined   tylko FIZZBUZZ, transformer zamienia wynik na wielkie litery

Przykład (10..20 co 2):
  [Divisible: Buzz]|[Divisible: Fizz]|NotDivisible-14|...
"""

from __future__ import annotations

from typing import Any

from data_model import (
    NO_CONTEXT,
    Plugin,
    Rule,
    RuleEvaluator,
    RuleSet,
    SelectBehavior,
    TaggedRuleGroup,
)

NOT_DIVISIBLE_PREFIX = "NotDivisible-"
PIPE_SEPARATOR       = "|"


def divisible_by(divisor: int) -> RuleEvaluator:
    def _check(num: int, context: Any = NO_CONTEXT) -> bool:
        return num % divisor == 0
    return _check


def always(num: int, context: Any = NO_CONTEXT) -> bool:
    return True


# ---------------------------------------------------------------------------
# Reguły i grupy
# ---------------------------------------------------------------------------

FIZZBUZZ = Rule(output="FizzBuzz", evaluator=divisible_by(15), priority=0, name="fizzbuzz")
FIZZ     = Rule(output="Fizz",     evaluator=divisible_by(3),  priority=1, name="fizz")
BUZZ     = Rule(output="Buzz",     evaluator=divisible_by(5),  priority=2, name="buzz")

DIVISIBILITY_RULES: list[Rule] = [FIZZ, BUZZ, FIZZBUZZ]


def upper_case(result: str, num: int, context: Any = NO_CONTEXT) -> str:
    return result.upper()


DIVISIBLE_GROUP = TaggedRuleGroup(
    tag="Divisible",
    rules=DIVISIBILITY_RULES,
    select_behavior=SelectBehavior.FIRST,
)

COMBINED_GROUP = TaggedRuleGroup(
    tag="Combined",
    rules=[FIZZBUZZ],
    select_behavior=SelectBehavior.FIRST,
    result_transformer=upper_case,
)

DIVISIBILITY_RULE_SET = RuleSet(condition=always, rules=DIVISIBILITY_RULES)


# ---------------------------------------------------------------------------
# Funkcje wtyczki
# ---------------------------------------------------------------------------

def divisibility_group_selector(num: int, context: Any = NO_CONTEXT) -> list[TaggedRuleGroup]:
    return [DIVISIBLE_GROUP, COMBINED_GROUP]


def divisibility_rule_selector(num: int, context: Any = NO_CONTEXT) -> list[RuleSet]:
    return [DIVISIBILITY_RULE_SET]


def pipe_formatter(results: list[str]) -> str:
    return PIPE_SEPARATOR.join(results)


def not_divisible(num: int) -> str:
    return f"{NOT_DIVISIBLE_PREFIX}{num}"


DIVISIBILITY_PLUGIN = Plugin(
    rule_group_selectors=[divisibility_group_selector],
    rule_selectors=[divisibility_rule_selector],
    result_formatters=[pipe_formatter],
    name="divisibility",
)
