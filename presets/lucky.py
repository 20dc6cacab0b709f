"""
presets/lucky.py — wtyczka "szczęśliwych" liczb nieparzystych.

Pokazuje kombinator (OR z podzielności przez 7 i 11) wpięty jako evaluator
oraz dekorator grupy, który zwraca nową regułę zamiast modyfikować starą.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from data_model import (
    NO_CONTEXT,
    CombinatorType,
    Plugin,
    Rule,
    RuleCombinator,
    RuleSet,
    TaggedRuleGroup,
    combinator_evaluator,
)

from .divisibility import divisible_by

SEVEN  = Rule(output="Seven",  evaluator=divisible_by(7),  name="seven")
ELEVEN = Rule(output="Eleven", evaluator=divisible_by(11), name="eleven")

LUCKY = Rule(
    output="Lucky",
    evaluator=combinator_evaluator(
        RuleCombinator(type=CombinatorType.OR, rules=[SEVEN, ELEVEN])
    ),
    name="lucky",
)


def is_odd(num: int, context: Any = NO_CONTEXT) -> bool:
    return num % 2 != 0


def exclaim(rule: Rule, context: Any = NO_CONTEXT) -> Rule:
    return dataclasses.replace(rule, output=f"{rule.output}!")


LUCKY_GROUP = TaggedRuleGroup(tag="Lucky", rules=[LUCKY], decorators=[exclaim])


def lucky_group_selector(num: int, context: Any = NO_CONTEXT) -> list[TaggedRuleGroup]:
    return [LUCKY_GROUP]


def lucky_rule_selector(num: int, context: Any = NO_CONTEXT) -> list[RuleSet]:
    return [RuleSet(condition=is_odd, rules=[LUCKY])]


LUCKY_PLUGIN = Plugin(
    rule_group_selectors=[lucky_group_selector],
    rule_selectors=[lucky_rule_selector],
    name="lucky",
)
