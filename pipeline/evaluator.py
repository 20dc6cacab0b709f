"""
pipeline/evaluator.py — ewaluacja reguł dla pojedynczej liczby.

Algorytm:
  1. selektory grup → matching_groups (kolejność selektorów, potem grup)
  2. selektory reguł → rule_sets (ta sama dyscyplina kolejności)
  3. dla każdego RuleSet ze spełnionym warunkiem:
       - stabilne sortowanie po priority rosnąco
       - usunięcie sąsiednich duplikatów (po tożsamości)
       - pierwsza reguła, która przejdzie filtr i pasuje, wygrywa
  4. brak dopasowania → default_output(num)

Wyjątki rzucone przez selektory lub predykaty nie są przechwytywane.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from data_model import (
    NO_CONTEXT,
    DefaultOutput,
    Rule,
    RuleDecorator,
    RuleGroupSelector,
    RuleSelector,
    RuleSet,
    TaggedRuleGroup,
)

logger = logging.getLogger(__name__)

DEFAULT_TAG = "Default"


# ---------------------------------------------------------------------------
# Operacje na regułach
# ---------------------------------------------------------------------------

def evaluate_rule(rule: Rule, num: int, context: Any = NO_CONTEXT) -> bool:
    """evaluator ma pierwszeństwo przed condition; brak obu → False."""
    return rule.matches(num, context)


def order_rules(rules: Sequence[Rule]) -> list[Rule]:
    """
    Zwraca nową listę reguł: stabilnie posortowaną po priority
    i bez sąsiednich duplikatów (ten sam obiekt tuż po sobie).

    Duplikaty nie sąsiadujące po sortowaniu zostają.
    """
    ordered = sorted(rules, key=lambda rule: rule.sort_priority)
    return [
        rule for index, rule in enumerate(ordered)
        if index == 0 or rule is not ordered[index - 1]
    ]


def apply_rule_events(rule: Rule, num: int) -> None:
    for event in rule.events or []:
        event(num)


def apply_decorators(
    rule: Rule,
    decorators: Iterable[RuleDecorator],
    context: Any = NO_CONTEXT,
) -> Rule:
    """Składa dekoratory od lewej: D2(D1(rule))."""
    decorated = rule
    for decorator in decorators:
        decorated = decorator(decorated, context)
    return decorated


def groups_with_rule(rule: Rule, groups: Iterable[TaggedRuleGroup]) -> list[TaggedRuleGroup]:
    return [group for group in groups if group.contains(rule)]


def get_rule_tag(rule: Rule, groups: Iterable[TaggedRuleGroup]) -> str:
    """Tag pierwszej grupy zawierającej regułę albo "Default"."""
    for group in groups:
        if group.contains(rule):
            return group.tag
    return DEFAULT_TAG


def apply_result_transformers(
    result: str,
    num: int,
    groups: Iterable[TaggedRuleGroup],
    context: Any = NO_CONTEXT,
) -> str:
    """Składa transformery grup od lewej: T2(T1(result, num), num)."""
    for group in groups:
        if group.result_transformer is not None:
            result = group.result_transformer(result, num, context)
    return result


def format_label(tag: str, body: str) -> str:
    return f"[{tag}: {body}]"


# ---------------------------------------------------------------------------
# Zbieranie grup i zestawów
# ---------------------------------------------------------------------------

def collect_groups(
    selectors: Iterable[RuleGroupSelector],
    num: int,
    context: Any = NO_CONTEXT,
) -> list[TaggedRuleGroup]:
    groups: list[TaggedRuleGroup] = []
    for selector in selectors:
        groups.extend(selector(num, context) or [])
    return groups


def collect_rule_sets(
    selectors: Iterable[RuleSelector],
    num: int,
    context: Any = NO_CONTEXT,
) -> list[RuleSet]:
    rule_sets: list[RuleSet] = []
    for selector in selectors:
        rule_sets.extend(selector(num, context) or [])
    return rule_sets


# ---------------------------------------------------------------------------
# Ewaluacja
# ---------------------------------------------------------------------------

def _apply_rule_set(
    rule_set: RuleSet,
    num: int,
    matching_groups: list[TaggedRuleGroup],
    context: Any,
) -> str:
    """Zwraca etykietę pierwszej pasującej reguły zestawu albo ""."""
    for rule in order_rules(rule_set.rules):
        if not rule.passes_filter(num, context):
            continue
        if not evaluate_rule(rule, num, context):
            continue

        apply_rule_events(rule, num)
        owners    = groups_with_rule(rule, matching_groups)
        decorated = apply_decorators(
            rule,
            (decorator for group in owners for decorator in group.decorators or []),
            context,
        )
        tag  = get_rule_tag(rule, owners)
        body = apply_result_transformers(decorated.output, num, owners, context)
        logger.debug("%d: reguła %s → tag=%s", num, rule, tag)
        return format_label(tag, body)
    return ""


def evaluate(
    num: int,
    group_selectors: Iterable[RuleGroupSelector],
    rule_selectors: Iterable[RuleSelector],
    default_output: DefaultOutput = str,
    context: Any = NO_CONTEXT,
) -> str:
    """
    Wyznacza etykietę dla liczby num.

    Args:
        num:             oceniana liczba
        group_selectors: funkcje (num, context) -> list[TaggedRuleGroup] | None
        rule_selectors:  funkcje (num, context) -> list[RuleSet] | None
        default_output:  etykieta gdy żadna reguła nie pasuje (domyślnie str)
        context:         wartość przekazywana do każdego predykatu

    Returns:
        "[tag: wynik]" albo default_output(num).
    """
    matching_groups = collect_groups(group_selectors, num, context)
    rule_sets       = collect_rule_sets(rule_selectors, num, context)

    for rule_set in rule_sets:
        if not rule_set.condition(num, context):
            logger.debug("%d: zestaw reguł nieaktywny — pomijam", num)
            continue
        result = _apply_rule_set(rule_set, num, matching_groups, context)
        if result != "":
            return result

    logger.debug("%d: brak dopasowania — etykieta domyślna", num)
    return default_output(num)
