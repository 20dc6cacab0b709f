"""
Grupy reguł (TaggedRuleGroup) i zestawy reguł (RuleSet).

TaggedRuleGroup nadaje regułom tag oraz opcjonalne dekoratory i transformer
wyniku. RuleSet to jednostka aktywacji: jego reguły są brane pod uwagę
tylko gdy warunek zestawu jest spełniony.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeAlias

from .common import ResultTransformer, RuleEvaluator
from .rules import Rule, RuleDecorator


class SelectBehavior(StrEnum):
    """Sposób wyboru reguł z grupy. Zadeklarowany; potok go nie odczytuje."""
    ALL   = "all"
    FIRST = "first"
    LAST  = "last"


# ---------------------------------------------------------------------------
# TaggedRuleGroup
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class TaggedRuleGroup:
    """
    Nazwany zbiór reguł (przez referencję).

    - tag:                etykieta w wyniku, np. "[Divisible: Fizz]"
    - rules:              reguły należące do grupy (współdzielone, nie kopiowane)
    - select_behavior:    zarezerwowane (all / first / last)
    - decorators:         funkcje (rule, context) -> Rule, stosowane po kolei
    - result_transformer: funkcja (result, num, context) -> str
    """
    tag: str
    rules: list[Rule]
    select_behavior: SelectBehavior = SelectBehavior.ALL
    decorators: list[RuleDecorator] = field(default_factory=list)
    result_transformer: ResultTransformer | None = None

    def contains(self, rule: Rule) -> bool:
        """Sprawdza przynależność po tożsamości obiektu."""
        return any(member is rule for member in self.rules)


# ---------------------------------------------------------------------------
# RuleSet
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class RuleSet:
    """Reguły za wspólnym warunkiem aktywacji (num, context) -> bool."""
    condition: RuleEvaluator
    rules: list[Rule]


# ---------------------------------------------------------------------------
# Selektory i modyfikatory
# ---------------------------------------------------------------------------

RuleGroupSelector: TypeAlias = Callable[[int, Any], list[TaggedRuleGroup] | None]
RuleSelector: TypeAlias      = Callable[[int, Any], list[RuleSet] | None]
RuleGroupModifier: TypeAlias = Callable[[list[TaggedRuleGroup], Any], list[TaggedRuleGroup]]
