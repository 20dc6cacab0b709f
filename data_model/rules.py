"""
Struktury danych dla pojedynczych reguł (rules) i kombinatorów reguł.

Reguły porównywane są po tożsamości (`is`), nie po wartości — grupowanie
w TaggedRuleGroup i usuwanie duplikatów w ewaluatorze zależą od tego,
że ten sam obiekt Rule jest współdzielony przez wiele list.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeAlias

from .common import NO_CONTEXT, ResultTransformer, RuleEvaluator, RuleEvent


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------

@dataclass(slots=True, eq=False)
class Rule:
    """
    Reguła: warunkowy producent etykiety dla liczby.

    - output:             etykieta emitowana gdy reguła pasuje (wymagana)
    - evaluator:          predykat (num, context) -> bool
    - condition:          starsza nazwa predykatu; używana gdy brak evaluator
    - events:             callbacki (num) wywoływane po dopasowaniu
    - filter:             predykat (num, context); False → reguła pomijana
    - priority:           mniejsza wartość = wcześniej (None traktowane jak 0)
    - result_transformer: zadeklarowany, potok stosuje tylko transformery grup
    - name:               nazwa do wyświetlania (opcjonalnie)

    Reguła bez evaluator i bez condition nigdy nie pasuje.
    """
    output: str
    evaluator: RuleEvaluator | None = None
    condition: RuleEvaluator | None = None
    events: list[RuleEvent] = field(default_factory=list)
    filter: RuleEvaluator | None = None
    priority: int | None = 0
    result_transformer: ResultTransformer | None = None
    name: str | None = None

    @property
    def predicate(self) -> RuleEvaluator | None:
        """Predykat dopasowania: evaluator, a gdy go brak — condition."""
        if self.evaluator is not None:
            return self.evaluator
        return self.condition

    @property
    def sort_priority(self) -> int:
        return self.priority or 0

    def matches(self, num: int, context: Any = NO_CONTEXT) -> bool:
        predicate = self.predicate
        if predicate is None:
            return False
        return bool(predicate(num, context))

    def passes_filter(self, num: int, context: Any = NO_CONTEXT) -> bool:
        """True gdy brak filtra lub filtr przepuszcza liczbę."""
        return self.filter is None or bool(self.filter(num, context))

    def __str__(self) -> str:
        label = self.name or self.output
        return f"{label} (priority={self.sort_priority})"


RuleDecorator: TypeAlias = Callable[[Rule, Any], Rule]


# ---------------------------------------------------------------------------
# Kombinatory
# ---------------------------------------------------------------------------

class CombinatorType(StrEnum):
    """Rodzaj kombinatora logicznego."""
    AND = "AND"
    OR  = "OR"
    NOT = "NOT"


@dataclass(slots=True)
class RuleCombinator:
    """
    Złożenie predykatów kilku reguł.

    - type:  AND / OR — używa `rules`; NOT — używa `rule`
    - rules: reguły łączone koniunkcją lub alternatywą
    - rule:  reguła negowana (tylko NOT)

    Kombinator nie jest wołany przez potok sam z siebie; aby go użyć,
    podłącz combinator_evaluator(...) jako evaluator reguły.
    """
    type: CombinatorType
    rules: list[Rule] = field(default_factory=list)
    rule: Rule | None = None


def evaluate_rule_combinator(
    combinator: RuleCombinator,
    num: int,
    context: Any = NO_CONTEXT,
) -> bool:
    match combinator.type:
        case CombinatorType.AND:
            return all(rule.matches(num, context) for rule in combinator.rules)
        case CombinatorType.OR:
            return any(rule.matches(num, context) for rule in combinator.rules)
        case CombinatorType.NOT:
            if combinator.rule is None:
                raise ValueError("Kombinator NOT wymaga pola 'rule'.")
            return not combinator.rule.matches(num, context)
    return False


def combinator_evaluator(combinator: RuleCombinator) -> RuleEvaluator:
    """Zwraca predykat (num, context) do wpięcia jako Rule.evaluator."""
    def _evaluate(num: int, context: Any = NO_CONTEXT) -> bool:
        return evaluate_rule_combinator(combinator, num, context)
    return _evaluate
