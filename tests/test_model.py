"""
Testy modelu danych: Rule, RuleCombinator, TaggedRuleGroup.
"""

import pytest

from data_model import (
    NO_CONTEXT,
    CombinatorType,
    Rule,
    RuleCombinator,
    SelectBehavior,
    TaggedRuleGroup,
    combinator_evaluator,
    evaluate_rule_combinator,
)

from conftest import always, multiple_of, never


class TestRule:
    """Reguła: predykat, filtr, tożsamość"""

    def test_evaluator_takes_precedence_over_condition(self) -> None:
        rule = Rule(output="x", evaluator=never, condition=always)
        assert rule.predicate is never
        assert rule.matches(1) is False

    def test_condition_used_when_no_evaluator(self) -> None:
        rule = Rule(output="x", condition=always)
        assert rule.matches(1) is True

    def test_rule_without_predicate_never_matches(self) -> None:
        rule = Rule(output="x")
        assert rule.predicate is None
        assert rule.matches(3) is False

    def test_missing_filter_passes(self) -> None:
        assert Rule(output="x").passes_filter(7) is True

    def test_filter_blocks(self) -> None:
        rule = Rule(output="x", evaluator=always, filter=multiple_of(2))
        assert rule.passes_filter(7) is False
        assert rule.passes_filter(8) is True

    def test_none_priority_sorts_as_zero(self) -> None:
        assert Rule(output="x", priority=None).sort_priority == 0

    def test_equality_is_identity(self) -> None:
        a = Rule(output="same", evaluator=always)
        b = Rule(output="same", evaluator=always)
        assert a != b
        assert a == a
        assert b not in [a]

    def test_predicate_receives_context(self) -> None:
        seen = []
        rule = Rule(output="x", evaluator=lambda num, ctx: seen.append(ctx) or True)
        rule.matches(1, "ctx")
        rule.matches(2)
        assert seen == ["ctx", NO_CONTEXT]

    def test_no_context_is_falsy(self) -> None:
        assert not NO_CONTEXT
        assert repr(NO_CONTEXT) == "NO_CONTEXT"


class TestRuleCombinator:
    """Kombinatory AND / OR / NOT"""

    def setup_method(self) -> None:
        self.by3 = Rule(output="3", evaluator=multiple_of(3))
        self.by5 = Rule(output="5", evaluator=multiple_of(5))

    def test_and(self) -> None:
        combinator = RuleCombinator(type=CombinatorType.AND, rules=[self.by3, self.by5])
        assert evaluate_rule_combinator(combinator, 15) is True
        assert evaluate_rule_combinator(combinator, 9) is False

    def test_or(self) -> None:
        combinator = RuleCombinator(type=CombinatorType.OR, rules=[self.by3, self.by5])
        assert evaluate_rule_combinator(combinator, 10) is True
        assert evaluate_rule_combinator(combinator, 7) is False

    def test_not(self) -> None:
        combinator = RuleCombinator(type=CombinatorType.NOT, rule=self.by3)
        assert evaluate_rule_combinator(combinator, 4) is True
        assert evaluate_rule_combinator(combinator, 6) is False

    def test_not_without_rule_raises(self) -> None:
        with pytest.raises(ValueError):
            evaluate_rule_combinator(RuleCombinator(type=CombinatorType.NOT), 1)

    def test_empty_and_is_true_empty_or_is_false(self) -> None:
        assert evaluate_rule_combinator(RuleCombinator(type=CombinatorType.AND), 1) is True
        assert evaluate_rule_combinator(RuleCombinator(type=CombinatorType.OR), 1) is False

    def test_combinator_wired_as_evaluator(self) -> None:
        combinator = RuleCombinator(type=CombinatorType.AND, rules=[self.by3, self.by5])
        rule = Rule(output="FizzBuzz", evaluator=combinator_evaluator(combinator))
        assert rule.matches(30) is True
        assert rule.matches(12) is False


class TestTaggedRuleGroup:
    """Grupa: przynależność po tożsamości"""

    def test_contains_by_identity(self) -> None:
        rule = Rule(output="Fizz", evaluator=always)
        twin = Rule(output="Fizz", evaluator=always)
        group = TaggedRuleGroup(tag="T", rules=[rule])
        assert group.contains(rule) is True
        assert group.contains(twin) is False

    def test_defaults(self) -> None:
        group = TaggedRuleGroup(tag="T", rules=[])
        assert group.select_behavior is SelectBehavior.ALL
        assert group.decorators == []
        assert group.result_transformer is None
