"""
data_model — struktury danych potoku reguł rulebuzz.

Użycie:
  from data_model import Rule, RuleSet, TaggedRuleGroup, Plugin, ...

Moduły:
  common  — NO_CONTEXT, RuleEvaluator, ResultTransformer, ResultFormatter,
            RuleEvent, DefaultOutput
  rules   — Rule, RuleDecorator, CombinatorType, RuleCombinator,
            evaluate_rule_combinator, combinator_evaluator
  groups  — SelectBehavior, TaggedRuleGroup, RuleSet,
            RuleGroupSelector, RuleSelector, RuleGroupModifier
  plugins — Plugin
"""

from .common import (
    NO_CONTEXT,
    RuleEvaluator,
    ResultTransformer,
    ResultFormatter,
    RuleEvent,
    DefaultOutput,
)
from .rules import (
    Rule,
    RuleDecorator,
    CombinatorType,
    RuleCombinator,
    evaluate_rule_combinator,
    combinator_evaluator,
)
from .groups import (
    SelectBehavior,
    TaggedRuleGroup,
    RuleSet,
    RuleGroupSelector,
    RuleSelector,
    RuleGroupModifier,
)
from .plugins import Plugin

__all__ = [
    # common
    "NO_CONTEXT",
    "RuleEvaluator",
    "ResultTransformer",
    "ResultFormatter",
    "RuleEvent",
    "DefaultOutput",
    # rules
    "Rule",
    "RuleDecorator",
    "CombinatorType",
    "RuleCombinator",
    "evaluate_rule_combinator",
    "combinator_evaluator",
    # groups
    "SelectBehavior",
    "TaggedRuleGroup",
    "RuleSet",
    "RuleGroupSelector",
    "RuleSelector",
    "RuleGroupModifier",
    # plugins
    "Plugin",
]
