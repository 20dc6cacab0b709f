"""
pipeline — silnik potoku reguł rulebuzz.

Publiczne API:
  run(start, end, step, plugins, default_output, result_formatter, context) → str
  evaluate_sequence(start, end, step, plugins, default_output, context)     → list[str]
  sequence_numbers(start, end, step)                                         → list[int]
  evaluate(num, group_selectors, rule_selectors, default_output, context)   → str
  aggregate_plugins(plugins)                                                 → PluginFunctions
  order_rules, apply_decorators, apply_result_transformers, get_rule_tag     klocki ewaluatora
"""

from .aggregator import PluginFunctions, aggregate_plugins
from .evaluator  import (
    DEFAULT_TAG,
    evaluate,
    evaluate_rule,
    order_rules,
    apply_rule_events,
    apply_decorators,
    groups_with_rule,
    get_rule_tag,
    apply_result_transformers,
    collect_groups,
    collect_rule_sets,
)
from .sequence   import (
    run,
    evaluate_sequence,
    sequence_length,
    sequence_numbers,
    space_join,
)

__all__ = [
    "PluginFunctions",
    "aggregate_plugins",
    "DEFAULT_TAG",
    "evaluate",
    "evaluate_rule",
    "order_rules",
    "apply_rule_events",
    "apply_decorators",
    "groups_with_rule",
    "get_rule_tag",
    "apply_result_transformers",
    "collect_groups",
    "collect_rule_sets",
    "run",
    "evaluate_sequence",
    "sequence_length",
    "sequence_numbers",
    "space_join",
]
