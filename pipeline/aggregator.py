"""
pipeline/aggregator.py — spłaszczanie funkcji wtyczek.

Kolejność: najpierw kolejność wtyczek na liście, potem kolejność w polu
wtyczki. Brak deduplikacji.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from data_model import (
    Plugin,
    ResultFormatter,
    RuleGroupModifier,
    RuleGroupSelector,
    RuleSelector,
)


@dataclass(slots=True)
class PluginFunctions:
    """Zebrane funkcje wszystkich wtyczek."""
    rule_group_selectors: list[RuleGroupSelector] = field(default_factory=list)
    rule_selectors:       list[RuleSelector]      = field(default_factory=list)
    rule_group_modifiers: list[RuleGroupModifier] = field(default_factory=list)
    result_formatters:    list[ResultFormatter]   = field(default_factory=list)


def aggregate_plugins(plugins: Iterable[Plugin]) -> PluginFunctions:
    functions = PluginFunctions()
    for plugin in plugins:
        functions.rule_group_selectors.extend(plugin.rule_group_selectors or [])
        functions.rule_selectors.extend(plugin.rule_selectors or [])
        functions.rule_group_modifiers.extend(plugin.rule_group_modifiers or [])
        functions.result_formatters.extend(plugin.result_formatters or [])
    return functions
