"""
Plugin — paczka funkcji dokładanych do potoku.

Wszystkie pola są opcjonalne; brak pola oznacza pustą listę.
rule_group_modifiers są zbierane przez agregator, ale potok ich nie wywołuje.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import ResultFormatter
from .groups import RuleGroupModifier, RuleGroupSelector, RuleSelector


@dataclass(slots=True)
class Plugin:
    rule_group_selectors: list[RuleGroupSelector] = field(default_factory=list)
    rule_selectors:       list[RuleSelector]      = field(default_factory=list)
    rule_group_modifiers: list[RuleGroupModifier] = field(default_factory=list)
    result_formatters:    list[ResultFormatter]   = field(default_factory=list)
    name: str | None = None
