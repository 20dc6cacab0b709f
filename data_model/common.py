"""
Wspólne typy pierwotne używane przez rules, groups i plugins.

Sygnatury funkcji wtyczek (kontekst przekazywany jest zawsze, patrz NO_CONTEXT):
  RuleEvaluator      (num, context) -> bool
  ResultTransformer  (result, num, context) -> str
  ResultFormatter    (results) -> str
  RuleEvent          (num) -> None
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, TypeAlias

# ---------------------------------------------------------------------------
# Kontekst
# ---------------------------------------------------------------------------

class _NoContext:
    """Znacznik braku kontekstu — jedyna instancja to NO_CONTEXT."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_CONTEXT"

    def __bool__(self) -> bool:
        return False


NO_CONTEXT: Final = _NoContext()


# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

RuleEvaluator: TypeAlias     = Callable[[int, Any], bool]
ResultTransformer: TypeAlias = Callable[[str, int, Any], str]
ResultFormatter: TypeAlias   = Callable[[list[str]], str]
RuleEvent: TypeAlias         = Callable[[int], None]
DefaultOutput: TypeAlias     = Callable[[int], str]
