"""
Testy agregatora wtyczek i przebiegu po zakresie (pipeline.sequence).
"""

import math

import pytest

from data_model import Plugin
from pipeline import aggregate_plugins, run, sequence_length, sequence_numbers

from conftest import not_divisible


def f(name):
    def _fn(*args):
        return name
    _fn.__name__ = name
    return _fn


class TestAggregatePlugins:
    """Spłaszczanie funkcji wtyczek"""

    def test_empty(self) -> None:
        functions = aggregate_plugins([])
        assert functions.rule_group_selectors == []
        assert functions.rule_selectors == []
        assert functions.rule_group_modifiers == []
        assert functions.result_formatters == []

    def test_plugin_order_then_field_order(self) -> None:
        a1, a2, b1 = f("a1"), f("a2"), f("b1")
        functions = aggregate_plugins([
            Plugin(rule_selectors=[a1, a2]),
            Plugin(),
            Plugin(rule_selectors=[b1], result_formatters=[b1]),
        ])
        assert functions.rule_selectors == [a1, a2, b1]
        assert functions.result_formatters == [b1]

    def test_no_deduplication(self) -> None:
        a = f("a")
        functions = aggregate_plugins([Plugin(rule_group_selectors=[a]), Plugin(rule_group_selectors=[a])])
        assert functions.rule_group_selectors == [a, a]

    def test_modifiers_collected_but_never_called(self) -> None:
        calls = []
        plugin = Plugin(rule_group_modifiers=[lambda groups, ctx: calls.append(1) or groups])
        assert len(aggregate_plugins([plugin]).rule_group_modifiers) == 1
        run(1, 3, 1, [plugin])
        assert calls == []


class TestSequence:
    """Długość ciągu i formatowanie"""

    def test_default_run_gives_21_space_joined_labels(self) -> None:
        result = run(10, 50, 2)
        parts = result.split(" ")
        assert len(parts) == 21
        assert parts[0] == "10"
        assert parts[-1] == "50"

    def test_length_rounds_up_on_partial_step(self) -> None:
        assert sequence_numbers(10, 11, 5) == [10]
        assert run(10, 11, 5) == "10"

    @pytest.mark.parametrize("start, end, step", [(1, 10, 4), (1, 11, 4), (10, 50, 2), (3, 3, 7), (0, 99, 10)])
    def test_last_number_never_exceeds_end(self, start: int, end: int, step: int) -> None:
        numbers = sequence_numbers(start, end, step)
        assert len(numbers) == sequence_length(start, end, step) == math.ceil((end - start + 1) / step)
        assert numbers[-1] <= end

    def test_partial_last_step_is_dropped(self) -> None:
        assert sequence_numbers(1, 10, 4) == [1, 5, 9]
        assert sequence_numbers(1, 11, 4) == [1, 5, 9]
        assert sequence_numbers(1, 13, 4) == [1, 5, 9, 13]

    def test_empty_range(self) -> None:
        assert sequence_numbers(10, 1, 1) == []
        assert run(10, 1, 1) == ""

    def test_zero_step_is_not_guarded(self) -> None:
        with pytest.raises(ZeroDivisionError):
            run(1, 10, 0)

    def test_custom_formatter_and_default_output(self) -> None:
        result = run(1, 3, 1, [], not_divisible, lambda results: "|".join(results))
        assert result == "NotDivisible-1|NotDivisible-2|NotDivisible-3"

    def test_plugin_formatters_do_not_replace_caller_formatter(self) -> None:
        plugin = Plugin(result_formatters=[lambda results: "plugin"])
        assert run(1, 2, 1, [plugin]) == "1 2"

    def test_fizz_example(self, fizz_plugin: Plugin) -> None:
        result = run(12, 13, 1, [fizz_plugin], not_divisible, "|".join)
        assert result == "[Default: Fizz]|NotDivisible-13"

    def test_plugin_exception_gives_no_partial_result(self) -> None:
        def broken(num, ctx):
            if num == 3:
                raise RuntimeError("selector failed")
            return None

        with pytest.raises(RuntimeError):
            run(1, 5, 1, [Plugin(rule_selectors=[broken])])
