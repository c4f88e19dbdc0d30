"""Tests for :mod:`hof_example.functions`."""
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from hof_example import functions
from hof_example.items import Item


def test_call_twice_invokes_callback_two_times():
    calls = []

    def record():
        calls.append("called")
        return len(calls)

    assert functions.call_twice(record) == [1, 2]
    assert calls == ["called", "called"]


def test_call_twice_with_cheer():
    assert functions.call_twice(functions.cheer) == ["Hooray!", "Hooray!"]


def test_apply_function_passes_value_through():
    assert functions.apply_function("Gandalf", functions.say_name) == "Hello, Gandalf!"
    assert functions.apply_function(4, lambda n: n * n) == 16


def test_make_upgrader_returns_a_function():
    upgrade_by_five = functions.make_upgrader(5)
    assert upgrade_by_five(Item("Bow", 8, True)) == Item("Bow", 13, True)
    assert list(map(upgrade_by_five, [Item("Axe", 12)])) == [Item("Axe", 17)]


def test_make_upgrader_rejects_bool_delta():
    with pytest.raises(TypeError):
        functions.make_upgrader(True)


def test_compose_runs_left_to_right():
    add_one = lambda n: n + 1
    double = lambda n: n * 2
    assert functions.compose(add_one, double)(3) == 8
    assert functions.compose(double, add_one)(3) == 7


def test_compose_without_steps_is_identity():
    marker = object()
    assert functions.compose()(marker) is marker
