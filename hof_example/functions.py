"""Functions as values.

Python functions are ordinary objects: they can be bound to names,
passed to other functions, returned from functions and stored in lists
or dicts.  The helpers below are the smallest possible examples of each.
"""
from __future__ import annotations

from dataclasses import replace
from functools import reduce
from typing import Any, Callable, List, TypeVar

from .items import Item, check_delta

T = TypeVar("T")


def cheer() -> str:
    return "Hooray!"


def call_twice(callback: Callable[[], T]) -> List[T]:
    """Invoke *callback* two times and return both results in call order."""
    return [callback(), callback()]


def say_name(name: str) -> str:
    return f"Hello, {name}!"


def apply_function(value: Any, callback: Callable[[Any], T]) -> T:
    """Pass *value* to *callback* and return whatever it gives back."""
    return callback(value)


def make_upgrader(delta: int) -> Callable[[Item], Item]:
    """Return a function that raises one item's power by *delta*.

    The returned function remembers *delta*, so ``make_upgrader(5)`` can be
    handed straight to :func:`map`.
    """
    check_delta(delta)

    def upgrader(item: Item) -> Item:
        return replace(item, power=item.power + delta)

    return upgrader


def compose(*steps: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Chain *steps* left to right: ``compose(f, g)(x) == g(f(x))``.

    With no steps the result is the identity function.
    """

    def composed(value: Any) -> Any:
        return reduce(lambda acc, step: step(acc), steps, value)

    return composed
