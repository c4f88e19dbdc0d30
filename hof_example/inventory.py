"""Transformations over a sequence of :class:`~.items.Item`.

Each function here is a small higher-order building block: the work is
done by ``map``, ``filter``, ``next``, ``any``, ``all`` and
:func:`functools.reduce`, with the per-item rule passed in as a lambda.
All functions return new lists and leave their input untouched, except
:func:`upgrade_in_place` which is kept to show what *not* to do.
"""
from __future__ import annotations

from dataclasses import replace
from functools import reduce
from typing import Callable, Iterable, List, Optional, Sequence

from .items import Item, check_delta
from .logger import logger


def upgrade(items: Iterable[Item], delta: int) -> List[Item]:
    """Return new items with ``delta`` added to each item's power."""
    check_delta(delta)
    upgraded = list(map(lambda item: replace(item, power=item.power + delta), items))
    logger.debug("upgraded %d items by %d", len(upgraded), delta)
    return upgraded


def upgrade_with_loop(items: Sequence[Item], delta: int) -> List[Item]:
    """Same result as :func:`upgrade`, written as an explicit loop."""
    check_delta(delta)
    upgraded = []
    for i in range(len(items)):
        upgraded.append(
            Item(name=items[i].name, power=items[i].power + delta, broken=items[i].broken)
        )
    return upgraded


def upgrade_in_place(items: List[Item], delta: int) -> None:
    """Overwrite every slot of *items* with an upgraded copy.

    Anyone else holding a reference to *items* sees the change, which is
    why :func:`upgrade` is preferred.
    """
    check_delta(delta)
    for i in range(len(items)):
        items[i] = replace(items[i], power=items[i].power + delta)
    logger.debug("upgraded %d items in place by %d", len(items), delta)


def filter_usable(items: Iterable[Item]) -> List[Item]:
    """Return only the items that are not broken, in their original order."""
    return list(filter(lambda item: not item.broken, items))


def upgrade_and_filter(items: Iterable[Item], delta: int) -> List[Item]:
    """Upgrade every item, then drop the broken ones."""
    return filter_usable(upgrade(items, delta))


def for_each(items: Iterable[Item], callback: Callable[[Item], object]) -> None:
    """Call *callback* once per item; results are discarded."""
    for item in items:
        callback(item)


def find_first_above(items: Iterable[Item], threshold: int) -> Optional[Item]:
    """Return the first item with power strictly above *threshold*, or ``None``."""
    return next((item for item in items if item.power > threshold), None)


def index_of_first_broken(items: Iterable[Item]) -> Optional[int]:
    """Return the position of the first broken item, or ``None`` if all work."""
    return next((index for index, item in enumerate(items) if item.broken), None)


def any_broken(items: Iterable[Item]) -> bool:
    return any(item.broken for item in items)


def all_above(items: Iterable[Item], threshold: int) -> bool:
    return all(item.power > threshold for item in items)


def total_power(items: Iterable[Item]) -> int:
    """Sum the power of all items; an empty inventory has no power."""
    return reduce(lambda total, item: total + item.power, items, 0)
