"""Item definitions used by the inventory examples.

An :class:`Item` is frozen: every transformation in :mod:`.inventory`
builds new items instead of editing existing ones.  Construction checks
the field types so a malformed record fails where it is written, not
later inside a ``map`` or ``reduce``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Item:
    """One inventory entry.

    Parameters
    ----------
    name:
        Human readable identifier of the item.  Must not be blank.
    power:
        Integer capability score.  May be zero or negative after a
        downgrade.
    broken:
        ``True`` when the item cannot currently be used.
    """

    name: str
    power: int
    broken: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"item name must be a string, got {self.name!r}")
        if not self.name.strip():
            raise ValueError("item name must not be empty")
        #bool is a subclass of int but True is not a power score
        if isinstance(self.power, bool) or not isinstance(self.power, int):
            raise TypeError(f"power of {self.name} must be an integer, got {self.power!r}")
        if not isinstance(self.broken, bool):
            raise TypeError(f"broken flag of {self.name} must be a bool, got {self.broken!r}")


def starting_inventory() -> List[Item]:
    """Return a fresh copy of the adventurer's starting inventory."""
    return [
        Item(name="Sword", power=10, broken=False),
        Item(name="Shield", power=5, broken=False),
        Item(name="Bow", power=8, broken=True),
        Item(name="Axe", power=12, broken=False),
    ]


def check_delta(delta: int) -> None:
    """Reject power changes that are not plain integers, such as ``True``."""
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise TypeError(f"power delta must be an integer, got {delta!r}")
