"""A weapon rack kept as a plain list of names.

These helpers wrap list ``append``, ``pop`` and indexing so the demo can
show how a list grows and shrinks.  Unlike :mod:`.inventory`, they
mutate the list they are given.
"""
from __future__ import annotations

from typing import List, Optional

from .logger import logger
from .settings import MAX_WEAPONS


def starting_weapons() -> List[str]:
    return ["Sword", "Shield", "Bow", "Axe"]


def add_weapon(weapons: List[str], name: str) -> None:
    """Append *name* to the rack.

    Raises
    ------
    ValueError
        If the rack is already full.
    """
    if len(weapons) >= MAX_WEAPONS:
        raise ValueError(f"cannot carry more than {MAX_WEAPONS} weapons, {name} does not fit")
    weapons.append(name)
    logger.debug("picked up %s, rack now holds %d", name, len(weapons))


def drop_last(weapons: List[str]) -> Optional[str]:
    """Remove and return the most recently added weapon, ``None`` if empty."""
    if not weapons:
        return None
    return weapons.pop()


def weapon_at(weapons: List[str], index: int) -> Optional[str]:
    """Return the weapon at *index* (zero based), ``None`` when out of range."""
    if 0 <= index < len(weapons):
        return weapons[index]
    return None
