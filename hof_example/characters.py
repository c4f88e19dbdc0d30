"""Character definitions for the methods example.

A method is just a function stored on a class.  :meth:`Character.greet`
reads the instance it is called on through ``self``.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Character:
    """A named traveller.

    Parameters
    ----------
    name:
        Human readable identifier of the character.
    hometown:
        Where the character comes from.
    age:
        Age in years.
    has_ring:
        Whether the character is carrying the ring.
    """

    name: str
    hometown: str
    age: int
    has_ring: bool = False

    def greet(self) -> str:
        """Return the character's introduction."""
        return f"Hello, I'm {self.name} from {self.hometown}"


def frodo() -> Character:
    return Character(name="Frodo", hometown="The Shire", age=50, has_ring=True)
