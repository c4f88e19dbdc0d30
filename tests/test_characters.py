"""Tests for :mod:`hof_example.characters`."""
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from hof_example.characters import Character, frodo


def test_greet_uses_instance_attributes():
    sam = Character(name="Sam", hometown="Hobbiton", age=38)
    assert sam.greet() == "Hello, I'm Sam from Hobbiton"
    assert sam.has_ring is False


def test_frodo():
    hero = frodo()
    assert hero.age == 50
    assert hero.has_ring
    assert hero.greet() == "Hello, I'm Frodo from The Shire"
