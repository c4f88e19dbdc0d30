"""Entry point walking through every example in order.

Running this module prints one section per idea: functions as values,
callbacks, methods, lists, and finally the inventory transformations
built from ``map``, ``filter`` and friends.
"""
from __future__ import annotations

from functools import partial
from typing import Callable, List

from . import characters, functions, inventory, items, render, weapons
from .logger import logger
from .settings import EVERY_THRESHOLD, POWERFUL_THRESHOLD, UPGRADE_DELTA


def setup_demo():
    """Create the starting inventory, weapon rack and a character."""
    return items.starting_inventory(), weapons.starting_weapons(), characters.frodo()


def function_basics(out: Callable[[str], None]) -> None:
    out(functions.cheer())
    cheer_again = functions.cheer  #no parentheses, just the function itself
    out(cheer_again())

    out("\nCalling the function twice:")
    for result in functions.call_twice(functions.cheer):
        out(result)

    out(functions.say_name("Frodo"))
    out(functions.apply_function("Gandalf", functions.say_name))


def method_example(out: Callable[[str], None], character: characters.Character) -> None:
    out(f"\n{character.name}, age {character.age}")
    out(character.greet())


def list_example(out: Callable[[str], None], rack: List[str]) -> None:
    out(f"\nMy weapons: {rack}")
    out(f"My first weapon: {weapons.weapon_at(rack, 0)}")
    out(f"My third weapon: {weapons.weapon_at(rack, 2)}")
    out(f"Number of weapons: {len(rack)}")

    out("\n=== YOU FOUND A DAGGER OF SPEED! ===")
    weapons.add_weapon(rack, "Dagger")
    out(str(rack))
    dropped = weapons.drop_last(rack)
    out(f"\nYou dropped your {dropped}.")
    out(f"Remaining inventory: {rack}")


def inventory_example(out: Callable[[str], None], start: List[items.Item]) -> None:
    out("\n" + render.render_inventory("Original inventory:", start))
    out("\n" + render.render_inventory(
        "Upgraded inventory (for loop):", inventory.upgrade_with_loop(start, UPGRADE_DELTA)))
    out("\n" + render.render_inventory(
        "Upgraded inventory (map):", inventory.upgrade(start, UPGRADE_DELTA)))
    out("\n" + render.render_inventory(
        "Upgraded inventory (returned function):",
        list(map(functions.make_upgrader(UPGRADE_DELTA), start))))
    out("\n" + render.render_inventory("Original inventory (unchanged):", start))
    out("\n" + render.render_inventory("Filtered inventory (filter):", inventory.filter_usable(start)))
    out("\n" + render.render_inventory(
        "Upgraded & filtered inventory:", inventory.upgrade_and_filter(start, UPGRADE_DELTA)))
    #the same pipeline assembled from two functions
    upgrade_then_filter = functions.compose(
        partial(inventory.upgrade, delta=UPGRADE_DELTA), inventory.filter_usable)
    out("\n" + render.render_inventory(
        "Upgraded & filtered inventory (composed):", upgrade_then_filter(start)))

    out("\nLogging each item:")
    inventory.for_each(start, lambda item: out(render.describe(item)))

    powerful = inventory.find_first_above(start, POWERFUL_THRESHOLD)
    out(f"\nFirst item with power > {POWERFUL_THRESHOLD}: "
        + (render.describe(powerful) if powerful is not None else "none"))

    broken_index = inventory.index_of_first_broken(start)
    out("\nIndex of first broken item: " + ("none" if broken_index is None else str(broken_index)))

    out(f"\nDo we have any broken items? {inventory.any_broken(start)}")
    out(f"\nAre all items powerful (power > {EVERY_THRESHOLD})? "
        f"{inventory.all_above(start, EVERY_THRESHOLD)}")

    total = inventory.total_power(start)
    out(f"\nTotal power of all items: {total}")
    out(render.render_bar("Power", total, total + UPGRADE_DELTA * len(start)))

    #mutating the list in place, shown for contrast with the copies above
    scratch = list(start)
    inventory.upgrade_in_place(scratch, UPGRADE_DELTA)
    out("\n" + render.render_inventory("Upgraded in place (a copy was mutated):", scratch))


def main(out: Callable[[str], None] = print) -> None:
    """Run every example, sending each line of output to *out*."""
    start, rack, character = setup_demo()
    logger.info("running demo with %d items", len(start))
    function_basics(out)
    method_example(out, character)
    list_example(out, rack)
    inventory_example(out, start)


if __name__ == "__main__":  # pragma: no cover - manual demonstration
    main()
