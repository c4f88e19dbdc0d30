"""Text rendering for the demo.

Panels are drawn on an off-screen :class:`tcod.console.Console`, the same
way a roguelike draws its inventory window, and then read back as plain
text so they can be printed to a terminal without opening a window.
"""
from __future__ import annotations

import textwrap
from typing import Iterable, List, Sequence

import tcod.console
import tcod.constants

from .items import Item
from .settings import BAR_WIDTH, PANEL_WIDTH

#one menu letter per option
MAX_MENU_OPTIONS = 26


def describe(item: Item) -> str:
    """Return a one line summary such as ``"Bow: Power 8, Broken"``."""
    status = "Broken" if item.broken else "Not broken"
    return f"{item.name}: Power {item.power}, {status}"


def draw_panel(header: str, lines: Iterable[str], width: int = PANEL_WIDTH) -> tcod.console.Console:
    """Draw *header* followed by *lines* on a new console.

    The header and every line are word wrapped to the panel width, so a
    long line takes several rows instead of losing its end.  Blank lines
    are kept as blank rows.
    """
    if width <= 0:
        raise ValueError("panel width must be positive")
    rows: List[str] = textwrap.wrap(header, width) if header else []
    for line in lines:
        rows.extend(textwrap.wrap(line, width) or [""])
    #a console needs at least one row even when there is nothing to show
    console = tcod.console.Console(width, max(1, len(rows)), order="C")
    for y, text in enumerate(rows):
        console.print(0, y, text)
    return console


def console_text(console: tcod.console.Console) -> str:
    """Read the characters of *console* back as text, one line per row."""
    return "\n".join("".join(map(chr, row)).rstrip() for row in console.ch)


def render_panel(header: str, lines: Iterable[str], width: int = PANEL_WIDTH) -> str:
    return console_text(draw_panel(header, lines, width))


def render_inventory(header: str, items: Sequence[Item], width: int = PANEL_WIDTH) -> str:
    """Render *items* as a lettered menu, ``(a)`` for the first item."""
    if len(items) == 0:
        options = ["Inventory is empty."]
    else:
        options = [describe(item) for item in items]
    if len(options) > MAX_MENU_OPTIONS:
        raise ValueError(f"Cannot have a menu with more than {MAX_MENU_OPTIONS} options.")
    lines = ["(" + chr(ord("a") + index) + ")" + text for index, text in enumerate(options)]
    return render_panel(header, lines, width)


def render_bar(name: str, value: int, maximum: int, width: int = BAR_WIDTH) -> str:
    """Render a one row bar of ``#`` over ``-`` with a centred label."""
    if maximum <= 0:
        raise ValueError("bar maximum must be positive")
    if width <= 0:
        raise ValueError("bar width must be positive")
    #first calculate the filled part, clamped to the bar
    bar_width = max(0, min(width, int(float(value) / maximum * width)))

    console = tcod.console.Console(width, 1, order="C")
    console.ch[0, :] = ord("-")
    if bar_width > 0:
        console.ch[0, :bar_width] = ord("#")

    #some centred text with the value
    console.print(width // 2, 0, f"{name}: {value}/{maximum}", alignment=tcod.constants.CENTER)
    return console_text(console)
