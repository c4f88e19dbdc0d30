"""Tunable constants for the inventory examples.

Values mirror the numbers used throughout the demonstration so tests and
the demo agree on them.
"""
from __future__ import annotations

import os

#how much every upgrade adds to an item's power
UPGRADE_DELTA = 5

#thresholds for the find and every examples
POWERFUL_THRESHOLD = 10
EVERY_THRESHOLD = 5

#one weapon per menu letter, a to z
MAX_WEAPONS = 26

#sizes of the rendered text panels
PANEL_WIDTH = 50
BAR_WIDTH = 20

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
