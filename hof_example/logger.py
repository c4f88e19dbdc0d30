"""Logger configuration shared by the example modules."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from .settings import LOG_LEVEL

__all__ = ["logger", "resolve_level", "setup_logger"]


def resolve_level(level: str) -> int:
    """Return the numeric level for a name such as ``"debug"``.

    Unknown or empty names fall back to ``WARNING``.
    """
    numeric = logging.getLevelName(level.strip().upper())
    if isinstance(numeric, int):
        return numeric
    return logging.WARNING


def setup_logger(
    name: str = "hof_example",
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """Configure and return a logger instance.

    Parameters
    ----------
    name:
        Logger name, normally the package name.
    level:
        Log level name such as ``"DEBUG"``.  Defaults to the ``LOG_LEVEL``
        environment variable, or ``"WARNING"`` when it is unset or not
        a known level name.
    format_string:
        Custom :mod:`logging` format string.
    """
    level = level or LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    #only configure once, repeated imports must not stack handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(resolve_level(level))
        logger.propagate = False

    return logger


logger = setup_logger()
