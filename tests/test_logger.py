"""Tests for :mod:`hof_example.logger`."""
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import logging

import pytest

from hof_example.logger import logger, resolve_level, setup_logger


def test_package_logger_configured_once():
    before = list(logger.handlers)
    again = setup_logger()
    assert again is logger
    assert logger.handlers == before
    assert again.propagate is False


def test_explicit_level_on_new_logger():
    custom = setup_logger(name="hof_example.test_debug", level="debug")
    assert custom.level == logging.DEBUG


@pytest.mark.parametrize("name", ["verbose", "", "   "])
def test_unknown_level_falls_back_to_warning(name):
    assert resolve_level(name) == logging.WARNING


def test_unknown_level_on_new_logger():
    custom = setup_logger(name="hof_example.test_verbose", level="verbose")
    assert custom.level == logging.WARNING


def test_known_level_names():
    assert resolve_level(" info ") == logging.INFO
    assert resolve_level("ERROR") == logging.ERROR
