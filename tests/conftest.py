"""Shared fixtures."""

import logging

import numpy as np
import pytest

from montyhall.log import LOGGER_NAME
from montyhall.output import ConsoleOutput


@pytest.fixture(autouse=True)
def fresh_logger():
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger._configured = False


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def lines():
    """Collects report lines instead of printing them."""
    return []


@pytest.fixture
def output(lines):
    return ConsoleOutput(sink=lines.append)
