"""Shared fixtures."""

import logging

import pytest

from resultcase.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings() -> object:
    """Reload settings from the environment for every test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def package_logger() -> object:
    """The resultcase logger, restored to its original state afterwards."""
    logger = logging.getLogger("resultcase")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
