"""Pytest configuration and fixtures."""

import logging

import pytest

from tabassert.config import get_config, set_config


@pytest.fixture(autouse=True)
def restore_config():
    """Undo configure()/set_config() calls made by a test."""
    previous = get_config()
    yield
    set_config(previous)


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Drop handlers that setup_logger() attached during a test."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name == "tabassert" or name.startswith("tabassert_"):
            logger = logging.getLogger(name)
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
