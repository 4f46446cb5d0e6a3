"""Shared fixtures for the publisher test suite."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo configure_structlog() so its handlers never outlive captured streams."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        # logging.basicConfig() installs plain StreamHandlers
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()
