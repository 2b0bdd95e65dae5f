"""
Pytest configuration and fixtures for resource_naming tests.
"""

import logging

import pytest

from resource_naming import ResourceNamingStrategy
from resource_naming import inflectors


class RecordingInflector:
    """Fake inflector that tags its output so delegation is visible."""

    def __init__(self):
        self.calls = []

    def pluralize(self, word):
        self.calls.append(("pluralize", word))
        return word + "Plural"

    def underscore(self, word):
        self.calls.append(("underscore", word))
        return word.lower()


@pytest.fixture
def strategy():
    """English naming strategy."""
    return ResourceNamingStrategy()


@pytest.fixture
def recording_inflector():
    return RecordingInflector()


@pytest.fixture
def restore_registry():
    """Restore the inflector registry after a test registers locales."""
    saved = dict(inflectors._REGISTRY)
    yield
    inflectors._REGISTRY.clear()
    inflectors._REGISTRY.update(saved)


@pytest.fixture
def clean_logger():
    """Remove handlers added to the resource_naming logger during a test."""
    logger = logging.getLogger("resource_naming")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)
