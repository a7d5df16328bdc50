"""Shared fixtures for the pattern tests."""

import logging

import pytest

from gof_patterns.infrastructure.patterns import SingletonRegistry


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test a clean singleton registry."""
    SingletonRegistry.get_instance().reset()
    yield
    SingletonRegistry.get_instance().reset()


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clean_pattern_env(monkeypatch):
    """Keep GOF_PATTERNS_* variables from the outer environment out of tests."""
    monkeypatch.delenv("GOF_PATTERNS_CONFIG", raising=False)
    monkeypatch.delenv("GOF_PATTERNS_LOG_LEVEL", raising=False)
