"""Shared fixtures for formguard tests."""

from __future__ import annotations

import logging

import pytest
import structlog

from formguard.config import get_settings
from formguard.logging import LoggerRegistry


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from ambient FORMGUARD_* settings."""
    for name in (
        "FORMGUARD_LOG_LEVEL",
        "FORMGUARD_LOG_JSON",
        "FORMGUARD_DEFAULT_ABORT_EARLY",
        "FORMGUARD_DEFAULT_INCLUDE_RULES",
        "FORMGUARD_DEFAULT_INCLUDE_LABEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_logging():
    """Restore structlog and the formguard stdlib logger after a test."""
    package_logger = logging.getLogger("formguard")
    handlers, level, propagate = list(package_logger.handlers), package_logger.level, package_logger.propagate
    yield
    structlog.reset_defaults()
    LoggerRegistry._loggers.clear()
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
