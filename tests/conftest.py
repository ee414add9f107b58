"""Shared fixtures for numstyle tests."""

from __future__ import annotations

import pytest

from numstyle.formatter import NumberFormatter, get_formatter


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from NUMSTYLE_* variables and the cached formatter."""
    for name in ("NUMSTYLE_DEFAULT_CURRENCY", "NUMSTYLE_LOCALE", "NUMSTYLE_LOG_FALLBACKS"):
        monkeypatch.delenv(name, raising=False)
    get_formatter.cache_clear()
    yield
    get_formatter.cache_clear()


@pytest.fixture
def formatter() -> NumberFormatter:
    """Create a formatter with default settings."""
    return NumberFormatter()
