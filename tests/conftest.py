"""Shared test configuration and fixtures."""

import pytest

from timetable_prep.config import ADD_HINTS_VAR, LOG_LEVEL_VAR


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    """Run every test against default settings, whatever the developer's .env sets."""
    monkeypatch.delenv(ADD_HINTS_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
