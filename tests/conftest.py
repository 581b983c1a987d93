"""
Pytest configuration and fixtures for learncli tests

Provides:
- An environment without LEARNCLI_* overrides
- Scripted in-memory sessions (no network)
"""

from __future__ import annotations

import os

import pytest

from core.config import AppSettings
from fakes import FakeSession


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Make every test start from the default configuration."""
    for key in list(os.environ):
        if key.upper().startswith("LEARNCLI_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def make_session():
    """Factory fixture: `make_session(**kwargs)` -> FakeSession."""

    def _make(**kwargs) -> FakeSession:
        return FakeSession(**kwargs)

    return _make
