"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from obs_settings.config import reset_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("OBS_SETTINGS_WARN_BELOW_MINIMUM", raising=False)
    monkeypatch.delenv("OBS_SETTINGS_METRICS_ENABLED", raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()
