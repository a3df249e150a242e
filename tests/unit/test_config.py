from __future__ import annotations

from obs_settings import config


def test_settings_defaults() -> None:
    settings = config.get_settings()
    assert settings.warn_below_minimum is True
    assert settings.metrics_enabled is True


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("OBS_SETTINGS_METRICS_ENABLED", "0")
    config.reset_settings_cache()
    assert config.get_settings().metrics_enabled is False


def test_get_settings_is_cached(monkeypatch) -> None:
    first = config.get_settings()
    monkeypatch.setenv("OBS_SETTINGS_WARN_BELOW_MINIMUM", "false")
    assert config.get_settings() is first
    config.reset_settings_cache()
    assert config.get_settings().warn_below_minimum is False

