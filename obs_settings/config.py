"""Configuration helpers for obs_settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _Settings(BaseSettings):
    warn_below_minimum: bool = Field(
        default=True, alias="OBS_SETTINGS_WARN_BELOW_MINIMUM"
    )
    metrics_enabled: bool = Field(default=True, alias="OBS_SETTINGS_METRICS_ENABLED")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached library settings."""

    return _Settings()  # type: ignore[call-arg]


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


__all__ = ["get_settings", "reset_settings_cache"]
