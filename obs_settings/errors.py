"""Error taxonomy for source settings serialization."""

from __future__ import annotations


class SourceSettingsError(ValueError):
    """Base class for every error raised by obs_settings."""


class UnknownSourceKindError(SourceSettingsError, LookupError):
    def __init__(self, source_kind: str) -> None:
        super().__init__(f"unknown source kind: {source_kind!r}")
        self.source_kind = source_kind


class SourceKindMismatchError(SourceSettingsError, TypeError):
    def __init__(self, source_kind: str, expected: type, actual: type) -> None:
        super().__init__(
            f"source kind {source_kind!r} expects {expected.__name__}, "
            f"got {actual.__name__}"
        )
        self.source_kind = source_kind
        self.expected = expected
        self.actual = actual


class SettingsSerializationError(SourceSettingsError):
    """A payload could not be turned into a settings document."""

    def __init__(self, source_kind: str, message: str) -> None:
        super().__init__(f"failed to serialize {source_kind!r} settings: {message}")
        self.source_kind = source_kind


__all__ = [
    "SettingsSerializationError",
    "SourceKindMismatchError",
    "SourceSettingsError",
    "UnknownSourceKindError",
]
