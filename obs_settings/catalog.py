"""Catalog of supported source kinds and the serialization entry point."""

from __future__ import annotations

import logging
import time
from types import MappingProxyType
from typing import Any, Mapping

from pydantic_core import PydanticSerializationError

from obs_settings import telemetry
from obs_settings.errors import (
    SettingsSerializationError,
    SourceKindMismatchError,
    UnknownSourceKindError,
)
from obs_settings.schemas.sources import (
    AvCaptureInput,
    BrowserSource,
    ColorSourceV3,
    CoreaudioInputCapture,
    CoreaudioOutputCapture,
    DisplayCapture,
    FfmpegSource,
    ImageSource,
    Slideshow,
    SourceSettingsModel,
    TextFt2SourceV2,
    VlcSource,
    WindowCapture,
)

_logger = logging.getLogger("obs_settings.catalog")

SOURCE_COREAUDIO_INPUT_CAPTURE = CoreaudioInputCapture.source_kind
SOURCE_COREAUDIO_OUTPUT_CAPTURE = CoreaudioOutputCapture.source_kind
SOURCE_BROWSER_SOURCE = BrowserSource.source_kind
SOURCE_COLOR_SOURCE_V3 = ColorSourceV3.source_kind
SOURCE_DISPLAY_CAPTURE = DisplayCapture.source_kind
SOURCE_IMAGE_SOURCE = ImageSource.source_kind
SOURCE_SLIDESHOW = Slideshow.source_kind
SOURCE_FFMPEG_SOURCE = FfmpegSource.source_kind
SOURCE_TEXT_FT2_SOURCE_V2 = TextFt2SourceV2.source_kind
SOURCE_VLC_SOURCE = VlcSource.source_kind
SOURCE_AV_CAPTURE_INPUT = AvCaptureInput.source_kind
SOURCE_WINDOW_CAPTURE = WindowCapture.source_kind

SOURCE_KINDS: Mapping[str, type[SourceSettingsModel]] = MappingProxyType(
    {
        model.source_kind: model
        for model in (
            CoreaudioInputCapture,
            CoreaudioOutputCapture,
            BrowserSource,
            ColorSourceV3,
            DisplayCapture,
            ImageSource,
            Slideshow,
            FfmpegSource,
            TextFt2SourceV2,
            VlcSource,
            AvCaptureInput,
            WindowCapture,
        )
    }
)


def settings_type(source_kind: str) -> type[SourceSettingsModel]:
    """Return the payload model registered for *source_kind*."""

    try:
        return SOURCE_KINDS[source_kind]
    except KeyError as exc:
        raise UnknownSourceKindError(source_kind) from exc


def build_source_settings(source_kind: str, **overrides: Any) -> SourceSettingsModel:
    """Instantiate the payload for *source_kind*, defaults plus *overrides*."""

    return settings_type(source_kind)(**overrides)


def serialize_source_settings(
    source_kind: str, payload: SourceSettingsModel
) -> dict[str, Any]:
    """Turn *payload* into the settings document for *source_kind*.

    Either the whole document is returned or a single
    :class:`SettingsSerializationError` is raised; there is no partial
    output.
    """

    expected = settings_type(source_kind)
    if type(payload) is not expected:
        raise SourceKindMismatchError(source_kind, expected, type(payload))

    start = time.perf_counter()
    try:
        settings = payload.to_settings()
    except (PydanticSerializationError, ValueError, TypeError) as exc:
        duration_ms = (time.perf_counter() - start) * 1000.0
        telemetry.record_serialization(
            source_kind=source_kind, status="error", duration_ms=duration_ms
        )
        _logger.exception("failed to serialize %s settings", source_kind)
        raise SettingsSerializationError(source_kind, str(exc)) from exc

    duration_ms = (time.perf_counter() - start) * 1000.0
    telemetry.record_serialization(
        source_kind=source_kind, status="ok", duration_ms=duration_ms
    )
    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug(
            "serialized %s settings",
            source_kind,
            extra=telemetry.build_structured_log_payload(
                source_kind=source_kind, settings=settings, duration_ms=duration_ms
            ),
        )
    return settings


__all__ = [
    "SOURCE_AV_CAPTURE_INPUT",
    "SOURCE_BROWSER_SOURCE",
    "SOURCE_COLOR_SOURCE_V3",
    "SOURCE_COREAUDIO_INPUT_CAPTURE",
    "SOURCE_COREAUDIO_OUTPUT_CAPTURE",
    "SOURCE_DISPLAY_CAPTURE",
    "SOURCE_FFMPEG_SOURCE",
    "SOURCE_IMAGE_SOURCE",
    "SOURCE_KINDS",
    "SOURCE_SLIDESHOW",
    "SOURCE_TEXT_FT2_SOURCE_V2",
    "SOURCE_VLC_SOURCE",
    "SOURCE_WINDOW_CAPTURE",
    "build_source_settings",
    "serialize_source_settings",
    "settings_type",
]
