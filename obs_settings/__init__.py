"""Typed settings payloads for OBS sources."""

from .catalog import (
    SOURCE_AV_CAPTURE_INPUT,
    SOURCE_BROWSER_SOURCE,
    SOURCE_COLOR_SOURCE_V3,
    SOURCE_COREAUDIO_INPUT_CAPTURE,
    SOURCE_COREAUDIO_OUTPUT_CAPTURE,
    SOURCE_DISPLAY_CAPTURE,
    SOURCE_FFMPEG_SOURCE,
    SOURCE_IMAGE_SOURCE,
    SOURCE_KINDS,
    SOURCE_SLIDESHOW,
    SOURCE_TEXT_FT2_SOURCE_V2,
    SOURCE_VLC_SOURCE,
    SOURCE_WINDOW_CAPTURE,
    build_source_settings,
    serialize_source_settings,
    settings_type,
)
from .encoding import (
    decode_color,
    duration_millis,
    embed_json,
    encode_color,
    pack_flags,
)
from .errors import (
    SettingsSerializationError,
    SourceKindMismatchError,
    SourceSettingsError,
    UnknownSourceKindError,
)
from .requests import SourceSettingsUpdate
from .schemas import *  # noqa: F401,F403
from .schemas import __all__ as _schema_names

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
    "SettingsSerializationError",
    "SourceKindMismatchError",
    "SourceSettingsError",
    "SourceSettingsUpdate",
    "UnknownSourceKindError",
    "build_source_settings",
    "decode_color",
    "duration_millis",
    "embed_json",
    "encode_color",
    "pack_flags",
    "serialize_source_settings",
    "settings_type",
    *_schema_names,
]
