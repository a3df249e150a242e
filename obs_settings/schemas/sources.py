"""Settings payloads, one model per OBS source kind.

Defaults mirror the factory defaults OBS applies when a key is missing, so
``BrowserSource(url=...)`` produces the same document the tool would build
if ``url`` were the only setting sent.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, ClassVar, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from obs_settings.config import get_settings
from obs_settings.encoding import (
    InvertedColor,
    JsonEmbedded,
    Milliseconds,
    PathValue,
    Rgba8,
)
from obs_settings.schemas.common import (
    AspectPreset,
    BoundingSize,
    ColorRange,
    ColorSpace,
    Font,
    FrameRate,
    PlaybackBehavior,
    Resolution,
    SlideMode,
    SlideshowFile,
    Transition,
)
from obs_settings.schemas.crop import CropMode, CropNone, encode_crop_mode

_logger = logging.getLogger("obs_settings.schemas.sources")

DEFAULT_BROWSER_URL = "https://obsproject.com/browser-source"
DEFAULT_BROWSER_CSS = (
    "body { background-color: rgba(0, 0, 0, 0); margin: 0px auto; overflow: hidden; }"
)


class SourceSettingsModel(BaseModel):
    """Common serialization capability of every source payload.

    Subclasses declare their fields only; there is no shared data.
    """

    source_kind: ClassVar[str]
    documented_minimums: ClassVar[Mapping[str, Any]] = {}

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @classmethod
    def defaults(cls) -> "SourceSettingsModel":
        """Return the instance matching the tool's factory defaults."""

        return cls()

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @model_validator(mode="after")
    def _warn_below_documented_minimums(self) -> "SourceSettingsModel":
        # values are never clamped, the tool decides what to do with them
        if not self.documented_minimums or not get_settings().warn_below_minimum:
            return self
        for name, minimum in self.documented_minimums.items():
            value = getattr(self, name)
            if value < minimum:
                _logger.warning(
                    "%s.%s=%r is below the documented minimum %r",
                    type(self).__name__,
                    name,
                    value,
                    minimum,
                )
        return self


class CoreaudioInputCapture(SourceSettingsModel):
    source_kind: ClassVar[str] = "coreaudio_input_capture"

    device_id: str = "default"


class CoreaudioOutputCapture(SourceSettingsModel):
    source_kind: ClassVar[str] = "coreaudio_output_capture"

    device_id: str = "default"


class BrowserSource(SourceSettingsModel):
    source_kind: ClassVar[str] = "browser_source"

    is_local_file: bool = False
    local_file: PathValue = ""
    url: str = DEFAULT_BROWSER_URL
    width: int = 800
    height: int = 600
    fps_custom: bool = False  # use ``fps`` instead of the canvas frame rate
    fps: int = 30
    reroute_audio: bool = False  # control audio via OBS
    css: str = DEFAULT_BROWSER_CSS
    shutdown: bool = False  # shut down the source when not visible
    restart_when_active: bool = False  # refresh when the scene becomes active


class ColorSourceV3(SourceSettingsModel):
    source_kind: ClassVar[str] = "color_source_v3"

    color: InvertedColor = Rgba8(209, 209, 209, 255)
    width: int = 0
    height: int = 0


class DisplayCapture(SourceSettingsModel):
    """Display capture; the crop mode keys sit next to ``display``."""

    source_kind: ClassVar[str] = "display_capture"

    display: int = 0
    show_cursor: bool = True
    crop_mode: CropMode = Field(default_factory=CropNone)

    @model_serializer(mode="wrap")
    def _flatten_crop_mode(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data = handler(self)
        data.pop("crop_mode", None)
        data.update(encode_crop_mode(self.crop_mode))
        return data


class ImageSource(SourceSettingsModel):
    source_kind: ClassVar[str] = "image_source"

    file: PathValue = ""
    unload: bool = False  # unload the image when not showing


class Slideshow(SourceSettingsModel):
    source_kind: ClassVar[str] = "slideshow"
    documented_minimums: ClassVar[Mapping[str, Any]] = {
        "slide_time": timedelta(milliseconds=50),
        "transition_speed": timedelta(0),
    }

    playback_behavior: PlaybackBehavior = PlaybackBehavior.ALWAYS_PLAY
    slide_mode: SlideMode = SlideMode.MODE_AUTO
    transition: Transition = Transition.FADE
    slide_time: Milliseconds = timedelta(seconds=8)
    transition_speed: Milliseconds = timedelta(milliseconds=700)
    loop: bool = True
    hide: bool = False  # hide when the slideshow is done
    randomize: bool = False
    use_custom_size: BoundingSize = AspectPreset.AUTOMATIC
    files: tuple[SlideshowFile, ...] = ()


class FfmpegSource(SourceSettingsModel):
    """Media file or network stream played through FFmpeg."""

    source_kind: ClassVar[str] = "ffmpeg_source"

    is_local_file: bool = True
    local_file: PathValue = ""
    looping: bool = False
    buffering_mb: int = 2  # network buffering in megabytes
    input: str = ""
    input_format: str = ""
    reconnect_delay_sec: int = 10
    restart_on_activate: bool = True
    clear_on_media_end: bool = True  # show nothing when playback ends
    close_when_inactive: bool = False
    speed_percent: int = 100
    color_range: ColorRange = ColorRange.AUTO
    seekable: bool = False


class TextFt2SourceV2(SourceSettingsModel):
    """FreeType 2 text source.

    ``color1`` is the top color of the text and ``color2`` the bottom one.
    ``text`` is only used while ``from_file`` is false; ``text_file`` must
    hold UTF-8 or UTF-16 text and is only read while ``from_file`` is true.
    ``custom_width`` is accepted by the tool but has no visible effect.
    """

    source_kind: ClassVar[str] = "text_ft2_source_v2"
    documented_minimums: ClassVar[Mapping[str, Any]] = {"log_lines": 1}

    antialiasing: bool = True
    color1: InvertedColor = Rgba8(255, 255, 255, 255)
    color2: InvertedColor = Rgba8(255, 255, 255, 255)
    custom_width: int = 0
    drop_shadow: bool = False
    font: Font = Field(default_factory=Font)
    from_file: bool = False
    log_lines: int = 6
    log_mode: bool = False
    outline: bool = False
    text: str = ""
    text_file: PathValue = ""
    word_wrap: bool = False


class VlcSource(SourceSettingsModel):
    source_kind: ClassVar[str] = "vlc_source"
    documented_minimums: ClassVar[Mapping[str, Any]] = {
        "network_caching": timedelta(milliseconds=100),
        "track": 1,
        "subtitle": 1,
    }

    loop: bool = Field(
        default=True,
        validation_alias=AliasChoices("loop", "bool"),
        serialization_alias="bool",
    )
    shuffle: bool = False
    playback_behavior: PlaybackBehavior = PlaybackBehavior.STOP_RESTART
    playlist: tuple[SlideshowFile, ...] = ()
    network_caching: Milliseconds = timedelta(milliseconds=400)
    track: int = 1  # audio track
    subtitle_enable: bool = False
    subtitle: int = 1


class AvCaptureInput(SourceSettingsModel):
    """Video capture device on macOS.

    ``resolution`` is sent as a JSON document inside a string field.
    """

    source_kind: ClassVar[str] = "av_capture_input"

    buffering: bool = False
    color_space: ColorSpace = ColorSpace.AUTO
    device: str = ""
    device_name: str = ""
    frame_rate: FrameRate = FrameRate(numerator=30, denominator=1)
    input_format: int = 0
    resolution: JsonEmbedded[Resolution] = Resolution(width=1280, height=720)
    use_preset: bool = True


class WindowCapture(SourceSettingsModel):
    source_kind: ClassVar[str] = "window_capture"

    owner_name: str = ""
    window_name: str = ""
    window: int = 0
    show_empty_names: bool = False
    show_shadow: bool = False


__all__ = [
    "AvCaptureInput",
    "BrowserSource",
    "ColorSourceV3",
    "CoreaudioInputCapture",
    "CoreaudioOutputCapture",
    "DEFAULT_BROWSER_CSS",
    "DEFAULT_BROWSER_URL",
    "DisplayCapture",
    "FfmpegSource",
    "ImageSource",
    "Slideshow",
    "SourceSettingsModel",
    "TextFt2SourceV2",
    "VlcSource",
    "WindowCapture",
]
