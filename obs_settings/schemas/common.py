"""Value types shared by several source kinds."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator

from obs_settings.encoding import FontFlags, PackedFlags, PathValue, Rgba8


class PlaybackBehavior(str, Enum):
    ALWAYS_PLAY = "always_play"  # keep playing while hidden
    STOP_RESTART = "stop_restart"  # stop when hidden, restart when shown
    PAUSE_UNPAUSE = "pause_unpause"  # pause when hidden, resume when shown


class SlideMode(str, Enum):
    MODE_AUTO = "mode_auto"
    MODE_MANUAL = "mode_manual"  # hotkeys only


class Transition(str, Enum):
    CUT = "cut"
    FADE = "fade"
    SWIPE = "swipe"
    SLIDE = "slide"


class ColorRange(IntEnum):
    """YUV color range of a media file source."""

    AUTO = 0
    PARTIAL = 1
    FULL = 2


class ColorSpace(IntEnum):
    AUTO = -1
    REC601 = 1
    REC709 = 2


class VideoRange(IntEnum):
    AUTO = -1
    PARTIAL = 1
    FULL = 2


class AspectPreset(str, Enum):
    AUTOMATIC = "Automatic"
    SIXTEEN_TO_NINE = "16:9"
    SIXTEEN_TO_TEN = "16:10"
    FOUR_TO_THREE = "4:3"
    ONE_TO_ONE = "1:1"


@dataclass(frozen=True)
class CustomRatio:
    """Free aspect ratio, sent as ``"{width}:{height}"``."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}:{self.height}"


@dataclass(frozen=True)
class CustomSize:
    """Absolute bounding size in pixels, sent as ``"{width}x{height}"``."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


_RATIO_RE = re.compile(r"^\s*(\d+)\s*:\s*(\d+)\s*$")
_SIZE_RE = re.compile(r"^\s*(\d+)\s*x\s*(\d+)\s*$", re.IGNORECASE)


def format_custom_size(value: AspectPreset | CustomRatio | CustomSize) -> str:
    """Render a bounding size the way the slideshow source expects it.

    The separator carries meaning: ``:`` marks an aspect ratio while ``x``
    marks an absolute size in pixels.
    """

    if isinstance(value, AspectPreset):
        return value.value
    if isinstance(value, (CustomRatio, CustomSize)):
        return str(value)
    raise TypeError(f"not a custom size: {value!r}")


def parse_custom_size(text: str) -> AspectPreset | CustomRatio | CustomSize:
    try:
        return AspectPreset(text.strip())
    except ValueError:
        pass
    match = _RATIO_RE.match(text)
    if match:
        return CustomRatio(int(match.group(1)), int(match.group(2)))
    match = _SIZE_RE.match(text)
    if match:
        return CustomSize(int(match.group(1)), int(match.group(2)))
    raise ValueError(f"unrecognized custom size {text!r}")


def _coerce_custom_size(value: Any) -> AspectPreset | CustomRatio | CustomSize:
    if isinstance(value, (AspectPreset, CustomRatio, CustomSize)):
        return value
    if isinstance(value, str):
        return parse_custom_size(value)
    raise ValueError(f"not a custom size: {value!r}")


BoundingSize = Annotated[
    Union[AspectPreset, CustomRatio, CustomSize],
    PlainValidator(_coerce_custom_size),
    PlainSerializer(format_custom_size, return_type=str),
]


class Font(BaseModel):
    """Font of a text source.

    ``flags`` and ``style`` are expected to agree (``FontFlags.BOLD`` with
    ``"Bold"``) but nothing enforces it.
    """

    face: str = "Helvetica"
    flags: PackedFlags = FontFlags(0)
    size: int = 256
    style: str = "Regular"

    model_config = ConfigDict(frozen=True)


class FrameRate(BaseModel):
    numerator: int
    denominator: int

    model_config = ConfigDict(frozen=True)


class Resolution(BaseModel):
    width: int
    height: int

    model_config = ConfigDict(frozen=True)


class SlideshowFile(BaseModel):
    """Single entry of a slideshow or VLC playlist."""

    value: PathValue = ""
    hidden: bool = False
    selected: bool = False

    model_config = ConfigDict(frozen=True)


__all__ = [
    "AspectPreset",
    "BoundingSize",
    "ColorRange",
    "ColorSpace",
    "CustomRatio",
    "CustomSize",
    "Font",
    "FontFlags",
    "FrameRate",
    "PlaybackBehavior",
    "Resolution",
    "Rgba8",
    "SlideMode",
    "SlideshowFile",
    "Transition",
    "VideoRange",
    "format_custom_size",
    "parse_custom_size",
]
