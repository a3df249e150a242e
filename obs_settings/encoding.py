"""Wire encoders for OBS source settings.

The control protocol stores a handful of values differently from the way
they are natural to express in Python:

* colors are packed into a single integer with the channel order reversed
  (``0xAABBGGRR``),
* durations travel as an integer count of milliseconds,
* font style flags travel as one packed byte,
* some nested structures travel as a JSON document inside a string field.

Each rule lives in exactly one plain function below.  The ``Annotated``
aliases at the bottom attach those functions to pydantic fields so the
payload models only have to declare the field type.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from datetime import timedelta
from enum import IntFlag
from pathlib import Path, PurePath
from typing import Annotated, Any, NamedTuple, TypeVar, Union

from pydantic import BeforeValidator, PlainSerializer, PlainValidator
from pydantic_core import from_json, to_json

T = TypeVar("T")

_CHANNEL_MAX = 0xFF


class Rgba8(NamedTuple):
    """8-bit color in conventional RGBA channel order."""

    r: int
    g: int
    b: int
    a: int = _CHANNEL_MAX


class FontFlags(IntFlag):
    BOLD = 1
    ITALIC = 2
    UNDERLINE = 4
    STRIKEOUT = 8


def encode_color(color: Rgba8) -> int:
    """Pack *color* into the protocol's byte-reversed ``0xAABBGGRR`` integer."""

    r, g, b, a = color
    return (
        (a & _CHANNEL_MAX) << 24
        | (b & _CHANNEL_MAX) << 16
        | (g & _CHANNEL_MAX) << 8
        | (r & _CHANNEL_MAX)
    )


def decode_color(value: int) -> Rgba8:
    """Inverse of :func:`encode_color`; only the low 32 bits are read."""

    return Rgba8(
        r=value & _CHANNEL_MAX,
        g=(value >> 8) & _CHANNEL_MAX,
        b=(value >> 16) & _CHANNEL_MAX,
        a=(value >> 24) & _CHANNEL_MAX,
    )


def duration_millis(value: timedelta) -> int:
    """Return *value* as whole milliseconds, truncated toward zero.

    No minimum is enforced here; fields with a documented floor leave that
    check to the caller.
    """

    micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
    millis = abs(micros) // 1_000
    return millis if micros >= 0 else -millis


def pack_flags(flags: FontFlags | Iterable[FontFlags]) -> int:
    """OR the given flags together into one unsigned byte."""

    if isinstance(flags, int):
        packed = int(flags)
    else:
        packed = 0
        for flag in flags:
            packed |= int(flag)
    return packed & 0xFF


def embed_json(value: Any) -> str:
    """Serialize *value* to compact JSON text for use as a string field."""

    return to_json(value).decode("utf-8")


def path_text(value: str | os.PathLike[str]) -> str:
    # os.fspath keeps "" as "" where str(Path("")) would give "."
    return os.fspath(value)


def _coerce_color(value: Any) -> Rgba8:
    if isinstance(value, Rgba8):
        return value
    if isinstance(value, bool):
        raise ValueError("color must be an Rgba8, a 4-tuple or a packed int")
    if isinstance(value, int):
        return decode_color(value)
    if isinstance(value, Mapping):
        try:
            value = (value["r"], value["g"], value["b"], value.get("a", _CHANNEL_MAX))
        except KeyError as exc:
            raise ValueError(f"color mapping is missing channel {exc}") from exc
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        try:
            channels = [int(channel) for channel in value]
        except (TypeError, ValueError) as exc:
            raise ValueError(f"color channels must be integers: {value!r}") from exc
        if any(channel < 0 or channel > _CHANNEL_MAX for channel in channels):
            raise ValueError("color channels must be within 0-255")
        return Rgba8(*channels)
    raise ValueError("color must be an Rgba8, a 4-tuple or a packed int")


def _coerce_duration(value: Any) -> timedelta:
    # bare numbers are read as milliseconds, the unit these fields use on the wire
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return timedelta(milliseconds=value)
    raise ValueError("duration must be a timedelta or a number of milliseconds")


def _coerce_flags(value: Any) -> FontFlags:
    if isinstance(value, FontFlags):
        return value
    if isinstance(value, bool):
        raise ValueError("font flags must be FontFlags, an int or an iterable")
    if isinstance(value, int):
        return FontFlags(value & 0xFF)
    if isinstance(value, str):
        try:
            return FontFlags[value.strip().upper()]
        except KeyError as exc:
            raise ValueError(f"unknown font flag {value!r}") from exc
    if isinstance(value, Iterable):
        combined = FontFlags(0)
        for item in value:
            combined |= _coerce_flags(item)
        return combined
    raise ValueError("font flags must be FontFlags, an int or an iterable")


def _coerce_path(value: Any) -> Union[str, PurePath]:
    if isinstance(value, (str, PurePath)):
        return value
    if isinstance(value, os.PathLike):
        return Path(os.fspath(value))
    raise ValueError("expected a path or a string")


def _load_embedded(value: Any) -> Any:
    if isinstance(value, (str, bytes)):
        return from_json(value)
    return value


InvertedColor = Annotated[
    Rgba8,
    PlainValidator(_coerce_color),
    PlainSerializer(encode_color, return_type=int),
]
Milliseconds = Annotated[
    timedelta,
    PlainValidator(_coerce_duration),
    PlainSerializer(duration_millis, return_type=int),
]
PackedFlags = Annotated[
    FontFlags,
    PlainValidator(_coerce_flags),
    PlainSerializer(pack_flags, return_type=int),
]
PathValue = Annotated[
    Union[str, PurePath],
    PlainValidator(_coerce_path),
    PlainSerializer(path_text, return_type=str),
]
JsonEmbedded = Annotated[
    T,
    BeforeValidator(_load_embedded),
    PlainSerializer(embed_json, return_type=str),
]


__all__ = [
    "FontFlags",
    "InvertedColor",
    "JsonEmbedded",
    "Milliseconds",
    "PackedFlags",
    "PathValue",
    "Rgba8",
    "decode_color",
    "duration_millis",
    "embed_json",
    "encode_color",
    "pack_flags",
    "path_text",
]
