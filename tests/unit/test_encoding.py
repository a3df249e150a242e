from __future__ import annotations

import json
from datetime import timedelta
from pathlib import Path

import pytest

from obs_settings import encoding
from obs_settings.encoding import FontFlags, Rgba8
from obs_settings.schemas import Resolution


@pytest.mark.parametrize(
    ("color", "expected"),
    [
        (Rgba8(255, 0, 0, 255), 0xFF0000FF),
        (Rgba8(0, 0, 255, 255), 0xFFFF0000),
        (Rgba8(209, 209, 209, 255), 0xFFD1D1D1),
        (Rgba8(0x12, 0x34, 0x56, 0x78), 0x78563412),
        (Rgba8(0, 0, 0, 0), 0),
    ],
)
def test_encode_color_reverses_channel_order(color, expected) -> None:
    assert encoding.encode_color(color) == expected


@pytest.mark.parametrize(
    "color",
    [
        Rgba8(0, 0, 0, 0),
        Rgba8(255, 255, 255, 255),
        Rgba8(1, 2, 3, 4),
        Rgba8(200, 17, 99, 128),
    ],
)
def test_decode_color_inverts_encode_color(color) -> None:
    assert encoding.decode_color(encoding.encode_color(color)) == color


def test_decode_color_reads_only_low_32_bits() -> None:
    assert encoding.decode_color(0x1_FF0000FF) == Rgba8(255, 0, 0, 255)


@pytest.mark.parametrize(
    ("duration", "expected"),
    [
        (timedelta(0), 0),
        (timedelta(seconds=8), 8000),
        (timedelta(milliseconds=700), 700),
        (timedelta(microseconds=1999), 1),
        (timedelta(microseconds=999), 0),
        (timedelta(days=1, milliseconds=5), 86_400_005),
    ],
)
def test_duration_millis_truncates_to_whole_milliseconds(duration, expected) -> None:
    assert encoding.duration_millis(duration) == expected


def test_duration_millis_truncates_negative_values_toward_zero() -> None:
    assert encoding.duration_millis(timedelta(microseconds=-1500)) == -1


def test_duration_millis_is_monotonic() -> None:
    samples = [timedelta(microseconds=step * 250) for step in range(0, 40)]
    encoded = [encoding.duration_millis(sample) for sample in samples]
    assert encoded == sorted(encoded)


def test_duration_millis_does_not_clamp_below_documented_minimums() -> None:
    assert encoding.duration_millis(timedelta(milliseconds=10)) == 10


def test_pack_flags_assigns_disjoint_bits() -> None:
    assert encoding.pack_flags([]) == 0
    assert encoding.pack_flags(FontFlags(0)) == 0
    assert encoding.pack_flags({FontFlags.BOLD}) == 1
    assert encoding.pack_flags({FontFlags.ITALIC}) == 2
    assert encoding.pack_flags({FontFlags.UNDERLINE}) == 4
    assert encoding.pack_flags({FontFlags.STRIKEOUT}) == 8


@pytest.mark.parametrize(
    ("left", "right"),
    [
        ({FontFlags.BOLD}, {FontFlags.ITALIC}),
        ({FontFlags.BOLD, FontFlags.STRIKEOUT}, {FontFlags.UNDERLINE}),
        (set(), {FontFlags.ITALIC, FontFlags.UNDERLINE}),
    ],
)
def test_pack_flags_of_union_is_bitwise_or(left, right) -> None:
    assert encoding.pack_flags(left | right) == (
        encoding.pack_flags(left) | encoding.pack_flags(right)
    )


def test_pack_flags_is_order_independent() -> None:
    forward = [FontFlags.BOLD, FontFlags.ITALIC, FontFlags.STRIKEOUT]
    assert encoding.pack_flags(forward) == encoding.pack_flags(reversed(forward))
    assert encoding.pack_flags(FontFlags.BOLD | FontFlags.ITALIC) == 3


def test_embed_json_produces_parseable_text() -> None:
    text = encoding.embed_json(Resolution(width=1920, height=1080))
    assert isinstance(text, str)
    assert json.loads(text) == {"width": 1920, "height": 1080}


def test_path_text_keeps_empty_path_empty() -> None:
    assert encoding.path_text("") == ""
    assert encoding.path_text(Path("/tmp/slides/a.png")) == "/tmp/slides/a.png"
