from __future__ import annotations

import pytest
from pydantic import ValidationError

from obs_settings.schemas import (
    CropManual,
    CropNone,
    CropToWindow,
    CropToWindowAndManual,
    DisplayCapture,
    encode_crop_mode,
)

_WINDOW = {
    "owner_name": "Safari",
    "window_name": "Start Page",
    "window": 4711,
    "show_empty_names": True,
}
_RECT = {"left": 1.5, "top": 2.0, "right": 30.25, "bottom": 40.0}


def test_crop_none_emits_only_the_tag() -> None:
    assert encode_crop_mode(CropNone()) == {"crop_mode": 0}


def test_crop_manual_renames_rect_to_manual_keys() -> None:
    assert encode_crop_mode(CropManual(**_RECT)) == {
        "crop_mode": 1,
        "manual.origin.x": 1.5,
        "manual.origin.y": 2.0,
        "manual.size.width": 30.25,
        "manual.size.height": 40.0,
    }


def test_crop_to_window_emits_window_identity() -> None:
    assert encode_crop_mode(CropToWindow(**_WINDOW)) == {"crop_mode": 2, **_WINDOW}


def test_crop_to_window_and_manual_uses_window_rect_keys() -> None:
    encoded = encode_crop_mode(CropToWindowAndManual(**_WINDOW, **_RECT))
    assert encoded == {
        "crop_mode": 3,
        **_WINDOW,
        "window.origin.x": 1.5,
        "window.origin.y": 2.0,
        "window.size.width": 30.25,
        "window.size.height": 40.0,
    }
    assert not any(key.startswith("manual.") for key in encoded)
    assert not {"left", "top", "right", "bottom"} & set(encoded)


def test_encode_crop_mode_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError):
        encode_crop_mode({"crop_mode": 1})


def test_display_capture_flattens_crop_mode_next_to_own_fields() -> None:
    settings = DisplayCapture(display=1, crop_mode=CropManual(**_RECT)).to_settings()
    assert settings == {
        "display": 1,
        "show_cursor": True,
        "crop_mode": 1,
        "manual.origin.x": 1.5,
        "manual.origin.y": 2.0,
        "manual.size.width": 30.25,
        "manual.size.height": 40.0,
    }


def test_display_capture_defaults_to_no_crop() -> None:
    assert DisplayCapture.defaults().to_settings() == {
        "display": 0,
        "show_cursor": True,
        "crop_mode": 0,
    }


def test_display_capture_accepts_tagged_mapping() -> None:
    capture = DisplayCapture(crop_mode={"mode": 2, **_WINDOW})
    assert isinstance(capture.crop_mode, CropToWindow)
    assert capture.to_settings()["window"] == 4711


def test_crop_variants_reject_fields_of_other_variants() -> None:
    with pytest.raises(ValidationError):
        CropManual(owner_name="Safari")


def test_crop_variants_are_immutable() -> None:
    mode = CropManual(**_RECT)
    with pytest.raises(ValidationError):
        mode.left = 3.0
