"""Crop modes of the macOS display capture source.

The display capture source keeps its crop settings as flat keys next to its
own ``display`` and ``show_cursor`` values.  ``crop_mode`` holds the numeric
tag of the active mode and only the keys belonging to that mode are sent.
The manual rectangle is stored under ``manual.*`` keys for a plain manual
crop but under ``window.*`` keys when it refines a window crop, so the
rectangle fields cannot be derived from attribute names.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _CropModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class _WindowTarget(_CropModel):
    owner_name: str = ""
    window_name: str = ""
    window: int = 0
    show_empty_names: bool = False


class _Rect(_CropModel):
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


class CropNone(_CropModel):
    mode: Literal[0] = 0


class CropManual(_Rect):
    mode: Literal[1] = 1


class CropToWindow(_WindowTarget):
    mode: Literal[2] = 2


class CropToWindowAndManual(_WindowTarget, _Rect):
    mode: Literal[3] = 3


CropMode = Annotated[
    Union[CropNone, CropManual, CropToWindow, CropToWindowAndManual],
    Field(discriminator="mode"),
]


def _window_fields(target: _WindowTarget) -> dict[str, Any]:
    return {
        "owner_name": target.owner_name,
        "window_name": target.window_name,
        "window": target.window,
        "show_empty_names": target.show_empty_names,
    }


def _rect_fields(prefix: str, rect: _Rect) -> dict[str, Any]:
    return {
        f"{prefix}.origin.x": rect.left,
        f"{prefix}.origin.y": rect.top,
        f"{prefix}.size.width": rect.right,
        f"{prefix}.size.height": rect.bottom,
    }


def encode_crop_mode(mode: Any) -> dict[str, Any]:
    """Return the flat settings keys for *mode*, ``crop_mode`` tag first."""

    if isinstance(mode, CropNone):
        return {"crop_mode": 0}
    if isinstance(mode, CropManual):
        return {"crop_mode": 1, **_rect_fields("manual", mode)}
    if isinstance(mode, CropToWindow):
        return {"crop_mode": 2, **_window_fields(mode)}
    if isinstance(mode, CropToWindowAndManual):
        return {
            "crop_mode": 3,
            **_window_fields(mode),
            **_rect_fields("window", mode),
        }
    raise TypeError(f"unsupported crop mode: {type(mode).__name__}")


__all__ = [
    "CropManual",
    "CropMode",
    "CropNone",
    "CropToWindow",
    "CropToWindowAndManual",
    "encode_crop_mode",
]
