from __future__ import annotations

import pytest
from pydantic import ValidationError

from obs_settings.requests import SourceSettingsUpdate
from obs_settings.schemas import ColorSourceV3, Rgba8


def test_update_from_payload_carries_kind_and_settings() -> None:
    update = SourceSettingsUpdate.from_payload(
        "TEST-1", ColorSourceV3(color=Rgba8(255, 0, 0, 255), width=10, height=20)
    )
    assert update.to_request() == {
        "sourceName": "TEST-1",
        "sourceType": "color_source_v3",
        "sourceSettings": {"color": 0xFF0000FF, "width": 10, "height": 20},
    }


def test_update_omits_type_when_not_requested() -> None:
    update = SourceSettingsUpdate.from_payload(
        "TEST-1", ColorSourceV3(), include_type=False
    )
    assert "sourceType" not in update.to_request()


def test_update_requires_a_source_name() -> None:
    with pytest.raises(ValidationError):
        SourceSettingsUpdate(source_name="")
