"""Hand-off bundle passed to the protocol transport."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from obs_settings.catalog import serialize_source_settings
from obs_settings.schemas.sources import SourceSettingsModel


class SourceSettingsUpdate(BaseModel):
    """Settings document addressed to one named source.

    The transport wraps this in its own request envelope; nothing here talks
    to the tool.
    """

    source_name: str = Field(..., min_length=1, serialization_alias="sourceName")
    source_type: Optional[str] = Field(default=None, serialization_alias="sourceType")
    source_settings: Dict[str, Any] = Field(
        default_factory=dict, serialization_alias="sourceSettings"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_payload(
        cls,
        source_name: str,
        payload: SourceSettingsModel,
        *,
        include_type: bool = True,
    ) -> "SourceSettingsUpdate":
        source_kind = payload.source_kind
        return cls(
            source_name=source_name,
            source_type=source_kind if include_type else None,
            source_settings=serialize_source_settings(source_kind, payload),
        )

    def to_request(self) -> dict[str, Any]:
        exclude = {"source_type"} if self.source_type is None else None
        return self.model_dump(by_alias=True, exclude=exclude)


__all__ = ["SourceSettingsUpdate"]
