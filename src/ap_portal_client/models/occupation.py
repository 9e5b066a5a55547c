"""Occupation models.

The server speaks ``{id, name, description}``; rows handed to the display layer
use the portal's occupation code / occupation name vocabulary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Occupation(BaseModel):
    """Occupation row as shown in the catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    occ_code: str = Field(alias="occCode")
    occ_name: str = Field(default="", alias="occName")
    description: str | None = None

    @classmethod
    def from_api(cls, payload: dict[str, Any], *, fallback_code: str = "") -> Occupation:
        raw_id = payload.get("id")
        return cls(
            occ_code=str(raw_id) if raw_id is not None else fallback_code,
            occ_name=payload.get("name") or "",
            description=payload.get("description"),
        )


class OccupationRequest(BaseModel):
    """Body of create and update calls."""

    name: str
    description: str | None = None
