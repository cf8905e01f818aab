"""Player catalog record."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


DominantFoot = Literal["Left", "Right"]

_MISSING_ASSET_TOKENS = {"", "undefined", "null", "none"}


class Player(BaseModel):
    """Read-only player entity.

    ``continent`` and ``position_category`` are classified once at ingestion
    and stored as-is; nothing downstream recomputes them.
    """

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    nationality: str
    continent: str
    position: str
    position_category: str
    club: str
    league: str
    age: int = Field(..., ge=0)
    height: int = Field(..., gt=0)
    dominant_foot: DominantFoot
    career_start: int
    career_end: Optional[int] = None
    image_url: Optional[str] = None
    club_image_url: Optional[str] = None
    nationality_image_url: Optional[str] = None

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    @field_validator("image_url", "club_image_url", "nationality_image_url", mode="before")
    @classmethod
    def _blank_asset_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip()
            if text.lower() in _MISSING_ASSET_TOKENS:
                return None
            return text
        return value

    @property
    def is_active(self) -> bool:
        return self.career_end is None
