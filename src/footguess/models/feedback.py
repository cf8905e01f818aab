"""Feedback payloads produced by comparing a guess against the answer."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


NationalityStatus = Literal["correct", "same_continent", "wrong"]
PositionStatus = Literal["correct", "same_category", "wrong"]
ClubStatus = Literal["correct", "same_league", "wrong"]
HeightStatus = Literal["taller", "correct", "shorter"]
FootStatus = Literal["correct", "wrong"]
CareerStartStatus = Literal["earlier", "correct", "later"]


class _FeedbackModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class NationalityFeedback(_FeedbackModel):
    status: NationalityStatus
    value: Optional[str] = None
    flag: Optional[str] = None


class PositionFeedback(_FeedbackModel):
    status: PositionStatus
    value: str


class ClubFeedback(_FeedbackModel):
    status: ClubStatus
    value: str
    logo: Optional[str] = None


class AgeFeedback(_FeedbackModel):
    difference: int
    value: Optional[int] = None


class HeightFeedback(_FeedbackModel):
    status: HeightStatus
    value: Optional[int] = None


class DominantFootFeedback(_FeedbackModel):
    status: FootStatus
    value: str


class CareerStartFeedback(_FeedbackModel):
    status: CareerStartStatus
    value: Optional[int] = None


class GuessedPlayer(_FeedbackModel):
    """Redacted view of the guessed player; never carries answer data."""

    id: int
    name: str
    nationality: str
    club: str
    image_url: Optional[str] = None


class FeedbackResult(_FeedbackModel):
    """Outcome of one guess. ``correct`` alone decides whether the game is won."""

    correct: bool
    nationality: NationalityFeedback
    position: PositionFeedback
    club: ClubFeedback
    age: AgeFeedback
    height: HeightFeedback
    dominant_foot: DominantFootFeedback
    career_start: CareerStartFeedback
    guessed_player: GuessedPlayer
    timestamp: str

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys and absent values omitted."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
