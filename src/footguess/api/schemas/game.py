from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from footguess.models import FeedbackResult


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GuessRequest(_CamelModel):
    player_id: int


class PlayerSearchResponse(_CamelModel):
    id: int
    name: str
    nationality: str
    club: str
    image_url: Optional[str] = None


class GameStateResponse(_CamelModel):
    game_id: int
    daily_player_id: Optional[int] = None
    attempts: int
    max_attempts: int
    continuous_mode_enabled: bool
    completed: bool
    guesses: List[FeedbackResult] = Field(default_factory=list)
    score: Optional[int] = None
    next_game_time: Optional[str] = None


class ContinuousModeResponse(_CamelModel):
    success: bool
