"""Canonical models shared by the engine, store and API layers."""

from .feedback import (
    AgeFeedback,
    CareerStartFeedback,
    ClubFeedback,
    DominantFootFeedback,
    FeedbackResult,
    GuessedPlayer,
    HeightFeedback,
    NationalityFeedback,
    PositionFeedback,
)
from .player import Player

__all__ = [
    "AgeFeedback",
    "CareerStartFeedback",
    "ClubFeedback",
    "DominantFootFeedback",
    "FeedbackResult",
    "GuessedPlayer",
    "HeightFeedback",
    "NationalityFeedback",
    "Player",
    "PositionFeedback",
]
