"""Guess comparison: turns (guessed, answer) into per-attribute feedback.

Nominal attributes (nationality, position, club) use three tiers: the exact
tier only when the guess *is* the answer, a partial tier when the coarse
grouping (continent, position category, league) matches, and a miss
otherwise. Ordered attributes (age, height, career start) report a signed
difference or a direction. Dominant foot is a direct attribute match.

Exact values that would give the answer away (flag, club logo, age, height,
career start) are only revealed on a correct guess.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, TypeVar

from footguess.models import (
    AgeFeedback,
    CareerStartFeedback,
    ClubFeedback,
    DominantFootFeedback,
    FeedbackResult,
    GuessedPlayer,
    HeightFeedback,
    NationalityFeedback,
    Player,
    PositionFeedback,
)


SAME_CONTINENT_LABEL = "Same continent"
WRONG_COUNTRY_LABEL = "Wrong country"

_T = TypeVar("_T")


def _tiered_status(is_correct: bool, same_group: bool, partial: str) -> str:
    if is_correct:
        return "correct"
    return partial if same_group else "wrong"


def _direction(guessed: int, answer: int, *, below: str, above: str) -> str:
    if guessed < answer:
        return below
    if guessed > answer:
        return above
    return "correct"


def _reveal(is_correct: bool, value: _T) -> Optional[_T]:
    return value if is_correct else None


def compare_players(
    guessed: Player,
    answer: Player,
    *,
    evaluated_at: datetime | None = None,
) -> FeedbackResult:
    """Compare a guessed player against the answer player."""

    is_correct = guessed.id == answer.id
    same_continent = guessed.continent == answer.continent

    if is_correct:
        nationality_label = guessed.nationality
    elif same_continent:
        nationality_label = SAME_CONTINENT_LABEL
    else:
        nationality_label = WRONG_COUNTRY_LABEL

    timestamp = (evaluated_at or datetime.now(timezone.utc)).isoformat()

    return FeedbackResult(
        correct=is_correct,
        nationality=NationalityFeedback(
            status=_tiered_status(is_correct, same_continent, "same_continent"),
            value=nationality_label,
            flag=_reveal(is_correct, guessed.nationality_image_url),
        ),
        position=PositionFeedback(
            status=_tiered_status(
                is_correct,
                guessed.position_category == answer.position_category,
                "same_category",
            ),
            value=guessed.position,
        ),
        club=ClubFeedback(
            status=_tiered_status(is_correct, guessed.league == answer.league, "same_league"),
            value=guessed.club,
            logo=_reveal(is_correct, guessed.club_image_url),
        ),
        age=AgeFeedback(
            difference=guessed.age - answer.age,
            value=_reveal(is_correct, guessed.age),
        ),
        height=HeightFeedback(
            status=_direction(guessed.height, answer.height, below="shorter", above="taller"),
            value=_reveal(is_correct, guessed.height),
        ),
        dominant_foot=DominantFootFeedback(
            status="correct" if guessed.dominant_foot == answer.dominant_foot else "wrong",
            value=guessed.dominant_foot,
        ),
        career_start=CareerStartFeedback(
            status=_direction(guessed.career_start, answer.career_start, below="earlier", above="later"),
            value=_reveal(is_correct, guessed.career_start),
        ),
        guessed_player=GuessedPlayer(
            id=guessed.id,
            name=guessed.name,
            nationality=guessed.nationality,
            club=guessed.club,
            image_url=guessed.image_url,
        ),
        timestamp=timestamp,
    )
