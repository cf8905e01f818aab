"""Score awarded for solving a game in a given number of attempts."""

from __future__ import annotations

import math


BASE_SCORE = 100


def calculate_score(attempts: int, max_attempts: int) -> int:
    """Linear penalty of ``100 / max_attempts`` per attempt after the first.

    A first-attempt solve always scores 100; the result is floored at 0 and
    rounded half-up.
    """

    if max_attempts <= 0:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got {attempts}")
    if attempts == 1:
        return BASE_SCORE

    penalty_per_attempt = BASE_SCORE / max_attempts
    score = max(0.0, BASE_SCORE - (attempts - 1) * penalty_per_attempt)
    return int(math.floor(score + 0.5))
