"""Guess comparison and scoring."""

from .feedback import compare_players
from .scoring import calculate_score

__all__ = ["calculate_score", "compare_players"]
