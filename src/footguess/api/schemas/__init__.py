"""Pydantic models for API I/O."""

from .game import ContinuousModeResponse, GameStateResponse, GuessRequest, PlayerSearchResponse

__all__ = [
    "ContinuousModeResponse",
    "GameStateResponse",
    "GuessRequest",
    "PlayerSearchResponse",
]
