"""Game sessions: daily answer resolution and the guess flow."""

from .errors import (
    AnswerPlayerMissingError,
    AttemptsRemainingError,
    DuplicateGuessError,
    EmptyCatalogError,
    GameCompletedError,
    GameError,
    NoAttemptsLeftError,
    PlayerNotFoundError,
)
from .service import SESSION_LOCK_STRIPES, GameService, GameSnapshot, next_game_time, pick_daily_player_id

__all__ = [
    "AnswerPlayerMissingError",
    "AttemptsRemainingError",
    "DuplicateGuessError",
    "EmptyCatalogError",
    "GameCompletedError",
    "GameError",
    "GameService",
    "GameSnapshot",
    "NoAttemptsLeftError",
    "PlayerNotFoundError",
    "SESSION_LOCK_STRIPES",
    "next_game_time",
    "pick_daily_player_id",
]
