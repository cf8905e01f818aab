"""Records and the storage interface shared by every backend."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional, Protocol

from footguess.models import FeedbackResult, Player


@dataclass
class GameRecord:
    game_id: int
    session_id: str
    day: date
    answer_player_id: int
    created_at: datetime
    continuous_mode_enabled: bool = False
    completed: bool = False
    score: Optional[int] = None
    completed_at: Optional[datetime] = None


class GameStore(Protocol):
    """Session-keyed game storage.

    Every game belongs to one (session id, calendar day) pair; the day's
    answer player is recorded once per day and shared across sessions.
    Unknown game ids raise ``KeyError``.
    """

    def save_players(self, players: Iterable[Player]) -> int: ...

    def get_player(self, player_id: int) -> Optional[Player]: ...

    def list_players(self) -> List[Player]: ...

    def count_players(self) -> int: ...

    def get_daily_player_id(self, day: date) -> Optional[int]: ...

    def set_daily_player_id(self, day: date, player_id: int) -> int: ...

    def get_game(self, session_id: str, day: date) -> Optional[GameRecord]: ...

    def create_game(self, session_id: str, day: date, answer_player_id: int) -> GameRecord: ...

    def get_guesses(self, game_id: int) -> List[FeedbackResult]: ...

    def record_guess(self, game_id: int, feedback: FeedbackResult) -> None: ...

    def complete_game(self, game_id: int, score: int) -> GameRecord: ...

    def enable_continuous_mode(self, game_id: int) -> GameRecord: ...
