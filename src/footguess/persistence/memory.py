"""In-memory game store for tests and throwaway servers."""

from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from footguess.models import FeedbackResult, Player

from .records import GameRecord


class MemoryGameStore:
    """Dict-backed store with the same contract as :class:`SqliteGameStore`."""

    def __init__(self, players: Iterable[Player] | None = None):
        self._lock = threading.Lock()
        self._players: Dict[int, Player] = {}
        self._daily: Dict[date, int] = {}
        self._games: Dict[int, GameRecord] = {}
        self._games_by_session: Dict[Tuple[str, date], int] = {}
        self._guesses: Dict[int, List[FeedbackResult]] = {}
        self._next_game_id = 1
        if players is not None:
            self.save_players(players)

    def save_players(self, players: Iterable[Player]) -> int:
        count = 0
        with self._lock:
            for player in players:
                self._players[player.id] = player
                count += 1
        return count

    def get_player(self, player_id: int) -> Optional[Player]:
        return self._players.get(player_id)

    def list_players(self) -> List[Player]:
        return [self._players[player_id] for player_id in sorted(self._players)]

    def count_players(self) -> int:
        return len(self._players)

    def get_daily_player_id(self, day: date) -> Optional[int]:
        return self._daily.get(day)

    def set_daily_player_id(self, day: date, player_id: int) -> int:
        with self._lock:
            return self._daily.setdefault(day, player_id)

    def get_game(self, session_id: str, day: date) -> Optional[GameRecord]:
        game_id = self._games_by_session.get((session_id, day))
        if game_id is None:
            return None
        return replace(self._games[game_id])

    def create_game(self, session_id: str, day: date, answer_player_id: int) -> GameRecord:
        with self._lock:
            game_id = self._games_by_session.get((session_id, day))
            if game_id is None:
                game_id = self._next_game_id
                self._next_game_id += 1
                self._games[game_id] = GameRecord(
                    game_id=game_id,
                    session_id=session_id,
                    day=day,
                    answer_player_id=answer_player_id,
                    created_at=datetime.now(timezone.utc),
                )
                self._games_by_session[(session_id, day)] = game_id
                self._guesses[game_id] = []
            return replace(self._games[game_id])

    def get_guesses(self, game_id: int) -> List[FeedbackResult]:
        return list(self._guesses.get(game_id, []))

    def record_guess(self, game_id: int, feedback: FeedbackResult) -> None:
        with self._lock:
            self._require_game(game_id)
            self._guesses[game_id].append(feedback)

    def complete_game(self, game_id: int, score: int) -> GameRecord:
        with self._lock:
            game = self._require_game(game_id)
            game.completed = True
            game.score = score
            game.completed_at = datetime.now(timezone.utc)
            return replace(game)

    def enable_continuous_mode(self, game_id: int) -> GameRecord:
        with self._lock:
            game = self._require_game(game_id)
            game.continuous_mode_enabled = True
            return replace(game)

    def _require_game(self, game_id: int) -> GameRecord:
        game = self._games.get(game_id)
        if game is None:
            raise KeyError(f"Game {game_id} not found")
        return game
