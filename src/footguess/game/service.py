"""Guess submission flow around the feedback engine."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from typing import Callable, List, Optional

from footguess.catalog import PlayerSearchIndex
from footguess.config import GameSettings
from footguess.engine import calculate_score, compare_players
from footguess.models import FeedbackResult, Player
from footguess.persistence import GameRecord, GameStore

from .errors import (
    AnswerPlayerMissingError,
    AttemptsRemainingError,
    DuplicateGuessError,
    EmptyCatalogError,
    GameCompletedError,
    NoAttemptsLeftError,
    PlayerNotFoundError,
)


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

SESSION_LOCK_STRIPES = 64


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_game_time(now: datetime) -> datetime:
    """Next UTC midnight after ``now``."""

    tomorrow = now.astimezone(timezone.utc).date() + timedelta(days=1)
    return datetime.combine(tomorrow, time.min, tzinfo=timezone.utc)


def pick_daily_player_id(day: date, player_ids: List[int]) -> int:
    """Deterministic pick for a calendar day, stable across processes."""

    if not player_ids:
        raise EmptyCatalogError()
    rng = random.Random(day.isoformat())
    return rng.choice(sorted(player_ids))


@dataclass
class GameSnapshot:
    game: GameRecord
    guesses: List[FeedbackResult] = field(default_factory=list)
    max_attempts: int = 6
    next_game_time: Optional[datetime] = None

    @property
    def attempts(self) -> int:
        return len(self.guesses)

    @property
    def attempts_exhausted(self) -> bool:
        return self.attempts >= self.max_attempts


class GameService:
    """Session-keyed game flow.

    Every session plays one game per UTC day against that day's shared
    answer player. The check-compare-append-complete sequence of a guess runs
    under the lock stripe its session id hashes to.
    """

    def __init__(
        self,
        store: GameStore,
        *,
        settings: GameSettings | None = None,
        search_index: PlayerSearchIndex | None = None,
        clock: Clock | None = None,
    ):
        self.store = store
        self.settings = settings or GameSettings()
        self._search_index = search_index
        self._clock = clock or _utc_now
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(SESSION_LOCK_STRIPES)]

    @property
    def max_attempts(self) -> int:
        return self.settings.max_attempts

    def _session_lock(self, session_id: str) -> threading.Lock:
        # Striped: sessions sharing a stripe serialize, memory stays fixed.
        return self._locks[hash(session_id) % len(self._locks)]

    def _today(self) -> date:
        return self._clock().astimezone(timezone.utc).date()

    def refresh_search_index(self) -> PlayerSearchIndex:
        self._search_index = PlayerSearchIndex(
            self.store.list_players(),
            limit=self.settings.search_limit,
            score_cutoff=self.settings.search_score_cutoff,
        )
        logger.info("Loaded %d players into search index", len(self._search_index))
        return self._search_index

    def search_players(self, query: str) -> List[Player]:
        index = self._search_index or self.refresh_search_index()
        return index.search(query)

    def _daily_player_id(self, day: date) -> int:
        existing = self.store.get_daily_player_id(day)
        if existing is not None:
            return existing
        player_ids = [player.id for player in self.store.list_players()]
        chosen = self.store.set_daily_player_id(day, pick_daily_player_id(day, player_ids))
        logger.info("Daily player for %s resolved to id %d", day.isoformat(), chosen)
        return chosen

    def _current_game(self, session_id: str) -> GameRecord:
        day = self._today()
        game = self.store.get_game(session_id, day)
        if game is None:
            game = self.store.create_game(session_id, day, self._daily_player_id(day))
            logger.info("Created game %d for session %s on %s", game.game_id, session_id, day.isoformat())
        return game

    def _snapshot(self, game: GameRecord) -> GameSnapshot:
        return GameSnapshot(
            game=game,
            guesses=self.store.get_guesses(game.game_id),
            max_attempts=self.max_attempts,
            next_game_time=next_game_time(self._clock()) if game.completed else None,
        )

    def get_state(self, session_id: str) -> GameSnapshot:
        with self._session_lock(session_id):
            return self._snapshot(self._current_game(session_id))

    def submit_guess(self, session_id: str, player_id: int) -> FeedbackResult:
        with self._session_lock(session_id):
            game = self._current_game(session_id)
            guesses = self.store.get_guesses(game.game_id)
            attempts = len(guesses)

            if game.completed:
                raise GameCompletedError()
            if not game.continuous_mode_enabled and attempts >= self.max_attempts:
                raise NoAttemptsLeftError()

            guessed = self.store.get_player(player_id)
            if guessed is None:
                raise PlayerNotFoundError(player_id)
            if any(previous.guessed_player.id == player_id for previous in guesses):
                raise DuplicateGuessError(player_id)

            answer = self.store.get_player(game.answer_player_id)
            if answer is None:
                logger.error("Answer player %d missing for game %d", game.answer_player_id, game.game_id)
                raise AnswerPlayerMissingError(game.answer_player_id)

            feedback = compare_players(guessed, answer, evaluated_at=self._clock())
            self.store.record_guess(game.game_id, feedback)

            if feedback.correct:
                score = calculate_score(attempts + 1, self.max_attempts)
                self.store.complete_game(game.game_id, score)
                logger.info(
                    "Session %s solved game %d in %d attempts (score %d)",
                    session_id,
                    game.game_id,
                    attempts + 1,
                    score,
                )
            return feedback

    def enable_continuous_mode(self, session_id: str) -> GameSnapshot:
        with self._session_lock(session_id):
            game = self._current_game(session_id)
            attempts = len(self.store.get_guesses(game.game_id))
            if attempts < self.max_attempts:
                raise AttemptsRemainingError()
            if game.completed:
                raise GameCompletedError()
            game = self.store.enable_continuous_mode(game.game_id)
            logger.info("Continuous mode enabled for game %d", game.game_id)
            return self._snapshot(game)
