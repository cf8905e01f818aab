"""SQLite-backed game store."""

from __future__ import annotations

import sqlite3
import tempfile
from contextlib import contextmanager
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from footguess.models import FeedbackResult, Player

from .records import GameRecord


class SqliteGameStore:
    """Simple SQLite-backed store for the catalog, daily answers and games.

    A connection is opened per operation, so ``file:`` URIs must name a file;
    in-memory databases are rejected by ``GameSettings.from_env``.
    """

    def __init__(self, db_path: Path | str):
        if isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path: Path | str = db_path
            self._use_uri = True
        else:
            self.db_path = Path(db_path)
            self._use_uri = False
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        try:
            if isinstance(self.db_path, Path):
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(self.db_path)
            else:
                conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        except sqlite3.OperationalError:
            fallback_dir = Path(tempfile.gettempdir()) / "footguess-runtime"
            fallback_dir.mkdir(parents=True, exist_ok=True)
            fallback = fallback_dir / "footguess.sqlite"
            conn = sqlite3.connect(fallback)
            self.db_path = fallback
            self._use_uri = False
            self._create_schema(conn)
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        conn = self._connect()
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        with self._connection() as conn:
            self._create_schema(conn)

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS players (
                id INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                player_json TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS daily_challenges (
                day TEXT PRIMARY KEY,
                player_id INTEGER NOT NULL,
                created_at TEXT NOT NULL
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS games (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                session_id TEXT NOT NULL,
                day TEXT NOT NULL,
                answer_player_id INTEGER NOT NULL,
                continuous_mode_enabled INTEGER NOT NULL DEFAULT 0,
                completed INTEGER NOT NULL DEFAULT 0,
                score INTEGER,
                created_at TEXT NOT NULL,
                completed_at TEXT,
                UNIQUE (session_id, day)
            )
            """
        )
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS guesses (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                game_id INTEGER NOT NULL REFERENCES games (id),
                feedback_json TEXT NOT NULL,
                created_at TEXT NOT NULL
            )
            """
        )
        conn.execute("CREATE INDEX IF NOT EXISTS idx_guesses_game ON guesses (game_id, id)")

    def save_players(self, players: Iterable[Player]) -> int:
        rows = [(player.id, player.name, player.model_dump_json()) for player in players]
        with self._connection() as conn:
            conn.executemany(
                """
                INSERT INTO players (id, name, player_json) VALUES (?, ?, ?)
                ON CONFLICT (id) DO UPDATE SET name = excluded.name, player_json = excluded.player_json
                """,
                rows,
            )
        return len(rows)

    def get_player(self, player_id: int) -> Optional[Player]:
        with self._connection() as conn:
            row = conn.execute("SELECT player_json FROM players WHERE id = ?", (player_id,)).fetchone()
        if row is None:
            return None
        return Player.model_validate_json(row["player_json"])

    def list_players(self) -> List[Player]:
        with self._connection() as conn:
            rows = conn.execute("SELECT player_json FROM players ORDER BY id").fetchall()
        return [Player.model_validate_json(row["player_json"]) for row in rows]

    def count_players(self) -> int:
        with self._connection() as conn:
            row = conn.execute("SELECT COUNT(*) AS total FROM players").fetchone()
        return int(row["total"])

    def get_daily_player_id(self, day: date) -> Optional[int]:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT player_id FROM daily_challenges WHERE day = ?",
                (day.isoformat(),),
            ).fetchone()
        return None if row is None else int(row["player_id"])

    def set_daily_player_id(self, day: date, player_id: int) -> int:
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            conn.execute(
                "INSERT OR IGNORE INTO daily_challenges (day, player_id, created_at) VALUES (?, ?, ?)",
                (day.isoformat(), player_id, now),
            )
            row = conn.execute(
                "SELECT player_id FROM daily_challenges WHERE day = ?",
                (day.isoformat(),),
            ).fetchone()
        return int(row["player_id"])

    def get_game(self, session_id: str, day: date) -> Optional[GameRecord]:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT * FROM games WHERE session_id = ? AND day = ?",
                (session_id, day.isoformat()),
            ).fetchone()
        return None if row is None else self._row_to_game(row)

    def create_game(self, session_id: str, day: date, answer_player_id: int) -> GameRecord:
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            conn.execute(
                """
                INSERT OR IGNORE INTO games (session_id, day, answer_player_id, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (session_id, day.isoformat(), answer_player_id, now),
            )
            row = conn.execute(
                "SELECT * FROM games WHERE session_id = ? AND day = ?",
                (session_id, day.isoformat()),
            ).fetchone()
        return self._row_to_game(row)

    def get_guesses(self, game_id: int) -> List[FeedbackResult]:
        with self._connection() as conn:
            rows = conn.execute(
                "SELECT feedback_json FROM guesses WHERE game_id = ? ORDER BY id",
                (game_id,),
            ).fetchall()
        return [FeedbackResult.model_validate_json(row["feedback_json"]) for row in rows]

    def record_guess(self, game_id: int, feedback: FeedbackResult) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            self._require_game(conn, game_id)
            conn.execute(
                "INSERT INTO guesses (game_id, feedback_json, created_at) VALUES (?, ?, ?)",
                (game_id, feedback.to_json(), now),
            )

    def complete_game(self, game_id: int, score: int) -> GameRecord:
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            self._require_game(conn, game_id)
            conn.execute(
                "UPDATE games SET completed = 1, score = ?, completed_at = ? WHERE id = ?",
                (score, now, game_id),
            )
            row = conn.execute("SELECT * FROM games WHERE id = ?", (game_id,)).fetchone()
        return self._row_to_game(row)

    def enable_continuous_mode(self, game_id: int) -> GameRecord:
        with self._connection() as conn:
            self._require_game(conn, game_id)
            conn.execute("UPDATE games SET continuous_mode_enabled = 1 WHERE id = ?", (game_id,))
            row = conn.execute("SELECT * FROM games WHERE id = ?", (game_id,)).fetchone()
        return self._row_to_game(row)

    def _require_game(self, conn: sqlite3.Connection, game_id: int) -> None:
        row = conn.execute("SELECT id FROM games WHERE id = ?", (game_id,)).fetchone()
        if row is None:
            raise KeyError(f"Game {game_id} not found")

    def _row_to_game(self, row: sqlite3.Row) -> GameRecord:
        def _parse_ts(value: Optional[str]) -> Optional[datetime]:
            return datetime.fromisoformat(value) if value else None

        return GameRecord(
            game_id=row["id"],
            session_id=row["session_id"],
            day=date.fromisoformat(row["day"]),
            answer_player_id=row["answer_player_id"],
            created_at=datetime.fromisoformat(row["created_at"]),
            continuous_mode_enabled=bool(row["continuous_mode_enabled"]),
            completed=bool(row["completed"]),
            score=row["score"],
            completed_at=_parse_ts(row["completed_at"]),
        )
