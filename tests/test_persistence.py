from datetime import date
from pathlib import Path

import pytest

from footguess.config import GameSettings
from footguess.engine import compare_players
from footguess.persistence import MemoryGameStore, SqliteGameStore, open_store

from tests.factories import make_player, sample_players


DAY = date(2025, 3, 1)


@pytest.fixture(params=["sqlite", "memory"])
def store(request, tmp_path: Path):
    if request.param == "sqlite":
        return SqliteGameStore(tmp_path / "footguess.sqlite")
    return MemoryGameStore()


def test_players_round_trip(store):
    players = sample_players()

    assert store.save_players(players) == len(players)
    assert store.count_players() == len(players)
    assert store.get_player(1) == players[0]
    assert store.get_player(999) is None
    assert [player.id for player in store.list_players()] == [player.id for player in players]


def test_save_players_upserts(store):
    store.save_players([make_player(1, club="Arsenal")])
    store.save_players([make_player(1, club="Chelsea")])

    assert store.count_players() == 1
    assert store.get_player(1).club == "Chelsea"


def test_daily_player_first_writer_wins(store):
    assert store.get_daily_player_id(DAY) is None

    assert store.set_daily_player_id(DAY, 3) == 3
    assert store.set_daily_player_id(DAY, 5) == 3
    assert store.get_daily_player_id(DAY) == 3


def test_games_are_keyed_by_session_and_day(store):
    first = store.create_game("alice", DAY, 3)
    again = store.create_game("alice", DAY, 4)
    other = store.create_game("bob", DAY, 3)
    tomorrow = store.create_game("alice", date(2025, 3, 2), 5)

    assert again.game_id == first.game_id
    assert again.answer_player_id == 3
    assert len({first.game_id, other.game_id, tomorrow.game_id}) == 3
    assert store.get_game("alice", DAY).game_id == first.game_id
    assert store.get_game("carol", DAY) is None
    assert not first.completed
    assert not first.continuous_mode_enabled


def test_guess_history_is_ordered(store):
    players = sample_players()
    game = store.create_game("alice", DAY, 1)
    first = compare_players(players[1], players[0])
    second = compare_players(players[2], players[0])

    store.record_guess(game.game_id, first)
    store.record_guess(game.game_id, second)

    assert store.get_guesses(game.game_id) == [first, second]
    assert store.get_guesses(9999) == []


def test_complete_and_continuous_mode(store):
    game = store.create_game("alice", DAY, 1)

    updated = store.enable_continuous_mode(game.game_id)
    assert updated.continuous_mode_enabled

    completed = store.complete_game(game.game_id, 67)
    assert completed.completed
    assert completed.score == 67
    assert completed.completed_at is not None
    assert store.get_game("alice", DAY).score == 67


def test_unknown_game_raises_key_error(store):
    feedback = compare_players(make_player(1), make_player(1))

    with pytest.raises(KeyError):
        store.record_guess(42, feedback)
    with pytest.raises(KeyError):
        store.complete_game(42, 100)
    with pytest.raises(KeyError):
        store.enable_continuous_mode(42)


def test_sqlite_store_persists_across_instances(tmp_path: Path):
    db_path = tmp_path / "footguess.sqlite"
    SqliteGameStore(db_path).save_players(sample_players())
    game = SqliteGameStore(db_path).create_game("alice", DAY, 2)

    reopened = SqliteGameStore(db_path)
    assert reopened.count_players() == len(sample_players())
    assert reopened.get_game("alice", DAY).game_id == game.game_id


def test_open_store_selects_backend(tmp_path: Path):
    memory = open_store(GameSettings(storage="memory"))
    sqlite = open_store(GameSettings(storage="sqlite", db_path=tmp_path / "x.sqlite"))

    assert isinstance(memory, MemoryGameStore)
    assert isinstance(sqlite, SqliteGameStore)
