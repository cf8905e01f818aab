import json
from pathlib import Path

import pytest

from footguess.cli import _parse_mapping, main
from footguess.config_loader import CatalogProfile
from footguess.persistence import SqliteGameStore


@pytest.fixture
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "footguess.sqlite"
    monkeypatch.setenv("FOOTGUESS_STORAGE", "sqlite")
    monkeypatch.setenv("FOOTGUESS_DB_PATH", str(path))
    return path


def test_parse_mapping():
    assert _parse_mapping(["name=First|Last", " club = Team "]) == {"name": "First|Last", "club": "Team"}
    with pytest.raises(ValueError):
        _parse_mapping(["name"])


def test_seed_bundled_catalog(db_path: Path, capsys):
    assert main(["seed"]) == 0

    out = capsys.readouterr().out
    assert "Saved 33 players" in out
    assert SqliteGameStore(db_path).count_players() == 33


def test_seed_with_profile(db_path: Path, tmp_path: Path, capsys):
    csv_path = tmp_path / "catalog.csv"
    csv_path.write_text(
        "\n".join(
            [
                "First,Last,Country,Role,Team,Competition,Age,Cm,Foot,Debut",
                "Mohamed,Salah,Egypt,Winger,Liverpool,Premier League,33,175,Left,2010",
            ]
        ),
        encoding="utf-8",
    )
    profile_path = tmp_path / "profile.json"
    columns = [
        "name=First|Last",
        "nationality=Country",
        "position=Role",
        "club=Team",
        "league=Competition",
        "age=Age",
        "height=Cm",
        "dominant_foot=Foot",
        "career_start=Debut",
    ]
    args = ["seed", "--catalog", str(csv_path), "--save-profile", str(profile_path)]
    for column in columns:
        args.extend(["--column", column])

    assert main(args) == 0
    assert CatalogProfile.load(profile_path).catalog_mapping["name"] == "First|Last"
    assert SqliteGameStore(db_path).get_player(1).name == "Mohamed Salah"

    assert main(["seed", "--catalog", str(csv_path), "--load-profile", str(profile_path)]) == 0
    assert "Saved 1 players" in capsys.readouterr().out


def test_seed_rejects_bad_catalog(db_path: Path, tmp_path: Path, capsys):
    csv_path = tmp_path / "broken.csv"
    csv_path.write_text("name,age\nNobody,old\n", encoding="utf-8")

    assert main(["seed", "--catalog", str(csv_path)]) == 1
    assert "Invalid catalog" in capsys.readouterr().err


def test_compare_prints_feedback(monkeypatch: pytest.MonkeyPatch, capsys):
    monkeypatch.setenv("FOOTGUESS_STORAGE", "memory")

    assert main(["compare", "1", "3"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["correct"] is False
    assert payload["guessedPlayer"]["name"] == "Lionel Messi"
    assert payload["nationality"]["status"] == "wrong"


def test_compare_unknown_player(monkeypatch: pytest.MonkeyPatch, capsys):
    monkeypatch.setenv("FOOTGUESS_STORAGE", "memory")

    assert main(["compare", "1", "999"]) == 1
    assert "999" in capsys.readouterr().err


def test_seed_rejects_unknown_column_key(db_path: Path, capsys):
    assert main(["seed", "--column", "salary=Salary"]) == 1
    assert "Unknown catalog field(s): salary" in capsys.readouterr().err
    assert SqliteGameStore(db_path).count_players() == 0
