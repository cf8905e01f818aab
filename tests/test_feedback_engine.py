from datetime import datetime, timezone

import pytest

from footguess.engine import compare_players
from footguess.engine.feedback import SAME_CONTINENT_LABEL, WRONG_COUNTRY_LABEL
from footguess.models import FeedbackResult

from tests.factories import make_player, sample_players


FIXED_NOW = datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)


def test_reference_example():
    guessed = make_player(
        1,
        continent="Europe",
        position_category="Attack",
        league="EPL",
        age=30,
        height=180,
        dominant_foot="Right",
        career_start=2010,
    )
    answer = make_player(
        2,
        continent="Europe",
        position_category="Midfield",
        league="EPL",
        age=28,
        height=185,
        dominant_foot="Left",
        career_start=2012,
    )

    feedback = compare_players(guessed, answer)

    assert feedback.correct is False
    assert feedback.nationality.status == "same_continent"
    assert feedback.position.status == "wrong"
    assert feedback.club.status == "same_league"
    assert feedback.age.difference == 2
    assert feedback.height.status == "shorter"
    assert feedback.dominant_foot.status == "wrong"
    assert feedback.career_start.status == "earlier"


@pytest.mark.parametrize("player", sample_players(), ids=lambda player: player.name)
def test_same_player_is_correct_everywhere(player):
    feedback = compare_players(player, player)

    assert feedback.correct is True
    assert feedback.nationality.status == "correct"
    assert feedback.position.status == "correct"
    assert feedback.club.status == "correct"
    assert feedback.age.difference == 0
    assert feedback.height.status == "correct"
    assert feedback.dominant_foot.status == "correct"
    assert feedback.career_start.status == "correct"


def test_correct_guess_reveals_exact_values():
    kane = sample_players()[0]

    feedback = compare_players(kane, kane)

    assert feedback.nationality.value == "England"
    assert feedback.nationality.flag == "https://flagcdn.com/w80/gb-eng.png"
    assert feedback.club.value == "Bayern Munich"
    assert feedback.club.logo == "https://example.com/bayern.png"
    assert feedback.age.value == 32
    assert feedback.height.value == 188
    assert feedback.career_start.value == 2010
    assert feedback.guessed_player.image_url == "https://example.com/kane.png"


def test_identical_attributes_but_different_id_is_not_correct():
    guessed = make_player(1, nationality_image_url="https://flagcdn.com/w80/gb-eng.png")
    answer = make_player(2)

    feedback = compare_players(guessed, answer)

    assert feedback.correct is False
    assert feedback.nationality.status == "same_continent"
    assert feedback.position.status == "same_category"
    assert feedback.club.status == "same_league"
    assert feedback.age.difference == 0
    assert feedback.height.status == "correct"
    assert feedback.dominant_foot.status == "correct"
    assert feedback.career_start.status == "correct"


def test_wrong_guess_hides_answer_values():
    guessed = sample_players()[0]
    answer = sample_players()[1]

    feedback = compare_players(guessed, answer)
    payload = feedback.to_payload()

    assert feedback.nationality.flag is None
    assert feedback.club.logo is None
    assert feedback.age.value is None
    assert feedback.height.value is None
    assert feedback.career_start.value is None
    assert "flag" not in payload["nationality"]
    assert "logo" not in payload["club"]
    assert "value" not in payload["age"]
    assert "value" not in payload["height"]
    assert "value" not in payload["careerStart"]


def test_nationality_labels():
    kane, haaland, messi = sample_players()[:3]

    assert compare_players(kane, haaland).nationality.value == SAME_CONTINENT_LABEL
    assert compare_players(kane, messi).nationality.status == "wrong"
    assert compare_players(kane, messi).nationality.value == WRONG_COUNTRY_LABEL


def test_position_and_club_always_show_guessed_values():
    kane, _, messi = sample_players()[:3]

    feedback = compare_players(messi, kane)

    assert feedback.position.status == "same_category"
    assert feedback.position.value == "Forward"
    assert feedback.club.status == "wrong"
    assert feedback.club.value == "Inter Miami"


@pytest.mark.parametrize(
    ("guessed_age", "answer_age", "difference"),
    [(30, 28, 2), (22, 34, -12), (27, 27, 0)],
)
def test_age_difference_is_signed(guessed_age: int, answer_age: int, difference: int):
    feedback = compare_players(make_player(1, age=guessed_age), make_player(2, age=answer_age))

    assert feedback.age.difference == difference
    assert feedback.age.value is None


@pytest.mark.parametrize(
    ("guessed_height", "answer_height", "status"),
    [(190, 180, "taller"), (170, 180, "shorter"), (180, 180, "correct")],
)
def test_height_direction(guessed_height: int, answer_height: int, status: str):
    feedback = compare_players(make_player(1, height=guessed_height), make_player(2, height=answer_height))

    assert feedback.height.status == status


@pytest.mark.parametrize(
    ("guessed_start", "answer_start", "status"),
    [(2008, 2012, "earlier"), (2016, 2012, "later"), (2012, 2012, "correct")],
)
def test_career_start_direction(guessed_start: int, answer_start: int, status: str):
    feedback = compare_players(
        make_player(1, career_start=guessed_start),
        make_player(2, career_start=answer_start),
    )

    assert feedback.career_start.status == status


def test_dominant_foot_is_direct_match():
    left_a = make_player(1, dominant_foot="Left")
    left_b = make_player(2, dominant_foot="Left")
    right = make_player(3, dominant_foot="Right")

    assert compare_players(left_a, left_b).dominant_foot.status == "correct"
    assert compare_players(left_a, right).dominant_foot.status == "wrong"
    assert compare_players(left_a, right).dominant_foot.value == "Left"


def test_classification_fields_are_read_not_recomputed():
    # Stored continent wins over what the nationality would classify as.
    guessed = make_player(1, nationality="Japan", continent="Europe")
    answer = make_player(2, nationality="England", continent="Europe")

    assert compare_players(guessed, answer).nationality.status == "same_continent"


def test_guessed_player_projection_has_no_answer_data():
    guessed, answer = sample_players()[2], sample_players()[0]

    feedback = compare_players(guessed, answer)

    assert feedback.guessed_player.model_dump() == {
        "id": 3,
        "name": "Lionel Messi",
        "nationality": "Argentina",
        "club": "Inter Miami",
        "image_url": None,
    }
    assert "imageUrl" not in feedback.to_payload()["guessedPlayer"]


def test_timestamp_uses_evaluation_time():
    player = make_player(1)

    feedback = compare_players(player, player, evaluated_at=FIXED_NOW)

    assert feedback.timestamp == "2025-03-01T12:30:00+00:00"


def test_default_timestamp_is_iso_utc():
    player = make_player(1)

    feedback = compare_players(player, player)

    assert datetime.fromisoformat(feedback.timestamp).tzinfo is not None


def test_feedback_json_round_trip():
    kane, haaland = sample_players()[:2]
    feedback = compare_players(kane, haaland, evaluated_at=FIXED_NOW)

    payload = feedback.to_payload()
    assert payload["dominantFoot"] == {"status": "wrong", "value": "Right"}
    assert FeedbackResult.model_validate_json(feedback.to_json()) == feedback
