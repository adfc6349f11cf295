from datetime import date, datetime

import pytest

from app.services.fluid_log_service import log_fluid
from app.services.food_item_service import create_food_item
from app.services.food_log_service import log_food
from app.services.goals_service import create_daily_goals
from app.services.progress_service import get_daily_progress, percentage_of_goal
from app.utils.errors import ValidationFailed


def test_empty_day_without_goals(user):
    progress = get_daily_progress(user["id"], "2024-01-15")

    assert progress == {
        "date": "2024-01-15",
        "goals": None,
        "summary": None,
        "food_logs": [],
        "fluid_logs": [],
        "progress_percentages": {"calories": 0, "protein": 0, "carbs": 0, "fats": 0, "fluid": 0},
    }


def test_goals_without_data_gives_zero_percentages(user, goals):
    progress = get_daily_progress(user["id"], date(2024, 1, 15))

    assert progress["goals"]["id"] == goals["id"]
    assert progress["summary"] is None
    assert set(progress["progress_percentages"].values()) == {0}


def test_data_without_goals_gives_zero_percentages(user, apple):
    log_food(user["id"], apple["id"], 150, datetime(2024, 1, 15, 8, 0))
    progress = get_daily_progress(user["id"], "2024-01-15")

    assert progress["goals"] is None
    assert progress["summary"]["total_calories"] == 78.0
    assert set(progress["progress_percentages"].values()) == {0}


def test_percentages_against_goals(user, goals):
    # 200 kcal and 100 g protein per 200 g portion
    shake = create_food_item("Protein shake", 100, 50, 0, 0)
    log_food(user["id"], shake["id"], 200, datetime(2024, 1, 15, 8, 0))
    log_fluid(user["id"], "Water", 500, datetime(2024, 1, 15, 9, 0))

    progress = get_daily_progress(user["id"], "2024-01-15")

    assert progress["progress_percentages"] == {
        "calories": 10,
        "protein": 67,
        "carbs": 0,
        "fats": 0,
        "fluid": 25,
    }
    assert len(progress["food_logs"]) == 1
    assert len(progress["fluid_logs"]) == 1
    assert progress["summary"]["total_protein"] == 100.0


def test_latest_goals_are_used(user):
    create_daily_goals(user["id"], 1000, 50, 100, 30, 1000)
    latest = create_daily_goals(user["id"], 2000, 100, 200, 60, 4000)
    log_fluid(user["id"], "Water", 1000, datetime(2024, 1, 15, 9, 0))

    progress = get_daily_progress(user["id"], "2024-01-15")
    assert progress["goals"]["id"] == latest["id"]
    assert progress["progress_percentages"]["fluid"] == 25


def test_date_isolation(user, apple, goals):
    log_food(user["id"], apple["id"], 100, datetime(2024, 1, 14, 23, 59, 59))
    log_fluid(user["id"], "Water", 400, datetime(2024, 1, 14, 12, 0))
    log_food(user["id"], apple["id"], 100, datetime(2024, 1, 16, 0, 0))
    log_fluid(user["id"], "Water", 400, datetime(2024, 1, 16, 6, 0))

    progress = get_daily_progress(user["id"], "2024-01-15")
    assert progress["summary"] is None
    assert progress["food_logs"] == []
    assert progress["fluid_logs"] == []

    log_food(user["id"], apple["id"], 50, datetime(2024, 1, 15, 0, 0))
    progress = get_daily_progress(user["id"], "2024-01-15")
    assert progress["summary"]["total_calories"] == 26.0
    assert len(progress["food_logs"]) == 1


def test_other_users_logs_are_not_included(user, other_user, apple):
    log_food(other_user["id"], apple["id"], 100, datetime(2024, 1, 15, 8, 0))
    progress = get_daily_progress(user["id"], "2024-01-15")
    assert progress["summary"] is None
    assert progress["food_logs"] == []


@pytest.mark.parametrize("total,target,expected", [
    (100, 150, 67),
    (0, 150, 0),
    (300, 150, 200),
    (1, 3, 33),
    (2, 3, 67),
    (50, 0, 0),
])
def test_percentage_of_goal(total, target, expected):
    assert percentage_of_goal(total, target) == expected


def test_percentage_rounds_half_up():
    assert percentage_of_goal(1, 200) == 1
    assert percentage_of_goal(5, 1000) == 1


def test_bad_date_rejected(user):
    with pytest.raises(ValidationFailed):
        get_daily_progress(user["id"], "15/01/2024")
