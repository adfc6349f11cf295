import pytest
from sqlalchemy.exc import IntegrityError

from app.extensions import db
from app.services.food_item_service import create_food_item, list_food_items, search_food_items
from app.services.goals_service import create_daily_goals, get_current_goals, update_daily_goals
from app.services.user_service import create_user, get_user
from app.utils.errors import NotFoundError, ValidationFailed


def test_create_and_get_user():
    user = create_user("  Ana ", "ana@example.com")
    assert user["name"] == "Ana"
    assert get_user(user["id"])["email"] == "ana@example.com"
    assert get_user(9999) is None


def test_duplicate_email_propagates_integrity_error(user):
    with pytest.raises(IntegrityError):
        create_user("Copy", "user@example.com")
    # session is usable afterwards
    assert get_user(user["id"]) is not None


def test_create_user_requires_name_and_email():
    with pytest.raises(ValidationFailed):
        create_user("", "a@example.com")
    with pytest.raises(ValidationFailed):
        create_user("A", " ")


def test_goals_lifecycle(user):
    assert get_current_goals(user["id"]) is None

    first = create_daily_goals(user["id"], 2000, 150, 250, 65, 2000)
    second = create_daily_goals(user["id"], 1800, 120, 200, 60, 2500)
    assert get_current_goals(user["id"])["id"] == second["id"]

    # editing older goals makes them current again
    edited = update_daily_goals(first["id"], daily_fluid=3000)
    assert edited["daily_fluid"] == 3000.0
    assert edited["daily_calories"] == 2000.0
    assert get_current_goals(user["id"])["id"] == first["id"]


def test_goals_validation(user):
    with pytest.raises(ValidationFailed):
        create_daily_goals(user["id"], 0, 150, 250, 65, 2000)
    with pytest.raises(ValidationFailed):
        create_daily_goals(user["id"], 2000, -1, 250, 65, 2000)
    with pytest.raises(NotFoundError):
        create_daily_goals(9999, 2000, 150, 250, 65, 2000)

    goals = create_daily_goals(user["id"], 2000, 0, 0, 0, 0)
    with pytest.raises(ValidationFailed):
        update_daily_goals(goals["id"], daily_calories=-5)
    with pytest.raises(ValidationFailed):
        update_daily_goals(goals["id"], bogus=1)


def test_update_missing_goals():
    with pytest.raises(NotFoundError) as exc:
        update_daily_goals(4242, daily_calories=1500)
    assert exc.value.code == "GOALS_NOT_FOUND"


def test_food_item_precision_round_trip():
    item = create_food_item("Big number", "99999.99", "0.01", 12.5, 0)
    assert item["calories_per_100g"] == 99999.99
    assert item["protein_per_100g"] == 0.01
    assert item["carbs_per_100g"] == 12.5


def test_food_item_validation():
    with pytest.raises(ValidationFailed):
        create_food_item("", 10, 1, 1, 1)
    with pytest.raises(ValidationFailed):
        create_food_item("Bad", -10, 1, 1, 1)


def test_search_is_case_insensitive_substring():
    create_food_item("Green Apple", 52, 0.3, 14, 0.2)
    create_food_item("Pineapple", 50, 0.5, 13, 0.1)
    create_food_item("Banana", 89, 1.1, 22.8, 0.3)

    names = [item["name"] for item in search_food_items("APPLE")]
    assert names == ["Green Apple", "Pineapple"]
    assert search_food_items("kiwi") == []
    assert len(list_food_items()) == 3


def test_search_treats_wildcards_literally():
    create_food_item("100% juice", 45, 0.5, 10, 0)
    create_food_item("Orange juice", 45, 0.7, 10, 0.2)

    assert [item["name"] for item in search_food_items("%")] == ["100% juice"]


def test_search_requires_query():
    with pytest.raises(ValidationFailed):
        search_food_items("  ")
