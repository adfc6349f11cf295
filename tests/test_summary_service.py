from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.models.daily_summary import DailySummary
from app.services import summary_service
from app.extensions import db


DAY = date(2024, 1, 15)


def totals(summary):
    return {
        "calories": summary.total_calories,
        "protein": summary.total_protein,
        "carbs": summary.total_carbs,
        "fats": summary.total_fats,
        "fluid": summary.total_fluid,
    }


def test_summary_date_truncates_in_utc():
    assert summary_service.summary_date_of(datetime(2024, 1, 15, 23, 59, 59)) == DAY
    # 23:30 at UTC-5 is already the next day in UTC
    eastern = timezone(timedelta(hours=-5))
    assert summary_service.summary_date_of(datetime(2024, 1, 15, 23, 30, tzinfo=eastern)) == date(2024, 1, 16)


def test_positive_delta_creates_row_with_zero_defaults(user):
    summary_service.apply_delta(user["id"], DAY, {"fluid": Decimal("250")})
    db.session.commit()

    summary = summary_service.get_summary(user["id"], DAY)
    assert summary is not None
    assert totals(summary) == {
        "calories": Decimal("0"),
        "protein": Decimal("0"),
        "carbs": Decimal("0"),
        "fats": Decimal("0"),
        "fluid": Decimal("250"),
    }


def test_deltas_accumulate_into_one_row(user):
    summary_service.apply_delta(user["id"], DAY, {"calories": Decimal("78"), "carbs": Decimal("21")})
    summary_service.apply_delta(user["id"], DAY, {"calories": Decimal("52"), "fluid": Decimal("300")})
    db.session.commit()

    rows = DailySummary.query.filter_by(user_id=user["id"]).all()
    assert len(rows) == 1
    assert rows[0].total_calories == Decimal("130")
    assert rows[0].total_carbs == Decimal("21")
    assert rows[0].total_fluid == Decimal("300")


def test_negative_delta_is_clamped_at_zero(user):
    summary_service.apply_delta(user["id"], DAY, {"fluid": Decimal("500")})
    summary_service.apply_delta(user["id"], DAY, {"fluid": Decimal("-800")})
    db.session.commit()

    summary = summary_service.get_summary(user["id"], DAY)
    assert summary.total_fluid == Decimal("0")


def test_reversal_without_summary_is_a_noop(user):
    summary_service.apply_delta(user["id"], DAY, {"calories": Decimal("-78")})
    db.session.commit()

    assert summary_service.get_summary(user["id"], DAY) is None
    assert DailySummary.query.count() == 0


def test_summary_is_kept_when_it_reaches_zero(user):
    summary_service.apply_delta(user["id"], DAY, {"calories": Decimal("78")})
    summary_service.apply_delta(user["id"], DAY, {"calories": Decimal("-78")})
    db.session.commit()

    summary = summary_service.get_summary(user["id"], DAY)
    assert summary is not None
    assert summary.total_calories == Decimal("0")


def test_mutation_bumps_updated_at(user):
    summary_service.apply_delta(user["id"], DAY, {"calories": Decimal("10")})
    db.session.commit()
    first = summary_service.get_summary(user["id"], DAY).updated_at

    summary_service.apply_delta(user["id"], DAY, {"calories": Decimal("-5")})
    db.session.commit()
    second = summary_service.get_summary(user["id"], DAY).updated_at

    assert second >= first


def test_days_and_users_are_isolated(user, other_user):
    summary_service.apply_delta(user["id"], DAY, {"calories": Decimal("100")})
    summary_service.apply_delta(user["id"], DAY + timedelta(days=1), {"calories": Decimal("40")})
    summary_service.apply_delta(other_user["id"], DAY, {"calories": Decimal("7")})
    db.session.commit()

    assert summary_service.get_summary(user["id"], DAY).total_calories == Decimal("100")
    assert summary_service.get_summary(user["id"], DAY + timedelta(days=1)).total_calories == Decimal("40")
    assert summary_service.get_summary(other_user["id"], DAY).total_calories == Decimal("7")


def test_unknown_nutrient_is_rejected(user):
    with pytest.raises(KeyError):
        summary_service.apply_delta(user["id"], DAY, {"sugar": Decimal("1")})


def test_update_then_insert_fallback(user, monkeypatch):
    # engines without an upsert construct go through update-then-insert
    monkeypatch.setattr(summary_service, "UPSERT_INSERTS", {})

    summary_service.apply_delta(user["id"], DAY, {"protein": Decimal("12.5")})
    summary_service.apply_delta(user["id"], DAY, {"protein": Decimal("7.5")})
    db.session.commit()

    rows = DailySummary.query.filter_by(user_id=user["id"]).all()
    assert len(rows) == 1
    assert rows[0].total_protein == Decimal("20")
