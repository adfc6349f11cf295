"""
Daily Summary Service

Keeps the denormalized per-user-per-day totals in `daily_summaries`
consistent with food and fluid log mutations.

Every mutation is a single SQL statement so that concurrent logs for the
same (user_id, summary_date) cannot lose an update:
- creation path: INSERT ... ON CONFLICT DO UPDATE (ON DUPLICATE KEY UPDATE on MySQL)
- reversal path: UPDATE ... SET total = CASE WHEN total + d < 0 THEN 0 ELSE total + d END

The caller owns the transaction; nothing here commits.
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from sqlalchemy import case, insert, update
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError

from app.extensions import db
from app.models.daily_summary import DailySummary
from app.services.food_helpers import NUTRIENTS, to_decimal
from app.utils.dates import to_utc, utcnow

logger = logging.getLogger(__name__)

TOTAL_COLUMNS = {nutrient: f"total_{nutrient}" for nutrient in NUTRIENTS}

UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
    "mysql": mysql_insert,
    "mariadb": mysql_insert,
}


def summary_date_of(consumed_at: datetime) -> date:
    """UTC calendar date a log is bucketed under."""
    return to_utc(consumed_at).date()


def _normalize(deltas: Mapping[str, Any]) -> Dict[str, Decimal]:
    unknown = set(deltas) - set(NUTRIENTS)
    if unknown:
        raise KeyError(f"Unknown nutrient(s): {', '.join(sorted(unknown))}")
    return {n: to_decimal(deltas.get(n)) for n in NUTRIENTS}


def _clamped(column, delta: Decimal):
    new_value = column + delta
    return case((new_value < 0, 0), else_=new_value)


def _increments(deltas: Dict[str, Decimal], now: datetime) -> Dict[str, Any]:
    table = DailySummary.__table__
    values = {
        TOTAL_COLUMNS[n]: _clamped(table.c[TOTAL_COLUMNS[n]], deltas[n])
        for n in NUTRIENTS
    }
    values["updated_at"] = now
    return values


def _apply_to_existing(user_id: int, summary_date: date, deltas: Dict[str, Decimal], now: datetime) -> bool:
    stmt = (
        update(DailySummary.__table__)
        .where(
            DailySummary.__table__.c.user_id == user_id,
            DailySummary.__table__.c.summary_date == summary_date,
        )
        .values(**_increments(deltas, now))
    )
    result = db.session.execute(stmt)
    return result.rowcount > 0


def _new_row(user_id: int, summary_date: date, deltas: Dict[str, Decimal], now: datetime) -> Dict[str, Any]:
    row = {
        "user_id": user_id,
        "summary_date": summary_date,
        "created_at": now,
        "updated_at": now,
    }
    for n in NUTRIENTS:
        row[TOTAL_COLUMNS[n]] = max(Decimal("0"), deltas[n])
    return row


def _upsert(user_id: int, summary_date: date, deltas: Dict[str, Decimal], now: datetime) -> None:
    dialect = db.engine.dialect.name
    insert_fn = UPSERT_INSERTS.get(dialect)
    row = _new_row(user_id, summary_date, deltas, now)

    if insert_fn is None:
        _update_then_insert(user_id, summary_date, deltas, now, row)
        return

    stmt = insert_fn(DailySummary.__table__).values(**row)
    if insert_fn is mysql_insert:
        stmt = stmt.on_duplicate_key_update(**_increments(deltas, now))
    else:
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "summary_date"],
            set_=_increments(deltas, now),
        )
    db.session.execute(stmt)


def _update_then_insert(user_id: int, summary_date: date, deltas: Dict[str, Decimal], now: datetime, row: Dict[str, Any]) -> None:
    # Engines without an upsert: the unique constraint arbitrates concurrent first inserts
    if _apply_to_existing(user_id, summary_date, deltas, now):
        return
    try:
        with db.session.begin_nested():
            db.session.execute(insert(DailySummary.__table__).values(**row))
    except IntegrityError:
        _apply_to_existing(user_id, summary_date, deltas, now)


def apply_delta(user_id: int, summary_date: date, deltas: Mapping[str, Any]) -> None:
    """
    Add signed nutrient deltas to the summary for (user_id, summary_date).

    Args:
        user_id: Owner of the summary
        summary_date: UTC calendar date
        deltas: Mapping over calories/protein/carbs/fats/fluid; missing keys are 0

    Behaviour:
        - any positive delta: the row is created (totals = max(0, delta)) or
          incremented, each total clamped at 0
        - no positive delta: an existing row is decremented with clamping;
          a missing row is left alone
    """
    normalized = _normalize(deltas)
    now = utcnow()

    if any(v > 0 for v in normalized.values()):
        _upsert(user_id, summary_date, normalized, now)
        logger.debug("Applied %s to summary user=%s date=%s", normalized, user_id, summary_date)
        return

    if _apply_to_existing(user_id, summary_date, normalized, now):
        logger.debug("Applied %s to summary user=%s date=%s", normalized, user_id, summary_date)
    else:
        logger.warning(
            "No summary to reverse for user=%s date=%s; skipping",
            user_id, summary_date,
        )


def get_summary(user_id: int, summary_date: date) -> Optional[DailySummary]:
    return (
        DailySummary.query
        .filter_by(user_id=user_id, summary_date=summary_date)
        .populate_existing()
        .first()
    )
