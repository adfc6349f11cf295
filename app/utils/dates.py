"""
Date helpers

All timestamps are persisted as naive UTC datetimes and bucketed into
calendar days by UTC truncation.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple, Union

from app.utils.errors import ValidationFailed


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_day(value: Union[str, date]) -> date:
    """Accept a date/datetime or a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return to_utc(value).date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationFailed("INVALID_DATE", f"date must be YYYY-MM-DD, got {value!r}")


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """Half-open [start, next_start) UTC range for a calendar day."""
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)
