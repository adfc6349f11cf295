"""
Fluid Log Service

Mirrors the food log service with a single channel: volume in ml,
logged verbatim.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from sqlalchemy import delete

from app.extensions import db
from app.models.fluid_log import FluidLog
from app.services import summary_service
from app.services.food_helpers import fluid_nutrition, negate, serialize_fluid_log, validated_quantity
from app.services.user_service import require_user
from app.utils.dates import day_bounds, parse_day, to_utc, utcnow
from app.utils.errors import ValidationFailed

logger = logging.getLogger(__name__)


def log_fluid(
    user_id: int,
    fluid_type: str,
    volume: Any,
    consumed_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Log a drink for a user.

    Raises:
        ValidationFailed: If fluid_type is empty or volume is not positive
        NotFoundError: If the user does not exist
    """
    fluid_type = (fluid_type or "").strip()
    if not fluid_type:
        raise ValidationFailed("VALIDATION_ERROR", "fluid_type is required")
    amount = validated_quantity("volume", volume)
    require_user(user_id)

    consumed_at = to_utc(consumed_at) if consumed_at else utcnow()
    log = FluidLog(
        user_id=user_id,
        fluid_type=fluid_type,
        volume=amount,
        consumed_at=consumed_at,
    )

    try:
        db.session.add(log)
        db.session.flush()
        summary_service.apply_delta(
            user_id,
            summary_service.summary_date_of(consumed_at),
            fluid_nutrition(amount),
        )
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return serialize_fluid_log(log)


def delete_fluid_log(log_id: int, user_id: int) -> bool:
    """Delete a user's fluid log; False if it does not exist or is not theirs."""
    log = FluidLog.query.filter_by(id=log_id, user_id=user_id).first()
    if not log:
        return False

    deltas = negate(fluid_nutrition(log.volume))
    summary_date = summary_service.summary_date_of(log.consumed_at)

    try:
        result = db.session.execute(
            delete(FluidLog).where(FluidLog.id == log_id, FluidLog.user_id == user_id)
        )
        if result.rowcount == 0:
            db.session.rollback()
            logger.info("Fluid log id=%s was already deleted", log_id)
            return False
        summary_service.apply_delta(user_id, summary_date, deltas)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("Deleted fluid log id=%s user=%s", log_id, user_id)
    return True


def fluid_logs_query(user_id: int, day: Optional[Union[str, date]] = None):
    query = FluidLog.query.filter(FluidLog.user_id == user_id)
    if day is not None:
        start, end = day_bounds(parse_day(day))
        query = query.filter(FluidLog.consumed_at >= start, FluidLog.consumed_at < end)
    return query.order_by(FluidLog.consumed_at.desc(), FluidLog.id.desc())


def list_fluid_logs(user_id: int, day: Optional[Union[str, date]] = None) -> List[Dict[str, Any]]:
    return [serialize_fluid_log(log) for log in fluid_logs_query(user_id, day).all()]
