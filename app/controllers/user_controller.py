"""
User Controller Module

Handles user endpoints:
- Registration and lookup
- Current goals
- Daily progress and per-day log listings
"""

from flask import current_app, request
from sqlalchemy.exc import IntegrityError

from app.schemas.food_schema import DayQuerySchema, OptionalDayQuerySchema
from app.schemas.user_schema import CreateUserSchema
from app.services.fluid_log_service import list_fluid_logs
from app.services.food_log_service import list_food_logs
from app.services.goals_service import get_current_goals
from app.services.progress_service import get_daily_progress
from app.services.user_service import create_user, get_user
from app.utils.errors import ServiceError
from app.utils.http import ok, error, json_body, service_error, validate_schema


def create_user_handler():
    data, err = validate_schema(CreateUserSchema(), json_body())
    if err:
        return err

    try:
        user = create_user(data["name"], data["email"])
    except ServiceError as e:
        return service_error(e)
    except IntegrityError:
        current_app.logger.warning("Rejected duplicate registration for %s", data["email"])
        return error("DUPLICATE_ENTRY", "A user with this email already exists", 409)

    return ok(user, 201)


def get_user_handler(user_id: int):
    user = get_user(user_id)
    if not user:
        return error("USER_NOT_FOUND", "User not found", 404)
    return ok(user)


def get_user_goals_handler(user_id: int):
    """Current goals (most recently updated) or null."""
    return ok({"goals": get_current_goals(user_id)})


def get_daily_progress_handler(user_id: int):
    """
    Query Parameters:
        - date (required): Calendar day, YYYY-MM-DD (UTC)
    """
    query, err = validate_schema(DayQuerySchema(), request.args.to_dict())
    if err:
        return err

    try:
        return ok(get_daily_progress(user_id, query["date"]))
    except ServiceError as e:
        return service_error(e)


def list_food_logs_handler(user_id: int):
    query, err = validate_schema(OptionalDayQuerySchema(), request.args.to_dict())
    if err:
        return err
    return ok({"items": list_food_logs(user_id, query["date"])})


def list_fluid_logs_handler(user_id: int):
    query, err = validate_schema(OptionalDayQuerySchema(), request.args.to_dict())
    if err:
        return err
    return ok({"items": list_fluid_logs(user_id, query["date"])})
