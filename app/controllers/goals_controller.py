from app.schemas.goals_schema import CreateDailyGoalsSchema, UpdateDailyGoalsSchema
from app.services.goals_service import create_daily_goals, update_daily_goals
from app.utils.errors import ServiceError
from app.utils.http import ok, json_body, service_error, validate_schema


def create_goals_handler():
    data, err = validate_schema(CreateDailyGoalsSchema(), json_body())
    if err:
        return err

    try:
        return ok(create_daily_goals(**data), 201)
    except ServiceError as e:
        return service_error(e)


def update_goals_handler(goals_id: int):
    data, err = validate_schema(UpdateDailyGoalsSchema(), json_body())
    if err:
        return err

    try:
        return ok(update_daily_goals(goals_id, **data))
    except ServiceError as e:
        return service_error(e)
