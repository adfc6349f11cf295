from flask import request

from app.schemas.food_schema import LogFluidSchema, OwnerQuerySchema
from app.services.fluid_log_service import delete_fluid_log, log_fluid
from app.utils.errors import ServiceError
from app.utils.http import ok, json_body, service_error, validate_schema


def log_fluid_handler():
    data, err = validate_schema(LogFluidSchema(), json_body())
    if err:
        return err

    try:
        return ok(log_fluid(**data), 201)
    except ServiceError as e:
        return service_error(e)


def delete_fluid_log_handler(log_id: int):
    query, err = validate_schema(OwnerQuerySchema(), request.args.to_dict())
    if err:
        return err

    deleted = delete_fluid_log(log_id, query["user_id"])
    return ok({"success": deleted}, 200 if deleted else 404)
