"""
Food Controller Module

Handles food-related endpoints:
- Food catalog creation, listing and search
- Food logging and deletion
"""

from flask import request

from app.schemas.food_schema import CreateFoodItemSchema, LogFoodSchema, OwnerQuerySchema
from app.services.food_item_service import create_food_item, list_food_items, search_food_items
from app.services.food_log_service import delete_food_log, log_food
from app.utils.errors import ServiceError
from app.utils.http import ok, arg_str, json_body, service_error, validate_schema


def create_food_item_handler():
    data, err = validate_schema(CreateFoodItemSchema(), json_body())
    if err:
        return err

    try:
        return ok(create_food_item(**data), 201)
    except ServiceError as e:
        return service_error(e)


def list_food_items_handler():
    """
    Query Parameters:
        - search: Case-insensitive name substring (optional)
    """
    search = (arg_str("search") or "").strip()
    items = search_food_items(search) if search else list_food_items()
    return ok({"items": items})


def log_food_handler():
    """
    Body Parameters:
        - user_id, food_item_id (required)
        - portion_size (required): grams, positive
        - consumed_at (optional): ISO timestamp, defaults to now
    """
    data, err = validate_schema(LogFoodSchema(), json_body())
    if err:
        return err

    try:
        return ok(log_food(**data), 201)
    except ServiceError as e:
        return service_error(e)


def delete_food_log_handler(log_id: int):
    query, err = validate_schema(OwnerQuerySchema(), request.args.to_dict())
    if err:
        return err

    deleted = delete_food_log(log_id, query["user_id"])
    return ok({"success": deleted}, 200 if deleted else 404)
