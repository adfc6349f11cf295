from flask import Blueprint
from app.controllers.food_controller import (
    create_food_item_handler,
    list_food_items_handler,
    log_food_handler,
    delete_food_log_handler,
)

food_bp = Blueprint("food", __name__, url_prefix="/api")

@food_bp.post("/food-items")
def create_food_item():
    return create_food_item_handler()


@food_bp.get("/food-items")
def list_food_items():
    return list_food_items_handler()


@food_bp.post("/food-logs")
def log_food():
    return log_food_handler()


@food_bp.delete("/food-logs/<int:log_id>")
def delete_food_log(log_id):
    return delete_food_log_handler(log_id)
