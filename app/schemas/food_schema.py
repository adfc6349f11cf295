from marshmallow import EXCLUDE, Schema, fields, validate
from app.schemas.goals_schema import MAX_AMOUNT

class CreateFoodItemSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    calories_per_100g = fields.Decimal(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    protein_per_100g = fields.Decimal(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    carbs_per_100g = fields.Decimal(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    fats_per_100g = fields.Decimal(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))

class LogFoodSchema(Schema):
    user_id = fields.Int(required=True, strict=True)
    food_item_id = fields.Int(required=True, strict=True)
    portion_size = fields.Decimal(required=True, validate=validate.Range(min=0, min_inclusive=False, max=MAX_AMOUNT))  # grams
    consumed_at = fields.DateTime(allow_none=True, load_default=None)

class LogFluidSchema(Schema):
    user_id = fields.Int(required=True, strict=True)
    fluid_type = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    volume = fields.Decimal(required=True, validate=validate.Range(min=0, min_inclusive=False, max=MAX_AMOUNT))  # ml
    consumed_at = fields.DateTime(allow_none=True, load_default=None)

class DayQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    date = fields.Date(required=True)

class OptionalDayQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    date = fields.Date(load_default=None)

class OwnerQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Int(required=True)
