from marshmallow import Schema, fields, validate

MAX_AMOUNT = 999999.99

class CreateDailyGoalsSchema(Schema):
    user_id = fields.Int(required=True, strict=True)
    daily_calories = fields.Decimal(required=True, validate=validate.Range(min=0, min_inclusive=False, max=MAX_AMOUNT))
    daily_protein = fields.Decimal(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    daily_carbs = fields.Decimal(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    daily_fats = fields.Decimal(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))
    daily_fluid = fields.Decimal(required=True, validate=validate.Range(min=0, max=MAX_AMOUNT))

class UpdateDailyGoalsSchema(Schema):
    daily_calories = fields.Decimal(validate=validate.Range(min=0, min_inclusive=False, max=MAX_AMOUNT))
    daily_protein = fields.Decimal(validate=validate.Range(min=0, max=MAX_AMOUNT))
    daily_carbs = fields.Decimal(validate=validate.Range(min=0, max=MAX_AMOUNT))
    daily_fats = fields.Decimal(validate=validate.Range(min=0, max=MAX_AMOUNT))
    daily_fluid = fields.Decimal(validate=validate.Range(min=0, max=MAX_AMOUNT))
