from marshmallow import Schema, fields, validate

class CreateUserSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    email = fields.Email(required=True, validate=validate.Length(max=255))
