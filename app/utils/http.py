from typing import Any, Dict, Optional, Tuple
from flask import request, jsonify
from marshmallow import Schema, ValidationError

def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data (converted to dict) if JSON parsing fails
    return request.form.to_dict() if request.form else {}


def validate_schema(schema: Schema, data: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Any]:
    """Load `data` through `schema`; returns (result, None) or (None, error response)."""
    try:
        return schema.load(data), None
    except ValidationError as e:
        return None, error("VALIDATION_ERROR", "Invalid request", 400, fields=e.messages)


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None:
        return default
    return val


def service_error(e):
    """Render a ServiceError raised by a service."""
    return error(e.code, e.message, e.status)
