# utils/http.py
from flask import request

from utils.errors import ValidationError


def json_body():
    """Request JSON as a dict; anything else (array, scalar) is a bad request."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Invalid request body")
    return data


def optional_str(value, name):
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{name} must be a string")
    return value
