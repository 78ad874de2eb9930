from flask import request
from werkzeug.exceptions import BadRequest


def require_fields(data, fields):
    """400 listing every field that is absent or empty."""
    missing = [field for field in fields if data.get(field) in (None, "", [], {})]
    if missing:
        raise BadRequest(f"Missing required fields: {', '.join(missing)}")


def get_json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadRequest("Invalid request body")
    return data
