# api/utils/request_helper.py

from datetime import datetime, timezone

from flask import jsonify, request


def json_object_body() -> dict:
    """
    Lee el body como objeto JSON. Sin body (o JSON inválido) devuelve {}.
    Lanza ValueError si llega otra cosa: una lista, un número, un string.
    """
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object.")
    return data


def parse_id(raw, field_name: str) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"{field_name} must be an integer id.")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be an integer id.")


def parse_optional_id(raw, field_name: str) -> int | None:
    if raw is None or raw == "":
        return None
    return parse_id(raw, field_name)


def parse_datetime(raw, field_name: str) -> datetime:
    """
    Acepta ISO-8601 (también con 'Z' final, como lo manda toISOString()).
    Devuelve un datetime naive en UTC, comparable con datetime.utcnow().
    """
    if not raw or not isinstance(raw, str):
        raise ValueError(f"{field_name} must be an ISO-8601 date.")
    value = raw.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"{field_name} must be an ISO-8601 date.")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


def optional_str(value) -> str | None:
    """String recortado, o None si viene vacío o no es texto."""
    if isinstance(value, str):
        return value.strip() or None
    return None


def error_response(exc: Exception):
    """
    Traduce las excepciones de los services al JSON de error de la API:
    ValueError → 400, PermissionError → 403, LookupError → 404.
    """
    if isinstance(exc, PermissionError):
        status = 403
    elif isinstance(exc, LookupError):
        status = 404
    else:
        status = 400
    return jsonify({"error": str(exc)}), status
