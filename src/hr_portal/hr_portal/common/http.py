from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def status_for(e: DomainError) -> int:
    if isinstance(e, ValidationError):
        return 400
    if isinstance(e, NotFoundError):
        return 404
    return 500


def error_response(e: DomainError):
    body = {"error": str(e) or "Request failed.", "kind": e.kind}
    if e.stage:
        body["stage"] = e.stage
    return jsonify(body), status_for(e)


def to_json(value: Any) -> Any:
    if is_dataclass(value):
        return asdict(value)
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def api_view(failure_message: str):
    """Turn domain errors into JSON error bodies; anything else is a logged 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                if status_for(e) >= 500:
                    logger.error("[%s %s] %s: %s", request.method, request.path, e.kind, e)
                return error_response(e)
            except Exception:
                logger.exception("[%s %s] unexpected error", request.method, request.path)
                return jsonify({"error": failure_message}), 500

        return wrapper

    return decorator
