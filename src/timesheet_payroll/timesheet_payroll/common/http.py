"""Helpers shared by the JSON controllers.

Authentication happens upstream; the gateway forwards who is calling in the
``X-Actor-*`` headers and every privileged service call gets that actor.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from enum import Enum
from typing import Any

from flask import Flask, jsonify, request

from ..core.actor import Actor
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    IncompleteMarkingError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def current_actor() -> Actor:
    role = (request.headers.get("X-Actor-Role") or "").strip().lower()
    actor_id = (request.headers.get("X-Actor-Id") or "").strip()
    if not role or not actor_id:
        raise AuthenticationError("Missing X-Actor-Role / X-Actor-Id headers")
    try:
        parsed = Role(role)
    except ValueError:
        raise AuthenticationError(f"Unknown role: {role}")
    return Actor(role=parsed, actor_id=actor_id, name=(request.headers.get("X-Actor-Name") or "").strip())


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in value]
    return value


def send_bytes(app: Flask, payload: bytes, *, mimetype: str, filename: str):
    return app.response_class(
        payload,
        mimetype=mimetype,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(IncompleteMarkingError)
    def _incomplete(e: IncompleteMarkingError):
        return jsonify({"success": False, "message": str(e), "shortfall": e.shortfall}), 400

    @app.errorhandler(ValidationError)
    def _invalid(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(AuthenticationError)
    def _unauthenticated(e: AuthenticationError):
        return jsonify({"success": False, "message": str(e)}), 401

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return jsonify({"success": False, "message": str(e)}), 403

    @app.errorhandler(PersistenceError)
    def _persistence(e: PersistenceError):
        logger.error("Request failed to persist: %s", e)
        return jsonify({"success": False, "message": str(e)}), 500
