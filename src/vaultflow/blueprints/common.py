"""Helpers shared by the JSON blueprints: auth guard, payloads, serializers."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Mapping, TypeVar

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..errors import AuthenticationError, PersistenceError, ValidationError, VaultFlowError
from ..extensions import get_context
from ..logging_config import get_logger
from ..models.transaction import Transaction
from ..models.vault import Vault
from ..services import auth

F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)


def token_required(view: F) -> F:
    """Reject requests without a valid ``Authorization: Bearer`` token."""

    @wraps(view)
    def wrapper(*args: Any, **kwargs: Any):
        header = request.headers.get("Authorization", "")
        parts = header.split(" ", 1)
        token = parts[1].strip() if len(parts) == 2 else ""
        if not token:
            raise AuthenticationError("Access token required", status_code=401)

        config = get_context().config
        payload = auth.verify_token(
            token,
            secret_key=config.SECRET_KEY,
            salt=config.TOKEN_SALT,
            max_age=config.TOKEN_MAX_AGE,
        )
        g.user_id = payload["userId"]
        g.username = payload.get("username")
        return view(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_user_id() -> int:
    return g.user_id


def json_body() -> Mapping[str, Any]:
    """Return the JSON object body, or raise a validation error."""

    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _iso(value: Any) -> str | None:
    return value.isoformat() if value is not None else None


def vault_to_dict(vault: Vault) -> dict[str, Any]:
    return {
        "id": vault.id,
        "name": vault.name,
        "percentage": vault.percentage,
        "description": vault.description,
        "totalIncome": vault.total_income,
        "totalSpent": vault.total_spent,
        "balance": vault.balance,
        "createdAt": _iso(vault.created_at),
    }


def transaction_to_dict(transaction: Transaction) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "date": _iso(transaction.occurred_on),
        "time": transaction.time,
        "type": transaction.type,
        "amount": transaction.amount,
        "category": transaction.category,
        "location": transaction.location,
        "wallet": transaction.wallet,
        "vaultId": transaction.vault_id,
        "vaultName": transaction.vault_name,
        "notes": transaction.notes,
        "createdAt": _iso(transaction.created_at),
    }


def register_error_handlers(app: Flask) -> None:
    """Translate domain and HTTP errors into ``{"error": ...}`` JSON bodies."""

    @app.errorhandler(VaultFlowError)
    def _handle_domain_error(exc: VaultFlowError):
        if isinstance(exc, PersistenceError):
            # Already logged with traceback where it was raised.
            return jsonify({"error": str(exc)}), exc.status_code
        payload: dict[str, Any] = {"error": str(exc)}
        fields = getattr(exc, "fields", None)
        if fields:
            payload["fields"] = fields
        return jsonify(payload), exc.status_code

    @app.errorhandler(HTTPException)
    def _handle_http_error(exc: HTTPException):
        return jsonify({"error": exc.description}), exc.code

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Server error"}), 500
