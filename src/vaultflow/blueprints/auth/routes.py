"""Registration and login routes."""

from __future__ import annotations

from flask import jsonify

from ...errors import AuthenticationError, ValidationError
from ...extensions import get_context
from ...models.user import User
from ...services import auth
from ..common import json_body
from . import bp


def _token_response(user: User, message: str):
    config = get_context().config
    token = auth.issue_token(user, secret_key=config.SECRET_KEY, salt=config.TOKEN_SALT)
    return {
        "message": message,
        "token": token,
        "user": {"id": user.id, "username": user.username},
    }


@bp.post("/register")
def register():
    """Create an account with the default vault layout and return a token."""

    payload = json_body()
    ctx = get_context()
    user = auth.register_user(
        username=str(payload.get("username") or ""),
        password=str(payload.get("password") or ""),
        session_factory=ctx.session_factory,
        vault_repo=ctx.vault_repo,
    )
    return jsonify(_token_response(user, "User registered successfully")), 201


@bp.post("/login")
def login():
    payload = json_body()
    username = str(payload.get("username") or "")
    password = str(payload.get("password") or "")
    if not username.strip() or not password:
        raise ValidationError("Username and password required")

    user = auth.authenticate(
        username=username,
        password=password,
        session_factory=get_context().session_factory,
    )
    if user is None:
        raise AuthenticationError("Invalid credentials", status_code=401)
    return jsonify(_token_response(user, "Login successful"))
