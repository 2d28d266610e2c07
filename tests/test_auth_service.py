"""Tests for registration, login and bearer tokens."""

from __future__ import annotations

import pytest
from itsdangerous import URLSafeTimedSerializer

from vaultflow.constants import DEFAULT_VAULTS
from vaultflow.errors import AuthenticationError, ValidationError
from vaultflow.services import auth

SECRET = "unit-secret"
SALT = "vaultflow-auth"


def test_register_hashes_password_and_seeds_vaults(session_factory, vault_repo):
    user = auth.register_user(
        username="  carol ", password="hunter22", session_factory=session_factory
    )

    assert user.username == "carol"
    assert user.password_hash != "hunter22"
    assert user.password_hash.startswith("$argon2")

    vaults = vault_repo.list_all(user_id=user.id)
    assert [v.name for v in vaults] == [t["name"] for t in DEFAULT_VAULTS]
    assert sum(v.percentage for v in vaults) == 100
    assert all(v.balance == 0.0 for v in vaults)


@pytest.mark.parametrize(
    ("username", "password", "message"),
    [
        ("", "longenough", "Username and password required"),
        ("dave", "", "Username and password required"),
        ("dave", "12345", "Password must be at least 6 characters"),
    ],
)
def test_register_rejects_bad_input(session_factory, username, password, message):
    with pytest.raises(ValidationError, match=message):
        auth.register_user(username=username, password=password, session_factory=session_factory)


def test_register_rejects_duplicate_username(session_factory, vault_repo):
    first = auth.register_user(username="erin", password="password1", session_factory=session_factory)

    with pytest.raises(ValidationError, match="Username already exists"):
        auth.register_user(username="erin", password="password2", session_factory=session_factory)

    # no second layout was seeded
    assert len(vault_repo.list_all(user_id=first.id)) == len(DEFAULT_VAULTS)


def test_register_duplicate_that_slips_past_lookup(session_factory, vault_repo, monkeypatch):
    first = auth.register_user(username="gina", password="password1", session_factory=session_factory)
    # a concurrent registration can commit between the lookup and the insert
    monkeypatch.setattr(auth, "_username_taken", lambda session, username: False)

    with pytest.raises(ValidationError, match="Username already exists"):
        auth.register_user(username="gina", password="password2", session_factory=session_factory)

    assert len(vault_repo.list_all(user_id=first.id)) == len(DEFAULT_VAULTS)
    assert auth.authenticate(username="gina", password="password1", session_factory=session_factory)


def test_authenticate_checks_password_and_records_login(session_factory):
    auth.register_user(username="frank", password="correct-horse", session_factory=session_factory)

    assert auth.authenticate(username="frank", password="wrong", session_factory=session_factory) is None
    assert auth.authenticate(username="nobody", password="x", session_factory=session_factory) is None
    assert auth.authenticate(username="", password="", session_factory=session_factory) is None

    user = auth.authenticate(
        username="frank", password="correct-horse", session_factory=session_factory
    )
    assert user is not None
    assert user.last_login is not None
    assert auth.get_user_by_username("frank", session_factory).last_login is not None


def test_token_round_trip(user):
    token = auth.issue_token(user, secret_key=SECRET, salt=SALT)

    payload = auth.verify_token(token, secret_key=SECRET, salt=SALT, max_age=60)

    assert payload == {"userId": user.id, "username": user.username}


def test_tampered_token_is_forbidden(user):
    token = auth.issue_token(user, secret_key=SECRET, salt=SALT)

    with pytest.raises(AuthenticationError) as excinfo:
        auth.verify_token(token + "x", secret_key=SECRET, salt=SALT, max_age=60)
    assert excinfo.value.status_code == 403

    with pytest.raises(AuthenticationError):
        auth.verify_token(token, secret_key="other-secret", salt=SALT, max_age=60)


def test_expired_token_is_forbidden(user):
    token = auth.issue_token(user, secret_key=SECRET, salt=SALT)

    with pytest.raises(AuthenticationError, match="Invalid or expired token"):
        auth.verify_token(token, secret_key=SECRET, salt=SALT, max_age=-1)


def test_token_without_user_id_is_forbidden():
    forged = URLSafeTimedSerializer(SECRET, salt=SALT).dumps({"username": "ghost"})

    with pytest.raises(AuthenticationError) as excinfo:
        auth.verify_token(forged, secret_key=SECRET, salt=SALT, max_age=60)
    assert excinfo.value.status_code == 403
