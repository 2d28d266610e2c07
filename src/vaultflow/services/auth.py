"""Authentication and user management services."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHash, VerificationError, VerifyMismatchError
from itsdangerous import BadSignature, URLSafeTimedSerializer
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..domain.repositories import VaultRepository
from ..errors import AuthenticationError, ValidationError
from ..infra.repositories import SQLModelVaultRepository
from ..logging_config import get_logger
from ..models.user import User
from . import vaults as vault_service

SessionFactory = Callable[[], Session]

MIN_PASSWORD_LENGTH = 6

_hasher = PasswordHasher()
logger = get_logger(__name__)


def get_user_by_username(username: str, session_factory: SessionFactory) -> Optional[User]:
    """Fetch a user by username."""
    username = username.strip()
    with session_factory() as session:
        user = session.exec(select(User).where(User.username == username)).first()
        if user:
            session.expunge(user)
        return user


def _username_taken(session: Session, username: str) -> bool:
    return session.exec(select(User.id).where(User.username == username)).first() is not None


def register_user(
    *,
    username: str,
    password: str,
    session_factory: SessionFactory,
    vault_repo: VaultRepository | None = None,
) -> User:
    """Create a user with a hashed password and the default vault layout."""

    username = (username or "").strip()
    if not username or not password:
        raise ValidationError("Username and password required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    password_hash = _hasher.hash(password)
    with session_factory() as session:
        if _username_taken(session, username):
            raise ValidationError("Username already exists")
        user = User(username=username, password_hash=password_hash)
        session.add(user)
        try:
            session.commit()
        except IntegrityError as exc:
            # Another registration took the name after the lookup.
            session.rollback()
            raise ValidationError("Username already exists") from exc
        session.refresh(user)
        session.expunge(user)

    repo = vault_repo or SQLModelVaultRepository(session_factory)
    vault_service.seed_default_vaults(repo, user_id=user.id)  # type: ignore[arg-type]
    logger.info("User registered", extra={"user_id": user.id})
    return user


def authenticate(
    *,
    username: str,
    password: str,
    session_factory: SessionFactory,
) -> Optional[User]:
    """Validate credentials and return the user when correct."""

    username = (username or "").strip()
    if not username or not password:
        return None
    with session_factory() as session:
        user = session.exec(select(User).where(User.username == username)).first()
        if user is None:
            return None
        try:
            _hasher.verify(user.password_hash, password)
        except (VerifyMismatchError, InvalidHash, VerificationError):
            return None

        user.last_login = datetime.now(timezone.utc)
        session.add(user)
        session.commit()
        session.refresh(user)
        session.expunge(user)
        return user


def _serializer(secret_key: str, salt: str) -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(secret_key, salt=salt)


def issue_token(user: User, *, secret_key: str, salt: str) -> str:
    """Return a signed, timestamped bearer token for ``user``."""

    return _serializer(secret_key, salt).dumps({"userId": user.id, "username": user.username})


def verify_token(token: str, *, secret_key: str, salt: str, max_age: int) -> dict[str, Any]:
    """Decode a bearer token, raising ``AuthenticationError`` (403) when rejected."""

    try:
        payload = _serializer(secret_key, salt).loads(token, max_age=max_age)
    except BadSignature as exc:  # includes SignatureExpired
        raise AuthenticationError("Invalid or expired token", status_code=403) from exc
    if not isinstance(payload, dict) or not isinstance(payload.get("userId"), int):
        raise AuthenticationError("Invalid or expired token", status_code=403)
    return payload
