"""Pytest configuration and shared fixtures for VaultFlow tests.

Provides an isolated SQLite database per test, repositories bound to it, a
seeded user, record factories and a Flask test client with a signed-in user.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from vaultflow.infra.database import create_session_factory
from vaultflow.infra.repositories import (
    SQLModelGoalRepository,
    SQLModelTransactionRepository,
    SQLModelVaultRepository,
)
# Importing the models registers every table with SQLModel metadata
from vaultflow.models import Goal, User, Vault
from vaultflow.services.allocation import AllocationEngine


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep config-driven paths (data dir, log files, default DB) inside tmp_path."""

    monkeypatch.setenv("VAULTFLOW_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.setenv("VAULTFLOW_DATABASE_URL", f"sqlite:///{tmp_path / 'app.db'}")
    monkeypatch.setenv("VAULTFLOW_SECRET_KEY", "test-secret")
    monkeypatch.setenv("VAULTFLOW_DEV_MODE", "true")


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test."""

    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the application wires up."""

    return create_session_factory(db_engine)


@pytest.fixture
def vault_repo(session_factory) -> SQLModelVaultRepository:
    return SQLModelVaultRepository(session_factory)


@pytest.fixture
def transaction_repo(session_factory) -> SQLModelTransactionRepository:
    return SQLModelTransactionRepository(session_factory)


@pytest.fixture
def goal_repo(session_factory) -> SQLModelGoalRepository:
    return SQLModelGoalRepository(session_factory)


@pytest.fixture
def allocation(vault_repo, transaction_repo) -> AllocationEngine:
    return AllocationEngine(vault_repo, transaction_repo)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def user_factory(session_factory):
    """Factory for users; password hashes are placeholders."""

    def _create_user(username: str = "tester") -> User:
        with session_factory() as session:
            user = User(username=username, password_hash="dummy-hash")
            session.add(user)
            session.commit()
            session.refresh(user)
            session.expunge(user)
            return user

    return _create_user


@pytest.fixture
def user(user_factory) -> User:
    """Default owner for scoped data."""

    return user_factory("tester")


@pytest.fixture
def vault_factory(vault_repo, user):
    """Factory for vaults with zeroed totals unless overridden."""

    def _create_vault(
        name: str = "Test Vault",
        percentage: float = 100.0,
        owner: User | None = None,
        **totals: float,
    ) -> Vault:
        owner = owner or user
        vault = Vault(user_id=owner.id, name=name, percentage=percentage, **totals)
        return vault_repo.create(vault, user_id=owner.id)

    return _create_vault


@pytest.fixture
def goal_factory(goal_repo, user):
    def _create_goal(
        name: str = "Emergency fund",
        target_amount: float = 1000.0,
        current_amount: float = 0.0,
        vault_id: int | None = None,
        owner: User | None = None,
    ) -> Goal:
        owner = owner or user
        goal = Goal(
            user_id=owner.id,
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            vault_id=vault_id,
        )
        return goal_repo.create(goal, user_id=owner.id)

    return _create_goal


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app():
    from vaultflow import create_app

    flask_app = create_app("testing")
    yield flask_app
    flask_app.extensions["vaultflow"].dispose()


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Register a user through the API and return bearer headers."""

    response = client.post(
        "/api/auth/register", json={"username": "alice", "password": "s3cret-pass"}
    )
    assert response.status_code == 201
    token = response.get_json()["token"]
    return {"Authorization": f"Bearer {token}"}
