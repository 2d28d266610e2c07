"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session

from .config import BaseConfig
from .infra.database import create_db_engine, create_session_factory, init_database
from .infra.repositories import (
    SQLModelGoalRepository,
    SQLModelTransactionRepository,
    SQLModelVaultRepository,
)
from .services.allocation import AllocationEngine


@dataclass
class AppContext:
    """Centralized application context with repositories and services."""

    config: BaseConfig
    db_engine: Engine
    session_factory: Callable[[], Session]

    vault_repo: SQLModelVaultRepository
    transaction_repo: SQLModelTransactionRepository
    goal_repo: SQLModelGoalRepository

    allocation: AllocationEngine

    def dispose(self) -> None:
        """Release pooled connections (tests and CLI shutdown)."""
        self.db_engine.dispose()


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create the engine, schema, repositories and allocation engine."""

    if config is None:
        config = BaseConfig()

    engine = create_db_engine(config)
    init_database(engine)
    session_factory = create_session_factory(engine)

    vault_repo = SQLModelVaultRepository(session_factory)
    transaction_repo = SQLModelTransactionRepository(session_factory)
    goal_repo = SQLModelGoalRepository(session_factory)

    return AppContext(
        config=config,
        db_engine=engine,
        session_factory=session_factory,
        vault_repo=vault_repo,
        transaction_repo=transaction_repo,
        goal_repo=goal_repo,
        allocation=AllocationEngine(vault_repo, transaction_repo),
    )
