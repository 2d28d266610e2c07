"""Concrete repository implementations using SQLModel."""

from .goal import SQLModelGoalRepository
from .transaction import SQLModelTransactionRepository
from .vault import SQLModelVaultRepository

__all__ = [
    "SQLModelGoalRepository",
    "SQLModelTransactionRepository",
    "SQLModelVaultRepository",
]
