"""Repository protocol definitions for domain layer."""

from .goal import GoalRepository
from .transaction import TransactionRepository
from .vault import VaultRepository

__all__ = [
    "GoalRepository",
    "TransactionRepository",
    "VaultRepository",
]
