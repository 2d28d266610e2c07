"""SQLModel table exports."""

from .goal import Goal
from .transaction import Transaction
from .user import User
from .vault import Vault

__all__ = [
    "Goal",
    "Transaction",
    "User",
    "Vault",
]
