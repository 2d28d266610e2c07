"""Blueprint exports."""

from . import analytics, auth, goals, health, transactions, vaults

__all__ = [
    "analytics",
    "auth",
    "goals",
    "health",
    "transactions",
    "vaults",
]
