"""Service module exports."""

from . import allocation, analytics, auth, goals, vaults

__all__ = [
    "allocation",
    "analytics",
    "auth",
    "goals",
    "vaults",
]
