"""Static data shared across services."""

from .vaults import DEFAULT_VAULTS

__all__ = ["DEFAULT_VAULTS"]
