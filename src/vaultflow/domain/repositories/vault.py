"""Vault repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.vault import Vault


class VaultRepository(Protocol):
    """Repository for managing vault entities."""

    def get_by_id(self, vault_id: int, *, user_id: int) -> Optional[Vault]:
        """Retrieve a vault owned by the user."""
        ...

    def list_all(self, *, user_id: int) -> list[Vault]:
        """List the user's vaults, oldest first."""
        ...

    def create(self, vault: Vault, *, user_id: int) -> Vault:
        """Create a new vault."""
        ...

    def update_settings(
        self,
        vault_id: int,
        *,
        user_id: int,
        name: str,
        percentage: float,
        description: Optional[str],
    ) -> Optional[Vault]:
        """Change name/percentage/description; running totals are untouched."""
        ...

    def delete(self, vault_id: int, *, user_id: int) -> bool:
        """Delete a vault; return False when nothing matched."""
        ...

    def adjust_totals(
        self,
        vault_id: int,
        *,
        user_id: int,
        income: float = 0.0,
        spent: float = 0.0,
        balance: float = 0.0,
    ) -> bool:
        """Add deltas to the running totals in a single statement."""
        ...
