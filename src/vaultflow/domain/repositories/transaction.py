"""Transaction repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.transaction import Transaction


class TransactionRepository(Protocol):
    """Repository for managing transaction entities."""

    def get_by_id(self, transaction_id: int, *, user_id: int) -> Optional[Transaction]:
        """Retrieve a transaction by ID."""
        ...

    def list_all(self, *, user_id: int) -> list[Transaction]:
        """List all transactions, newest first."""
        ...

    def create(self, transaction: Transaction, *, user_id: int) -> Transaction:
        """Create a new transaction."""
        ...

    def replace(
        self, transaction: Transaction, *, user_id: int, expected_revision: int
    ) -> bool:
        """Overwrite the mutable fields if the stored revision still matches."""
        ...

    def delete(
        self, transaction_id: int, *, user_id: int, expected_revision: Optional[int] = None
    ) -> bool:
        """Delete a transaction by ID, optionally only at a given revision."""
        ...
