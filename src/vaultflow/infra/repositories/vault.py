"""SQLModel implementation of Vault repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import update as sa_update
from sqlmodel import Session, select

from ...models.vault import Vault


class SQLModelVaultRepository:
    """SQLModel-based vault repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, vault_id: int, *, user_id: int) -> Optional[Vault]:
        """Retrieve a vault by ID."""
        with self.session_factory() as session:
            obj = session.exec(
                select(Vault).where(Vault.id == vault_id).where(Vault.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, *, user_id: int) -> list[Vault]:
        """List vaults in creation order."""
        with self.session_factory() as session:
            statement = (
                select(Vault)
                .where(Vault.user_id == user_id)
                .order_by(Vault.created_at, Vault.id)  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, vault: Vault, *, user_id: int) -> Vault:
        """Create a new vault."""
        with self.session_factory() as session:
            vault.user_id = user_id
            session.add(vault)
            session.commit()
            session.refresh(vault)
            session.expunge(vault)
            return vault

    def update_settings(
        self,
        vault_id: int,
        *,
        user_id: int,
        name: str,
        percentage: float,
        description: Optional[str],
    ) -> Optional[Vault]:
        """Update the display fields and percentage, leaving running totals alone."""
        with self.session_factory() as session:
            vault = session.exec(
                select(Vault).where(Vault.id == vault_id).where(Vault.user_id == user_id)
            ).first()
            if vault is None:
                return None
            vault.name = name
            vault.percentage = percentage
            vault.description = description
            session.add(vault)
            session.commit()
            session.refresh(vault)
            session.expunge(vault)
            return vault

    def delete(self, vault_id: int, *, user_id: int) -> bool:
        """Delete a vault by ID. Transactions and goals keep their vault_id."""
        with self.session_factory() as session:
            vault = session.exec(
                select(Vault).where(Vault.id == vault_id).where(Vault.user_id == user_id)
            ).first()
            if vault is None:
                return False
            session.delete(vault)
            session.commit()
            return True

    def adjust_totals(
        self,
        vault_id: int,
        *,
        user_id: int,
        income: float = 0.0,
        spent: float = 0.0,
        balance: float = 0.0,
    ) -> bool:
        """Add deltas to the running totals.

        The increment happens inside the UPDATE statement, so two writers
        touching the same vault cannot lose each other's change.
        """
        with self.session_factory() as session:
            statement = (
                sa_update(Vault)
                .where(Vault.id == vault_id)  # type: ignore[arg-type]
                .where(Vault.user_id == user_id)  # type: ignore[arg-type]
                .values(
                    total_income=Vault.total_income + income,
                    total_spent=Vault.total_spent + spent,
                    balance=Vault.balance + balance,
                )
            )
            result = session.execute(statement)
            session.commit()
            return bool(result.rowcount)
