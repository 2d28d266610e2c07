"""SQLModel implementation of Transaction repository."""

from __future__ import annotations

from typing import Callable, Optional

from sqlalchemy import delete as sa_delete
from sqlalchemy import update as sa_update
from sqlmodel import Session, select

from ...models.transaction import MUTABLE_FIELDS, Transaction


class SQLModelTransactionRepository:
    """SQLModel-based transaction repository implementation."""

    def __init__(self, session_factory: Callable[[], Session]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def get_by_id(self, transaction_id: int, *, user_id: int) -> Optional[Transaction]:
        """Retrieve a transaction by ID."""
        with self.session_factory() as session:
            obj = session.exec(
                select(Transaction)
                .where(Transaction.id == transaction_id)
                .where(Transaction.user_id == user_id)
            ).first()
            if obj:
                session.expunge(obj)
            return obj

    def list_all(self, *, user_id: int) -> list[Transaction]:
        """List all transactions, newest date and time first."""
        with self.session_factory() as session:
            statement = (
                select(Transaction)
                .where(Transaction.user_id == user_id)
                .order_by(
                    Transaction.occurred_on.desc(),  # type: ignore
                    Transaction.time.desc(),  # type: ignore
                    Transaction.id.desc(),  # type: ignore
                )
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def create(self, transaction: Transaction, *, user_id: int) -> Transaction:
        """Create a new transaction."""
        with self.session_factory() as session:
            transaction.user_id = user_id
            session.add(transaction)
            session.commit()
            session.refresh(transaction)
            session.expunge(transaction)
            return transaction

    def replace(
        self, transaction: Transaction, *, user_id: int, expected_revision: int
    ) -> bool:
        """Overwrite the mutable fields and bump the revision.

        Nothing is written when the row is gone or another writer already moved
        it past ``expected_revision``; the caller decides what that means.
        """
        values = {name: getattr(transaction, name) for name in MUTABLE_FIELDS}
        with self.session_factory() as session:
            statement = (
                sa_update(Transaction)
                .where(Transaction.id == transaction.id)  # type: ignore[arg-type]
                .where(Transaction.user_id == user_id)  # type: ignore[arg-type]
                .where(Transaction.revision == expected_revision)  # type: ignore[arg-type]
                .values(**values, revision=Transaction.revision + 1)
            )
            result = session.execute(statement)
            session.commit()
            return result.rowcount == 1

    def delete(
        self, transaction_id: int, *, user_id: int, expected_revision: Optional[int] = None
    ) -> bool:
        """Delete a transaction by ID; True only when this call removed the row."""
        with self.session_factory() as session:
            statement = (
                sa_delete(Transaction)
                .where(Transaction.id == transaction_id)  # type: ignore[arg-type]
                .where(Transaction.user_id == user_id)  # type: ignore[arg-type]
            )
            if expected_revision is not None:
                statement = statement.where(Transaction.revision == expected_revision)  # type: ignore[arg-type]
            result = session.execute(statement)
            session.commit()
            return result.rowcount == 1
