"""Vault allocation ledger.

Keeps each vault's ``total_income``, ``total_spent`` and ``balance`` in step
with the live transaction set. Income is spread over every vault of the owner
by percentage; an expense debits the single vault it targets. Editing a
transaction reverses its old effect and applies the new one.

Each vault write is its own unit of work. When the store fails halfway the
vaults already written stay written; the error is logged and re-raised as
``PersistenceError`` without compensation.

Edits and deletes claim the transaction row with a revision-checked write
before touching any vault, so a request that loses the race posts nothing.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping

from sqlalchemy.exc import SQLAlchemyError

from ..domain.repositories import TransactionRepository, VaultRepository
from ..errors import ConflictError, NotFoundError, PersistenceError
from ..logging_config import get_logger
from ..models.transaction import EXPENSE, INCOME, MUTABLE_FIELDS, Transaction

logger = get_logger(__name__)


def allocation_for(amount: float, percentage: float) -> float:
    """Share of ``amount`` credited to a vault holding ``percentage``; unrounded."""

    return (amount * percentage) / 100


@contextmanager
def _store_errors(action: str, **context: Any) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Store failure during %s", action, extra=context)
        raise PersistenceError(f"Server error during {action}") from exc


class AllocationEngine:
    """Applies and reverses transaction effects on vault running totals."""

    def __init__(self, vault_repo: VaultRepository, transaction_repo: TransactionRepository):
        self.vault_repo = vault_repo
        self.transaction_repo = transaction_repo

    # -- ledger effects -------------------------------------------------

    def apply(self, transaction: Transaction) -> None:
        """Credit income to every vault or debit an expense from its vault."""

        self._post(transaction, sign=1)

    def reverse(self, transaction: Transaction) -> None:
        """Undo :meth:`apply` for the given transaction state.

        Income is reversed with the vault percentages in effect *now*. If a
        percentage changed since the transaction was applied, the vault keeps
        the difference.
        """

        self._post(transaction, sign=-1)

    def _post(self, transaction: Transaction, *, sign: int) -> None:
        user_id = transaction.user_id
        direction = "apply" if sign > 0 else "reverse"
        context = {"user_id": user_id, "transaction_id": transaction.id, "direction": direction}

        with _store_errors(f"vault {direction}", **context):
            if transaction.type == INCOME:
                vaults = self.vault_repo.list_all(user_id=user_id)
                for vault in vaults:
                    allocation = sign * allocation_for(transaction.amount, vault.percentage)
                    self.vault_repo.adjust_totals(
                        vault.id,  # type: ignore[arg-type]
                        user_id=user_id,
                        income=allocation,
                        balance=allocation,
                    )
                logger.info(
                    "Income %s across %d vaults",
                    direction,
                    len(vaults),
                    extra={**context, "amount": transaction.amount},
                )
                return

            if transaction.type != EXPENSE or transaction.vault_id is None:
                return

            vault = self.vault_repo.get_by_id(transaction.vault_id, user_id=user_id)
            if vault is None:
                logger.warning(
                    "Expense targets unknown vault %s; balances left unchanged",
                    transaction.vault_id,
                    extra=context,
                )
                return
            self.vault_repo.adjust_totals(
                transaction.vault_id,
                user_id=user_id,
                spent=sign * transaction.amount,
                balance=-sign * transaction.amount,
            )
            logger.info(
                "Expense %s on vault %s",
                direction,
                transaction.vault_id,
                extra={**context, "amount": transaction.amount},
            )

    # -- transaction lifecycle -----------------------------------------

    def create(self, fields: Mapping[str, Any], *, user_id: int) -> Transaction:
        """Persist a new transaction, then apply it.

        The record is durable before apply runs; an apply failure leaves it
        stored but not (fully) reflected in vault balances.
        """

        transaction = Transaction(user_id=user_id, **_mutable(fields))
        with _store_errors("transaction create", user_id=user_id):
            created = self.transaction_repo.create(transaction, user_id=user_id)
        self.apply(created)
        return created

    def update(self, transaction_id: int, fields: Mapping[str, Any], *, user_id: int) -> Transaction:
        """Overwrite every mutable field, then move the vault effect.

        The row is claimed first by a revision-checked write. Only the request
        whose write lands reverses the old state and applies the new one, so
        overlapping edits or deletes never post the same state twice.
        """

        existing = self._require(transaction_id, user_id=user_id)
        updated = Transaction(
            id=existing.id,
            user_id=user_id,
            created_at=existing.created_at,
            revision=existing.revision + 1,
            **_mutable(fields),
        )
        with _store_errors("transaction update", user_id=user_id, transaction_id=transaction_id):
            claimed = self.transaction_repo.replace(
                updated, user_id=user_id, expected_revision=existing.revision
            )
        if not claimed:
            self._lost_claim(transaction_id, user_id=user_id)

        self.reverse(existing)
        self.apply(updated)
        return updated

    def delete(self, transaction_id: int, *, user_id: int) -> Transaction:
        """Remove the record, then reverse the state it held."""

        existing = self._require(transaction_id, user_id=user_id)
        with _store_errors("transaction delete", user_id=user_id, transaction_id=transaction_id):
            removed = self.transaction_repo.delete(
                transaction_id, user_id=user_id, expected_revision=existing.revision
            )
        if not removed:
            self._lost_claim(transaction_id, user_id=user_id)

        self.reverse(existing)
        return existing

    def _require(self, transaction_id: int, *, user_id: int) -> Transaction:
        with _store_errors("transaction lookup", user_id=user_id, transaction_id=transaction_id):
            existing = self.transaction_repo.get_by_id(transaction_id, user_id=user_id)
        if existing is None:
            raise NotFoundError("Transaction not found")
        return existing

    def _lost_claim(self, transaction_id: int, *, user_id: int) -> None:
        """Another writer got to the row between lookup and write; post nothing."""

        logger.warning(
            "Transaction %s changed concurrently; vault totals left unchanged",
            transaction_id,
            extra={"user_id": user_id, "transaction_id": transaction_id},
        )
        self._require(transaction_id, user_id=user_id)
        raise ConflictError("Transaction was modified by another request")


def _mutable(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Full replace: every mutable field is set, absent ones become None."""

    return {name: fields.get(name) for name in MUTABLE_FIELDS}
