"""Assertion and payload helpers shared by the test modules."""

from __future__ import annotations

from datetime import date

from vaultflow.infra.repositories import SQLModelVaultRepository


def tx_fields(
    type: str = "income",
    amount: float = 100.0,
    *,
    vault_id: int | None = None,
    category: str = "Salary",
    occurred_on: date | None = None,
    **extra,
) -> dict:
    """Validated transaction fields as the allocation engine receives them."""

    fields = {
        "occurred_on": occurred_on or date(2024, 3, 1),
        "type": type,
        "amount": amount,
        "category": category,
        "vault_id": vault_id,
    }
    fields.update(extra)
    return fields


def balances(repo: SQLModelVaultRepository, user_id: int) -> dict[str, float]:
    """Map vault name to balance for compact assertions."""

    return {v.name: v.balance for v in repo.list_all(user_id=user_id)}


def snapshot(repo: SQLModelVaultRepository, user_id: int) -> dict[int, tuple[float, float, float]]:
    """Every vault's (total_income, total_spent, balance) keyed by id."""

    return {
        v.id: (v.total_income, v.total_spent, v.balance)  # type: ignore[misc]
        for v in repo.list_all(user_id=user_id)
    }
