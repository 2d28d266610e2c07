"""Tests for the dashboard summary."""

from __future__ import annotations

from datetime import date

from vaultflow.models import Transaction
from vaultflow.services.analytics import summarize


def _tx(type_: str, amount: float, vault_id: int | None = None) -> Transaction:
    return Transaction(
        user_id=1,
        occurred_on=date(2024, 5, 1),
        type=type_,
        amount=amount,
        category="Misc",
        vault_id=vault_id,
    )


def test_summary_counts_every_transaction():
    summary = summarize(
        [_tx("income", 1000), _tx("income", 500), _tx("expense", 300, vault_id=1), _tx("expense", 150)]
    )

    assert summary.total_income == 1500
    assert summary.total_expenses == 450
    assert summary.net_savings == 1050
    assert summary.savings_rate == 70.0
    assert summary.transaction_count == 4


def test_savings_rate_rounds_to_one_decimal():
    summary = summarize([_tx("income", 3), _tx("expense", 1)])

    assert summary.savings_rate == 66.7


def test_savings_rate_without_income_is_zero():
    summary = summarize([_tx("expense", 40)])

    assert summary.savings_rate == 0.0
    assert summary.net_savings == -40


def test_summary_to_dict():
    assert summarize([]).to_dict() == {
        "totalIncome": 0,
        "totalExpenses": 0,
        "netSavings": 0,
        "savingsRate": 0.0,
        "transactionCount": 0,
    }
